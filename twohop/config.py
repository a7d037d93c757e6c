from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Vault settings
    vault_path: Path = Path("data/vault")

    # Aggregation settings
    exclude_front_link: bool = False  # skip two-hop links through forward links
    exclude_backlink: bool = False  # skip two-hop links through backlinks
    exclude_tag: bool = False
    excludes_duplicate_links: bool = False  # show each note in at most one group

    # Preview settings
    show_image: bool = False
    preview_max_size: int = 1000 * 1000  # bytes

    log_level: str = "INFO"  # Can be DEBUG, INFO, WARNING, ERROR, CRITICAL


settings = Settings()
