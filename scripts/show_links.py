"""CLI printing the two-hop links of a note in a local vault as JSON"""

import argparse
import sys

from loguru import logger

from twohop.aggregation import TwoHopLinksEngine
from twohop.config import Settings, settings
from twohop.vault.local import LocalVault


def main(
    vault_folder: str,
    note_path: str,
    *,
    exclude_front_link: bool = False,
    exclude_backlink: bool = False,
    exclude_tag: bool = False,
    excludes_duplicate_links: bool = False,
) -> str:
    vault = LocalVault(vault_folder)
    engine = TwoHopLinksEngine(
        vault=vault,
        settings=Settings(
            vault_path=vault_folder,
            exclude_front_link=exclude_front_link,
            exclude_backlink=exclude_backlink,
            exclude_tag=exclude_tag,
            excludes_duplicate_links=excludes_duplicate_links,
        ),
    )
    return engine.build(note_path).model_dump_json(indent=2)


if __name__ == "__main__":
    logger.configure(handlers=[{"sink": sys.stderr, "level": settings.log_level}])

    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--vault",
        type=str,
        required=False,
        help="Folder containing markdown notes",
        default=str(settings.vault_path),
    )
    parser.add_argument(
        "--note", type=str, required=True, help="Vault-relative path of the focal note"
    )
    parser.add_argument(
        "--exclude-front-link", action="store_true", default=settings.exclude_front_link
    )
    parser.add_argument(
        "--exclude-backlink", action="store_true", default=settings.exclude_backlink
    )
    parser.add_argument("--exclude-tag", action="store_true", default=settings.exclude_tag)
    parser.add_argument(
        "--excludes-duplicate-links",
        action="store_true",
        default=settings.excludes_duplicate_links,
        help="Show each note in at most one group",
    )

    args = parser.parse_args()

    print(
        main(
            vault_folder=args.vault,
            note_path=args.note,
            exclude_front_link=args.exclude_front_link,
            exclude_backlink=args.exclude_backlink,
            exclude_tag=args.exclude_tag,
            excludes_duplicate_links=args.excludes_duplicate_links,
        )
    )
