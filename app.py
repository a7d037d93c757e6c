import sys

from loguru import logger

from twohop.api import create_app
from twohop.config import settings
from twohop.vault.local import LocalVault

logger.configure(handlers=[{"sink": sys.stderr, "level": settings.log_level}])

logger.info(f"Indexing vault at {settings.vault_path}")
vault = LocalVault(settings.vault_path)
app = create_app(vault=vault, settings=settings)
