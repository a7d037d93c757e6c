from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from twohop.api.endpoints import get_endpoints_router
from twohop.config import Settings, settings as default_settings
from twohop.vault.base import Vault


def create_app(*, vault: Vault, settings: Settings | None = None) -> FastAPI:
    """Create FastAPI app."""
    app = FastAPI()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(
        router=get_endpoints_router(vault=vault, settings=settings or default_settings)
    )

    return app
