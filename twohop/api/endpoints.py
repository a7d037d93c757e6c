import mimetypes
from urllib.parse import unquote

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response
from loguru import logger

from twohop.aggregation import TwoHopLinksEngine
from twohop.config import Settings
from twohop.domain.link import LinkRef
from twohop.domain.results import LinkResolution, TwoHopLinks
from twohop.navigation import resolve_link
from twohop.preview import PreviewReader
from twohop.vault.base import Vault


def _create_two_hop_endpoint(vault: Vault, settings: Settings):
    """Create the two-hop links endpoint handler."""
    engine = TwoHopLinksEngine(vault=vault, settings=settings)

    async def get_two_hop_links(path: str) -> TwoHopLinks:
        if path not in vault.get_markdown_files():
            raise HTTPException(status_code=404, detail="Note not found")
        try:
            return engine.build(path)
        except Exception as e:
            logger.error(f"Error aggregating links for '{path}': {str(e)}")
            raise HTTPException(status_code=500, detail="Internal server error") from e

    return get_two_hop_links


def _create_preview_endpoint(vault: Vault, settings: Settings):
    """Create the preview endpoint handler."""
    preview_reader = PreviewReader(vault=vault, settings=settings)

    async def get_preview(link_text: str, source_path: str):
        link = LinkRef(source_path=source_path, link_text=link_text)
        try:
            return {"link": link, "preview": preview_reader.read_preview(link)}
        except Exception as e:
            logger.error(f"Error reading preview for '{link_text}': {str(e)}")
            raise HTTPException(status_code=500, detail="Internal server error") from e

    return get_preview


def _create_resolve_endpoint(vault: Vault):
    """Create the link resolution endpoint handler."""

    async def resolve(link_text: str, source_path: str) -> LinkResolution:
        return resolve_link(LinkRef(source_path=source_path, link_text=link_text), vault)

    return resolve


def _create_file_endpoint(vault: Vault):
    """Create the endpoint serving raw vault files, used for image previews."""

    async def get_file(path: str):
        decoded_path = unquote(path)
        try:
            content = vault.read_bytes(decoded_path)
        except KeyError as err:
            logger.warning(f"File not found: {decoded_path}")
            raise HTTPException(status_code=404, detail="File not found") from err

        mime_type, _ = mimetypes.guess_type(decoded_path)
        return Response(content=content, media_type=mime_type or "application/octet-stream")

    return get_file


def get_endpoints_router(*, vault: Vault, settings: Settings) -> APIRouter:
    router = APIRouter()

    @router.get("/health")
    async def health_check():
        return {"status": "healthy"}

    router.get("/api/twohop")(_create_two_hop_endpoint(vault, settings))
    router.get("/api/preview")(_create_preview_endpoint(vault, settings))
    router.get("/api/links/resolve")(_create_resolve_endpoint(vault))
    router.get("/api/files/{path:path}")(_create_file_endpoint(vault))

    return router
