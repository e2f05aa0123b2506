"""
Public warranty lookup endpoints for API v1.

``GET /warranty/form`` serves a standalone page embedding the lookup
form, and ``GET /shortcodes/{tag}`` returns the markup of any
registered shortcode, together with the stylesheet and scripts it needs,
for embedding in other pages.  The lookup itself runs through the ajax
dispatcher as the ``check_warranty`` action; the handler for it is built
here by ``make_check_warranty_handler``.
"""

import logging
from typing import Any, Mapping

from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import HTMLResponse, JSONResponse

from warranty_checker.app.core.config import settings
from warranty_checker.app.core.hooks import ActionHandler
from warranty_checker.app.core.security import verify_nonce
from warranty_checker.app.schemas.envelope import send_json_error, send_json_success
from warranty_checker.app.schemas.warranty import WarrantyLookupRequest
from warranty_checker.app.services.form_service import (
    NONCE_ACTION,
    SHORTCODE_TAG,
    build_embed,
    build_page,
)
from warranty_checker.app.services.message_service import MessageService
from warranty_checker.app.services.warranty_service import Found, WarrantyService

router = APIRouter()
logger = logging.getLogger(__name__)


def make_check_warranty_handler(service: WarrantyService) -> ActionHandler:
    """Build the ``check_warranty`` ajax handler around ``service``."""

    async def handle_check_warranty(payload: Mapping[str, Any]) -> JSONResponse:
        lookup_request = WarrantyLookupRequest(**{
            key: payload.get(key) for key in ("nonce", "serial", "contact")
        })
        if not verify_nonce(lookup_request.nonce, NONCE_ACTION):
            logger.warning("Rejected warranty lookup with an invalid nonce")
            return send_json_error(
                await MessageService.get_text("invalid_nonce"),
                status_code=status.HTTP_403_FORBIDDEN,
            )
        result = await service.lookup(lookup_request.serial, lookup_request.contact)
        if isinstance(result, Found):
            return send_json_success(result.data)
        return send_json_error(result.message)

    return handle_check_warranty


@router.get("/warranty/form", response_class=HTMLResponse)
async def warranty_form_page(request: Request) -> HTMLResponse:
    """Return a full HTML page with the warranty lookup form."""
    renderer = request.app.state.dispatcher.get_shortcode(SHORTCODE_TAG)
    if renderer is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Form not registered")
    messages = await MessageService.get_catalog()
    page = build_page(
        await renderer(),
        messages,
        ajax_url=request.url_for("dispatch_ajax").path,
        asset_version=settings.asset_version,
    )
    return HTMLResponse(page)


@router.get("/shortcodes/{tag}", response_class=HTMLResponse)
async def render_shortcode(tag: str, request: Request) -> HTMLResponse:
    """Return the markup produced by a registered shortcode, with its assets."""
    renderer = request.app.state.dispatcher.get_shortcode(tag)
    if renderer is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Shortcode not found")
    messages = await MessageService.get_catalog()
    fragment = build_embed(
        await renderer(),
        messages,
        ajax_url=request.url_for("dispatch_ajax").path,
        asset_version=settings.asset_version,
    )
    return HTMLResponse(fragment)
