"""
Form renderer for the public warranty lookup.

``build_form`` produces the static markup: two required text inputs,
the hidden anti-forgery nonce, a submit button and an empty live region
that the browser script fills with the result.

``build_asset_tags`` returns the stylesheet link and the script tags
(including the ``wcfSettings`` object the script reads) that must
accompany the form wherever it is shown.  ``build_embed`` places them
around a fragment; ``build_page`` puts them in a minimal HTML document.

All interpolated text goes through ``html.escape``.
"""

import html
import json
from typing import Any, Dict, Mapping, Tuple

from warranty_checker.app.core.assets import SCRIPT_FILENAME, STYLE_FILENAME
from warranty_checker.app.core.config import settings
from warranty_checker.app.core.security import create_nonce
from warranty_checker.app.services.message_service import MessageService

SHORTCODE_TAG = "warranty_check_form"
NONCE_ACTION = "wcf_check_warranty"
NONCE_FIELD = "wcf_nonce"


def build_form(messages: Mapping[str, str], nonce: str) -> str:
    e = html.escape
    return (
        '<form id="wcf-warranty-form" class="wcf-form" novalidate>\n'
        '    <div class="wcf-field">\n'
        f'        <label for="wcf-serial">{e(messages["label_serial_input"])}</label>\n'
        '        <input type="text" id="wcf-serial" name="serial" required'
        f' placeholder="{e(messages["placeholder_serial"])}" />\n'
        "    </div>\n"
        '    <div class="wcf-field">\n'
        f'        <label for="wcf-contact">{e(messages["label_contact_input"])}</label>\n'
        '        <input type="text" id="wcf-contact" name="contact" required'
        f' placeholder="{e(messages["placeholder_contact"])}" />\n'
        "    </div>\n"
        f'    <input type="hidden" id="{NONCE_FIELD}" name="{NONCE_FIELD}" value="{e(nonce)}" />\n'
        f'    <button type="submit" class="wcf-submit">{e(messages["button_submit"])}</button>\n'
        '    <div id="wcf-message" class="wcf-message" aria-live="polite"></div>\n'
        "</form>\n"
    )


def build_client_settings(messages: Mapping[str, str], ajax_url: str) -> Dict[str, Any]:
    """Settings object published to the browser script as ``wcfSettings``."""
    return {
        "ajaxUrl": ajax_url,
        "successMessage": messages["lookup_success"],
        "errorMessage": messages["not_found"],
        "checkingMessage": messages["checking"],
        "transportErrorMessage": messages["transport_error"],
        "labels": {
            "serial": messages["label_serial"],
            "status": messages["label_status"],
            "purchaseDate": messages["label_purchase_date"],
            "expirationDate": messages["label_expiration_date"],
            "notes": messages["label_notes"],
        },
    }


def build_asset_tags(
    messages: Mapping[str, str],
    ajax_url: str,
    assets_url: str = "/assets",
    asset_version: str = "1.0.0",
) -> Tuple[str, str]:
    """Return the stylesheet link and the script tags the form needs.

    The first item belongs before the form, the second after it: the
    inline ``wcfSettings`` object followed by the deferred form script.
    """
    e = html.escape
    # "</" must not appear inside an inline script element.
    client_settings = json.dumps(build_client_settings(messages, ajax_url), ensure_ascii=False)
    client_settings = client_settings.replace("</", "<\\/")
    style_href = f"{assets_url}/{STYLE_FILENAME}?ver={asset_version}"
    script_src = f"{assets_url}/{SCRIPT_FILENAME}?ver={asset_version}"
    style_tags = f'<link rel="stylesheet" href="{e(style_href)}" />\n'
    script_tags = (
        f"<script>window.wcfSettings = {client_settings};</script>\n"
        f'<script src="{e(script_src)}" defer></script>\n'
    )
    return style_tags, script_tags


def build_embed(
    form_html: str,
    messages: Mapping[str, str],
    ajax_url: str,
    assets_url: str = "/assets",
    asset_version: str = "1.0.0",
) -> str:
    """Wrap ``form_html`` with its assets for embedding in another page."""
    style_tags, script_tags = build_asset_tags(messages, ajax_url, assets_url, asset_version)
    return f"{style_tags}{form_html}{script_tags}"


def build_page(
    form_html: str,
    messages: Mapping[str, str],
    ajax_url: str,
    assets_url: str = "/assets",
    asset_version: str = "1.0.0",
) -> str:
    e = html.escape
    style_tags, script_tags = build_asset_tags(messages, ajax_url, assets_url, asset_version)
    return (
        "<!DOCTYPE html>\n"
        f'<html lang="{e(settings.locale)}">\n'
        "<head>\n"
        '<meta charset="utf-8" />\n'
        f"<title>{e(settings.project_name)}</title>\n"
        f"{style_tags}"
        "</head>\n"
        "<body>\n"
        f"{form_html}"
        f"{script_tags}"
        "</body>\n"
        "</html>\n"
    )


async def render_warranty_form() -> str:
    """Shortcode renderer: the lookup form with a freshly issued nonce."""
    messages = await MessageService.get_catalog()
    return build_form(messages, create_nonce(NONCE_ACTION))
