"""Form renderer and form page tests."""

from __future__ import annotations

import json
import re

import pytest

from warranty_checker.app.core.security import verify_nonce
from warranty_checker.app.services.form_service import (
    NONCE_ACTION,
    build_client_settings,
    build_embed,
    build_form,
    build_page,
)
from warranty_checker.app.services.message_service import default_messages

NONCE_RE = re.compile(r'name="wcf_nonce" value="([^"]*)"')


@pytest.mark.unit
def test_form_contains_required_controls():
    markup = build_form(default_messages("en"), "token-123")

    assert 'id="wcf-warranty-form"' in markup
    assert re.search(r'<input type="text" id="wcf-serial" name="serial" required', markup)
    assert re.search(r'<input type="text" id="wcf-contact" name="contact" required', markup)
    assert '<input type="hidden" id="wcf_nonce" name="wcf_nonce" value="token-123" />' in markup
    assert '<button type="submit" class="wcf-submit">Check warranty</button>' in markup
    assert '<div id="wcf-message" class="wcf-message" aria-live="polite"></div>' in markup


@pytest.mark.unit
def test_form_escapes_catalog_text():
    messages = default_messages("en")
    messages["label_serial_input"] = '<b>Serial</b> "no"'

    markup = build_form(messages, "t")

    assert "&lt;b&gt;Serial&lt;/b&gt; &quot;no&quot;" in markup
    assert "<b>Serial</b>" not in markup


@pytest.mark.unit
def test_page_publishes_client_settings_and_assets():
    messages = default_messages("en")
    messages["label_notes"] = "</script><script>alert(1)</script>"

    page = build_page("<form></form>", messages, ajax_url="/api/v1/ajax", asset_version="2.0.0")

    assert '<link rel="stylesheet" href="/assets/wcf-style.css?ver=2.0.0" />' in page
    assert '<script src="/assets/wcf-script.js?ver=2.0.0" defer></script>' in page
    assert "</script><script>alert(1)" not in page
    raw = page.split("window.wcfSettings = ", 1)[1].split(";</script>", 1)[0]
    published = json.loads(raw.replace("<\\/", "</"))
    assert published == build_client_settings(messages, "/api/v1/ajax")
    assert published["ajaxUrl"] == "/api/v1/ajax"


@pytest.mark.unit
def test_embed_wraps_fragment_with_assets():
    messages = default_messages("en")
    client_settings = json.dumps(build_client_settings(messages, "/ajax"), ensure_ascii=False)

    embed = build_embed("<form></form>\n", messages, ajax_url="/ajax", asset_version="3.1")

    assert embed == (
        '<link rel="stylesheet" href="/assets/wcf-style.css?ver=3.1" />\n'
        "<form></form>\n"
        f"<script>window.wcfSettings = {client_settings};</script>\n"
        '<script src="/assets/wcf-script.js?ver=3.1" defer></script>\n'
    )


@pytest.mark.integration
def test_form_page_embeds_valid_nonce(client):
    response = client.get("/api/v1/warranty/form")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    nonce = NONCE_RE.search(response.text).group(1)
    assert verify_nonce(nonce, NONCE_ACTION)
    assert '"ajaxUrl": "/api/v1/ajax"' in response.text


@pytest.mark.integration
def test_shortcode_endpoint_returns_fragment(client):
    response = client.get("/api/v1/shortcodes/warranty_check_form")

    assert response.status_code == 200
    assert response.text.startswith('<link rel="stylesheet" href="/assets/wcf-style.css?ver=')
    assert '<form id="wcf-warranty-form"' in response.text
    assert '"ajaxUrl": "/api/v1/ajax"' in response.text
    assert '<script src="/assets/wcf-script.js?ver=' in response.text
    assert response.text.index("</form>") < response.text.index("window.wcfSettings")
    assert "<html" not in response.text
    assert verify_nonce(NONCE_RE.search(response.text).group(1), NONCE_ACTION)


@pytest.mark.integration
def test_unknown_shortcode_is_404(client):
    assert client.get("/api/v1/shortcodes/nope").status_code == 404


@pytest.mark.integration
def test_form_uses_message_overrides(client, admin_headers):
    client.post("/api/v1/messages/button_submit", json={"content": "Look it up"}, headers=admin_headers)

    response = client.get("/api/v1/shortcodes/warranty_check_form")

    assert '<button type="submit" class="wcf-submit">Look it up</button>' in response.text
