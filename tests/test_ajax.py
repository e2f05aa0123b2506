"""End-to-end tests for the ``check_warranty`` ajax action."""

from __future__ import annotations

import pytest

from warranty_checker.app.core.security import create_nonce
from warranty_checker.app.services.form_service import NONCE_ACTION
from warranty_checker.app.services.record_store import RecordStore

from .conftest import add_warranty

pytestmark = pytest.mark.integration


@pytest.fixture
def seeded(configured):
    store = RecordStore()
    add_warranty(
        store,
        serial="SN123456",
        contact="a@b.com",
        status="Active",
        purchase_date="2024-01-01",
        expiration_date="2026-01-01",
        notes="",
    )
    return store


def check(client, serial, contact, nonce=None, **extra):
    body = {
        "action": "check_warranty",
        "nonce": create_nonce(NONCE_ACTION) if nonce is None else nonce,
        "serial": serial,
        "contact": contact,
    }
    body.update(extra)
    return client.post("/api/v1/ajax", data=body)


def test_found_returns_success_envelope(client, seeded):
    response = check(client, "SN123456", "a@b.com")

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "data": {
            "serial": "SN123456",
            "status": "Active",
            "purchaseDate": "2024-01-01",
            "expirationDate": "2026-01-01",
            "notes": "",
        },
    }


def test_not_found_returns_error_envelope(client, seeded):
    response = check(client, "SN999999", "a@b.com")

    assert response.status_code == 200
    assert response.json() == {
        "success": False,
        "data": {"message": "No warranty information was found. Please double-check your details."},
    }


def test_missing_serial_returns_validation_message(client, seeded):
    response = check(client, "", "a@b.com")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is False
    assert body["data"]["message"] == "Serial number and contact information are required."


def test_absent_fields_are_treated_as_empty(client, seeded):
    response = client.post(
        "/api/v1/ajax",
        data={"action": "check_warranty", "nonce": create_nonce(NONCE_ACTION)},
    )

    assert response.status_code == 200
    assert response.json()["data"]["message"] == "Serial number and contact information are required."


@pytest.mark.parametrize("nonce", ["", "bogus", "create-for-other-action"])
def test_invalid_nonce_is_forbidden(client, seeded, nonce):
    if nonce == "create-for-other-action":
        nonce = create_nonce("some_other_action")

    response = check(client, "SN123456", "a@b.com", nonce=nonce)

    assert response.status_code == 403
    body = response.json()
    assert body["success"] is False
    assert body["data"]["message"]


def test_unknown_action_is_rejected(client, seeded):
    response = client.post("/api/v1/ajax", data={"action": "delete_everything"})

    assert response.status_code == 400
    assert response.json() == {"success": False, "data": {"message": "Unknown action."}}


def test_nonce_from_form_page_is_accepted(client, seeded):
    page = client.get("/api/v1/warranty/form").text
    nonce = page.split('name="wcf_nonce" value="', 1)[1].split('"', 1)[0]

    response = check(client, "SN123456", "a@b.com", nonce=nonce)

    assert response.json()["success"] is True
