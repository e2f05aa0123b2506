"""Tests for the requests-based warranty client, using a stub session."""

from __future__ import annotations

import pytest
import requests

from warranty_client import TransportFailure, WarrantyClient, WarrantyLookupError

pytestmark = pytest.mark.unit

FORM_HTML = '<form><input type="hidden" id="wcf_nonce" name="wcf_nonce" value="nonce-abc" /></form>'


class StubResponse:
    def __init__(self, status_code=200, json_data=None, text=""):
        self.status_code = status_code
        self._json = json_data
        self.text = text

    def json(self):
        if self._json is None:
            raise ValueError("No JSON")
        return self._json

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


class StubSession:
    def __init__(self, get_response=None, post_response=None, post_error=None):
        self.get_response = get_response or StubResponse(text=FORM_HTML)
        self.post_response = post_response
        self.post_error = post_error
        self.posts = []

    def get(self, url, timeout=None):
        return self.get_response

    def post(self, url, data=None, timeout=None):
        self.posts.append((url, data))
        if self.post_error:
            raise self.post_error
        return self.post_response


def test_check_warranty_returns_data():
    data = {"serial": "SN1", "status": "Active", "purchaseDate": "", "expirationDate": "", "notes": ""}
    session = StubSession(post_response=StubResponse(json_data={"success": True, "data": data}))
    client = WarrantyClient(base_url="http://warranty.test/", session=session)

    assert client.check_warranty("SN1", "a@b.com") == data
    url, body = session.posts[0]
    assert url == "http://warranty.test/api/v1/ajax"
    assert body == {"action": "check_warranty", "nonce": "nonce-abc", "serial": "SN1", "contact": "a@b.com"}


def test_failure_envelope_raises_lookup_error():
    envelope = {"success": False, "data": {"message": "No warranty information was found."}}
    session = StubSession(post_response=StubResponse(json_data=envelope))
    client = WarrantyClient(base_url="http://warranty.test", session=session)

    with pytest.raises(WarrantyLookupError) as excinfo:
        client.check_warranty("SN9", "a@b.com", nonce="given")

    assert excinfo.value.message == "No warranty information was found."
    assert excinfo.value.status_code == 200
    assert session.posts[0][1]["nonce"] == "given"


def test_network_error_raises_transport_failure():
    session = StubSession(post_error=requests.ConnectionError("refused"))
    client = WarrantyClient(base_url="http://warranty.test", session=session)

    with pytest.raises(TransportFailure):
        client.check_warranty("SN1", "a@b.com", nonce="n")


@pytest.mark.parametrize(
    "response",
    [StubResponse(status_code=502, text="Bad gateway"), StubResponse(text="<html>oops</html>"), StubResponse(json_data=[1])],
)
def test_bad_responses_raise_transport_failure(response):
    client = WarrantyClient(base_url="http://warranty.test", session=StubSession(post_response=response))

    with pytest.raises(TransportFailure):
        client.check_warranty("SN1", "a@b.com", nonce="n")


def test_form_without_nonce_raises_transport_failure():
    session = StubSession(get_response=StubResponse(text="<html></html>"))

    with pytest.raises(TransportFailure):
        WarrantyClient(base_url="http://warranty.test", session=session).fetch_nonce()


def test_form_http_error_raises_transport_failure():
    session = StubSession(get_response=StubResponse(status_code=503))

    with pytest.raises(TransportFailure):
        WarrantyClient(base_url="http://warranty.test", session=session).fetch_nonce()
