"""Static asset installer tests."""

from __future__ import annotations

import pytest

from warranty_checker.app.core.assets import (
    SCRIPT,
    SCRIPT_FILENAME,
    STYLE_FILENAME,
    STYLE_SHEET,
    ensure_assets,
)


@pytest.mark.unit
def test_creates_missing_assets(tmp_path):
    target = tmp_path / "nested" / "assets"

    created = ensure_assets(str(target))

    assert sorted(p.name for p in created) == sorted([STYLE_FILENAME, SCRIPT_FILENAME])
    assert (target / STYLE_FILENAME).read_text(encoding="utf-8") == STYLE_SHEET
    assert (target / SCRIPT_FILENAME).read_text(encoding="utf-8") == SCRIPT


@pytest.mark.unit
def test_existing_assets_are_left_alone(tmp_path):
    (tmp_path / STYLE_FILENAME).write_text("/* custom */", encoding="utf-8")

    created = ensure_assets(str(tmp_path))

    assert [p.name for p in created] == [SCRIPT_FILENAME]
    assert (tmp_path / STYLE_FILENAME).read_text(encoding="utf-8") == "/* custom */"
    assert ensure_assets(str(tmp_path)) == []


@pytest.mark.integration
def test_assets_are_served_after_startup(client):
    response = client.get(f"/assets/{STYLE_FILENAME}")

    assert response.status_code == 200
    assert ".wcf-form{" in response.text
    assert client.get(f"/assets/{SCRIPT_FILENAME}").status_code == 200
