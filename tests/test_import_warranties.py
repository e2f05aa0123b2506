"""CSV import script tests."""

from __future__ import annotations

import pytest

import import_warranties
from warranty_checker.app.services.record_store import RecordStore
from warranty_checker.app.services.warranty_service import FIELD_KEYS

pytestmark = pytest.mark.unit

CSV = (
    "serial,contact,status,purchase_date,expiration_date,notes,title\n"
    "SN1,a@b.com,Active,2024-01-01,2026-01-01,,Unit one\n"
    ",a@b.com,Active,,,,\n"
    " SN2 , 0900000000 ,,2023-03-03,,Screen replaced,\n"
    "SN3,,Active,,,,\n"
)


@pytest.fixture
def csv_file(tmp_path):
    path = tmp_path / "warranties.csv"
    path.write_text(CSV, encoding="utf-8")
    return path


def test_import_inserts_valid_rows(tmp_path, csv_file, capsys):
    db_path = tmp_path / "import.db"

    code = import_warranties.main(["--db", str(db_path), "--csv", str(csv_file)])

    assert code == 0
    out = capsys.readouterr()
    assert "Imported 2 item(s), 2 skipped" in out.out
    assert "Line 3" in out.err and "Line 5" in out.err

    store = RecordStore(str(db_path))
    records = store.list_records("warranty_item")
    assert [r.title for r in records] == ["Unit one", "SN2"]
    second = store.get_fields(records[1].id)
    assert second[FIELD_KEYS["serial"]] == "SN2"
    assert second[FIELD_KEYS["contact"]] == "0900000000"
    assert second[FIELD_KEYS["notes"]] == "Screen replaced"


def test_dry_run_writes_nothing(tmp_path, csv_file, capsys):
    db_path = tmp_path / "dry.db"

    code = import_warranties.main(["--db", str(db_path), "--csv", str(csv_file), "--dry-run"])

    assert code == 0
    assert "2 item(s) would be imported, 2 skipped" in capsys.readouterr().out
    assert not db_path.exists()


def test_missing_csv(tmp_path, capsys):
    code = import_warranties.main(["--db", str(tmp_path / "x.db"), "--csv", str(tmp_path / "none.csv")])

    assert code == 1
    assert "CSV not found" in capsys.readouterr().err
