#!/usr/bin/env python3
"""
Import warranty items from a CSV file into the Warranty Checker database.

The CSV must have a header row.  Recognised columns are ``serial``,
``contact``, ``status``, ``purchase_date``, ``expiration_date``,
``notes`` and ``title``; other columns are ignored.  Rows without a
serial or a contact are skipped and reported.  Existing items are never
modified: importing the same file twice creates duplicates.

Usage:
    python import_warranties.py --db ./warranty_checker.db --csv warranties.csv
    python import_warranties.py --db ./warranty_checker.db --csv warranties.csv --dry-run
"""

import argparse
import csv
import os
import sys
from typing import Dict, Iterable, List, Optional, Tuple

from warranty_checker.app.core.db import init_db
from warranty_checker.app.schemas.warranty import WarrantyItemCreate
from warranty_checker.app.services.record_store import RecordStore
from warranty_checker.app.services.warranty_service import FIELD_KEYS, WARRANTY_TYPE


def parse_rows(rows: Iterable[Dict[str, str]]) -> Tuple[List[WarrantyItemCreate], List[int]]:
    """Turn CSV rows into items.  Returns the items and the skipped line numbers."""
    items: List[WarrantyItemCreate] = []
    skipped: List[int] = []
    # Line 1 is the header.
    for line_no, row in enumerate(rows, start=2):
        values = {key: (value or "").strip() for key, value in row.items() if key}
        if not values.get("serial") or not values.get("contact"):
            skipped.append(line_no)
            continue
        items.append(
            WarrantyItemCreate(
                title=values.get("title") or None,
                serial=values["serial"],
                contact=values["contact"],
                status=values.get("status", ""),
                purchase_date=values.get("purchase_date", ""),
                expiration_date=values.get("expiration_date", ""),
                notes=values.get("notes", ""),
            )
        )
    return items, skipped


def import_items(db_path: str, items: Iterable[WarrantyItemCreate]) -> List[int]:
    """Insert ``items`` and return their new ids."""
    init_db(db_path)
    store = RecordStore(db_path)
    ids = []
    for item in items:
        fields = {FIELD_KEYS[name]: getattr(item, name) for name in FIELD_KEYS}
        ids.append(store.insert(WARRANTY_TYPE, item.title or item.serial, fields))
    return ids


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Import warranty items from CSV.")
    ap.add_argument("--db", required=True, help="Path to SQLite DB file (created if missing)")
    ap.add_argument("--csv", required=True, help="CSV file with a header row")
    ap.add_argument("--dry-run", action="store_true", help="Validate the file without writing")
    args = ap.parse_args(argv)

    if not os.path.exists(args.csv):
        print(f"[!] CSV not found: {args.csv}", file=sys.stderr)
        return 1

    with open(args.csv, newline="", encoding="utf-8-sig") as fh:
        items, skipped = parse_rows(csv.DictReader(fh))

    for line_no in skipped:
        print(f"[!] Line {line_no}: missing serial or contact, skipped", file=sys.stderr)

    if args.dry_run:
        print(f"[=] {len(items)} item(s) would be imported, {len(skipped)} skipped")
        return 0

    ids = import_items(os.path.abspath(args.db), items)
    print(f"[+] Imported {len(ids)} item(s), {len(skipped)} skipped")
    return 0


if __name__ == "__main__":
    sys.exit(main())
