"""
Service layer for warranty items.

``WarrantyService.lookup`` is the public lookup handler: it validates
the two keys, issues a single point query against the record store and
maps the outcome to one of three results:

* ``Found`` carries the fields to return to the visitor;
* ``NotFound`` is the normal "no such warranty" outcome;
* ``ValidationError`` means a key was empty and the store was not queried.

Lookups never write.  The remaining methods manage warranty items for
administrators and are not reachable from the public form.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Union

from warranty_checker.app.schemas.warranty import (
    WarrantyItemCreate,
    WarrantyItemRead,
    WarrantyItemUpdate,
    WarrantyLookupData,
)
from warranty_checker.app.services.message_service import MessageService
from warranty_checker.app.services.record_store import Record, RecordStore


logger = logging.getLogger(__name__)

WARRANTY_TYPE = "warranty_item"

# Schema field name -> record_meta key.
FIELD_KEYS: Dict[str, str] = {
    "serial": "_warranty_serial",
    "contact": "_warranty_contact",
    "status": "_warranty_status",
    "purchase_date": "_warranty_purchase_date",
    "expiration_date": "_warranty_expiration_date",
    "notes": "_warranty_notes",
}


@dataclass(frozen=True)
class Found:
    data: WarrantyLookupData


@dataclass(frozen=True)
class NotFound:
    message: str


@dataclass(frozen=True)
class ValidationError:
    message: str


LookupResult = Union[Found, NotFound, ValidationError]


class WarrantyService:
    """Lookup handler and record management for ``warranty_item`` records."""

    def __init__(self, store: Optional[RecordStore] = None) -> None:
        self.store = store or RecordStore()

    async def lookup(self, serial: str, contact: str) -> LookupResult:
        """Find the warranty registered under ``serial`` and ``contact``.

        Both values are stripped of surrounding whitespace and then
        compared exactly (case sensitive) with the stored fields.  When
        several records match, the first one the store returns is used;
        no particular order is guaranteed.
        """
        serial = (serial or "").strip()
        contact = (contact or "").strip()
        if not serial or not contact:
            logger.info("Warranty lookup rejected: missing serial or contact")
            return ValidationError(await MessageService.get_text("validation_required"))

        record = self.store.find_one(
            WARRANTY_TYPE,
            [(FIELD_KEYS["serial"], serial), (FIELD_KEYS["contact"], contact)],
        )
        if record is None:
            logger.info("Warranty lookup for serial %s: not found", serial)
            return NotFound(await MessageService.get_text("not_found"))

        status = self.store.get_field(record.id, FIELD_KEYS["status"])
        if not status:
            status = await MessageService.get_text("status_placeholder")
        logger.info("Warranty lookup for serial %s: found record %s", serial, record.id)
        return Found(
            WarrantyLookupData(
                serial=serial,
                status=status,
                purchase_date=self.store.get_field(record.id, FIELD_KEYS["purchase_date"]) or "",
                expiration_date=self.store.get_field(record.id, FIELD_KEYS["expiration_date"]) or "",
                notes=self.store.get_field(record.id, FIELD_KEYS["notes"]) or "",
            )
        )

    # ------------------------------------------------------------------
    # Record management
    # ------------------------------------------------------------------
    async def create_item(self, data: WarrantyItemCreate) -> WarrantyItemRead:
        """Insert a new warranty item and return it."""
        fields = {FIELD_KEYS[name]: getattr(data, name) for name in FIELD_KEYS}
        record_id = self.store.insert(WARRANTY_TYPE, data.title or data.serial, fields)
        item = await self.get_item(record_id)
        if item is None:
            raise ValueError(f"Warranty item {record_id} not found after insert")
        return item

    async def list_items(self, limit: int = 100, offset: int = 0) -> List[WarrantyItemRead]:
        records = self.store.list_records(WARRANTY_TYPE, limit=limit, offset=offset)
        return [self._to_read(record) for record in records]

    async def get_item(self, item_id: int) -> Optional[WarrantyItemRead]:
        record = self.store.get(WARRANTY_TYPE, item_id)
        if record is None:
            return None
        return self._to_read(record)

    async def update_item(self, item_id: int, data: WarrantyItemUpdate) -> Optional[WarrantyItemRead]:
        """Update an existing item.  Returns ``None`` if it does not exist."""
        provided = data.model_dump(exclude_unset=True)
        fields = {FIELD_KEYS[name]: value for name, value in provided.items() if name in FIELD_KEYS}
        updated = self.store.update(WARRANTY_TYPE, item_id, title=provided.get("title"), fields=fields)
        if not updated:
            return None
        return await self.get_item(item_id)

    async def delete_item(self, item_id: int) -> bool:
        return self.store.delete(WARRANTY_TYPE, item_id)

    def _to_read(self, record: Record) -> WarrantyItemRead:
        meta = self.store.get_fields(record.id)
        return WarrantyItemRead(
            id=record.id,
            title=record.title,
            created_at=record.created_at,
            updated_at=record.updated_at,
            **{name: meta.get(key) for name, key in FIELD_KEYS.items()},
        )
