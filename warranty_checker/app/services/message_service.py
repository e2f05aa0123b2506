"""
Service layer for user-facing messages.

Every text shown to visitors (labels, placeholders, result and error
messages) has a key in the built-in catalog below, with one text per
supported locale.  Administrators may override any key; overrides are
stored per locale in the ``messages`` table and take precedence over the
catalog only while that locale is active.  Deleting an override reverts
the key to its built-in text.
"""

import logging
from typing import Dict, List, Optional

from warranty_checker.app.core.config import settings
from warranty_checker.app.core.db import get_connection


DEFAULT_LOCALE = "en"

CATALOG: Dict[str, Dict[str, str]] = {
    "en": {
        "label_serial_input": "Serial number",
        "label_contact_input": "Email or phone used for purchase",
        "placeholder_serial": "e.g. SN123456",
        "placeholder_contact": "name@example.com",
        "button_submit": "Check warranty",
        "validation_required": "Serial number and contact information are required.",
        "not_found": "No warranty information was found. Please double-check your details.",
        "status_placeholder": "Updating",
        "lookup_success": "Warranty lookup completed.",
        "checking": "Checking...",
        "transport_error": "Something went wrong, please try again later.",
        "invalid_nonce": "Your session has expired. Please reload the page and try again.",
        "unknown_action": "Unknown action.",
        "label_serial": "Serial",
        "label_status": "Status",
        "label_purchase_date": "Purchase date",
        "label_expiration_date": "Warranty expires",
        "label_notes": "Notes",
    },
    "vi": {
        "label_serial_input": "Số serial",
        "label_contact_input": "Email hoặc số điện thoại dùng khi mua hàng",
        "placeholder_serial": "VD: SN123456",
        "placeholder_contact": "ten@example.com",
        "button_submit": "Kiểm tra bảo hành",
        "validation_required": "Vui lòng nhập số serial và thông tin liên hệ.",
        "not_found": "Không tìm thấy thông tin bảo hành. Vui lòng kiểm tra lại.",
        "status_placeholder": "Đang cập nhật",
        "lookup_success": "Đã tra cứu thông tin bảo hành.",
        "checking": "Đang kiểm tra...",
        "transport_error": "Có lỗi xảy ra, vui lòng thử lại sau.",
        "invalid_nonce": "Phiên làm việc đã hết hạn. Vui lòng tải lại trang và thử lại.",
        "unknown_action": "Yêu cầu không hợp lệ.",
        "label_serial": "Serial",
        "label_status": "Trạng thái",
        "label_purchase_date": "Ngày mua",
        "label_expiration_date": "Hạn bảo hành",
        "label_notes": "Ghi chú",
    },
}


def active_locale() -> str:
    """Return the configured locale, or English when it has no catalog."""
    return settings.locale if settings.locale in CATALOG else DEFAULT_LOCALE


def default_messages(locale: Optional[str] = None) -> Dict[str, str]:
    """Return the built-in texts for ``locale`` (falls back to English)."""
    return dict(CATALOG.get(locale or settings.locale, CATALOG[DEFAULT_LOCALE]))


class MessageService:
    """Service for resolving and overriding user-facing messages.

    Every method works on the active locale; overrides saved under
    another locale are kept but ignored until that locale is configured.
    """

    @staticmethod
    def _load_overrides(locale: str) -> Dict[str, str]:
        conn = get_connection()
        try:
            rows = conn.execute(
                "SELECT key, content FROM messages WHERE locale = ?", (locale,)
            ).fetchall()
            return {row["key"]: row["content"] for row in rows}
        finally:
            conn.close()

    @classmethod
    async def get_catalog(cls) -> Dict[str, str]:
        """Return every message key mapped to its active text."""
        locale = active_locale()
        messages = default_messages(locale)
        for key, content in cls._load_overrides(locale).items():
            if key in messages:
                messages[key] = content
        return messages

    @classmethod
    async def list_messages(cls) -> List[Dict[str, object]]:
        """Return all messages with a flag telling whether they are overridden."""
        locale = active_locale()
        defaults = default_messages(locale)
        overrides = cls._load_overrides(locale)
        return [
            {
                "key": key,
                "locale": locale,
                "content": overrides.get(key, defaults[key]),
                "is_default": key not in overrides,
            }
            for key in sorted(defaults)
        ]

    @classmethod
    async def get_message(cls, key: str) -> Optional[Dict[str, object]]:
        """Retrieve a single message by key, or ``None`` for unknown keys."""
        locale = active_locale()
        defaults = default_messages(locale)
        if key not in defaults:
            return None
        conn = get_connection()
        try:
            row = conn.execute(
                "SELECT content FROM messages WHERE key = ? AND locale = ?",
                (key, locale),
            ).fetchone()
        finally:
            conn.close()
        if row:
            return {"key": key, "locale": locale, "content": row["content"], "is_default": False}
        return {"key": key, "locale": locale, "content": defaults[key], "is_default": True}

    @classmethod
    async def get_text(cls, key: str) -> str:
        """Shortcut returning only the active text of ``key``."""
        message = await cls.get_message(key)
        if message is None:
            raise KeyError(key)
        return str(message["content"])

    @classmethod
    async def upsert_message(cls, key: str, content: str) -> Optional[Dict[str, object]]:
        """Override a message for the active locale.

        Returns ``None`` if ``key`` is not in the catalog.
        """
        logger = logging.getLogger(__name__)
        locale = active_locale()
        if key not in default_messages(locale):
            return None
        conn = get_connection()
        try:
            conn.execute(
                "INSERT INTO messages (key, locale, content) VALUES (?, ?, ?)"
                " ON CONFLICT(key, locale) DO UPDATE SET content = excluded.content,"
                " updated_at = CURRENT_TIMESTAMP",
                (key, locale, content),
            )
            conn.commit()
            logger.info("Message %s overridden for locale %s", key, locale)
        finally:
            conn.close()
        return {"key": key, "locale": locale, "content": content, "is_default": False}

    @classmethod
    async def delete_message(cls, key: str) -> bool:
        """Remove the override of the active locale.  Returns ``True`` if one existed."""
        logger = logging.getLogger(__name__)
        locale = active_locale()
        conn = get_connection()
        try:
            cursor = conn.execute(
                "DELETE FROM messages WHERE key = ? AND locale = ?", (key, locale)
            )
            affected = cursor.rowcount
            conn.commit()
        finally:
            conn.close()
        if affected:
            logger.info("Message %s reverted to default for locale %s", key, locale)
        return affected > 0
