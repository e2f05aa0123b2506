"""
Pydantic schemas for warranty items.

``WarrantyLookupRequest`` is the typed form of the public ajax payload;
``WarrantyLookupData`` is what a successful lookup returns to the
browser, using the camelCase keys the form script reads.  The
``WarrantyItem*`` schemas back the record management API.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class WarrantyLookupRequest(BaseModel):
    """Schema for the ``check_warranty`` ajax call.

    Missing values become empty strings and surrounding whitespace is
    stripped; emptiness is reported by the lookup handler, not here.
    """

    nonce: str = ""
    serial: str = ""
    contact: str = ""

    @field_validator("nonce", "serial", "contact", mode="before")
    @classmethod
    def strip_text(cls, v: Any) -> str:
        if v is None:
            return ""
        return str(v).strip()


class WarrantyLookupData(BaseModel):
    """Fields returned for a found warranty."""

    model_config = ConfigDict(populate_by_name=True)

    serial: str
    status: str
    purchase_date: str = Field("", alias="purchaseDate")
    expiration_date: str = Field("", alias="expirationDate")
    notes: str = ""


def _strip_key(v: Any) -> Any:
    # Blank keys become "" and fail ``min_length``.
    return v.strip() if isinstance(v, str) else v


class WarrantyItemCreate(BaseModel):
    """Schema for creating a warranty item."""

    title: Optional[str] = Field(None, description="Admin-facing label; defaults to the serial")
    serial: str = Field(..., min_length=1, description="Serial number supplied by the purchaser")
    contact: str = Field(..., min_length=1, description="Email or phone used for the purchase")
    status: Optional[str] = None
    purchase_date: Optional[str] = None
    expiration_date: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("serial", "contact", mode="before")
    @classmethod
    def strip_keys(cls, v: Any) -> Any:
        return _strip_key(v)


class WarrantyItemUpdate(BaseModel):
    """Schema for updating a warranty item.

    All fields are optional; only provided values will be updated.
    """

    title: Optional[str] = None
    serial: Optional[str] = Field(None, min_length=1)
    contact: Optional[str] = Field(None, min_length=1)
    status: Optional[str] = None
    purchase_date: Optional[str] = None
    expiration_date: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("serial", "contact", mode="before")
    @classmethod
    def strip_keys(cls, v: Any) -> Any:
        return _strip_key(v)


class WarrantyItemRead(BaseModel):
    """Schema for reading a warranty item."""

    id: int
    title: str
    serial: Optional[str]
    contact: Optional[str]
    status: Optional[str]
    purchase_date: Optional[str]
    expiration_date: Optional[str]
    notes: Optional[str]
    created_at: str
    updated_at: str
