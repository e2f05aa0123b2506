"""
Pydantic schemas for user-facing messages.

Each message has a fixed ``key`` from the built-in catalog.  ``content``
is the active text for ``locale`` and ``is_default`` tells whether an
administrator has overridden it in that locale.
"""

from pydantic import BaseModel, Field


class MessageRead(BaseModel):
    key: str
    locale: str
    content: str
    is_default: bool


class MessageUpdate(BaseModel):
    content: str = Field(..., min_length=1)
