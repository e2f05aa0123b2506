"""
Message endpoints for API v1.

These routes let administrators list the user-facing texts and override
or revert them.  Only keys from the built-in catalog can be overridden.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from warranty_checker.app.core.security import require_admin
from warranty_checker.app.schemas.message import MessageRead, MessageUpdate
from warranty_checker.app.services.message_service import MessageService

router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("/", response_model=List[MessageRead])
async def list_messages() -> List[MessageRead]:
    """List every message with its active text."""
    return [MessageRead(**message) for message in await MessageService.list_messages()]


@router.get("/{key}", response_model=MessageRead)
async def get_message(key: str) -> MessageRead:
    msg = await MessageService.get_message(key)
    if not msg:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Message not found")
    return MessageRead(**msg)


@router.post("/{key}", response_model=MessageRead)
async def upsert_message(key: str, body: MessageUpdate) -> MessageRead:
    """Override the text of a message."""
    msg = await MessageService.upsert_message(key, body.content)
    if not msg:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Message not found")
    return MessageRead(**msg)


@router.delete("/{key}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_message(key: str) -> None:
    """Revert a message to its built-in text.

    Returns 404 when the key has no override.
    """
    deleted = await MessageService.delete_message(key)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Message override not found")
    return None
