"""
Top-level router for version 1 of the API.

This router aggregates the public lookup routes and the admin routes
under a unified prefix.
"""

from fastapi import APIRouter

from .endpoints import ajax, messages, warranty, warranty_items

router = APIRouter()

# The public routes define their own paths (/ajax, /warranty/form,
# /shortcodes/{tag}).
router.include_router(ajax.router, tags=["ajax"])
router.include_router(warranty.router, tags=["warranty"])
router.include_router(warranty_items.router, prefix="/warranty-items", tags=["warranty-items"])
router.include_router(messages.router, prefix="/messages", tags=["messages"])
