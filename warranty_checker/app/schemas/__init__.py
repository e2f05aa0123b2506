"""
Pydantic schema definitions for API payloads.

Schemas are separated from the record store so the API representation
stays independent of how warranty items are persisted.
"""
