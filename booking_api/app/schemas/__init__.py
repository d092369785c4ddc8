"""
Pydantic schema definitions for API payloads.

Schemas are separated from the database rows so the API
representation stays independent of the storage layout.
"""
