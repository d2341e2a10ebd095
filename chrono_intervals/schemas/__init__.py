"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (timestamp parsing happens here, not in core/)
    - Domain types from core/ used for enum fields
"""
