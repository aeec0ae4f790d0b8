"""Pydantic Schemas: request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (request shape, response shape)
    - Field-level business rules (title, website, handles) live in core/validate_fields

Design Decisions:
    - Separate from core.page: schemas are API contracts, Page is the stored record
"""
