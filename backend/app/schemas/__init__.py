"""Pydantic Schemas — request/response shapes for API endpoints.

Invariants:
    - Schemas are the API contract; field names match the JSON payloads exactly
"""
