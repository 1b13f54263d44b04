"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON except the Swagger UI page

Design Decisions:
    - Thin routes delegate to core/ (catalog, cart)
"""
