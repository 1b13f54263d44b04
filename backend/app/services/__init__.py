"""Services Layer — static OpenAPI document definitions and assembly.

Invariants:
    - Paths and schemas declared as plain dicts in define_*.py modules
    - Assembly uses explicit imports (no auto-discovery, no reflection)
"""
