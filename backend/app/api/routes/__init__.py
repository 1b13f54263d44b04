"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter (or a factory for config-dependent paths)
    - Routes never contain business logic (delegate to core/)
"""
