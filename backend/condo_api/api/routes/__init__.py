"""Route Modules: one file per resource.

Invariants:
    - Each module defines its own APIRouter with tags and no prefix;
      main.create_app mounts each router at / and again under /api
    - Routes never contain business logic (delegate to core/)
"""
