"""API Layer: FastAPI routes, request gate and error handlers.

Invariants:
    - Routes are thin: parse, call one core operation, log, return
    - Routers are registered explicitly in main.create_app
"""
