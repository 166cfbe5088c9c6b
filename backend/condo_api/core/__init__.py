"""Core Layer: entity store, validation rules, queries and mutations.

Invariants:
    - No module in core/ imports from api/, infrastructure/ or main
    - Every operation takes the EntityStore it works on as its first argument
"""
