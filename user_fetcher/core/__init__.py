"""Core Layer: domain types, cache keys, mapping and errors. No IO, no async.

Invariants:
    - No module in core/ imports from services/ or infrastructure/
"""
