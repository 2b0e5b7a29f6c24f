"""Core Layer: domain types, errors, id generation and store contracts.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
    - No IO in core/
"""
