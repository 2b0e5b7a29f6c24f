"""Infrastructure Layer: Collection Store implementations and cross-cutting concerns.

Invariants:
    - Every store implements core.repository_protocols.GameRepository
    - Storage failures are mapped to core.errors.StoreError, never leaked raw
"""
