"""Infrastructure Layer: HTTP transport, cache, retry and logging.

Invariants:
    - Connection-level failures are mapped to TransportError before leaving this layer
"""
