"""Infrastructure Layer: port implementations and cross-cutting concerns.

Invariants:
    - Adapters implement the Protocols in core/repository_protocols.py
    - Driver and delivery failures are mapped to InfrastructureError subclasses

Design Decisions:
    - One adapter per port, constructed per unit of work with its AsyncSession
"""
