"""Services Layer: balancing use cases and the integration-event dispatcher.

Invariants:
    - Use cases depend on Protocols only, never on SQLAlchemy
    - Every dependency arrives through __init__ (no module-level adapters)

Design Decisions:
    - One use case class per file with a single async execute()
"""
