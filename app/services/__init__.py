"""Services Layer: orchestration of page flows over the store.

Invariants:
    - Services receive their collaborators by injection (no module-level singletons)

Design Decisions:
    - One service per resource
"""
