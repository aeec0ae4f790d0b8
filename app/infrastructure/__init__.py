"""Infrastructure Layer: storage engine, collaborators and cross-cutting concerns.

Invariants:
    - Infrastructure never imports core validation logic (only types, errors, protocols)
    - All storage calls wrapped with error mapping to StorageFault

Design Decisions:
    - One module per collaborator (store, renderer, tokens, logging)
"""
