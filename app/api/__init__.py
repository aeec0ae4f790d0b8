"""API Layer: FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - /api endpoints return the {ok, msg, payload} JSON envelope

Design Decisions:
    - Thin routes delegate to PublishingService (impureim sandwich)
"""
