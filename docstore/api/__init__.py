"""API Layer — FastAPI routes and error handlers over a Store.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON responses
    - The Store lives on app.state; routes never build their own

Design Decisions:
    - Thin routes delegate to the Store
"""
