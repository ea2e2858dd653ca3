"""Core Layer — pure data-plane logic, no IO, no async, no HTTP.

Invariants:
    - No module in core/ imports from api/ or infrastructure/
    - Reactive machinery reached only through the teardown Protocol

Design Decisions:
    - Functional core separated from the HTTP shell
"""
