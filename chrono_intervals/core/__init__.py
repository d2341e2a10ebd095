"""Core Layer — pure interval logic, no IO, no async, no logging.

Invariants:
    - No module in core/ imports from services/, api/, schemas/ or infrastructure/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell: the HTTP API and settings
      live outside core/ and only call into it
"""
