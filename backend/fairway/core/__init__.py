"""Core Layer: pure league logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic over in-memory snapshots

Design Decisions:
    - Functional core separated from imperative shell: standings, strokes and
      pick rules are testable without a database or a web client
"""
