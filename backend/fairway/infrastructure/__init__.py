"""Infrastructure Layer: database sessions, repositories, logging.

Invariants:
    - Only the shell (services/, api/) imports from here; core/ never does
"""
