"""Services Layer: async orchestration around the pure core.

Invariants:
    - Services await repositories, call pure core functions, and never embed rules
    - Collaborators injected as core/repository_protocols types
"""
