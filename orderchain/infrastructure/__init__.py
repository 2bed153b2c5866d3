"""Infrastructure Layer — cross-cutting concerns kept out of the core.

Invariants:
    - Infrastructure never imports from core/ combinators (errors are shared)
"""
