"""Core Layer — pure comparator combinators, no IO, no shared state.

Invariants:
    - No module in core/ imports from infrastructure/
    - All functions are pure and deterministic given pure caller callbacks
    - Settings are read when a chain is built, never while comparing
"""
