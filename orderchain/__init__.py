"""orderchain — declarative three-way comparators built from small steps.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports from orderchain.core.* only, no star exports
"""
