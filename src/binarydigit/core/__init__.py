"""
Core domain models and algebraic invariants.

Independent of any external system: no I/O, no persistence.
"""
