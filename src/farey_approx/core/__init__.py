"""
Core domain models, mathematical primitives, and invariants.

This module contains the foundational building blocks: the Fraction value
type, checked integer arithmetic, error kinds, and the report contract.
"""
