"""
Domain models and value objects.

Contains the Fraction value type used by the mediant search.
"""

from farey_approx.core.domain.fraction import Fraction

__all__ = [
    "Fraction",
]
