"""
farey_approx — rational approximation of real numbers via Farey mediants.

Contains:
- core/        : Fraction value type, checked arithmetic, errors, contracts
- search/      : mediant-bisection search engine
- formatting/  : diagram, trace lines and JSON report
- cli.py       : command-line entry point
"""

__version__ = "0.1.0"
