"""
Domain models and value objects.

Contains the BinaryDigit value type and its canonical instances.
"""

from binarydigit.core.domain.binary_digit import FALSE, TRUE, BinaryDigit, Bit

__all__ = [
    "Bit",
    "BinaryDigit",
    "TRUE",
    "FALSE",
]
