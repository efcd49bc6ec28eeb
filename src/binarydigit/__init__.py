"""
binarydigit — двоичная цифра с полной булевой алгеброй.

Immutable value type с каноническими экземплярами TRUE и FALSE.
"""

from binarydigit.core.domain import FALSE, TRUE, BinaryDigit, Bit

__version__ = "1.0.0"

__all__ = [
    "Bit",
    "BinaryDigit",
    "TRUE",
    "FALSE",
    "__version__",
]
