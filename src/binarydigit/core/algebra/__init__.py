"""
Algebra — таблицы истинности и проверка тождеств булевой алгебры.
"""

from binarydigit.core.algebra.laws import (
    DOMAIN,
    NEGATION_PAIRS,
    AlgebraLawViolation,
    LawCheckReport,
    Operator,
    TruthTableRow,
    apply,
    arity,
    check_laws,
    truth_table,
)

__all__ = [
    # Constants
    "DOMAIN",
    "NEGATION_PAIRS",
    # Exceptions
    "AlgebraLawViolation",
    # Types
    "Operator",
    "TruthTableRow",
    "LawCheckReport",
    # Functions
    "arity",
    "apply",
    "truth_table",
    "check_laws",
]
