"""
Algebra laws — таблицы истинности и проверка тождеств булевой алгебры

Домен замкнут ({FALSE, TRUE}), поэтому каждое тождество проверяется
полным перебором всех входов.

Проверяемые законы:
- двойное отрицание: not(not(a)) = a
- отрицательные пары: nand/nor/xnor = not(and/or/xor)
- коммутативность and/or/xor
- законы де Моргана
- xor как неравенство, xnor как равенство
- согласованность == и hash
"""

from dataclasses import dataclass
from enum import Enum
from itertools import product
from typing import Callable, Dict, Final, List, Tuple

from binarydigit.core.domain.binary_digit import FALSE, TRUE, BinaryDigit
from binarydigit.infrastructure.logging import get_logger

logger = get_logger(__name__)


# =============================================================================
# DOMAIN
# =============================================================================

DOMAIN: Final[Tuple[BinaryDigit, BinaryDigit]] = (FALSE, TRUE)


class Operator(str, Enum):
    """Операторы булевой алгебры"""

    NOT = "not"
    AND = "and"
    NAND = "nand"
    OR = "or"
    NOR = "nor"
    XOR = "xor"
    XNOR = "xnor"


_DISPATCH: Final[Dict[Operator, Callable[..., BinaryDigit]]] = {
    Operator.NOT: BinaryDigit.not_,
    Operator.AND: BinaryDigit.and_,
    Operator.NAND: BinaryDigit.nand,
    Operator.OR: BinaryDigit.or_,
    Operator.NOR: BinaryDigit.nor,
    Operator.XOR: BinaryDigit.xor,
    Operator.XNOR: BinaryDigit.xnor,
}

# Производный оператор → примитив, отрицанием которого он является
NEGATION_PAIRS: Final[Dict[Operator, Operator]] = {
    Operator.NAND: Operator.AND,
    Operator.NOR: Operator.OR,
    Operator.XNOR: Operator.XOR,
}


def arity(operator: Operator) -> int:
    """Число операндов: 1 для NOT, 2 для остальных"""
    return 1 if operator is Operator.NOT else 2


def apply(operator: Operator, *operands: BinaryDigit) -> BinaryDigit:
    """
    Применение оператора к операндам.

    Args:
        operator: Оператор
        *operands: Операнды (1 для NOT, 2 для бинарных)

    Returns:
        Результат (канонический TRUE/FALSE)

    Raises:
        ValueError: Если число операндов не совпадает с арностью
    """
    expected = arity(operator)
    if len(operands) != expected:
        raise ValueError(
            f"Operator {operator.value} expects {expected} operand(s), got {len(operands)}"
        )
    return _DISPATCH[operator](*operands)


# =============================================================================
# TRUTH TABLES
# =============================================================================


@dataclass(frozen=True)
class TruthTableRow:
    """Строка таблицы истинности"""

    inputs: Tuple[BinaryDigit, ...]
    output: BinaryDigit


def truth_table(operator: Operator) -> List[TruthTableRow]:
    """
    Таблица истинности оператора над всем доменом.

    Порядок строк: FALSE перед TRUE, левый операнд старший.

    Args:
        operator: Оператор

    Returns:
        2 строки для NOT, 4 строки для бинарных операторов
    """
    return [
        TruthTableRow(inputs=inputs, output=apply(operator, *inputs))
        for inputs in product(DOMAIN, repeat=arity(operator))
    ]


# =============================================================================
# LAW CHECKS
# =============================================================================


class AlgebraLawViolation(Exception):
    """Нарушение тождества булевой алгебры на конкретных входах"""

    pass


@dataclass(frozen=True)
class LawCheckReport:
    """Результат проверки тождеств"""

    laws_checked: int
    cases_checked: int
    laws: Tuple[str, ...]


def _laws() -> List[Tuple[str, int, Callable[..., bool]]]:
    laws: List[Tuple[str, int, Callable[..., bool]]] = [
        ("double_negation", 1, lambda a: a.not_().not_() == a),
    ]

    for derived, primitive in NEGATION_PAIRS.items():
        laws.append(
            (
                f"{derived.value}_is_not_{primitive.value}",
                2,
                lambda a, b, d=derived, p=primitive: apply(d, a, b) == apply(p, a, b).not_(),
            )
        )

    for operator in (Operator.AND, Operator.OR, Operator.XOR):
        laws.append(
            (
                f"{operator.value}_commutative",
                2,
                lambda a, b, op=operator: apply(op, a, b) == apply(op, b, a),
            )
        )

    laws.extend(
        [
            ("de_morgan_and", 2, lambda a, b: a.and_(b).not_() == a.not_().or_(b.not_())),
            ("de_morgan_or", 2, lambda a, b: a.or_(b).not_() == a.not_().and_(b.not_())),
            ("xor_is_inequality", 2, lambda a, b: a.xor(b).to_bool() == (a != b)),
            ("xnor_is_equality", 2, lambda a, b: a.xnor(b).to_bool() == (a == b)),
            ("equal_values_equal_hash", 2, lambda a, b: a != b or hash(a) == hash(b)),
        ]
    )
    return laws


def check_laws() -> LawCheckReport:
    """
    Проверка всех тождеств полным перебором домена.

    Returns:
        LawCheckReport с числом проверенных законов и входов

    Raises:
        AlgebraLawViolation: Если хотя бы одно тождество не выполняется
    """
    names: List[str] = []
    cases = 0

    for name, law_arity, holds in _laws():
        for inputs in product(DOMAIN, repeat=law_arity):
            cases += 1
            if not holds(*inputs):
                rendered = ", ".join(str(bit) for bit in inputs)
                logger.error("Law %s violated for (%s)", name, rendered)
                raise AlgebraLawViolation(f"Law {name} violated for inputs ({rendered})")
        logger.debug("Law %s holds", name)
        names.append(name)

    logger.info("Verified %d laws over %d cases", len(names), cases)
    return LawCheckReport(laws_checked=len(names), cases_checked=cases, laws=tuple(names))
