"""
BinaryDigit — Двоичная цифра (логическое True/False)

Immutable Pydantic модель над замкнутым двухэлементным доменом {TRUE, FALSE}.

Канонические экземпляры TRUE и FALSE — единственный способ получить
"первичное" значение. Копия создаётся только из существующего экземпляра
через BinaryDigit.copy_of(). Конструирования из bool/str нет.

Операторы булевой алгебры:
- not_, and_, or_, xor — примитивы
- nand, nor, xnor — строятся композицией примитива и not_
"""

from enum import Enum

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class Bit(str, Enum):
    """Внутреннее значение двоичной цифры"""

    TRUE = "true"
    FALSE = "false"


# =============================================================================
# BINARY DIGIT MODEL
# =============================================================================


class BinaryDigit(BaseModel):
    """
    Двоичная цифра.

    Immutable модель (frozen=True): значение никогда не меняется после
    создания. Все операторы возвращают канонические TRUE/FALSE.

    Равенство — по значению: экземпляр равен только другому BinaryDigit
    с тем же значением. Сравнение с None, bool или любым другим типом
    даёт False и никогда не бросает исключение.

    Hash: TRUE → 1, FALSE → 0.
    """

    value: Bit = Field(..., description="Значение цифры (true/false)")

    # Immutable; strict: value принимает только члены Bit, без приведения str
    model_config = {"frozen": True, "strict": True}

    @classmethod
    def copy_of(cls, bit: "BinaryDigit") -> "BinaryDigit":
        """
        Новый экземпляр с тем же значением, что и у bit.

        Args:
            bit: Исходная двоичная цифра

        Returns:
            Новый BinaryDigit, равный bit (но не тот же объект)
        """
        return cls(value=Bit.TRUE if bit.to_bool() else Bit.FALSE)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def to_bool(self) -> bool:
        """Нативный bool: True для TRUE, False для FALSE"""
        return self.value is Bit.TRUE

    def __bool__(self) -> bool:
        return self.to_bool()

    def __str__(self) -> str:
        return "True" if self.to_bool() else "False"

    # -------------------------------------------------------------------------
    # Equality / hashing
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, BinaryDigit):
            return NotImplemented
        return self.to_bool() == other.to_bool()

    def __hash__(self) -> int:
        return 1 if self.to_bool() else 0

    # -------------------------------------------------------------------------
    # Boolean algebra
    # -------------------------------------------------------------------------

    def not_(self) -> "BinaryDigit":
        """NOT: TRUE ↦ FALSE, FALSE ↦ TRUE"""
        return FALSE if self.to_bool() else TRUE

    def and_(self, that: "BinaryDigit") -> "BinaryDigit":
        """AND: TRUE только если оба операнда TRUE"""
        that = _require_digit(that)
        return TRUE if self.to_bool() and that.to_bool() else FALSE

    def nand(self, that: "BinaryDigit") -> "BinaryDigit":
        """NAND = not(and)"""
        return self.and_(that).not_()

    def or_(self, that: "BinaryDigit") -> "BinaryDigit":
        """OR: TRUE если хотя бы один операнд TRUE"""
        that = _require_digit(that)
        return TRUE if self.to_bool() or that.to_bool() else FALSE

    def nor(self, that: "BinaryDigit") -> "BinaryDigit":
        """NOR = not(or)"""
        return self.or_(that).not_()

    def xor(self, that: "BinaryDigit") -> "BinaryDigit":
        """XOR: TRUE если значения операндов различаются"""
        that = _require_digit(that)
        return TRUE if self.to_bool() != that.to_bool() else FALSE

    def xnor(self, that: "BinaryDigit") -> "BinaryDigit":
        """XNOR = not(xor), т.е. TRUE если значения равны"""
        return self.xor(that).not_()

    # Операторы Python принимают только BinaryDigit: смешивание с bool
    # приводит к TypeError.

    def __invert__(self) -> "BinaryDigit":
        return self.not_()

    def __and__(self, other: object) -> "BinaryDigit":
        if not isinstance(other, BinaryDigit):
            return NotImplemented
        return self.and_(other)

    def __or__(self, other: object) -> "BinaryDigit":
        if not isinstance(other, BinaryDigit):
            return NotImplemented
        return self.or_(other)

    def __xor__(self, other: object) -> "BinaryDigit":
        if not isinstance(other, BinaryDigit):
            return NotImplemented
        return self.xor(other)


# =============================================================================
# OPERAND CHECK
# =============================================================================


def _require_digit(that: object) -> BinaryDigit:
    """
    Проверка, что операнд — BinaryDigit.

    Raises:
        TypeError: Если операнд другого типа (в т.ч. нативный bool)
    """
    if not isinstance(that, BinaryDigit):
        raise TypeError(f"Operand must be BinaryDigit, got {type(that).__name__}: {that!r}")
    return that


# =============================================================================
# CANONICAL INSTANCES
# =============================================================================

TRUE = BinaryDigit(value=Bit.TRUE)
FALSE = BinaryDigit(value=Bit.FALSE)
