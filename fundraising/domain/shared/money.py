# fundraising/domain/shared/money.py
#
# Currency-tagged monetary amount shared by every campaign value object.
#
# Design decisions:
#   - Amount is always a Decimal. Floats are converted through str() so a
#     literal such as 1500.50 keeps its written value instead of its binary
#     approximation.
#   - Two Money values only combine when their currencies are identical. A
#     mismatch raises CurrencyMismatchError; there is no implicit conversion.
#   - Formatting is driven by CURRENCY_FORMATS, one row per currency code,
#     never by the process locale. EUR uses "." for thousands and "," for
#     decimals, USD/GBP the opposite.
#   - subtract() clamps at zero: a negative Money cannot exist.
#
# Invariants:
#   - amount >= 0
#   - currency is one of SUPPORTED_CURRENCIES (upper-case ISO 4217 code)
from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

SUPPORTED_CURRENCIES: tuple[str, ...] = ("EUR", "USD", "GBP", "JPY", "CAD", "AUD", "CHF", "CNY")

_ZERO = Decimal("0")
_HUNDRED = Decimal("100")


class CurrencyMismatchError(ValueError):
    """Arithmetic or comparison between two amounts in different currencies."""


@dataclass(frozen=True)
class CurrencyFormat:
    symbol: str
    thousands_separator: str
    decimal_separator: str


# ADR: one row per currency code, never a global locale switch.
CURRENCY_FORMATS: dict[str, CurrencyFormat] = {
    "EUR": CurrencyFormat("€", ".", ","),
    "USD": CurrencyFormat("$", ",", "."),
    "GBP": CurrencyFormat("£", ",", "."),
    "CAD": CurrencyFormat("C$", ",", "."),
    "AUD": CurrencyFormat("A$", ",", "."),
}


def _fallback_format(currency: str) -> CurrencyFormat:
    return CurrencyFormat(f"{currency} ", ",", ".")


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """Coerce numeric input (or a numeric string) to Decimal. Never float."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Invalid numeric value: {value!r}")
    if isinstance(value, float):
        return Decimal(str(value))
    if isinstance(value, int):
        return Decimal(value)
    try:
        return Decimal(str(value).strip())
    except InvalidOperation as err:
        raise ValueError(f"Invalid numeric value: {value!r}") from err


def format_number(
    amount: Decimal,
    decimals: int,
    thousands_separator: str,
    decimal_separator: str,
) -> str:
    """Round half-up to `decimals` places and group thousands."""
    quantum = Decimal(1).scaleb(-decimals)
    rounded = amount.quantize(quantum, rounding=ROUND_HALF_UP)
    raw = format(rounded, f",.{decimals}f")
    integer_part, _, fraction = raw.partition(".")
    integer_part = integer_part.replace(",", thousands_separator)
    if not fraction:
        return integer_part
    return f"{integer_part}{decimal_separator}{fraction}"


@dataclass(frozen=True)
class Money:
    """Decimal amount tagged with a currency. Never float, never negative."""

    amount: Decimal
    currency: str = "EUR"

    def __post_init__(self) -> None:
        amount = to_decimal(self.amount)
        if amount < _ZERO:
            raise ValueError("Amount cannot be negative")
        currency = self.currency.strip().upper()
        if currency not in SUPPORTED_CURRENCIES:
            raise ValueError("Invalid currency code")
        object.__setattr__(self, "amount", amount)
        object.__setattr__(self, "currency", currency)

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def zero(cls, currency: str = "EUR") -> Money:
        return cls(_ZERO, currency)

    @classmethod
    def from_string(cls, raw: str, currency: str = "EUR") -> Money:
        """Parse user-typed amounts such as "1.500,50" (EUR) or "1,500.50"."""
        cleaned = "".join(c for c in raw if c.isdigit() or c in ".,")
        if not any(c.isdigit() for c in cleaned):
            return cls.zero(currency)

        if currency.strip().upper() == "EUR":
            if "," in cleaned:
                cleaned = cleaned.replace(".", "").replace(",", ".")
        else:
            cleaned = cleaned.replace(",", "")

        return cls(to_decimal(cleaned), currency)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def add(self, other: Money) -> Money:
        self._assert_same_currency(other, "Cannot add different currencies")
        return Money(self.amount + other.amount, self.currency)

    def subtract(self, other: Money) -> Money:
        """Difference clamped at zero."""
        self._assert_same_currency(other, "Cannot subtract different currencies")
        return Money(max(_ZERO, self.amount - other.amount), self.currency)

    def multiply(self, factor: Decimal | int | float | str) -> Money:
        factor_dec = to_decimal(factor)
        if factor_dec < _ZERO:
            raise ValueError("Multiplier cannot be negative")
        return Money(self.amount * factor_dec, self.currency)

    def divide(self, divisor: Decimal | int | float | str) -> Money:
        divisor_dec = to_decimal(divisor)
        if divisor_dec == _ZERO:
            raise ValueError("Cannot divide by zero")
        if divisor_dec < _ZERO:
            raise ValueError("Divisor cannot be negative")
        return Money(self.amount / divisor_dec, self.currency)

    def percentage(self, percent: Decimal | int | float | str) -> Money:
        percent_dec = to_decimal(percent)
        if percent_dec < _ZERO or percent_dec > _HUNDRED:
            raise ValueError("Percentage must be between 0 and 100")
        return self.multiply(percent_dec / _HUNDRED)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def equals(self, other: Money) -> bool:
        return self.currency == other.currency and self.amount == other.amount

    def greater_than(self, other: Money) -> bool:
        self._assert_same_currency(other, "Cannot compare different currencies")
        return self.amount > other.amount

    def greater_than_or_equal(self, other: Money) -> bool:
        self._assert_same_currency(other, "Cannot compare different currencies")
        return self.amount >= other.amount

    def less_than(self, other: Money) -> bool:
        self._assert_same_currency(other, "Cannot compare different currencies")
        return self.amount < other.amount

    def less_than_or_equal(self, other: Money) -> bool:
        self._assert_same_currency(other, "Cannot compare different currencies")
        return self.amount <= other.amount

    def is_zero(self) -> bool:
        return self.amount == _ZERO

    def is_positive(self) -> bool:
        return self.amount > _ZERO

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    @property
    def currency_format(self) -> CurrencyFormat:
        return CURRENCY_FORMATS.get(self.currency) or _fallback_format(self.currency)

    @property
    def currency_symbol(self) -> str:
        return self.currency_format.symbol.strip()

    def format(self, decimals: int = 2) -> str:
        """€1.500,50 / $2,000.00 / £1,234.56 / CHF 10.00"""
        fmt = self.currency_format
        return fmt.symbol + format_number(
            self.amount, decimals, fmt.thousands_separator, fmt.decimal_separator,
        )

    def format_amount(self, decimals: int = 2) -> str:
        """Formatted number without the currency symbol."""
        fmt = self.currency_format
        return format_number(self.amount, decimals, fmt.thousands_separator, fmt.decimal_separator)

    def to_dict(self) -> dict[str, object]:
        return {
            "amount": str(self.amount),
            "currency": self.currency,
            "formatted": self.format(),
        }

    def _assert_same_currency(self, other: Money, message: str) -> None:
        if self.currency != other.currency:
            raise CurrencyMismatchError(message)

    def __str__(self) -> str:
        return self.format()
