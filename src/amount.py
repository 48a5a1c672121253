from dataclasses import dataclass

SCALE = 10_000
FRACTIONAL_DIGITS = 4

_DIGITS = "0123456789"
_I64_MIN = -(2 ** 63)
_I64_MAX = 2 ** 63 - 1


class AmountParseError(ValueError):
    """Raised when a string cannot be read as an Amount."""


class InvalidIntegerPortion(AmountParseError):
    pass


class NonDigitInFractionalPortion(AmountParseError):
    pass


@dataclass(frozen=True, order=True)
class Amount:
    """
    Fixed-point amount with four fractional digits.
    Stored as an integer count of 1/10,000ths so arithmetic never drifts.
    """

    scaled: int = 0

    @classmethod
    def parse(cls, text: str) -> "Amount":
        """
        Parse a decimal string such as "321.54689".

        Digits past the fourth fractional place are dropped without rounding,
        but they are still checked so "1.00001x" is rejected.
        """
        integer_portion, dot, fractional_portion = text.partition(".")

        unsigned = integer_portion[1:] if integer_portion[:1] in ("+", "-") else integer_portion
        if not unsigned or any(ch not in _DIGITS for ch in unsigned):
            raise InvalidIntegerPortion(f"Invalid integer portion in amount {text!r}")
        integer_value = int(integer_portion)
        if not _I64_MIN <= integer_value <= _I64_MAX:
            raise InvalidIntegerPortion(f"Integer portion out of range in amount {text!r}")

        fractional_value = 0
        magnitude = SCALE // 10
        for ch in fractional_portion:
            if ch not in _DIGITS:
                raise NonDigitInFractionalPortion(f"Non-digit {ch!r} in fractional portion of amount {text!r}")
            # Keep scanning after the fourth digit so every character is validated
            fractional_value += int(ch) * magnitude
            magnitude //= 10

        if integer_portion.startswith("-"):
            return cls(integer_value * SCALE - fractional_value)
        return cls(integer_value * SCALE + fractional_value)

    def __add__(self, other: "Amount") -> "Amount":
        return Amount(self.scaled + other.scaled)

    def __sub__(self, other: "Amount") -> "Amount":
        return Amount(self.scaled - other.scaled)

    def is_negative(self) -> bool:
        return self.scaled < 0

    def __str__(self) -> str:
        whole, fraction = divmod(abs(self.scaled), SCALE)
        sign = "-" if self.scaled < 0 else ""
        return f"{sign}{whole}.{fraction:0{FRACTIONAL_DIGITS}d}"

    def __repr__(self) -> str:
        return f"Amount({self})"


ZERO = Amount(0)
