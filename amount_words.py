import math
import numbers
from decimal import Decimal, ROUND_HALF_UP

ONES = (
    "",
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
    "ten",
    "eleven",
    "twelve",
    "thirteen",
    "fourteen",
    "fifteen",
    "sixteen",
    "seventeen",
    "eighteen",
    "nineteen",
)
TENS = (
    "",
    "",
    "twenty",
    "thirty",
    "forty",
    "fifty",
    "sixty",
    "seventy",
    "eighty",
    "ninety",
)
SCALES = ("", "thousand", "million", "billion")

ZERO_WORD = "zero"
CENTS_WORD = "cents"
MAX_AMOUNT = 1000 ** len(SCALES)


class AmountError(ValueError):
    pass


class InvalidAmount(AmountError):
    pass


class UnsupportedMagnitude(AmountError):
    pass


def _to_decimal(amount):
    # bool is an int subclass but never a currency amount
    if isinstance(amount, bool) or not isinstance(amount, (numbers.Real, Decimal)):
        raise InvalidAmount(f"Amount must be a number, got {type(amount).__name__}: {amount!r}")
    if isinstance(amount, Decimal):
        value = amount
    elif isinstance(amount, numbers.Integral):
        value = Decimal(int(amount))
    else:
        amount = float(amount)
        if math.isnan(amount) or math.isinf(amount):
            raise InvalidAmount(f"Amount must be finite, got {amount!r}")
        # shortest repr, so 1.995 is 1.995 and not 1.99499999...
        value = Decimal(repr(amount))
    if value.is_nan() or value.is_infinite():
        raise InvalidAmount(f"Amount must be finite, got {amount!r}")
    if value < 0:
        raise InvalidAmount(f"Amount must not be negative, got {amount!r}")
    return value


def split_amount(amount):
    """Return ``(integer_part, cents)`` with cents rounded half up into 0..99.

    Cents that round up to 100 carry into the integer part.
    """
    value = _to_decimal(amount)
    integer_part = int(value)
    cents = int(((value - integer_part) * 100).quantize(Decimal(1), rounding=ROUND_HALF_UP))
    if cents == 100:
        integer_part += 1
        cents = 0
    return integer_part, cents


def convert_hundreds(value):
    if not 0 <= value <= 999:
        raise UnsupportedMagnitude(f"Hundreds chunk out of range 0..999: {value}")
    parts = []
    if value >= 100:
        parts.append(f"{ONES[value // 100]} hundred")
        value %= 100
    if value >= 20:
        tens = TENS[value // 10]
        if value % 10:
            tens = f"{tens} {ONES[value % 10]}"
        parts.append(tens)
    elif value > 0:
        parts.append(ONES[value])
    return " ".join(parts)


def chunk_words(integer_part):
    """Pairs of ``(chunk words, scale word)``, most significant chunk first.

    Zero chunks are left out entirely.
    """
    pairs = []
    remaining = integer_part
    scale_index = 0
    while remaining > 0:
        remaining, chunk = divmod(remaining, 1000)
        if chunk:
            if scale_index >= len(SCALES):
                raise UnsupportedMagnitude(
                    f"Amount {integer_part} is too large, largest scale word is "
                    f"'{SCALES[-1]}' (limit {MAX_AMOUNT - 1})"
                )
            pairs.append((convert_hundreds(chunk), SCALES[scale_index]))
        scale_index += 1
    pairs.reverse()
    return pairs


def speak(amount):
    integer_part, cents = split_amount(amount)
    if integer_part == 0 and cents == 0:
        return ZERO_WORD
    words = " ".join(
        f"{chunk} {scale}" if scale else chunk
        for chunk, scale in chunk_words(integer_part)
    )
    if not words:
        words = ZERO_WORD
    if cents:
        words = f"{words} and {convert_hundreds(cents)} {CENTS_WORD}"
    return words
