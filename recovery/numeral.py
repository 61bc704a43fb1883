from recovery.errors import InvalidBase, InvalidDigit, InvalidNumeral

ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
MAX_BASE = len(ALPHABET)

_DIGIT_VALUES = {ch: i for i, ch in enumerate(ALPHABET)}


def decode(base: int, digits: str) -> int:
    """Decode a non-negative numeral written in ``base`` (2..36)."""
    if isinstance(base, bool) or not isinstance(base, int) or not (2 <= base <= MAX_BASE):
        raise InvalidBase(base)
    if not digits:
        raise InvalidNumeral("empty numeral")

    result = 0
    for ch in digits.lower():
        value = _DIGIT_VALUES.get(ch)
        if value is None or value >= base:
            raise InvalidDigit(ch, base)
        result = result * base + value
    return result
