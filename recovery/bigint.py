# below the smallest value sys.set_int_max_str_digits accepts (640)
_STR_SAFE_DIGITS = 600
_STR_SAFE_LIMIT = 10**_STR_SAFE_DIGITS


def to_decimal(value: int) -> str:
    """Decimal text of ``value`` without the interpreter's int-to-str digit cap."""
    if value < 0:
        return "-" + to_decimal(-value)
    if value < _STR_SAFE_LIMIT:
        return str(value)
    # split around 10**m, m roughly half the digit count
    m = max(_STR_SAFE_DIGITS, (value.bit_length() * 30103 // 100000) // 2)
    hi, lo = divmod(value, 10**m)
    return to_decimal(hi) + to_decimal(lo).zfill(m)


def short_text(value: int) -> str:
    """``value`` as text, or just its approximate size when it is too long to be useful in a message."""
    if -_STR_SAFE_LIMIT < value < _STR_SAFE_LIMIT:
        return str(value)
    digits = abs(value).bit_length() * 30103 // 100000 + 1
    return f"<{'-' if value < 0 else ''}{digits}-digit integer>"
