"""Text rendering of characters, integers, masks and floats for failure messages."""

from __future__ import annotations

import math

from probity.styles import DisplayStyle

INT_WIDTH = 64
MAX_NIBBLES = INT_WIDTH // 4
_UINT_MASK = (1 << INT_WIDTH) - 1


def escape_char(code: int | str) -> str:
    """Render one character: printable ASCII as is, CR and LF escaped, others as \\xHH."""
    if isinstance(code, str):
        code = ord(code)
    if 32 <= code <= 126:
        return chr(code)
    if code == 13:
        return "\\r"
    if code == 10:
        return "\\n"
    return "\\x" + format_hex(code, 2)


def escape_text(text: str | bytes | None, length: int | None = None) -> str:
    """Render text up to its first NUL (or ``length`` bytes), escaping unprintables."""
    if text is None:
        return ""
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    data = data.split(b"\0", 1)[0]
    if length is not None:
        data = data[: max(length, 0)]
    return "".join(escape_char(byte) for byte in data)


def format_number(number: int) -> str:
    """Render a signed integer in decimal."""
    return str(int(number))


def format_unsigned(number: int) -> str:
    """Render an integer as an unsigned value of the full integer width."""
    return str(int(number) & _UINT_MASK)


def format_hex(number: int, nibbles: int) -> str:
    """Render the lowest ``nibbles`` hex digits of ``number`` in upper case."""
    if nibbles < 0 or nibbles > MAX_NIBBLES:
        nibbles = MAX_NIBBLES
    if nibbles == 0:
        return ""
    value = int(number) & ((1 << (4 * nibbles)) - 1)
    return f"{value:0{nibbles}X}"


def format_mask(mask: int, number: int) -> str:
    """Render each bit from the top: its value where ``mask`` is set, 'X' elsewhere."""
    chars = []
    for bit in reversed(range(INT_WIDTH)):
        current = 1 << bit
        if mask & current:
            chars.append("1" if number & current else "0")
        else:
            chars.append("X")
    return "".join(chars)


def format_float(number: float, double_precision: bool = False) -> str:
    """Render a float much like ``%.7g`` (or ``%.9g`` in double precision)."""
    if double_precision:
        sig_digits, min_scaled, max_scaled = 9, 100_000_000, 1_000_000_000
    else:
        sig_digits, min_scaled, max_scaled = 7, 1_000_000, 10_000_000

    number = float(number)
    sign = ""
    if number < 0.0:
        sign = "-"
        number = -number

    if number == 0.0:
        return sign + "0"
    if math.isnan(number):
        return sign + "nan"
    if math.isinf(number):
        return sign + "inf"

    n_int = 0
    exponent = 0
    if number < 1.0:
        factor = 1.0
        while number < max_scaled / 1e10:
            number *= 1e10
            exponent -= 10
        while number * factor < min_scaled:
            factor *= 10.0
            exponent -= 1
        number *= factor
    elif number > max_scaled:
        divisor = 1.0
        while number > min_scaled * 1e10:
            number /= 1e10
            exponent += 10
        while number / divisor > max_scaled:
            divisor *= 10.0
            exponent += 1
        number /= divisor
    else:
        factor = 1.0
        n_int = int(number)
        number -= n_int
        while n_int < min_scaled:
            n_int *= 10
            factor *= 10.0
            exponent -= 1
        number *= factor

    n = (int(number + number) + 1) // 2
    # Round half to even.
    if n & 1 and (n - number) == 0.5:
        n -= 1
    n += n_int

    if n >= max_scaled:
        n = min_scaled
        exponent += 1

    if exponent <= 0 and exponent >= -(sig_digits + 3):
        decimals = -exponent
    else:
        decimals = sig_digits - 1
    exponent += decimals

    while decimals > 0 and n % 10 == 0:
        n //= 10
        decimals -= 1

    digits = str(n).rjust(decimals + 1, "0")
    if decimals > 0:
        digits = digits[:-decimals] + "." + digits[-decimals:]

    if exponent != 0:
        exp_sign = "-" if exponent < 0 else "+"
        digits += f"e{exp_sign}{abs(exponent):02d}"
    return sign + digits


def format_by_style(number: int, style: DisplayStyle | int) -> str:
    """Render an integer according to a display style."""
    style = DisplayStyle(style)
    if style.is_signed():
        if style is DisplayStyle.CHAR:
            return "'" + escape_char(int(number)) + "'"
        return format_number(number)
    if style.is_unsigned():
        return format_unsigned(number)
    return "0x" + format_hex(number, style.width() * 2)