import math
from boundednumbers.functions import clamp


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward positive infinity (not banker's rounding)."""
    return math.floor(value + 0.5)


def clamp_position(pos: float, low: float = 0.0, high: float = 100.0) -> float:
    """Clamp a stop position to the percentage range."""
    return float(clamp(pos, low, high))


def is_plain_number(text: str) -> bool:
    """
    Check that ``text`` is a plain decimal number: optional sign, digits and at
    most one decimal point, with at least one digit.

    Rejects what ``float()`` would otherwise accept (``inf``, ``nan``, exponents,
    underscores).
    """
    if text[:1] in ("+", "-"):
        text = text[1:]
    if not text or text.count(".") > 1:
        return False
    digits = text.replace(".", "")
    return bool(digits) and digits.isascii() and digits.isdigit()


def leading_number(text: str, allow_fraction: bool = True) -> float | None:
    """
    Parse the longest numeric prefix of ``text``.

    Mirrors how browsers read ``parseFloat``/``parseInt`` arguments: trailing
    garbage is ignored, a missing prefix gives ``None``.

    Args:
        text: Input string, already stripped
        allow_fraction: Read a decimal part (``parseFloat``) or stop at it (``parseInt``)

    Returns:
        The parsed number, or None if no digits lead the string or the
        digits overflow a float
    """
    end = 0
    if text[:1] in ("+", "-"):
        end = 1
    start_digits = end
    while end < len(text) and text[end].isascii() and text[end].isdigit():
        end += 1
    int_digits = end - start_digits
    frac_digits = 0
    if allow_fraction and end < len(text) and text[end] == ".":
        frac_end = end + 1
        while frac_end < len(text) and text[frac_end].isascii() and text[frac_end].isdigit():
            frac_end += 1
        frac_digits = frac_end - end - 1
        if frac_digits:
            end = frac_end
    if not int_digits and not frac_digits:
        return None
    number = float(text[:end])
    if not math.isfinite(number):
        return None
    return number if allow_fraction else float(int(number))
