"""Extended hexadecimal (eHex) digits used in compact world profiles."""

EHEX_DIGITS = "0123456789ABCDEFG"


def ehex(digit: int) -> str:
    """Convert a value in 0..16 to its single uppercase eHex character.

    Examples:
        >>> ehex(9)
        '9'
        >>> ehex(10)
        'A'
        >>> ehex(16)
        'G'

    Raises:
        ValueError: If digit is outside 0..16
    """
    if not (0 <= digit <= 16):
        raise ValueError(f"Digit out of range: {digit} (must be 0-16)")
    return EHEX_DIGITS[digit]
