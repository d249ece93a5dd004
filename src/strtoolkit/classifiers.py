"""Predicates that classify a string by shape or length.

All lengths are measured with `len()`, i.e. in code points.
"""

__docformat__ = 'google'

__all__ = [
    'is_alphabetic',
    'is_alphanumeric',
    'is_numeric',
    'is_float_numeric',
    'is_integer_numeric',
    'is_tel_number',
    'is_max_length',
    'is_min_length'
]

from strtoolkit.patterns import (
    INTEGER_NUMERIC_PATTERN,
    FLOAT_NUMERIC_PATTERN,
    NUMERIC_PATTERN,
    LEADING_INTEGER_PATTERN,
    LEADING_FLOAT_PATTERN,
    WORD_PATTERN,
    TEL_NUMBER_PATTERN
)

def _int_string(text: str) -> str:
    # Canonical form of the longest integer prefix, '0' when there is none
    match = LEADING_INTEGER_PATTERN.match(text)
    if match is None:
        return '0'
    signed = match.group(1)
    digits = signed.lstrip('+-').lstrip('0') or '0'
    if signed.startswith('-') and digits != '0':
        return '-' + digits
    return digits

def _float_string(text: str) -> str:
    match = LEADING_FLOAT_PATTERN.match(text)
    if match is None:
        return '0'
    return '%.14G' % float(match.group(1))

def is_alphabetic(text: str, min_length: int = 1, max_length: int = -1) -> bool:
    """
    Check that a string is within length bounds and does not read back as a number.

    This is a loose heuristic rather than a per-character check: the string is
    parsed as an integer and as a float, and it is considered alphabetic unless
    either parse turns back into exactly the same string. Strings that merely
    start with a number, or that contain digits and punctuation, pass.

    Args:
        text: String to check
        min_length: Minimum number of characters
        max_length: Maximum number of characters, only enforced when greater than min_length

    Returns:
        True if the length is in bounds and text is not a canonical number, else False

    Example:
        >>> is_alphabetic('hello')
        True
        >>> is_alphabetic('42')
        False
        >>> is_alphabetic('hello', max_length=3)
        False
        >>> is_alphabetic('')
        False
    """
    length = len(text)
    in_length = min_length <= length

    if max_length > min_length:
        in_length = in_length and length <= max_length

    return in_length and _int_string(text) != text and _float_string(text) != text

def is_alphanumeric(text: str) -> bool:
    """
    Check if a string contains at least one word character.

    Word characters are letters of any script, digits and the underscore.

    Example:
        >>> is_alphanumeric('abc123')
        True
        >>> is_alphanumeric('...')
        False
    """
    return WORD_PATTERN.search(text) is not None

def is_numeric(text: str) -> bool:
    """
    Check if a string represents a decimal number.

    Accepts an optional sign, an integer or decimal part, an optional exponent,
    and surrounding ASCII whitespace. Rejects hex, underscores, 'inf' and 'nan'.

    Example:
        >>> is_numeric(' -12.5e3 ')
        True
        >>> is_numeric('1,000')
        False
    """
    return NUMERIC_PATTERN.fullmatch(text) is not None

def is_float_numeric(text: str) -> bool:
    """
    Check if a string represents a comma-grouped number with optional decimals.

    Example:
        >>> is_float_numeric('1,234.56')
        True
        >>> is_float_numeric('12.')
        True
        >>> is_float_numeric('-1.5')
        False
    """
    return FLOAT_NUMERIC_PATTERN.fullmatch(text) is not None

def is_integer_numeric(text: str) -> bool:
    """
    Check if a string represents a comma-grouped integer.

    Example:
        >>> is_integer_numeric('1,234')
        True
        >>> is_integer_numeric('1.5')
        False
    """
    return INTEGER_NUMERIC_PATTERN.fullmatch(text) is not None

def is_tel_number(text: str) -> bool:
    """
    Check if a string can be read as a telephone number.

    Args:
        text: Candidate telephone number

    Returns:
        True if text is an optional '+' or '00' followed by 7 to 15 digits,
        hyphens, parentheses or spaces, else False

    Example:
        >>> is_tel_number('+233201234567')
        True
        >>> is_tel_number('123')
        False
    """
    return TEL_NUMBER_PATTERN.fullmatch(text) is not None

def is_max_length(text: str, max_len: int) -> bool:
    return len(text) <= max_len

def is_min_length(text: str, min_len: int) -> bool:
    return len(text) >= min_len
