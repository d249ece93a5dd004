"""Telephone number normalization.

Numbers are reduced to their digits and prefixed with a calling code. No
check is made against real numbering plans; these are formatting helpers.
"""

__docformat__ = 'google'

__all__ = [
    'extract_digits',
    'internationalise_number',
    'internationalize_number_legacy'
]

import logging
import warnings
from functools import cache
from strtoolkit.config import get_defaults
from strtoolkit.lookups import CountryCodeData
from strtoolkit.substrings import starts_with
from strtoolkit.patterns import (
    PARENTHESIZED_DIGITS_PATTERN,
    NON_DIGIT_PATTERN,
    DIGITS_ONLY_PATTERN
)

logger = logging.getLogger(__name__)

@cache
def _country_codes() -> CountryCodeData:
    return CountryCodeData()

def extract_digits(number: str) -> str:
    """
    Drop parenthesized area codes, formatting characters and leading zeros.

    Example:
        >>> extract_digits('(020) 123-4567')
        '1234567'
        >>> extract_digits('024 412 3456')
        '244123456'
    """
    digits = PARENTHESIZED_DIGITS_PATTERN.sub('', number)
    digits = NON_DIGIT_PATTERN.sub('', digits)
    return digits.lstrip('0')

def internationalise_number(number: str, country_code: str|int, add_plus: bool = False) -> str:
    """
    Put a telephone number in international format.

    Args:
        number: Telephone number in any format
        country_code: Calling code to prepend when the number does not already start with it
        add_plus: Prefix the result with '+'

    Returns:
        Digits of the number, prefixed with the calling code

    Example:
        >>> internationalise_number('024 412 3456', '233')
        '233244123456'
        >>> internationalise_number('233244123456', 233, add_plus=True)
        '+233244123456'
        >>> internationalise_number('(020) 123-4567', '233', True)
        '+2331234567'
    """
    country_code = str(country_code)
    num = extract_digits(number)

    if not starts_with(country_code, num):
        num = country_code + num

    if add_plus and not starts_with('+', num):
        num = '+' + num

    return num

def _resolve_calling_code(country: str) -> str:
    lookup = _country_codes()
    default = get_defaults().default_calling_code

    if DIGITS_ONLY_PATTERN.fullmatch(country):
        if country in lookup.calling_codes:
            return country
    elif country in lookup.country_to_calling_code:
        return lookup.country_to_calling_code[country]

    logger.debug('Unknown country %r, falling back to calling code %s', country, default)
    return default

def internationalize_number_legacy(number: str, country: str|int|None = None) -> str:
    """
    Put a telephone number in international format using the built-in country table.

    Deprecated: the country table only knows Ghana ('GH' -> '233') and
    everything else falls back to '233'. Use `internationalise_number` with an
    explicit calling code instead.

    Args:
        number: Telephone number in any format
        country: Country identifier such as 'GH', or a calling code such as '233'.
            Defaults to 'GH'.

    Returns:
        Digits of the number, prefixed with the resolved calling code

    Example:
        >>> internationalize_number_legacy('024 412 3456')
        '233244123456'
    """
    warnings.warn(
        'internationalize_number_legacy is deprecated, use internationalise_number instead',
        DeprecationWarning,
        stacklevel=2
    )
    country = get_defaults().default_country if country is None else str(country)
    num = extract_digits(number)
    prefix = _resolve_calling_code(country)

    if not starts_with(prefix, num):
        num = prefix + num

    return num
