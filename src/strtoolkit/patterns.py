"""Regex patterns used to classify and normalize strings.
"""

__docformat__ = 'google'

import re

## Numbers
# Building blocks
DIGITS: str = "[0-9]+"
GROUPED_DIGITS: str = f"{DIGITS}(?:,{DIGITS})*"
""" Uncompiled regex building block representing comma-grouped digits (e.g. 1,234)."""

WHITESPACE: str = "[ \\t\\n\\r\\v\\f]*"
SIGN: str = "[+-]?"
DECIMAL: str = "(?:[0-9]+(?:\\.[0-9]*)?|\\.[0-9]+)"
EXPONENT: str = "(?:[eE][+-]?[0-9]+)"

# Patterns
INTEGER_NUMERIC_PATTERN: re.Pattern = re.compile(GROUPED_DIGITS)
"""Compiled regex matching a comma-grouped integer. Must be applied with `fullmatch`.

Used in `strtoolkit.classifiers.is_integer_numeric`."""

FLOAT_NUMERIC_PATTERN: re.Pattern = re.compile(f"{GROUPED_DIGITS}\\.?[0-9]*")
"""Compiled regex matching a comma-grouped number with an optional fractional part.

A bare trailing dot is accepted (e.g. '12.'). Must be applied with `fullmatch`.

Used in `strtoolkit.classifiers.is_float_numeric`."""

NUMERIC_PATTERN: re.Pattern = re.compile(
    f"{WHITESPACE}{SIGN}{DECIMAL}{EXPONENT}?{WHITESPACE}"
    )
"""Compiled regex matching a signed decimal number with optional exponent.

Leading and trailing ASCII whitespace is tolerated. Must be applied with `fullmatch`.

Used in `strtoolkit.classifiers.is_numeric`."""

LEADING_INTEGER_PATTERN: re.Pattern = re.compile(f"{WHITESPACE}({SIGN}[0-9]+)")
"""Compiled regex matching the integer prefix of a string.

Capture groups:
    * 1: signed digits

Used in `strtoolkit.classifiers.is_alphabetic`."""

LEADING_FLOAT_PATTERN: re.Pattern = re.compile(f"{WHITESPACE}({SIGN}{DECIMAL}{EXPONENT}?)")
"""Compiled regex matching the floating point prefix of a string.

Capture groups:
    * 1: signed decimal with optional exponent

Used in `strtoolkit.classifiers.is_alphabetic`."""

## Words
WORD_PATTERN: re.Pattern = re.compile("(\\W?\\w)+", re.I)
"""Compiled regex matching runs of word characters, each optionally preceded
by one non-word character.

Word characters follow Python's Unicode `\\w`: letters of any script, digits
and the underscore.

Used in `strtoolkit.classifiers.is_alphanumeric`."""

NON_ALNUM_PATTERN: re.Pattern = re.compile("[^A-Za-z0-9]")
"""Compiled regex matching any character that is not an ASCII letter or digit.

Used in `strtoolkit.cases.pascal_case_new`."""

## Telephone numbers
# Building blocks
TEL_PREFIX: str = "(?:\\+|00)?"
TEL_BODY: str = "[0-9\\-() ]{7,15}"
PARENTHESIZED_DIGITS: str = "\\([0-9]+?\\)"

# Patterns
TEL_NUMBER_PATTERN: re.Pattern = re.compile(f"{TEL_PREFIX}{TEL_BODY}")
"""Compiled regex matching a loosely formatted telephone number.

An optional '+' or '00' is followed by 7 to 15 digits, hyphens,
parentheses or spaces. Must be applied with `fullmatch`.

Used in `strtoolkit.classifiers.is_tel_number`."""

PARENTHESIZED_DIGITS_PATTERN: re.Pattern = re.compile(PARENTHESIZED_DIGITS)
"""Compiled regex matching a parenthesized run of digits such as a local area code.

Used in `strtoolkit.phones.extract_digits`."""

NON_DIGIT_PATTERN: re.Pattern = re.compile("[^0-9]")
"""Compiled regex matching any character that is not a digit.

Used in `strtoolkit.phones.extract_digits`."""

DIGITS_ONLY_PATTERN: re.Pattern = re.compile(DIGITS)
"""Compiled regex matching a string made of digits only. Must be applied with `fullmatch`.

Used in `strtoolkit.phones.internationalize_number_legacy`."""
