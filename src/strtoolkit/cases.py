"""Case conversion utilities.

Names are split on one or more separators and the pieces are glued back
together with their first character upper-cased. Only the first character
of each piece is touched, so 'user_ID' becomes 'UserID' rather than 'UserId'.
"""

__docformat__ = 'google'

__all__ = [
    'pascal_case',
    'camel_case',
    'pascal_case_new',
    'capitalise'
]

from typing import Iterable
from strtoolkit.config import get_defaults
from strtoolkit.entities import Separators, SeparatorKind
from strtoolkit.patterns import NON_ALNUM_PATTERN

# Characters removed by str.strip in `capitalise`
TRIM_CHARACTERS: str = " \t\n\r\0\x0b"

def upper_first(text: str) -> str:
    return text[:1].upper() + text[1:]

def lower_first(text: str) -> str:
    return text[:1].lower() + text[1:]

def _join_pieces(name: str, separators: Iterable[str]) -> str:
    result = name
    for sep in separators:
        chunks = result.split(sep) if sep else [result]
        result = ''.join(map(upper_first, chunks))
    return result

def pascal_case(name: str, separators: str|list|None = None) -> str:
    """
    Convert a string to PascalCase.

    Separators are applied in order, each one re-splitting the output of the
    previous one. An empty separator only upper-cases the first character.

    Args:
        name: String to convert
        separators: A separator or list of separators. Defaults to '_', '-' and ' '.

    Returns:
        The converted string

    Raises:
        InvalidArgumentError: separators is not None, a string, or a list of strings

    Example:
        >>> pascal_case('user_first_name')
        'UserFirstName'
        >>> pascal_case('a b_c')
        'ABC'
        >>> pascal_case('user.first', '.')
        'UserFirst'
    """
    resolved = Separators.from_value(separators, default=get_defaults().pascal_case_separators)
    return _join_pieces(name, resolved.values)

def camel_case(name: str, separators: str|list|None = None) -> str:
    """
    Convert a string to camelCase.

    Same as `pascal_case` with the first character lower-cased.

    Example:
        >>> camel_case('user-first-name')
        'userFirstName'
    """
    return lower_first(pascal_case(name, separators))

def pascal_case_new(name: str, separators: str|list|None = None) -> str:
    """
    Convert a string to PascalCase, treating all punctuation as a separator.

    When a single separator is given (or none, which means '_'), every
    character that is not an ASCII letter or digit is first replaced by that
    separator. A list of separators skips this step and behaves like
    `pascal_case`.

    Args:
        name: String to convert
        separators: None, a separator, or a list of separators

    Returns:
        The converted string

    Raises:
        InvalidArgumentError: separators is not None, a string, or a list of strings

    Example:
        >>> pascal_case_new('foo*bar')
        'FooBar'
        >>> pascal_case_new('foo*bar', ['*'])
        'FooBar'
        >>> pascal_case_new('foo.bar_baz', ['_'])
        'Foo.barBaz'
    """
    resolved = Separators.from_value(separators, default=get_defaults().pascal_case_new_separator)

    if resolved.kind is SeparatorKind.MANY:
        return _join_pieces(name, resolved.values)

    sep = resolved.values[0]
    substituted = NON_ALNUM_PATTERN.sub(lambda match: sep, name)
    return _join_pieces(substituted, resolved.values)

def capitalise(text: str) -> str:
    """
    Lower-case every space-separated word and upper-case its first letter.

    Example:
        >>> capitalise('hELLO wORLD')
        'Hello World'
        >>> capitalise(' kofi  annan ')
        'Kofi  Annan'
    """
    words = text.split(' ')
    return ' '.join(upper_first(word.lower()) for word in words).strip(TRIM_CHARACTERS)
