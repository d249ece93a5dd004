"""Value objects shared by the case conversion functions."""

__docformat__ = 'google'

__all__ = [
    'SeparatorKind',
    'Separators'
]

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple
from strtoolkit.exceptions import InvalidArgumentError

class SeparatorKind(Enum):
    """
    Enumeration of the ways separators can be passed to `strtoolkit.cases` functions.
    """
    DEFAULT = "default"
    SINGLE = "single"
    MANY = "many"

@dataclass(frozen=True)
class Separators:
    """
    An ordered set of delimiters, tagged with the form it was given in.

    Args:
        kind: How the separators were passed by the caller
        values: Delimiters in the order they are applied

    Build instances with `Separators.from_value` rather than directly.
    """
    kind: SeparatorKind
    values: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_value(cls, value, default: str|Tuple[str, ...]) -> 'Separators':
        """
        Normalize a separator argument into an ordered tuple of delimiters.

        Args:
            value: None, a single delimiter, or a list or tuple of delimiters
            default: Delimiter or delimiters to use when value is None

        Returns:
            A `Separators` object

        Raises:
            InvalidArgumentError: value is not None, a string, or a list of strings

        Example:
            >>> Separators.from_value('-', default='_').values
            ('-',)
            >>> Separators.from_value(None, default=('_', ' ')).kind
            <SeparatorKind.DEFAULT: 'default'>
        """
        if value is None:
            values = (default,) if isinstance(default, str) else tuple(default)
            return cls(SeparatorKind.DEFAULT, values)
        elif isinstance(value, str):
            return cls(SeparatorKind.SINGLE, (value,))
        elif isinstance(value, (list, tuple)):
            for item in value:
                if not isinstance(item, str):
                    raise InvalidArgumentError('Separators', 'a list of strings', item)
            return cls(SeparatorKind.MANY, tuple(value))
        else:
            raise InvalidArgumentError('Separator', 'either None or a string or a list', value)
