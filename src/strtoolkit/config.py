"""Packaged library defaults.

Defaults are read once from `strtoolkit/data/defaults.yaml` and cached for
the life of the process.
"""

__docformat__ = 'google'

__all__ = [
    'Defaults',
    'get_defaults'
]

import logging
import yaml
from dataclasses import dataclass
from functools import cache
from importlib import resources
from typing import Tuple

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class Defaults:
    """
    Default arguments used when callers omit optional parameters.

    Args:
        pascal_case_separators: Delimiters applied in order by `strtoolkit.cases.pascal_case`
        pascal_case_new_separator: Delimiter used by `strtoolkit.cases.pascal_case_new`
        default_country: Country identifier assumed by the legacy phone normalizer
        default_calling_code: Calling code used when a country cannot be resolved
    """
    pascal_case_separators: Tuple[str, ...]
    pascal_case_new_separator: str
    default_country: str
    default_calling_code: str

    @classmethod
    def from_dict(cls, data: dict) -> 'Defaults':
        for section in ('separators', 'telephone'):
            if section not in data:
                raise ValueError(f"Missing '{section}' section in defaults file")

        separators = data['separators']
        telephone = data['telephone']
        return cls(
            pascal_case_separators = tuple(str(s) for s in separators['pascal_case']),
            pascal_case_new_separator = str(separators['pascal_case_new']),
            default_country = str(telephone['default_country']),
            default_calling_code = str(telephone['default_calling_code'])
        )

class DefaultsData:
    yaml_path = resources.files('strtoolkit.data').joinpath('defaults.yaml')
    """ Packaged library defaults """

    def load(self) -> Defaults:
        with self.yaml_path.open('r') as f:
            data = yaml.safe_load(f) or {}
        logger.debug('Loaded defaults from %s', self.yaml_path)
        return Defaults.from_dict(data)

@cache
def get_defaults() -> Defaults:
    """
    Return the packaged defaults, loading them on first use.

    Example:
        >>> get_defaults().pascal_case_separators
        ('_', '-', ' ')
    """
    return DefaultsData().load()
