"""
String classification and transformation utilities.

See individual module documentation for detailed information.
"""
import logging

from . import classifiers
from . import cases
from . import phones
from . import substrings
from . import entities
from .classifiers import *
from .cases import *
from .phones import *
from .substrings import *
from .exceptions import InvalidArgumentError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'classifiers',
    'cases',
    'phones',
    'substrings',
    'entities',
    'InvalidArgumentError',
    *classifiers.__all__,
    *cases.__all__,
    *phones.__all__,
    *substrings.__all__
]
