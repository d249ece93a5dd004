import logging
import pandas as pd
from functools import cached_property
from importlib import resources
from keyword import iskeyword
from typing import Tuple

logger = logging.getLogger(__name__)

class CountryCodeData:
    """
    Lookup table of short country identifiers and their calling codes.

    Every column of the packaged CSV becomes an attribute holding a
    `pandas.Series` (e.g. `country`, `calling_code`). Values are read as
    strings so that calling codes keep any leading zeros.
    """
    csv_path = resources.files('strtoolkit.data').joinpath('country_codes.csv')

    def __init__(self):
        with self.csv_path.open('r') as f:
            data = pd.read_csv(f, dtype=str)
            for column in data.columns:
                if not iskeyword(column):
                    setattr(self, column, data[column])
        self._validate_data()
        logger.debug('Loaded %d country calling codes', len(self.country))

    def _validate_data(self):
        if self.country.isna().any() or self.calling_code.isna().any():
            raise ValueError("Missing values in country code table")
        elif self.country.duplicated().any():
            raise ValueError("Non-unique country identifiers in country code table")

    @cached_property
    def country_to_calling_code(self):
        return dict(zip(self.country, self.calling_code))

    @cached_property
    def calling_codes(self) -> Tuple[str, ...]:
        return tuple(self.calling_code)
