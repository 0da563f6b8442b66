"""
Age Reference Data

Mean and standard deviation of the sprint and change-of-direction tests for
youth players aged 15 to 19. The table is indexed by biological age, so a
late maturing 17 year old is compared with 16 year olds.

Values are illustrative sample data; a club with its own testing history
should pass a different lookup to the metrics engine.
"""

import math
from types import MappingProxyType
from typing import Mapping

from .config import DEFAULT_REFERENCE_AGE
from .models import ReferenceEntry, ReferenceStat


def _entry(sprint_10m, sprint_30m, cod) -> ReferenceEntry:
    return ReferenceEntry(
        sprint_10m=ReferenceStat(mean=sprint_10m[0], sd=sprint_10m[1]),
        sprint_30m=ReferenceStat(mean=sprint_30m[0], sd=sprint_30m[1]),
        cod=ReferenceStat(mean=cod[0], sd=cod[1]),
    )


# (mean, sd) in seconds
REFERENCE_TABLE: Mapping[int, ReferenceEntry] = MappingProxyType({
    15: _entry((1.85, 0.12), (4.35, 0.18), (2.40, 0.15)),
    16: _entry((1.82, 0.11), (4.28, 0.17), (2.35, 0.14)),
    17: _entry((1.80, 0.10), (4.22, 0.16), (2.32, 0.13)),
    18: _entry((1.78, 0.10), (4.18, 0.15), (2.28, 0.12)),
    19: _entry((1.76, 0.09), (4.15, 0.15), (2.25, 0.12)),
})


def round_age(age: float) -> int:
    """Round half up, so 16.5 belongs to the 17 year old group"""
    return int(math.floor(age + 0.5))


def lookup(biological_age: float) -> ReferenceEntry:
    """
    Get reference values for a biological age

    Args:
        biological_age: Age in years (decimal)

    Returns:
        ReferenceEntry for the rounded age, or the default age entry when the
        rounded age is not in the table
    """
    if not math.isfinite(biological_age):
        return REFERENCE_TABLE[DEFAULT_REFERENCE_AGE]
    age = round_age(biological_age)
    return REFERENCE_TABLE.get(age, REFERENCE_TABLE[DEFAULT_REFERENCE_AGE])
