"""Configuration constants for the SkiArea catalog.

All tunable parameters are centralized here.

Classes:
    ParkingConfig: Parking proportionality rule
    ImportConfig: Lift import file format
    LogConfig: Logging defaults for applications embedding the catalog
"""

import re


class ParkingConfig:
    """Parking proportionality rule."""

    # A parking is proportionate when slots // total served capacity is below this.
    # Integer division truncating toward zero, not real division.
    PROPORTION_THRESHOLD = 30


class ImportConfig:
    """Lift import file format.

    One record per line:
        T;<code>;<category>;<capacity>
        L;<liftName>;<typeCode>
    """

    FIELD_SEPARATOR = ";"
    ENCODING = "utf-8"

    # Record tags (first field, after stripping)
    LIFT_TYPE_TAG = "T"
    LIFT_TAG = "L"

    # Minimum field counts including the tag; shorter lines are skipped
    MIN_LIFT_TYPE_FIELDS = 4
    MIN_LIFT_FIELDS = 3

    # Optional sign followed by Unicode decimal digits (no underscores, no blanks)
    INTEGER_PATTERN = re.compile(r"[+-]?\d+")

    # Capacities must fit a signed 32-bit integer
    INT_MIN = -(2**31)
    INT_MAX = 2**31 - 1


class LogConfig:
    """Logging defaults used by skiarea.configure_logging()."""

    DEFAULT_LEVEL = "INFO"
    FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
