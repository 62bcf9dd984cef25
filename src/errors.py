'''
This module defines the errors raised by the ride tracker.
'''

from enum import Enum


class ValidationKind(str, Enum):
    EMPTY_NAME = "EmptyName"
    FRIGHT_FACTOR_OUT_OF_RANGE = "FrightFactorOutOfRange"
    COST_BELOW_MINIMUM = "CostBelowMinimum"
    NEGATIVE_VISITORS = "NegativeVisitors"


class RideTrackerError(Exception):
    """Base class for all ride tracker errors"""


class ValidationError(RideTrackerError):
    """A ride field was given a value outside its allowed range"""

    def __init__(self, kind, message):
        super().__init__(message)
        self.kind = kind


class DuplicateNameError(RideTrackerError):
    """A ride with the same name (ignoring case) already exists"""

    def __init__(self, name):
        super().__init__(f"A ride named '{name}' already exists.")
        self.name = name


class NotFoundError(RideTrackerError):
    """No ride matches the requested name"""

    def __init__(self, name):
        super().__init__(f"Ride '{name}' not found.")
        self.name = name


class MalformedRecordError(RideTrackerError):
    """A line in the rides file could not be turned into a ride"""

    def __init__(self, line_no, line, reason):
        super().__init__(f"line {line_no}: {reason} ({line!r})")
        self.line_no = line_no
        self.line = line
        self.reason = reason


class StorageError(RideTrackerError):
    """Writing the rides file failed"""

    def __init__(self, path, cause):
        super().__init__(f"could not save rides to {path}: {cause}")
        self.path = path
        self.cause = cause
