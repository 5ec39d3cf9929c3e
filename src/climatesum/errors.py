"""Exceptions raised while reading and aggregating observation files."""
from typing import Optional


class ClimateSumError(Exception):
    """Base class for all climatesum errors."""


class ConfigError(ClimateSumError, ValueError):
    """Configuration file could not be read or holds invalid values."""


class ParseError(ClimateSumError):
    """A single input line could not be turned into an observation."""

    def __init__(self, message: str, line: Optional[str] = None):
        super().__init__(message)
        self.line = line


class FieldCountMismatch(ParseError):
    """Fewer fields than the TDV layout requires."""

    def __init__(self, found: int, expected: int, line: Optional[str] = None):
        super().__init__(f"expected {expected} fields, found {found}", line)
        self.found = found
        self.expected = expected


class MissingRegionCode(ParseError):
    """The region code field is empty."""

    def __init__(self, line: Optional[str] = None):
        super().__init__("region code is empty", line)


class NumericFieldInvalid(ParseError):
    """A field that must be numeric does not hold a finite number."""

    def __init__(self, field: str, value: str, line: Optional[str] = None):
        super().__init__(f"field '{field}' is not a number: {value!r}", line)
        self.field = field
        self.value = value


class FileOpenError(ClimateSumError):
    """An input file could not be opened for reading."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"cannot open {path}: {reason}")
        self.path = path
        self.reason = reason


class CapacityExceededError(ClimateSumError):
    """More distinct regions were seen than the store was allowed to hold."""

    def __init__(self, region: str, capacity: int):
        super().__init__(
            f"region {region!r} would exceed the limit of {capacity} regions"
        )
        self.region = region
        self.capacity = capacity
