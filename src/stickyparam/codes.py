"""Code constants for stickyparam.

These constants prevent stringly-typed sources and value tags and ensure
client code compares against the right values.
"""

from enum import Enum


class DefaultSource(str, Enum):
    """Where a resolved default came from."""

    STATIC = "STATIC"  # Spec's configured default
    HISTORY = "HISTORY"  # Last qualifying run of the job


class ValueType(str, Enum):
    """Declared type tags for recorded parameter values."""

    BOOLEAN = "boolean"
    STRING = "string"
