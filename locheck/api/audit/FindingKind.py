"""Kinds of report lines produced by an audit."""

from enum import Enum


class FindingKind(str, Enum):
    EMPTY_VALUE = "empty_value"
    UNUSED = "unused"
    USED = "used"
