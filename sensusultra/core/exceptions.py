# sensusultra/core/exceptions.py
from __future__ import annotations

from enum import Enum


class Status(Enum):
    """Result codes of the device-parser interface."""

    SUCCESS = 0
    UNSUPPORTED = -1
    INVALIDARGS = -2
    NOMEMORY = -3
    DATAFORMAT = -6


class ParserError(Exception):
    """Base error for all parser and dive-model exceptions."""

    status: Status = Status.INVALIDARGS


# ---- Parser errors ----
class InvalidArgs(ParserError, ValueError):
    """Raised when an operation receives an argument of the wrong kind."""

    status = Status.INVALIDARGS


class DataFormatError(ParserError):
    """Raised when the installed buffer is too short or malformed."""

    status = Status.DATAFORMAT


class UnsupportedField(ParserError, KeyError):
    """Raised when a field kind (or device family) is not supported."""

    status = Status.UNSUPPORTED


# ---- Dive model errors ----
class InvalidProfile(ParserError):
    """Raised when a ProfileSeries is constructed with invalid inputs."""


class InvalidDive(ParserError):
    """Raised when a Dive / DiveMeta is constructed with invalid inputs."""


class SeriesNotFound(ParserError, KeyError):
    """Raised when a requested profile series is not present in a Dive."""
