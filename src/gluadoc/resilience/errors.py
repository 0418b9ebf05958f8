"""Error classification for structured error handling.

Classifies exceptions by category to enable:
- Structured logging (which failures are per-file vs fatal)
- The per-invocation boundary policy (configuration errors propagate,
  everything else degrades to "no result for this file")
"""

from __future__ import annotations

import re
from enum import Enum

import yaml
from pydantic import ValidationError


class ConfigurationError(Exception):
    """Plugin configuration is missing, unreadable or invalid."""


class ErrorClass(Enum):
    CONFIGURATION = "configuration"  # bad config, halt initialization
    MALFORMED_INPUT = "malformed_input"  # source text the scanner choked on
    FILESYSTEM = "filesystem"  # unreadable hub file, bad path
    UNKNOWN = "unknown"  # unclassified, still per-file


def classify_error(error: Exception) -> ErrorClass:
    """Classify an error to determine handling strategy.

    Checks exception types first, falls back to message matching
    for untyped exceptions raised deep inside the scanners.
    """
    # 1. Configuration problems, whichever layer raised them
    if isinstance(
        error, (ConfigurationError, ValidationError, yaml.YAMLError, re.error)
    ):
        return ErrorClass.CONFIGURATION

    # 2. Filesystem access
    if isinstance(error, OSError):
        return ErrorClass.FILESYSTEM

    # 3. Text the scanners could not make sense of
    if isinstance(error, (ValueError, IndexError, UnicodeError)):
        return ErrorClass.MALFORMED_INPUT

    # 4. Fall back to string matching for untyped exceptions
    msg = str(error).lower()
    if "config" in msg:
        return ErrorClass.CONFIGURATION
    if "no such file" in msg or "permission denied" in msg:
        return ErrorClass.FILESYSTEM

    return ErrorClass.UNKNOWN


def is_fatal(error: Exception) -> bool:
    """Return True if the error must propagate past the per-file boundary.

    Only an explicit ConfigurationError qualifies. Errors that merely
    classify as configuration while scanning a file stay per-file.
    """
    return isinstance(error, ConfigurationError)
