# SPDX-License-Identifier: MIT
"""Hybrid semantic versioning: strict SemVer 2.0.0 plus legacy 4-part versions.

This package provides a single immutable version type with a lenient parser
(accepting legacy ``major.minor.build.revision`` versions) and a strict
SemVer 2.0.0 parser, and a comparer whose strictness is configurable.

Example:
    >>> from hybrid_semver import parse_version, try_parse_strict, VersionComparison
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build")
    >>> version.release_labels
    ('alpha', '1')
    >>> version.metadata
    'build'
    >>>
    >>> try_parse_strict("1.2.3.4") is None
    True
    >>>
    >>> version == parse_version("1.2.3-ALPHA.1")
    True
    >>> version.equals(parse_version("1.2.3-alpha.1"), VersionComparison.VERSION_RELEASE_METADATA)
    False
"""

__version__ = "0.1.0"

from .semver import (
    SemanticVersion,
    parse_version,
    parse_strict,
    try_parse_version,
    try_parse_strict,
    is_valid_semver,
    InvalidVersionError,
    EmptyVersionError,
    MalformedVersionError,
    VersionTypeError,
    LENIENT_PATTERN,
    SEMVER_PATTERN,
)
from .compare import (
    DEFAULT_COMPARER,
    VersionComparer,
    VersionComparison,
    compare_versions,
    version_key,
)

__all__ = [
    # Version value and parsing
    "SemanticVersion",
    "parse_version",
    "parse_strict",
    "try_parse_version",
    "try_parse_strict",
    "is_valid_semver",
    "LENIENT_PATTERN",
    "SEMVER_PATTERN",
    # Errors
    "InvalidVersionError",
    "EmptyVersionError",
    "MalformedVersionError",
    "VersionTypeError",
    # Version comparison
    "DEFAULT_COMPARER",
    "VersionComparer",
    "VersionComparison",
    "compare_versions",
    "version_key",
]
