# SPDX-License-Identifier: MIT
"""Semantic version parsing and formatting.

Two grammars share one value type:

- Lenient (legacy): 1 to 4 numeric components, optional ``-release`` whose
  first identifier starts with a letter, optional single-segment ``+metadata``.
  Whitespace around the dots is tolerated, e.g. ``1.3 .4``.
- Strict (SemVer 2.0.0): exactly 3 components without leading zeros,
  dot-separated ``-release`` identifiers, single-segment ``+metadata``.

Both grammars are case-insensitive.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable, Optional, Union

if TYPE_CHECKING:
    from .compare import VersionComparison

logger = logging.getLogger(__name__)

_FLAGS = re.IGNORECASE | re.ASCII

# Legacy-compatible pattern. Components may carry leading zeros and be padded
# with whitespace around the separating dots.
LENIENT_PATTERN = re.compile(
    r"(?P<version>\d+(?:\s*\.\s*\d+){0,3})"
    r"(?:-(?P<release>[a-z][0-9a-z-]*(?:\.[0-9a-z-]+)*))?"
    r"(?:\+(?P<metadata>[0-9a-z-]+))?",
    _FLAGS,
)

# Strict SemVer 2.0.0 pattern. Build metadata is restricted to one segment.
SEMVER_PATTERN = re.compile(
    r"(?P<version>(?:0|[1-9]\d*)(?:\.(?:0|[1-9]\d*)){2})"
    r"(?:-(?P<release>[0-9a-z-]+(?:\.[0-9a-z-]+)*))?"
    r"(?:\+(?P<metadata>[0-9a-z-]+))?",
    _FLAGS,
)


class InvalidVersionError(Exception):
    """Raised when a version string cannot be parsed."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid version string: {version!r}"
        super().__init__(self.message)


class EmptyVersionError(InvalidVersionError):
    """Raised when the version string is None or empty."""

    def __init__(self, version: Optional[str] = None):
        super().__init__(version or "", "Version string cannot be null or empty")


class MalformedVersionError(InvalidVersionError):
    """Raised when the version string does not match the grammar."""

    def __init__(self, version: str, strict: bool = False):
        kind = "semantic version" if strict else "version string"
        super().__init__(version, f"{version!r} is not a valid {kind}")


class VersionTypeError(TypeError):
    """Raised when a comparison receives something that is not a version."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(
            f"Object must be a SemanticVersion, got {type(value).__name__}"
        )


@dataclass(frozen=True, slots=True, eq=False)
class SemanticVersion:
    """An immutable semantic version.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch (legacy: build) number
        revision: Legacy fourth component, 0 when absent
        release_labels: Pre-release identifiers in input order, empty for a
            stable release
        metadata: Build metadata, excluded from ordering and default equality
        original_string: The parsed text with whitespace removed, None when
            the value was built from components
    """

    major: int
    minor: int = 0
    patch: int = 0
    revision: int = 0
    release_labels: tuple[str, ...] = ()
    metadata: Optional[str] = None
    original_string: Optional[str] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch", "revision"):
            object.__setattr__(self, name, max(int(getattr(self, name)), 0))
        object.__setattr__(self, "release_labels", _normalize_labels(self.release_labels))
        object.__setattr__(self, "metadata", self.metadata or None)
        object.__setattr__(self, "original_string", self.original_string or None)

    # -- accessors ---------------------------------------------------------

    @property
    def release(self) -> str:
        """Pre-release labels joined with dots, empty for a stable release."""
        return ".".join(self.release_labels)

    @property
    def is_prerelease(self) -> bool:
        return bool(self.release_labels)

    @property
    def has_metadata(self) -> bool:
        return self.metadata is not None

    @property
    def is_legacy_version(self) -> bool:
        """True when the version carries a nonzero fourth component."""
        return self.revision > 0

    @property
    def version(self) -> tuple[int, int, int, int]:
        """The numeric components as ``(major, minor, patch, revision)``."""
        return (self.major, self.minor, self.patch, self.revision)

    @property
    def base_version(self) -> str:
        """Return the numeric part without pre-release or metadata."""
        if self.is_legacy_version:
            return f"{self.major}.{self.minor}.{self.patch}.{self.revision}"
        return f"{self.major}.{self.minor}.{self.patch}"

    # -- formatting --------------------------------------------------------

    def __str__(self) -> str:
        """Return the original text, or a legacy string for built values."""
        if self.original_string is None:
            return self._legacy_string()
        return self.original_string

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_normalized_string()!r})"

    def to_normalized_string(self) -> str:
        """Return the canonical form derived from the components.

        Legacy versions render all four components and drop metadata,
        everything else renders as ``major.minor.patch[-release][+metadata]``.
        """
        if self.is_legacy_version:
            return self._legacy_string()

        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.release_labels:
            text += f"-{self.release}"
        if self.metadata:
            text += f"+{self.metadata}"
        return text

    def _legacy_string(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}.{self.revision}"
        if self.release_labels:
            text += f"-{self.release}"
        return text

    # -- comparison --------------------------------------------------------

    def compare_to(
        self,
        other: Optional[SemanticVersion],
        mode: Union[VersionComparison, str, None] = None,
    ) -> int:
        """Three-way compare against ``other`` under ``mode``.

        Returns -1, 0 or 1. A missing ``other`` compares as lower.

        Raises:
            VersionTypeError: If ``other`` is not a SemanticVersion
        """
        return _comparer(mode).compare(self, other)

    def equals(
        self,
        other: Optional[SemanticVersion],
        mode: Union[VersionComparison, str, None] = None,
    ) -> bool:
        return _comparer(mode).equals(self, other)

    def __hash__(self) -> int:
        return _comparer(None).hash(self)

    def __eq__(self, other: object) -> bool:
        if other is not None and not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.compare_to(other) == 0

    def __ne__(self, other: object) -> bool:
        if other is not None and not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.compare_to(other) != 0

    def __lt__(self, other: Optional[SemanticVersion]) -> bool:
        return self.compare_to(other) < 0

    def __le__(self, other: Optional[SemanticVersion]) -> bool:
        return self.compare_to(other) <= 0

    def __gt__(self, other: Optional[SemanticVersion]) -> bool:
        return self.compare_to(other) > 0

    def __ge__(self, other: Optional[SemanticVersion]) -> bool:
        return self.compare_to(other) >= 0

    # -- parsing -----------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> SemanticVersion:
        return parse_version(text)

    @classmethod
    def try_parse(cls, text: Optional[str]) -> Optional[SemanticVersion]:
        return try_parse_version(text)

    @classmethod
    def try_parse_strict(cls, text: Optional[str]) -> Optional[SemanticVersion]:
        return try_parse_strict(text)


def _normalize_labels(labels: Union[str, Iterable[str], None]) -> tuple[str, ...]:
    if labels is None:
        return ()
    if isinstance(labels, str):
        labels = labels.split(".")
    labels = tuple(labels)
    if not any(labels):
        return ()
    if not all(labels):
        raise ValueError(f"Release labels cannot be empty: {labels!r}")
    return labels


def _comparer(mode):
    # compare.py imports this module, so the comparer is resolved lazily
    from .compare import DEFAULT_COMPARER, VersionComparer

    if mode is None:
        return DEFAULT_COMPARER
    return VersionComparer(mode)


def _match(text: object, pattern: re.Pattern, strip: bool) -> Optional[SemanticVersion]:
    if not isinstance(text, str) or not text:
        return None

    match = pattern.fullmatch(text.strip() if strip else text)
    if match is None:
        logger.debug("Rejected version string %r (pattern %s)", text, pattern.pattern)
        return None

    numbers = [int(part) for part in match.group("version").split(".")]
    numbers += [0] * (4 - len(numbers))
    release = match.group("release")

    return SemanticVersion(
        major=numbers[0],
        minor=numbers[1],
        patch=numbers[2],
        revision=numbers[3],
        release_labels=release.split(".") if release else (),
        metadata=match.group("metadata"),
        original_string="".join(text.split()),
    )


def try_parse_version(text: Optional[str]) -> Optional[SemanticVersion]:
    """Parse ``text`` with the lenient grammar.

    Returns:
        The parsed version, or None if ``text`` is empty, not a string or
        does not match. Never raises.

    Examples:
        >>> try_parse_version("1.2.3.4-beta").revision
        4
        >>> try_parse_version("1.2.3-1beta") is None
        True
    """
    return _match(text, LENIENT_PATTERN, strip=True)


def try_parse_strict(text: Optional[str]) -> Optional[SemanticVersion]:
    """Parse ``text`` with the strict SemVer 2.0.0 grammar.

    Returns:
        The parsed version, or None if ``text`` is not strict SemVer.

    Examples:
        >>> try_parse_strict("1.2.3-X.y3+0").release_labels
        ('X', 'y3')
        >>> try_parse_strict("01.2.3") is None
        True
    """
    return _match(text, SEMVER_PATTERN, strip=False)


def parse_version(version_string: str) -> SemanticVersion:
    """Parse a version string with the lenient grammar.

    Args:
        version_string: Text such as ``1.2``, ``1.2.3-beta+build`` or the
            legacy ``1.2.3.4``

    Returns:
        A SemanticVersion whose ``str()`` echoes the input

    Raises:
        EmptyVersionError: If the string is None or empty
        MalformedVersionError: If the string does not match the grammar
        InvalidVersionError: If the input is not a string

    Examples:
        >>> parse_version("1.2.3-alpha+build")
        SemanticVersion('1.2.3-alpha+build')

        >>> str(parse_version("1.2.3.4"))
        '1.2.3.4'
    """
    return _parse_or_raise(version_string, strict=False)


def parse_strict(version_string: str) -> SemanticVersion:
    """Parse a version string with the strict SemVer 2.0.0 grammar.

    Raises:
        EmptyVersionError: If the string is None or empty
        MalformedVersionError: If the string is not strict SemVer
        InvalidVersionError: If the input is not a string
    """
    return _parse_or_raise(version_string, strict=True)


def _parse_or_raise(version_string: str, strict: bool) -> SemanticVersion:
    if version_string is None or version_string == "":
        raise EmptyVersionError(version_string)
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    parser = try_parse_strict if strict else try_parse_version
    version = parser(version_string)
    if version is None:
        raise MalformedVersionError(version_string, strict=strict)
    return version


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid strict semantic version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("1.0.0-alpha")
        True
    """
    return try_parse_strict(version_string) is not None
