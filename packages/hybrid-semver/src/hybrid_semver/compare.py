# SPDX-License-Identifier: MIT
"""Version comparison at configurable strictness.

Ordering: major, minor, patch and revision numerically, then pre-release
labels (a release outranks any of its pre-releases), then optionally build
metadata. Label comparison is case-insensitive: ``Alpha`` and ``alpha`` are
the same label, and hashing follows the same rule.
"""

from __future__ import annotations

from enum import Enum
from functools import cmp_to_key
from typing import Any, Optional, Sequence, Union

from .semver import SemanticVersion, VersionTypeError, parse_version


class VersionComparison(Enum):
    """How much of a version takes part in a comparison."""

    DEFAULT = "default"
    VERSION = "version"
    VERSION_RELEASE = "version_release"
    VERSION_RELEASE_METADATA = "version_release_metadata"

    @classmethod
    def _missing_(cls, value: object) -> Optional[VersionComparison]:
        # Accept member names too, e.g. "VERSION_RELEASE" or "version-release"
        if isinstance(value, str):
            name = value.strip().upper().replace("-", "_")
            return cls.__members__.get(name)
        return None


def _sign(left: Any, right: Any) -> int:
    return (left > right) - (left < right)


def _is_numeric(label: str) -> bool:
    return label.isascii() and label.isdigit()


def _compare_label(left: str, right: str) -> int:
    left_numeric = _is_numeric(left)
    right_numeric = _is_numeric(right)

    if left_numeric and right_numeric:
        return _sign(int(left), int(right))
    if left_numeric:
        # Numeric identifiers have lower precedence than alphanumeric ones
        return -1
    if right_numeric:
        return 1
    return _sign(left.upper(), right.upper())


def _compare_release_labels(left: Sequence[str], right: Sequence[str]) -> int:
    """Compare two pre-release label sequences.

    Per SemVer: a version without pre-release has higher precedence
    than one with pre-release (1.0.0 > 1.0.0-alpha), and a larger set of
    identifiers outranks a prefix of it (alpha < alpha.1).
    """
    if not left and not right:
        return 0
    if not left:
        return 1
    if not right:
        return -1

    for left_label, right_label in zip(left, right):
        result = _compare_label(left_label, right_label)
        if result:
            return result

    return _sign(len(left), len(right))


def _canonical_label(label: str) -> str:
    return str(int(label)) if _is_numeric(label) else label.upper()


def _check_type(value: object) -> None:
    if value is not None and not isinstance(value, SemanticVersion):
        raise VersionTypeError(value)


class VersionComparer:
    """Compares, equates and hashes versions under a comparison mode.

    The comparer is callable with the same signature as ``compare`` so it can
    be passed to ``functools.cmp_to_key``; ``key`` does that already.

    Example:
        >>> comparer = VersionComparer(VersionComparison.VERSION)
        >>> comparer.equals(parse_version("1.0.0-beta"), parse_version("1.0.0"))
        True
        >>> sorted([parse_version("2.0"), parse_version("1.0")], key=comparer.key)
        [SemanticVersion('1.0.0'), SemanticVersion('2.0.0')]
    """

    __slots__ = ("mode", "key")

    def __init__(self, mode: Union[VersionComparison, str] = VersionComparison.DEFAULT):
        self.mode = VersionComparison(mode)
        self.key = cmp_to_key(self.compare)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.mode.name})"

    def __call__(self, x: Optional[SemanticVersion], y: Optional[SemanticVersion]) -> int:
        return self.compare(x, y)

    @property
    def includes_release(self) -> bool:
        return self.mode is not VersionComparison.VERSION

    @property
    def includes_metadata(self) -> bool:
        return self.mode is VersionComparison.VERSION_RELEASE_METADATA

    def compare(self, x: Optional[SemanticVersion], y: Optional[SemanticVersion]) -> int:
        """Three-way compare two versions.

        Returns:
            -1 if x < y, 0 if x == y, 1 if x > y. None sorts below every
            version and equals None.

        Raises:
            VersionTypeError: If either argument is not a SemanticVersion
        """
        _check_type(x)
        _check_type(y)

        if x is None or y is None:
            return _sign(x is not None, y is not None)

        result = _sign(x.version, y.version)
        if result or not self.includes_release:
            return result

        result = _compare_release_labels(x.release_labels, y.release_labels)
        if result or not self.includes_metadata:
            return result

        # Ordinal, case-sensitive; absent metadata equals empty metadata
        return _sign(x.metadata or "", y.metadata or "")

    def equals(self, x: Optional[SemanticVersion], y: Optional[SemanticVersion]) -> bool:
        return self.compare(x, y) == 0

    def hash(self, version: Optional[SemanticVersion]) -> int:
        """Hash consistent with ``equals`` for this comparer's mode.

        Hashes the normalized text upper-cased, with numeric labels written
        without leading zeros, so ``alpha.01`` and ``ALPHA.1`` collide as they
        compare equal. Metadata only counts in the metadata mode.
        """
        _check_type(version)
        if version is None:
            return 0

        text = version.base_version
        if self.includes_release and version.release_labels:
            text += "-" + ".".join(_canonical_label(label) for label in version.release_labels)
        if self.includes_metadata and version.metadata:
            text += "+" + version.metadata
        return hash(text)


DEFAULT_COMPARER = VersionComparer()


def compare_versions(
    version1: Union[str, SemanticVersion],
    version2: Union[str, SemanticVersion],
    mode: Union[VersionComparison, str] = VersionComparison.DEFAULT,
) -> int:
    """Compare two versions.

    Args:
        version1: First version (string or SemanticVersion)
        version2: Second version (string or SemanticVersion)
        mode: Which parts of the versions take part

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0+a", "1.0.0+b")
        0
        >>> compare_versions("1.0.0+a", "1.0.0+b", "version_release_metadata")
        -1
        >>> compare_versions("1.0.0-rc", "1.0.0")
        -1
    """
    v1 = parse_version(version1) if isinstance(version1, str) else version1
    v2 = parse_version(version2) if isinstance(version2, str) else version2

    if mode is VersionComparison.DEFAULT:
        return DEFAULT_COMPARER.compare(v1, v2)
    return VersionComparer(mode).compare(v1, v2)


def version_key(version: Union[str, SemanticVersion]) -> tuple:
    """Return a sort key agreeing with the default ordering.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    v = parse_version(version) if isinstance(version, str) else version
    if not isinstance(v, SemanticVersion):
        raise VersionTypeError(v)

    # Stable releases become (1,) so they sort after any (0, labels...)
    if not v.release_labels:
        release_key: tuple = (1,)
    else:
        parts = []
        for label in v.release_labels:
            if _is_numeric(label):
                parts.append((0, int(label), ""))
            else:
                parts.append((1, 0, label.upper()))
        release_key = (0, tuple(parts))

    return (*v.version, release_key)
