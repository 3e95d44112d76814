# SPDX-License-Identifier: MIT
"""Property-based tests for parsing and comparison laws.

These tests verify that:
- Canonical strict strings round-trip through both string forms
- Normalizing and re-parsing yields an equal version
- Default equality is an equivalence relation and the ordering is total
- Equal versions hash equally, whatever their metadata or label casing
- version_key agrees with the comparer
"""

from __future__ import annotations

from hypothesis import given, settings, strategies as st

from hybrid_semver import (
    DEFAULT_COMPARER,
    SemanticVersion,
    VersionComparer,
    VersionComparison,
    try_parse_strict,
    version_key,
)


# =============================================================================
# Strategies for generating test data
# =============================================================================

numbers = st.integers(min_value=0, max_value=10**6)

# Canonical numeric component (no leading zeros)
numeric_components = numbers.map(str)

# Strict identifiers: alphanumerics and hyphens
identifiers = st.from_regex(r"[0-9A-Za-z-]{1,8}", fullmatch=True)

# A small label pool so that generated versions collide often
labels = st.one_of(
    st.integers(min_value=0, max_value=12).map(str),
    st.sampled_from(["alpha", "Alpha", "beta", "BETA", "rc", "x-1", "pre"]),
)

metadata = st.one_of(st.none(), st.sampled_from(["0", "build", "BUILD", "sha-1"]))


@st.composite
def strict_version_strings(draw):
    """Generate a canonical strict SemVer string."""
    text = ".".join(draw(st.lists(numeric_components, min_size=3, max_size=3)))
    release = draw(st.lists(identifiers, max_size=4))
    if release:
        text += "-" + ".".join(release)
    if draw(st.booleans()):
        text += "+" + draw(identifiers)
    return text


@st.composite
def versions(draw):
    """Generate a SemanticVersion from components."""
    small = st.integers(min_value=0, max_value=3)
    return SemanticVersion(
        major=draw(small),
        minor=draw(small),
        patch=draw(small),
        revision=draw(st.sampled_from([0, 0, 0, 1])),
        release_labels=draw(st.lists(labels, max_size=3)),
        metadata=draw(metadata),
    )


def sign(value: int) -> int:
    return (value > 0) - (value < 0)


# =============================================================================
# Round-trip properties
# =============================================================================


class TestRoundTrip:
    """Parsing and formatting canonical strings."""

    @given(text=strict_version_strings())
    @settings(max_examples=200)
    def test_strict_round_trip(self, text):
        """Canonical strict strings are reproduced by both string forms."""
        v = try_parse_strict(text)
        assert v is not None
        assert str(v) == text
        assert v.to_normalized_string() == text

    @given(text=strict_version_strings())
    @settings(max_examples=200)
    def test_normalization_idempotent(self, text):
        """Re-parsing the normalized form yields an equal version."""
        v = try_parse_strict(text)
        again = try_parse_strict(v.to_normalized_string())
        assert again == v
        assert hash(again) == hash(v)
        assert again.to_normalized_string() == v.to_normalized_string()

    @given(
        major=numbers,
        minor=numbers,
        patch=numbers,
        width=st.integers(min_value=1, max_value=3),
    )
    @settings(max_examples=100)
    def test_leading_zeros_rejected(self, major, minor, patch, width):
        """Any zero-padded component fails the strict grammar."""
        padded = "0" * width + str(major)
        assert try_parse_strict(f"{padded}.{minor}.{patch}") is None
        assert try_parse_strict(f"{minor}.{padded}.{patch}") is None
        assert try_parse_strict(f"{minor}.{patch}.{padded}") is None


# =============================================================================
# Comparison laws
# =============================================================================


class TestComparisonLaws:
    """Equivalence and ordering laws for the default comparer."""

    @given(v=versions())
    @settings(max_examples=100)
    def test_reflexive(self, v):
        """Every version equals itself."""
        assert v == v
        assert v.compare_to(v) == 0

    @given(a=versions(), b=versions())
    @settings(max_examples=300)
    def test_antisymmetric(self, a, b):
        """Swapping arguments negates the comparison."""
        assert a.compare_to(b) == -b.compare_to(a)
        assert (a == b) == (b == a)

    @given(a=versions(), b=versions(), c=versions())
    @settings(max_examples=300)
    def test_transitive(self, a, b, c):
        """Sorted triples stay ordered end to end."""
        low, mid, high = sorted([a, b, c])
        assert low <= mid <= high
        assert low <= high
        if low == mid and mid == high:
            assert low == high

    @given(a=versions(), b=versions())
    @settings(max_examples=300)
    def test_equal_implies_same_hash(self, a, b):
        """Versions equal by default hash equally."""
        if a == b:
            assert hash(a) == hash(b)
        else:
            assert a.compare_to(b) != 0

    @given(v=versions(), other=metadata)
    @settings(max_examples=100)
    def test_metadata_ignored_by_default(self, v, other):
        """Replacing the metadata never changes default equality."""
        changed = SemanticVersion(
            v.major, v.minor, v.patch, v.revision, v.release_labels, other
        )
        assert changed == v
        assert hash(changed) == hash(v)
        assert not (changed < v)
        assert not (changed > v)

    @given(v=versions())
    @settings(max_examples=100)
    def test_label_case_ignored(self, v):
        """Label casing never changes equality or hash."""
        swapped = SemanticVersion(
            v.major,
            v.minor,
            v.patch,
            v.revision,
            [label.swapcase() for label in v.release_labels],
            v.metadata,
        )
        assert swapped == v
        assert hash(swapped) == hash(v)

    @given(a=versions(), b=versions())
    @settings(max_examples=300)
    def test_version_key_agrees(self, a, b):
        """version_key orders exactly like the default comparer."""
        key_order = (version_key(a) > version_key(b)) - (version_key(a) < version_key(b))
        assert key_order == DEFAULT_COMPARER.compare(a, b)

    @given(a=versions(), b=versions(), mode=st.sampled_from(list(VersionComparison)))
    @settings(max_examples=300)
    def test_modes_consistent(self, a, b, mode):
        """Each mode's hash agrees with its equality, and modes nest."""
        comparer = VersionComparer(mode)
        if comparer.equals(a, b):
            assert comparer.hash(a) == comparer.hash(b)

        exact = VersionComparer(VersionComparison.VERSION_RELEASE_METADATA)
        if exact.equals(a, b):
            assert a == b
        if a == b:
            assert a.equals(b, VersionComparison.VERSION)

    @given(a=versions(), b=versions())
    @settings(max_examples=200)
    def test_operators_agree_with_compare_to(self, a, b):
        """All six operators derive from the same comparison."""
        result = sign(a.compare_to(b))
        assert (a == b) == (result == 0)
        assert (a != b) == (result != 0)
        assert (a < b) == (result < 0)
        assert (a <= b) == (result <= 0)
        assert (a > b) == (result > 0)
        assert (a >= b) == (result >= 0)
