"""
Tests for parameterized policy options.

Tests cover:
- SeparatorOption construction, validation and string parsing
- RangeOption inside / outside / unlimited semantics
- Exclusive upper bounds
"""

import pytest

from policy_validators.core.enums import TriAllow
from policy_validators.core.options import (
    RangeKind,
    RangeOption,
    RangeViolation,
    SeparatorOption,
)


@pytest.mark.unit
class TestSeparatorOption:
    """Test separator policy option."""

    def test_constructors(self):
        assert SeparatorOption.must(":") == SeparatorOption(TriAllow.MUST, ":")
        assert SeparatorOption.allow("-").allows()
        assert SeparatorOption.must(":").requires()
        assert SeparatorOption.disallow().forbids()
        assert SeparatorOption.disallow().separator is None

    def test_disallow_carries_no_separator(self):
        with pytest.raises(ValueError):
            SeparatorOption(TriAllow.DISALLOW, ":")

    @pytest.mark.parametrize("separator", [None, "", "::"])
    def test_separator_must_be_single_character(self, separator):
        with pytest.raises(ValueError):
            SeparatorOption(TriAllow.ALLOW, separator)

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("must(:)", SeparatorOption.must(":")),
            ("allow(-)", SeparatorOption.allow("-")),
            ("disallow", SeparatorOption.disallow()),
        ],
    )
    def test_from_string(self, text, expected):
        assert SeparatorOption.from_string(text) == expected

    @pytest.mark.parametrize("text", ["must", "allow(:", "disallow(:)"])
    def test_from_string_rejects_malformed(self, text):
        with pytest.raises(ValueError):
            SeparatorOption.from_string(text)


@pytest.mark.unit
class TestRangeOption:
    """Test numeric range policy."""

    def test_unlimited_accepts_everything(self):
        option = RangeOption.unlimited()

        assert option.kind is RangeKind.UNLIMITED
        assert option.accepts(-(10**30))
        assert option.accepts(10**30)

    def test_unlimited_has_no_bounds(self):
        with pytest.raises(ValueError):
            RangeOption(RangeKind.UNLIMITED, min=1)

    def test_min_greater_than_max_rejected(self):
        with pytest.raises(ValueError):
            RangeOption.inside(10, 1)

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0, RangeViolation.TOO_SMALL),
            (1, None),
            (5, None),
            (10, None),
            (11, RangeViolation.TOO_LARGE),
        ],
    )
    def test_inside_inclusive(self, value, expected):
        assert RangeOption.inside(1, 10).check(value) is expected

    def test_inside_exclusive_upper_bound(self):
        option = RangeOption.inside(1, 10, inclusive=False)

        assert option.check(1) is None
        assert option.check(9) is None
        assert option.check(10) is RangeViolation.TOO_LARGE

    def test_inside_open_ended(self):
        assert RangeOption.inside(min=0).check(10**20) is None
        assert RangeOption.inside(max=0).check(1) is RangeViolation.TOO_LARGE

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0, None),
            (1, RangeViolation.FORBIDDEN),
            (10, RangeViolation.FORBIDDEN),
            (11, None),
        ],
    )
    def test_outside(self, value, expected):
        assert RangeOption.outside(1, 10).check(value) is expected

    @pytest.mark.parametrize("value", [-(2**63), 0, 5, 2**63])
    def test_outside_without_bounds_accepts_everything(self, value):
        assert RangeOption.outside().check(value) is None

    def test_outside_with_one_bound(self):
        option = RangeOption.outside(min=10)

        assert option.check(9) is None
        assert option.check(10) is RangeViolation.FORBIDDEN

    def test_floats(self):
        option = RangeOption.inside(0.0, 1.0)

        assert option.accepts(0.5)
        assert option.check(1.5) is RangeViolation.TOO_LARGE

    def test_str(self):
        assert str(RangeOption.unlimited()) == "unlimited"
        assert str(RangeOption.inside(1, 10)) == "inside 1..=10"
        assert str(RangeOption.outside(1, 10, inclusive=False)) == "outside 1..10"
