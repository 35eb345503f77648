"""Unit tests for Theme domain entity.

Tests cover:
- Construction defaults and validation
- Final entrance fee (including negative fee)
- change_* operations and rejection behavior
- Capacity boundary table
"""

from datetime import time

import pytest
from uuid_extensions import uuid7

from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.entities import Theme
from src.domain.entities.theme import DEFAULT_CAPACITY, DEFAULT_DISCOUNT_AMOUNT
from tests.conftest import create_test_theme


@pytest.mark.unit
class TestThemeCreation:
    """Test Theme construction."""

    def test_defaults(self):
        """Test discount 0, unavailable and capacity 2 by default."""
        theme = Theme(
            id=uuid7(),
            office_id=uuid7(),
            name="Prison Break",
            price=20000,
            open_time=time(11, 0),
        )

        assert theme.discount_amount == DEFAULT_DISCOUNT_AMOUNT == 0
        assert theme.is_available is False
        assert theme.capacity == DEFAULT_CAPACITY == 2

    def test_capacity_limits_exposed(self):
        """Test MIN_CAPACITY / MAX_CAPACITY class constants."""
        assert Theme.MIN_CAPACITY == 1
        assert Theme.MAX_CAPACITY == 6

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("name", ""),
            ("price", -1),
            ("open_time", None),
            ("discount_amount", -100),
            ("is_available", None),
            ("capacity", 0),
            ("capacity", 7),
        ],
    )
    def test_invalid_field_fails_construction(self, field, value):
        """Test invalid fields raise ValueError."""
        with pytest.raises(ValueError):
            create_test_theme(**{field: value})

    @pytest.mark.parametrize("name", [None, "", "   ", "x" * 101])
    def test_invalid_name_fails_construction(self, name):
        """Test null, blank and over-long names raise ValueError."""
        with pytest.raises(ValueError):
            create_test_theme(name=name)

    def test_hundred_character_name_accepted(self):
        """Test a name at the 100-character limit is kept."""
        theme = create_test_theme(name="x" * 100)

        assert theme.name == "x" * 100


@pytest.mark.unit
class TestThemeFinalEntranceFee:
    """Test final entrance fee computation."""

    def test_price_minus_discount(self):
        """Test price=10000, discount=500 gives 9500."""
        theme = create_test_theme(price=10000, discount_amount=500)

        assert theme.get_final_entrance_fee() == 9500
        assert theme.final_entrance_fee == 9500

    def test_discount_above_price_gives_negative_fee(self):
        """Test discount is not capped by price."""
        theme = create_test_theme(price=10000)

        result = theme.change_discount_amount(15000)

        assert isinstance(result, Success)
        assert theme.final_entrance_fee == -5000

    def test_fee_follows_changes(self):
        """Test fee reflects the current price and discount."""
        theme = create_test_theme(price=30000, discount_amount=0)

        theme.change_price(28000)
        theme.change_discount_amount(3000)

        assert theme.final_entrance_fee == 25000


@pytest.mark.unit
class TestThemeChanges:
    """Test Theme change operations."""

    @pytest.mark.parametrize(
        ("capacity", "succeeds"),
        [(-1, False), (0, False), (1, True), (6, True), (7, False)],
    )
    def test_capacity_boundaries(self, capacity, succeeds):
        """Test change_capacity boundary table."""
        theme = create_test_theme(capacity=4)

        result = theme.change_capacity(capacity)

        if succeeds:
            assert isinstance(result, Success)
            assert theme.capacity == capacity
        else:
            assert isinstance(result, Failure)
            assert result.error.code == ErrorCode.INVALID_CAPACITY
            assert theme.capacity == 4

    def test_change_is_available_none_rejected(self):
        """Test change_is_available(None) fails and keeps the old value."""
        theme = create_test_theme(is_available=True)

        result = theme.change_is_available(None)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_AVAILABILITY
        assert theme.is_available is True

    def test_change_is_available(self):
        """Test availability can be toggled."""
        theme = create_test_theme(is_available=True)

        assert isinstance(theme.change_is_available(False), Success)
        assert theme.is_available is False

    @pytest.mark.parametrize("name", ["L", "Lost Temple", "x" * 100])
    def test_change_name(self, name):
        """Test names of 1-100 non-blank characters are applied."""
        theme = create_test_theme()

        assert isinstance(theme.change_name(name), Success)
        assert theme.name == name

    @pytest.mark.parametrize("name", [None, "", "   ", "x" * 101])
    def test_invalid_name_keeps_old_name(self, name):
        """Test rejected names fail and keep the old name."""
        theme = create_test_theme()

        result = theme.change_name(name)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_NAME
        assert result.error.field == "name"
        assert theme.name == "The Haunted Library"

    def test_change_price_negative_rejected(self):
        """Test negative price fails and keeps the old price."""
        theme = create_test_theme(price=25000)

        result = theme.change_price(-1)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_PRICE
        assert theme.price == 25000

    def test_change_open_time(self):
        """Test open time changes and None is rejected."""
        theme = create_test_theme(open_time=time(10, 0))

        assert isinstance(theme.change_open_time(time(13, 30)), Success)
        result = theme.change_open_time(None)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_OPEN_TIME
        assert theme.open_time == time(13, 30)

    def test_change_discount_negative_rejected(self):
        """Test negative discount fails."""
        theme = create_test_theme(discount_amount=1000)

        result = theme.change_discount_amount(-1)

        assert isinstance(result, Failure)
        assert theme.discount_amount == 1000

    def test_office_cannot_be_changed(self):
        """Test Theme exposes no operation to move to another office."""
        assert not hasattr(Theme, "change_office")
        assert not hasattr(Theme, "change_office_id")
