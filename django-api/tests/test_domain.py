"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

import uuid
from decimal import Decimal

import pytest

from ticketing.domain import Availability, Capacity, EventId, Money, Quantity
from ticketing.domain.errors import CapacityExceededError, ErrorCode, EventNotFoundError


class TestMoney:
    """Tests for Money value object."""

    def test_money_accepts_positive_amount(self):
        """Money can be created with positive amount."""
        assert Money(Decimal("50.00")).amount == Decimal("50.00")

    def test_money_accepts_zero(self):
        """Money can be created with zero."""
        assert Money(Decimal("0")).amount == 0

    def test_money_rejects_negative_amount(self):
        """Money raises ValueError for negative amount."""
        with pytest.raises(ValueError):
            Money(Decimal("-0.01"))

    def test_money_str_format(self):
        """Money string representation is formatted to 2 decimal places."""
        assert str(Money(Decimal("15.5"))) == "15.50"


class TestCapacity:
    """Tests for Capacity value object."""

    def test_capacity_accepts_positive_value(self):
        """Capacity can be created with positive value."""
        assert Capacity(100).value == 100

    def test_capacity_accepts_zero(self):
        """Capacity can be created with zero."""
        assert Capacity(0).value == 0

    def test_capacity_rejects_negative_value(self):
        """Capacity raises ValueError for negative value."""
        with pytest.raises(ValueError):
            Capacity(-1)


class TestQuantity:
    """Tests for Quantity value object."""

    def test_quantity_accepts_one(self):
        assert Quantity(1).value == 1

    @pytest.mark.parametrize("value", [0, -3])
    def test_quantity_rejects_non_positive(self, value):
        with pytest.raises(ValueError):
            Quantity(value)

    @pytest.mark.parametrize("value", [True, 1.5, "2"])
    def test_quantity_rejects_non_integers(self, value):
        with pytest.raises(ValueError):
            Quantity(value)


class TestEventId:
    """Tests for EventId value object."""

    def test_from_string_valid_uuid(self):
        """EventId.from_string parses valid UUID."""
        raw = uuid.uuid4()
        assert EventId.from_string(str(raw)).value == raw

    def test_from_string_invalid_uuid(self):
        """EventId.from_string raises ValueError for invalid UUID."""
        with pytest.raises(ValueError):
            EventId.from_string("event-01")

    def test_str_is_canonical_uuid(self):
        raw = uuid.uuid4()
        assert str(EventId.from_string(str(raw).upper())) == str(raw)


class TestAvailability:
    """Tests for Availability."""

    def test_available_is_capacity_minus_sold(self):
        availability = Availability(EventId(uuid.uuid4()), total_tickets=5, sold=3)
        assert availability.available == 2

    def test_available_never_negative(self):
        availability = Availability(EventId(uuid.uuid4()), total_tickets=2, sold=3)
        assert availability.available == 0


class TestDomainErrors:
    """Tests for domain error payloads."""

    def test_capacity_exceeded_message(self):
        error = CapacityExceededError("abc", requested=3, available=1)
        assert error.code is ErrorCode.CAPACITY_EXCEEDED
        assert error.message == "Not enough tickets available"
        assert error.available == 1

    def test_str_includes_code(self):
        assert str(EventNotFoundError("abc")) == "EVENT_NOT_FOUND: Event not found"
