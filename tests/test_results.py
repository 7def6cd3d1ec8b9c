"""Tests for ConfigurationValidationItem and ConfigurationValidationCollection."""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from configuration_validation.results import (
    ConfigurationValidationCollection,
    ConfigurationValidationItem,
)

from .conftest import messages

# =============================================================================
# ConfigurationValidationItem Unit Tests
# =============================================================================


class TestConfigurationValidationItem:
    """Unit tests for ConfigurationValidationItem dataclass."""

    def test_item_creation(self) -> None:
        """Test creating an item with all fields."""
        item = ConfigurationValidationItem("Sect", "cfg", 22, "Something")

        assert item.section == "Sect"
        assert item.item == "cfg"
        assert item.value == 22
        assert item.message == "Something"

    def test_item_value_defaults_to_none(self) -> None:
        """Test that value defaults to None."""
        item = ConfigurationValidationItem(section="Sect", item="cfg", message="Required")

        assert item.value is None

    def test_item_fields_can_be_set(self) -> None:
        """Test that fields can be assigned after creation."""
        item = ConfigurationValidationItem(section="", item="")
        item.section = "Sect"
        item.item = "Key"
        item.value = True
        item.message = "Failure"

        assert str(item) == "Sect:Key = True (Failure)"

    def test_str_with_none_value(self) -> None:
        """Test that an absent value renders as empty text."""
        item = ConfigurationValidationItem("Sect", "Key", None, "Missing")

        assert str(item) == "Sect:Key =  (Missing)"

    def test_str_with_int_value(self) -> None:
        """Test rendering of integer values."""
        item = ConfigurationValidationItem("Sect", "Key", 0, "No zeroes")

        assert str(item) == "Sect:Key = 0 (No zeroes)"

    def test_to_dict(self) -> None:
        """Test exporting an item as a dict."""
        item = ConfigurationValidationItem("Sect", "Key", "bad", "Wrong")

        assert item.to_dict() == {
            "section": "Sect",
            "item": "Key",
            "value": "bad",
            "message": "Wrong",
        }

    def test_item_equality(self) -> None:
        """Test that items compare by their fields."""
        assert ConfigurationValidationItem("S", "i", 1, "m") == ConfigurationValidationItem(
            "S", "i", 1, "m"
        )
        assert ConfigurationValidationItem("S", "i", 1, "m") != ConfigurationValidationItem(
            "S", "i", 2, "m"
        )


# =============================================================================
# ConfigurationValidationCollection Unit Tests
# =============================================================================


class TestConfigurationValidationCollection:
    """Unit tests for ConfigurationValidationCollection."""

    def test_new_collection_is_empty(self) -> None:
        """Test a new collection has no items."""
        failures = ConfigurationValidationCollection()

        assert failures.count == 0
        assert len(failures) == 0
        assert not failures

    def test_add_contains_item(self) -> None:
        """Test that an added item can be read back by index."""
        failures = ConfigurationValidationCollection()
        failures.add(ConfigurationValidationItem("Sect", "cfg", 22, "Something"))

        assert failures.count == 1
        assert failures[0].section == "Sect"
        assert failures[0].item == "cfg"
        assert failures[0].value == 22
        assert failures[0].message == "Something"

    def test_add_two_contains_both(self, two_items: list[ConfigurationValidationItem]) -> None:
        """Test adding two items one by one."""
        failures = ConfigurationValidationCollection()
        failures.add(two_items[0])
        failures.add(two_items[1])

        assert failures.count == 2
        assert bool(failures) is True

    def test_add_range_keeps_order(self, two_items: list[ConfigurationValidationItem]) -> None:
        """Test add_range appends all items in order."""
        failures = ConfigurationValidationCollection()
        failures.add_range(two_items)

        assert failures.count == 2
        assert [f.item for f in failures] == ["cfg", "set"]

    def test_add_range_accepts_tuple_and_generator(
        self, two_items: list[ConfigurationValidationItem]
    ) -> None:
        """Test add_range works with any iterable."""
        failures = ConfigurationValidationCollection()
        failures.add_range(tuple(two_items))
        failures.add_range(item for item in two_items)

        assert failures.count == 4

    def test_duplicates_are_kept(self) -> None:
        """Test that the same property can fail several times."""
        item = ConfigurationValidationItem("Sect", "cfg", 22, "Something")
        failures = ConfigurationValidationCollection([item, item])

        assert failures.count == 2

    def test_slicing_returns_list(self, two_items: list[ConfigurationValidationItem]) -> None:
        """Test slicing a collection."""
        failures = ConfigurationValidationCollection(two_items)

        assert failures[1:] == [two_items[1]]

    def test_to_list_is_copy(self, two_items: list[ConfigurationValidationItem]) -> None:
        """Test that to_list does not expose internal storage."""
        failures = ConfigurationValidationCollection(two_items)
        copy = failures.to_list()
        copy.clear()

        assert failures.count == 2

    def test_repr(self, two_items: list[ConfigurationValidationItem]) -> None:
        """Test string representation."""
        assert repr(ConfigurationValidationCollection(two_items)) == (
            "ConfigurationValidationCollection(count=2)"
        )


# =============================================================================
# Property-Based Tests
# =============================================================================


class TestCollectionProperties:
    """Property-based tests for collection ordering."""

    @given(item_messages=st.lists(messages, max_size=20))
    @settings(max_examples=50)
    def test_insertion_order_preserved(self, item_messages: list[str]) -> None:
        """Items are returned in the order they were added."""
        failures = ConfigurationValidationCollection()
        for message in item_messages:
            failures.add(ConfigurationValidationItem("Sect", "item", None, message))

        assert len(failures) == len(item_messages)
        assert [f.message for f in failures] == item_messages
