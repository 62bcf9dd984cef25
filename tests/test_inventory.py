"""Tests for collection operations."""

import pytest

from errors import DuplicateNameError, NotFoundError, ValidationError
from inventory import RideInventory
from ride import Ride


@pytest.fixture
def inventory():
    return RideInventory([
        Ride("Python Plunge", 40, 5.0, 10),
        Ride("Drop Tower", 85, 12.5, 340),
        Ride("Tea Cups", 5, 1.0, 0),
    ])


def names(inventory):
    return [r.name for r in inventory.list_all()]


class TestFind:
    def test_case_insensitive(self, inventory):
        assert inventory.find_by_name("drop tower").name == "Drop Tower"
        assert inventory.find_by_name("  TEA CUPS ").name == "Tea Cups"

    def test_missing(self, inventory):
        assert inventory.find_by_name("Ferris Wheel") is None

    def test_first_match_wins(self):
        first = Ride("Twin", 1, 1.0, 1)
        inventory = RideInventory([first, Ride("TWIN", 2, 2.0, 2)])
        assert inventory.find_by_name("twin") is first


class TestAdd:
    def test_appends(self, inventory):
        ride = inventory.add("Ferris Wheel", 10, 3.0, 50)
        assert names(inventory)[-1] == "Ferris Wheel"
        assert ride.thrill_level == "Mild"

    def test_duplicate_name(self, inventory):
        with pytest.raises(DuplicateNameError):
            inventory.add("PYTHON PLUNGE", 10, 3.0, 50)
        assert names(inventory) == ["Python Plunge", "Drop Tower", "Tea Cups"]

    def test_invalid_ride_not_added(self, inventory):
        with pytest.raises(ValidationError):
            inventory.add("Ferris Wheel", 10, 0.5, 50)
        assert len(inventory) == 3

    def test_empty_collection(self):
        inventory = RideInventory()
        assert inventory.list_all() == []
        inventory.add("Solo", 1, 1.0, 0)
        assert names(inventory) == ["Solo"]


class TestEdit:
    def test_updates_in_place(self, inventory):
        inventory.edit("tea cups", 95, 4.0, 12)
        ride = inventory.find_by_name("Tea Cups")
        assert (ride.fright_factor, ride.cost_to_enter, ride.visitors_today) == (95, 4.0, 12)
        assert names(inventory) == ["Python Plunge", "Drop Tower", "Tea Cups"]

    def test_not_found(self, inventory):
        with pytest.raises(NotFoundError):
            inventory.edit("Ferris Wheel", 1, 1.0, 1)
        assert names(inventory) == ["Python Plunge", "Drop Tower", "Tea Cups"]

    def test_invalid_value_leaves_ride_unchanged(self, inventory):
        with pytest.raises(ValidationError):
            inventory.edit("Drop Tower", 50, 20.0, -5)
        ride = inventory.find_by_name("Drop Tower")
        assert (ride.fright_factor, ride.cost_to_enter, ride.visitors_today) == (85, 12.5, 340)


class TestRemove:
    def test_preserves_order(self, inventory):
        inventory.remove("DROP TOWER")
        assert names(inventory) == ["Python Plunge", "Tea Cups"]

    def test_not_found(self, inventory):
        with pytest.raises(NotFoundError):
            inventory.remove("Ferris Wheel")
        assert len(inventory) == 3


def test_list_all_returns_copy(inventory):
    listed = inventory.list_all()
    listed.clear()
    assert len(inventory) == 3
