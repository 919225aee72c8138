"""Tests for service modules."""

import logging
from datetime import time

import pytest
from pydantic import ValidationError

from bistro.exceptions import RestaurantNotFoundError
from bistro.services.restaurant_service import RestaurantService


class TestRestaurantService:
    """Tests for the RestaurantService."""

    @pytest.fixture
    def restaurant_service(self):
        """Create a restaurant service for testing."""
        return RestaurantService()

    def test_add_and_find_restaurant(self, restaurant_service):
        """Test registering and finding a restaurant."""
        added = restaurant_service.add_restaurant(
            "Pumpkin Tales", "Chennai", "12:00:00", "23:00:00"
        )

        result = restaurant_service.find_restaurant_by_name("Pumpkin Tales")

        assert result is added
        assert result.location == "Chennai"

    def test_find_restaurant_not_found(self, restaurant_service):
        """Test looking up an unknown restaurant."""
        with pytest.raises(RestaurantNotFoundError, match="Nowhere"):
            restaurant_service.find_restaurant_by_name("Nowhere")

    def test_remove_restaurant(self, restaurant_service):
        """Test unregistering a restaurant."""
        restaurant_service.add_restaurant("A", "Chennai", "10:00:00", "20:00:00")
        restaurant_service.add_restaurant("B", "Chennai", "10:00:00", "20:00:00")

        removed = restaurant_service.remove_restaurant("A")

        assert removed.name == "A"
        assert [r.name for r in restaurant_service.get_restaurants()] == ["B"]

    def test_remove_unknown_restaurant_leaves_registry(self, restaurant_service):
        """Test that a failed removal changes nothing."""
        restaurant_service.add_restaurant("A", "Chennai", "10:00:00", "20:00:00")

        with pytest.raises(RestaurantNotFoundError):
            restaurant_service.remove_restaurant("B")

        assert len(restaurant_service.get_restaurants()) == 1

    def test_get_restaurants_returns_snapshot(self, restaurant_service):
        """Test that the returned list is a copy."""
        restaurant_service.add_restaurant("A", "Chennai", "10:00:00", "20:00:00")

        restaurant_service.get_restaurants().clear()

        assert len(restaurant_service.get_restaurants()) == 1

    def test_get_demo_restaurant(self, restaurant_service):
        """Test get_demo_restaurant method."""
        result = restaurant_service.get_demo_restaurant()

        assert result.name == "Amelie's cafe"
        assert result.location == "Chennai"
        assert result.is_restaurant_open(time(12, 0)) is True
        assert restaurant_service.get_demo_restaurant() is result
        assert restaurant_service.get_restaurants() == [result]

    def test_demo_restaurant_from_environment(self, monkeypatch):
        """Test that the demo restaurant follows configuration."""
        monkeypatch.setenv("BISTRO_DEMO_RESTAURANT_NAME", "Test Kitchen")
        monkeypatch.setenv("BISTRO_DEMO_OPENING_TIME", "08:00:00")

        result = RestaurantService().get_demo_restaurant()

        assert result.name == "Test Kitchen"
        assert result.opening_time.hour == 8

    def test_demo_restaurant_with_invalid_hours(self, monkeypatch, caplog):
        """Test that inverted demo hours are reported and rejected."""
        monkeypatch.setenv("BISTRO_DEMO_OPENING_TIME", "23:00:00")
        monkeypatch.setenv("BISTRO_DEMO_CLOSING_TIME", "09:00:00")

        with caplog.at_level(logging.WARNING, logger="bistro.config"):
            service = RestaurantService()

        assert "demo restaurant cannot be created" in caplog.text

        with pytest.raises(ValidationError, match="must be before"):
            service.get_demo_restaurant()

        assert service.get_restaurants() == []
