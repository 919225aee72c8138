"""Restaurant registry service - in-memory implementation."""

import logging
from datetime import time

from bistro.config import get_config
from bistro.exceptions import RestaurantNotFoundError
from bistro.restaurant import Restaurant

logger = logging.getLogger(__name__)


class RestaurantService:
    """Service for registering and looking up restaurants by name.

    Restaurants are kept in memory in registration order.
    """

    def __init__(self) -> None:
        """Initialize the restaurant service."""
        self.config = get_config()
        self.restaurants: list[Restaurant] = []
        self.demo_restaurant: Restaurant | None = None

    def add_restaurant(
        self,
        name: str,
        location: str,
        opening_time: time | str,
        closing_time: time | str,
    ) -> Restaurant:
        """Create and register a new restaurant.

        Args:
            name: Restaurant name
            location: Restaurant location
            opening_time: Time of day the restaurant opens
            closing_time: Time of day the restaurant closes

        Returns:
            The newly registered Restaurant
        """
        restaurant = Restaurant(name, location, opening_time, closing_time)
        self.restaurants.append(restaurant)
        logger.info(f"Registered restaurant '{name}' in {location}")
        return restaurant

    def find_restaurant_by_name(self, restaurant_name: str) -> Restaurant:
        """Find a restaurant by name.

        Args:
            restaurant_name: The name of the restaurant to find

        Returns:
            The first registered Restaurant with that name

        Raises:
            RestaurantNotFoundError: If no restaurant has that name
        """
        logger.info(f"Looking up restaurant: {restaurant_name}")

        for restaurant in self.restaurants:
            if restaurant.name == restaurant_name:
                return restaurant

        logger.warning(f"Restaurant not found: {restaurant_name}")
        raise RestaurantNotFoundError(restaurant_name)

    def remove_restaurant(self, restaurant_name: str) -> Restaurant:
        """Unregister a restaurant.

        Args:
            restaurant_name: The name of the restaurant to remove

        Returns:
            The removed Restaurant

        Raises:
            RestaurantNotFoundError: If no restaurant has that name
        """
        restaurant = self.find_restaurant_by_name(restaurant_name)
        self.restaurants.remove(restaurant)
        if restaurant is self.demo_restaurant:
            self.demo_restaurant = None
        logger.info(f"Removed restaurant '{restaurant_name}'")
        return restaurant

    def get_restaurants(self) -> list[Restaurant]:
        """Get all registered restaurants.

        Returns:
            Snapshot list of Restaurant objects
        """
        return list(self.restaurants)

    def get_demo_restaurant(self) -> Restaurant:
        """Get the configured demo restaurant, registering it on first use.

        Returns:
            The demo Restaurant

        Raises:
            pydantic.ValidationError: If the configured demo hours are not ordered
        """
        if self.demo_restaurant is None:
            self.demo_restaurant = self.add_restaurant(
                self.config.demo_restaurant_name,
                self.config.demo_restaurant_location,
                self.config.demo_opening_time,
                self.config.demo_closing_time,
            )
        return self.demo_restaurant
