"""Bistro - restaurant menu and order management."""

from bistro.exceptions import BistroError, ItemNotFoundError, RestaurantNotFoundError
from bistro.models import Item, RestaurantDetails
from bistro.restaurant import Restaurant

__all__ = [
    "BistroError",
    "Item",
    "ItemNotFoundError",
    "Restaurant",
    "RestaurantDetails",
    "RestaurantNotFoundError",
]
