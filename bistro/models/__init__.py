"""Data models for the bistro package."""

from bistro.models.item import Item
from bistro.models.restaurant import RestaurantDetails

__all__ = ["Item", "RestaurantDetails"]
