"""Services for the bistro package."""

from bistro.services.restaurant_service import RestaurantService

__all__ = ["RestaurantService"]
