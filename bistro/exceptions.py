"""Exceptions raised by the bistro package."""


class BistroError(Exception):
    """Base class for bistro errors."""


class ItemNotFoundError(BistroError):
    """Raised when a menu item is requested by a name the menu does not have."""

    def __init__(self, item_name: str) -> None:
        self.item_name = item_name
        super().__init__(f"Item not found on menu: {item_name}")


class RestaurantNotFoundError(BistroError):
    """Raised when no registered restaurant has the requested name."""

    def __init__(self, restaurant_name: str) -> None:
        self.restaurant_name = restaurant_name
        super().__init__(f"Restaurant not found: {restaurant_name}")
