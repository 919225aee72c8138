"""Restaurant menu, opening hours and order cost tracking."""

import logging
from collections.abc import Iterable
from datetime import time

from bistro.clock import Clock, system_clock
from bistro.exceptions import ItemNotFoundError
from bistro.models import Item, RestaurantDetails

logger = logging.getLogger(__name__)


class Restaurant:
    """A single restaurant with a menu and a running order cost.

    Instances are not thread-safe; callers sharing one across threads must
    serialize access themselves.
    """

    def __init__(
        self,
        name: str,
        location: str,
        opening_time: time | str,
        closing_time: time | str,
        menu: Iterable[Item] | None = None,
        clock: Clock | None = None,
    ) -> None:
        """Initialize the restaurant.

        Args:
            name: Restaurant name
            location: Restaurant location
            opening_time: Time of day the restaurant opens
            closing_time: Time of day the restaurant closes
            menu: Optional items to start the menu with, in order
            clock: Optional time-of-day source (defaults to the system clock)

        Raises:
            pydantic.ValidationError: If the hours are invalid or not ordered
        """
        self.details = RestaurantDetails(
            name=name,
            location=location,
            opening_time=opening_time,
            closing_time=closing_time,
        )
        self.clock = clock or system_clock
        self.menu: list[Item] = list(menu) if menu is not None else []
        self.order_cost = 0

    def __repr__(self) -> str:
        return (
            f"Restaurant(name={self.name!r}, location={self.location!r}, "
            f"items={len(self.menu)})"
        )

    @property
    def name(self) -> str:
        return self.details.name

    @property
    def location(self) -> str:
        return self.details.location

    @property
    def opening_time(self) -> time:
        return self.details.opening_time

    @property
    def closing_time(self) -> time:
        return self.details.closing_time

    # Hours

    def get_current_time(self) -> time:
        """Return the current time of day from the configured clock."""
        return self.clock()

    def is_restaurant_open(self, current_time: time | None = None) -> bool:
        """Check whether the restaurant is open.

        Both the opening and the closing instant count as open.

        Args:
            current_time: Time to check (defaults to ``get_current_time()``)

        Returns:
            True if the time falls within opening hours
        """
        if current_time is None:
            current_time = self.get_current_time()
        return self.opening_time <= current_time <= self.closing_time

    # Menu

    def get_menu(self) -> list[Item]:
        """Return a snapshot of the menu in insertion order."""
        return list(self.menu)

    def find_item_by_name(self, item_name: str) -> Item | None:
        """Find the first menu item whose name matches exactly.

        Args:
            item_name: Name of the item

        Returns:
            The matching Item, or None if the menu has no such item
        """
        for item in self.menu:
            if item.name == item_name:
                return item
        return None

    def add_to_menu(self, name: str, price: int) -> None:
        """Append a new item to the menu."""
        self.menu.append(Item(name=name, price=price))
        logger.info(f"Added '{name}' ({price}) to menu of {self.name}")

    def remove_from_menu(self, item_name: str) -> Item:
        """Remove an item from the menu.

        Args:
            item_name: Name of the item to remove

        Returns:
            The removed Item

        Raises:
            ItemNotFoundError: If the menu has no item with that name
        """
        item = self.find_item_by_name(item_name)
        if item is None:
            logger.warning(f"Cannot remove '{item_name}': not on menu of {self.name}")
            raise ItemNotFoundError(item_name)

        self.menu.remove(item)
        logger.info(f"Removed '{item_name}' from menu of {self.name}")
        return item

    # Order

    def get_order_cost(self) -> int:
        """Return the running order cost."""
        return self.order_cost

    def add_items_to_order(self, item_names: Iterable[str] | None) -> int:
        """Add the prices of the named menu items to the order cost.

        Names missing from the menu add nothing.

        Args:
            item_names: Names of the items to add, or None

        Returns:
            The updated order cost
        """
        self.order_cost += self._total_price(item_names)
        logger.debug(f"Order cost for {self.name} is now {self.order_cost}")
        return self.order_cost

    def remove_items_from_order(self, item_names: Iterable[str] | None) -> int:
        """Subtract the prices of the named menu items from the order cost.

        Names missing from the menu subtract nothing.

        Args:
            item_names: Names of the items to remove, or None

        Returns:
            The updated order cost
        """
        self.order_cost -= self._total_price(item_names)
        logger.debug(f"Order cost for {self.name} is now {self.order_cost}")
        return self.order_cost

    def reset_order(self) -> None:
        """Clear the running order cost."""
        self.order_cost = 0

    def _total_price(self, item_names: Iterable[str] | None) -> int:
        if not item_names:
            return 0
        if isinstance(item_names, str):
            item_names = [item_names]

        total = 0
        for item_name in item_names:
            item = self.find_item_by_name(item_name)
            if item is None:
                logger.warning(
                    f"Ignoring '{item_name}' in order: not on menu of {self.name}"
                )
                continue
            total += item.price
        return total

    # Presentation

    def display_details(self) -> str:
        """Format the restaurant's details and menu for display.

        Returns:
            Multi-line summary text
        """
        lines = [
            f"Restaurant: {self.name}",
            f"Location: {self.location}",
            f"Opening time: {self.opening_time.isoformat()}",
            f"Closing time: {self.closing_time.isoformat()}",
            "Menu:",
        ]
        lines.extend(f"  {item}" for item in self.menu)
        details = "\n".join(lines)
        logger.debug(details)
        return details
