"""Menu item data model."""

from pydantic import BaseModel, ConfigDict, Field


class Item(BaseModel):
    """A named, priced entry on a restaurant menu."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Item name, unique within a menu by convention")
    price: int = Field(
        ..., description="Item price in whole currency units, non-negative by convention"
    )

    def __str__(self) -> str:
        return f"{self.name}:{self.price}"
