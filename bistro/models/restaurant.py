"""Restaurant data model."""

from datetime import time

from pydantic import BaseModel, ConfigDict, Field, model_validator


class RestaurantDetails(BaseModel):
    """Static restaurant information: who, where, and when it is open."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Restaurant name")
    location: str = Field(..., description="Restaurant location")
    opening_time: time = Field(..., description="Time of day the restaurant opens")
    closing_time: time = Field(..., description="Time of day the restaurant closes")

    @model_validator(mode="after")
    def check_hours(self) -> "RestaurantDetails":
        """Opening and closing must fall within the same day."""
        if self.opening_time >= self.closing_time:
            raise ValueError(
                f"opening_time ({self.opening_time}) must be before "
                f"closing_time ({self.closing_time})"
            )
        return self
