from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator

class ListingType(str, Enum):
    BUY = "buy"
    RENT = "rent"
    UNKNOWN = "unknown"

class MarsApiFilter(str, Enum):
    """Values accepted by the `filter` query parameter of the listings endpoint."""
    SHOW_RENT = "rent"
    SHOW_BUY = "buy"
    SHOW_ALL = "all"

class MarsProperty(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    price: float
    type: ListingType = ListingType.UNKNOWN
    # Upstream names the image field img_src
    img_src_url: str = Field(alias="img_src")

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value):
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("type", mode="before")
    @classmethod
    def _coerce_type(cls, value):
        if isinstance(value, ListingType):
            return value
        try:
            return ListingType(str(value).lower())
        except ValueError:
            return ListingType.UNKNOWN

    @property
    def is_rental(self) -> bool:
        return self.type == ListingType.RENT
