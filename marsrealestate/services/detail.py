from marsrealestate.schemas.property import MarsProperty
from marsrealestate.services.binding import bind_image
from marsrealestate.services.live_data import LiveData, MutableLiveData

class DetailViewModel:
    """Display strings for the property chosen on the overview grid."""

    def __init__(self, mars_property: MarsProperty):
        self._selected_property: MutableLiveData[MarsProperty] = MutableLiveData(mars_property)

    @property
    def selected_property(self) -> LiveData[MarsProperty]:
        return self._selected_property

    @property
    def display_property_price(self) -> str:
        mars_property = self._selected_property.value
        if mars_property.is_rental:
            return f"${mars_property.price:,.0f}/month"
        return f"${mars_property.price:,.0f}"

    @property
    def display_property_type(self) -> str:
        kind = "Rent" if self._selected_property.value.is_rental else "Sale"
        return f"Available for {kind}"

    def to_dict(self) -> dict:
        mars_property = self._selected_property.value
        return {
            "id": mars_property.id,
            "image_uri": bind_image(mars_property.img_src_url),
            "price": self.display_property_price,
            "type": self.display_property_type,
            "is_rental": mars_property.is_rental,
        }
