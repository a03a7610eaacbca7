from typing import Callable, List, Optional
from marsrealestate.schemas.property import MarsApiFilter, MarsProperty
from marsrealestate.schemas.overview import MarsApiStatus
from marsrealestate.services.adapter import PhotoGridAdapter
from marsrealestate.services.binding import StatusIndicator, bind_grid, bind_status
from marsrealestate.services.detail import DetailViewModel
from marsrealestate.services.overview import OverviewViewModel
from structlog import get_logger

logger = get_logger()

class OverviewScreen:
    """Host for the overview grid.

    Observes the view model the way the grid screen does: the status drives the
    indicator, the list feeds the adapter and a selected property navigates to
    its detail view.
    """

    def __init__(self, view_model: OverviewViewModel):
        self.view_model = view_model
        self.adapter = PhotoGridAdapter(view_model.display_property_details)
        self.indicator = StatusIndicator(visible=False)
        self.detail: Optional[DetailViewModel] = None
        self.navigations = 0
        self._subscriptions: List[Callable[[], None]] = [
            view_model.status.observe(self._on_status),
            view_model.properties.observe(self._on_properties),
            view_model.navigate_to_selected_property.observe(self._on_selected_property),
        ]

    def _on_status(self, status: MarsApiStatus):
        self.indicator = bind_status(status)

    def _on_properties(self, properties: List[MarsProperty]):
        bind_grid(self.adapter, properties)

    def _on_selected_property(self, mars_property: Optional[MarsProperty]):
        if mars_property is None:
            return
        self.detail = DetailViewModel(mars_property)
        self.navigations += 1
        logger.info("Navigated to property detail", property_id=mars_property.id)
        self.view_model.display_property_details_complete()

    def update_filter(self, filter: MarsApiFilter):
        return self.view_model.update_filter(filter)

    def click(self, position: int) -> Optional[DetailViewModel]:
        if position < 0 or position >= self.adapter.item_count:
            raise IndexError(position)
        self.adapter.click(position)
        return self.detail

    def render(self) -> dict:
        return {
            "status": self.view_model.status.value,
            "indicator": {"visible": self.indicator.visible, "image": self.indicator.image},
            "total": self.adapter.item_count,
            "items": self.adapter.render(),
        }

    def close(self):
        """Detach from the view model; its loads keep running until the view model is closed."""
        for unsubscribe in self._subscriptions:
            unsubscribe()
        self._subscriptions = []
