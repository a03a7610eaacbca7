import asyncio
from typing import List, Optional
from marsrealestate.schemas.overview import MarsApiStatus
from marsrealestate.schemas.property import MarsApiFilter, MarsProperty
from marsrealestate.services.api import MarsApiService
from marsrealestate.services.live_data import LiveData, MutableLiveData
from marsrealestate.services.scope import ViewModelScope
from structlog import get_logger

logger = get_logger()

class OverviewViewModel:
    """State holder behind the overview grid.

    Publishes the status of the most recent request, the last successfully
    fetched list and the property selected for navigation. Must be created
    inside a running event loop: construction starts the first load.
    """

    def __init__(
        self,
        api_service: MarsApiService,
        scope: Optional[ViewModelScope] = None,
        initial_filter: MarsApiFilter = MarsApiFilter.SHOW_ALL,
    ):
        self._api_service = api_service
        self.scope = scope or ViewModelScope()

        self._status: MutableLiveData[MarsApiStatus] = MutableLiveData()
        self._properties: MutableLiveData[List[MarsProperty]] = MutableLiveData()
        self._navigate_to_selected_property: MutableLiveData[Optional[MarsProperty]] = MutableLiveData()

        # Load on creation so a status is available immediately
        self.load(initial_filter)

    @property
    def status(self) -> LiveData[MarsApiStatus]:
        return self._status

    @property
    def properties(self) -> LiveData[List[MarsProperty]]:
        return self._properties

    @property
    def navigate_to_selected_property(self) -> LiveData[Optional[MarsProperty]]:
        return self._navigate_to_selected_property

    def load(self, filter: MarsApiFilter) -> asyncio.Task:
        task = self.scope.launch(self._get_mars_real_estate_properties(filter))
        # The task has not started yet, LOADING is visible to callers synchronously
        self._status.value = MarsApiStatus.LOADING
        return task

    async def _get_mars_real_estate_properties(self, filter: MarsApiFilter):
        try:
            list_result = await self._api_service.get_properties(filter.value)
        except Exception as e:
            logger.error("Error fetching Mars properties", filter=filter.value, error=str(e))
            self._status.value = MarsApiStatus.ERROR
            return
        self._properties.value = list_result
        self._status.value = MarsApiStatus.DONE

    def update_filter(self, filter: MarsApiFilter) -> asyncio.Task:
        return self.load(filter)

    def display_property_details(self, mars_property: MarsProperty):
        self._navigate_to_selected_property.value = mars_property

    def display_property_details_complete(self):
        """Clear the selection once navigation happened so re-observing does not navigate again."""
        if self._navigate_to_selected_property.value is None:
            return
        self._navigate_to_selected_property.value = None

    def close(self):
        self.scope.cancel()
