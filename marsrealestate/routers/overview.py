from fastapi import APIRouter, Depends, HTTPException
from marsrealestate.dependencies.screen import get_overview_screen
from marsrealestate.schemas.overview import DetailResponse, OverviewResponse
from marsrealestate.schemas.property import MarsApiFilter
from marsrealestate.services.screen import OverviewScreen
from structlog import get_logger

logger = get_logger()
router = APIRouter(prefix="/api/v1/overview", tags=["overview"])

@router.get("", response_model=OverviewResponse)
async def get_overview(screen: OverviewScreen = Depends(get_overview_screen)):
    return screen.render()

@router.post("/filter", response_model=OverviewResponse)
async def update_filter(filter: MarsApiFilter, screen: OverviewScreen = Depends(get_overview_screen)):
    """Reload the grid with a new filter and return it once the request settled."""
    task = screen.update_filter(filter)
    await task
    logger.info("Applied filter", filter=filter.value, status=screen.view_model.status.value)
    return screen.render()

@router.post("/cells/{position}/click", response_model=DetailResponse)
async def click_cell(position: int, screen: OverviewScreen = Depends(get_overview_screen)):
    try:
        detail = screen.click(position)
    except IndexError:
        raise HTTPException(status_code=404, detail="No property at this position")
    logger.info("Clicked grid cell", position=position)
    return detail.to_dict()
