from fastapi import APIRouter, Depends, HTTPException
from marsrealestate.dependencies.screen import get_overview_screen
from marsrealestate.schemas.overview import DetailResponse
from marsrealestate.services.screen import OverviewScreen

router = APIRouter(prefix="/api/v1/detail", tags=["detail"])

@router.get("", response_model=DetailResponse)
async def get_detail(screen: OverviewScreen = Depends(get_overview_screen)):
    if screen.detail is None:
        raise HTTPException(status_code=404, detail="No property selected")
    return screen.detail.to_dict()
