from fastapi import HTTPException, Request
from marsrealestate.services.screen import OverviewScreen

def get_overview_screen(request: Request) -> OverviewScreen:
    """Screen created at startup; 503 while the app has not finished starting."""
    screen = getattr(request.app.state, "overview_screen", None)
    if screen is None:
        raise HTTPException(status_code=503, detail="Overview not ready")
    return screen
