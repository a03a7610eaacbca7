from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from marsrealestate.config import settings
from marsrealestate.routers import overview
from marsrealestate.routers import detail
from marsrealestate.schemas.property import MarsApiFilter
from marsrealestate.services.api import MarsApiService
from marsrealestate.services.overview import OverviewViewModel
from marsrealestate.services.screen import OverviewScreen
from structlog import get_logger

logger = get_logger()

app = FastAPI(title="Mars Real Estate Overview")
app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_credentials=True, allow_methods=["*"], allow_headers=["*"])

@app.on_event("startup")
async def startup_event():
    api_service = MarsApiService()
    app.state.api_service = api_service
    # Building the view model starts the first load
    view_model = OverviewViewModel(api_service, initial_filter=MarsApiFilter(settings.DEFAULT_FILTER))
    app.state.overview_screen = OverviewScreen(view_model)
    logger.info("Overview screen started")

@app.on_event("shutdown")
async def shutdown_event():
    screen = getattr(app.state, "overview_screen", None)
    if screen:
        screen.close()
        screen.view_model.close()
        app.state.overview_screen = None
    api_service = getattr(app.state, "api_service", None)
    if api_service:
        await api_service.aclose()

app.include_router(overview.router)
app.include_router(detail.router)
