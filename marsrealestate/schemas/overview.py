from enum import Enum
from pydantic import BaseModel
from typing import List, Optional

class MarsApiStatus(str, Enum):
    LOADING = "loading"
    ERROR = "error"
    DONE = "done"

class StatusIndicatorResponse(BaseModel):
    visible: bool
    image: Optional[str] = None

class GridCellResponse(BaseModel):
    position: int
    id: str
    image_uri: Optional[str] = None

class OverviewResponse(BaseModel):
    status: Optional[MarsApiStatus] = None
    indicator: StatusIndicatorResponse
    total: int
    items: List[GridCellResponse]

class DetailResponse(BaseModel):
    id: str
    image_uri: Optional[str] = None
    price: str
    type: str
    is_rental: bool
