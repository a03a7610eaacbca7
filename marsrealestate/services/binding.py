from dataclasses import dataclass
from typing import List, Optional
from urllib.parse import urlsplit, urlunsplit
from marsrealestate.schemas.overview import MarsApiStatus

LOADING_ANIMATION = "loading_animation"
CONNECTION_ERROR_IMAGE = "ic_connection_error"

@dataclass(frozen=True)
class StatusIndicator:
    visible: bool
    image: Optional[str] = None


def bind_image(img_url: Optional[str]) -> Optional[str]:
    """Image URI for a cell, always fetched over https."""
    if not img_url:
        return None
    parts = urlsplit(img_url)
    if not parts.scheme:
        parts = urlsplit(f"https://{img_url.lstrip('/')}")
    return urlunsplit(parts._replace(scheme="https"))


def bind_status(status: Optional[MarsApiStatus]) -> StatusIndicator:
    if status == MarsApiStatus.LOADING:
        return StatusIndicator(visible=True, image=LOADING_ANIMATION)
    if status == MarsApiStatus.ERROR:
        return StatusIndicator(visible=True, image=CONNECTION_ERROR_IMAGE)
    return StatusIndicator(visible=False)


def bind_grid(adapter, data: Optional[List]):
    return adapter.submit_list(data or [])
