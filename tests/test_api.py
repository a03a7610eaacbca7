import httpx
import pydantic
import pytest
from marsrealestate.schemas.property import ListingType
from marsrealestate.services.api import MarsApiService

PAYLOAD = [
    {"price": 450000, "id": "424905", "type": "buy", "img_src": "http://mars.jpl.nasa.gov/msl-raw-images/msss/01000/mcam/1000MR0044631300503690E01_DXXX.jpg"},
    {"price": 8000, "id": "424906", "type": "rent", "img_src": "http://mars.jpl.nasa.gov/msl-raw-images/msss/01000/mcam/1000ML0044631300305227E03_DXXX.jpg"},
    {"price": 11000, "id": 424907, "type": "lease", "img_src": "http://mars.jpl.nasa.gov/msl-raw-images/msss/01000/mcam/1000MR0044631290503689E01_DXXX.jpg"},
]

def make_service(handler):
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return MarsApiService(client=client, base_url="https://mars.test/")

@pytest.mark.asyncio
async def test_get_properties_sends_filter_and_decodes():
    requests = []

    def handler(request):
        requests.append(request)
        return httpx.Response(200, json=PAYLOAD)

    properties = await make_service(handler).get_properties("rent")
    assert str(requests[0].url) == "https://mars.test/realestate?filter=rent"
    assert requests[0].method == "GET"
    assert [p.id for p in properties] == ["424905", "424906", "424907"]
    assert properties[0].type == ListingType.BUY
    assert properties[1].is_rental
    assert properties[2].type == ListingType.UNKNOWN
    assert properties[0].img_src_url == PAYLOAD[0]["img_src"]

@pytest.mark.asyncio
async def test_non_2xx_raises():
    service = make_service(lambda request: httpx.Response(500, text="boom"))
    with pytest.raises(httpx.HTTPStatusError):
        await service.get_properties("all")

@pytest.mark.asyncio
async def test_invalid_json_raises():
    service = make_service(lambda request: httpx.Response(200, text="<html>"))
    with pytest.raises(ValueError):
        await service.get_properties("all")

@pytest.mark.asyncio
async def test_schema_mismatch_raises():
    service = make_service(lambda request: httpx.Response(200, json=[{"id": "1"}]))
    with pytest.raises(pydantic.ValidationError):
        await service.get_properties("all")

@pytest.mark.asyncio
async def test_transport_error_raises():
    def handler(request):
        raise httpx.ConnectError("unreachable", request=request)

    with pytest.raises(httpx.ConnectError):
        await make_service(handler).get_properties("buy")
