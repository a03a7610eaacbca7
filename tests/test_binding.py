from marsrealestate.schemas.overview import MarsApiStatus
from marsrealestate.schemas.property import MarsProperty
from marsrealestate.services.binding import CONNECTION_ERROR_IMAGE, LOADING_ANIMATION, bind_image, bind_status
from marsrealestate.services.detail import DetailViewModel
from marsrealestate.services.live_data import MutableLiveData

def test_bind_image_forces_https():
    assert bind_image("http://mars.jpl.nasa.gov/a.jpg") == "https://mars.jpl.nasa.gov/a.jpg"
    assert bind_image("https://mars.jpl.nasa.gov/a.jpg") == "https://mars.jpl.nasa.gov/a.jpg"
    assert bind_image("") is None

def test_bind_status():
    assert bind_status(MarsApiStatus.LOADING).image == LOADING_ANIMATION
    assert bind_status(MarsApiStatus.ERROR).image == CONNECTION_ERROR_IMAGE
    assert bind_status(MarsApiStatus.DONE).visible is False
    assert bind_status(None).visible is False

def test_detail_display_strings():
    rental = DetailViewModel(MarsProperty(id="1", price=8000, type="rent", img_src="http://x/1.jpg"))
    sale = DetailViewModel(MarsProperty(id="2", price=1234567, type="buy", img_src="http://x/2.jpg"))
    assert rental.display_property_price == "$8,000/month"
    assert rental.display_property_type == "Available for Rent"
    assert sale.display_property_price == "$1,234,567"
    assert sale.display_property_type == "Available for Sale"
    assert sale.to_dict()["image_uri"] == "https://x/2.jpg"

def test_live_data_replays_latest_value_to_new_observer():
    cell = MutableLiveData()
    early = []
    unsubscribe = cell.observe(early.append)
    cell.value = 1
    unsubscribe()
    cell.set_value(2)
    late = []
    cell.observe(late.append)
    assert early == [1]
    assert late == [2]
    assert cell.value == 2

def test_live_data_value_published_during_dispatch_reaches_every_observer_last():
    cell = MutableLiveData()
    clearer, follower = [], []

    def clear_on_value(value):
        clearer.append(value)
        if value is not None:
            cell.value = None

    cell.observe(clear_on_value)
    cell.observe(follower.append)
    cell.value = "selected"
    assert clearer == ["selected", None]
    assert follower == [None]
    assert cell.value is None
