"""
Shared fixtures for the Ward client tests
"""

from typing import Callable, List

import httpx
import pytest

from ward.core.settings import WardSettings
from ward.schemas.pickup_schema import PickupRequest, ShipperInformation, Shipment
from ward.schemas.rate_quote_schema import RateQuoteRequest, RateQuoteRequestInner, RateQuoteDetail


@pytest.fixture
def settings() -> WardSettings:
    """Settings isolated from WARD_* environment variables and .env"""
    return WardSettings(_env_file=None, production_mode=False, timeout=10)


@pytest.fixture
def pickup_request() -> PickupRequest:
    return PickupRequest(
        shipper_information=ShipperInformation(
            shipper_code="12345",
            shipper_name="Acme Widgets",
            shipper_address1="1 Market St",
            shipper_city="Philadelphia",
            shipper_state="PA",
            shipper_zipcode="19103",
            shipper_contact_name="Jane Doe",
            shipper_contact_telephone="2155551234",
            shipper_ready_time="0900",
            shipper_close_time="1700",
            pickup_date="10212026",
        ),
        shipment=Shipment(
            pieces=3,
            weight=500,
            consignee_name="Chicago Supply",
            consignee_city="Chicago",
            consignee_state="IL",
            consignee_zipcode="60601",
            hazardous="N",
            freezable="N",
            delivery_appointment_flag="N",
        ),
    )


@pytest.fixture
def rate_quote_request() -> RateQuoteRequest:
    return RateQuoteRequest(
        request=RateQuoteRequestInner(
            customer_code="12345",
            origin_city="Philadelphia",
            origin_state="PA",
            origin_zipcode="19103",
            destination_city="Chicago",
            destination_state="IL",
            destination_zipcode="60601",
            pallet_count=2,
            details=[
                RateQuoteDetail(weight=500, pieces=2, freight_class="70"),
                RateQuoteDetail(weight=200, pieces=1, freight_class="85"),
            ],
            accessorials=["LGD", "IDL"],
        )
    )


class StubWard:
    """Records requests and answers with a canned body"""

    def __init__(self, body: str, status_code: int = 200):
        self.body = body
        self.status_code = status_code
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, text=self.body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def stub_ward() -> Callable[..., StubWard]:
    return StubWard
