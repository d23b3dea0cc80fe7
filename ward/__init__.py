"""
Client for the Ward Trucking LTL (less than truckload) XML/SOAP API.

Currently supported:
- pickup requests
- rate quotes

To request a pickup:
- Create a client, test endpoint unless production=True (WardClient).
- Set shipper information (ShipperInformation) and shipment data (Shipment).
- Build the pickup request (PickupRequest) and send it (WardClient.request_pickup).
- Handle WardError subclasses for failures.

You need a Ward account registered for API access.
"""

from ward.core.exceptions import (
    ErrorCode, WardError, SerializationError, TransportError,
    DeserializationError, EmptyResultError
)
from ward.core.settings import WardSettings, get_ward_settings
from ward.schemas import (
    ShipperInformation, Shipment, PickupRequest, PickupResult, PickupResponse,
    RateQuoteDetail, RateQuoteRequestInner, RateQuoteRequest, ServiceCenter,
    AccessorialCharge, RateDetail, RateQuoteResult, RateQuoteResponse
)
from ward.services.ward_client import WardClient

__version__ = "1.0.0"
