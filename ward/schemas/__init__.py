"""
Ward request/response models
"""

from .base_schema import WardModel, XSI_NAMESPACE, XSD_NAMESPACE, SOAP12_NAMESPACE
from .pickup_schema import (
    ShipperInformation, Shipment, PickupRequest, PickupResult, PickupResponse
)
from .rate_quote_schema import (
    RateQuoteDetail, RateQuoteRequestInner, RateQuoteRequest, ServiceCenter,
    AccessorialCharge, RateDetail, RateQuoteResult, RateQuoteResponse
)
