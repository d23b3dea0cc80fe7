from decimal import Decimal
from typing import List, Optional

from pydantic import Field

from ward.schemas.base_schema import (
    WardModel, XSI_NAMESPACE, XSD_NAMESPACE, SOAP12_NAMESPACE
)


class RateQuoteDetail(WardModel):
    """One line item: weight, pieces and freight class"""
    weight: int = Field(0, ge=0, alias="Weight", description="lbs")
    pieces: int = Field(0, ge=0, alias="Pieces")
    freight_class: str = Field("", alias="Class", description="NMFC freight class, e.g. 70 or 77.5")


class RateQuoteRequestInner(WardModel):
    customer_code: str = Field("", alias="CustomerCode", description="Ward account number")
    origin_city: str = Field("", alias="OriginCity")
    origin_state: str = Field("", alias="OriginState")
    origin_zipcode: str = Field("", alias="OriginZipcode")
    destination_city: str = Field("", alias="DestinationCity")
    destination_state: str = Field("", alias="DestinationState")
    destination_zipcode: str = Field("", alias="DestinationZipcode")
    pallet_count: int = Field(0, ge=0, alias="PalletCount")
    details: List[RateQuoteDetail] = Field(
        default_factory=list, alias="Details", json_schema_extra={"xml_item": "DetailItem"}
    )
    accessorials: List[str] = Field(
        default_factory=list, alias="Accessorials", json_schema_extra={"xml_item": "AccessorialItem"},
        description="Accessorial service codes, e.g. liftgate or inside delivery"
    )


class RateQuoteRequest(WardModel):
    """Main body of the rate quote request envelope"""
    xsi_attr: str = Field(XSI_NAMESPACE, alias="xmlns:xsi")
    xsd_attr: str = Field(XSD_NAMESPACE, alias="xmlns:xsd")
    soap12_attr: str = Field(SOAP12_NAMESPACE, alias="xmlns:soap12")

    request: RateQuoteRequestInner = Field(default_factory=RateQuoteRequestInner, alias="request")


class ServiceCenter(WardModel):
    """Ward terminal serving the origin or destination"""
    id: str = Field("", alias="ID")
    name: str = Field("", alias="Name")
    manager: str = Field("", alias="Manager")
    address: str = Field("", alias="Address")
    city: str = Field("", alias="City")
    state: str = Field("", alias="State")
    zipcode: str = Field("", alias="Zipcode")
    transit_days: str = Field("", alias="TransitDays")
    telephone: str = Field("", alias="Telephone")
    fax: str = Field("", alias="Fax")


class AccessorialCharge(WardModel):
    code: str = Field("", alias="Code")
    description: str = Field("", alias="Description")
    charge: Optional[Decimal] = Field(None, alias="Charge")


class RateDetail(WardModel):
    """Rate breakdown for one freight class"""
    freight_class: str = Field("", alias="Class")
    weight: str = Field("", alias="Weight")
    rate: Optional[Decimal] = Field(None, alias="Rate")
    charge: Optional[Decimal] = Field(None, alias="Charge")
    accessorials: List[AccessorialCharge] = Field(
        default_factory=list, alias="Accessorials", json_schema_extra={"xml_item": "Accessorial"}
    )


class RateQuoteResult(WardModel):
    origin_service_center: ServiceCenter = Field(default_factory=ServiceCenter, alias="OriginServiceCenter")
    destination_service_center: ServiceCenter = Field(default_factory=ServiceCenter, alias="DestinationServiceCenter")
    discount_percentage: Optional[Decimal] = Field(None, alias="DiscountPercentage")
    discount_amount: Optional[Decimal] = Field(None, alias="DiscountAmount")
    fuel_surcharge_percentage: Optional[Decimal] = Field(None, alias="FuelSurchargePercentage")
    fuel_surcharge_amount: Optional[Decimal] = Field(None, alias="FuelSurchargeAmount")
    net_charge: Optional[Decimal] = Field(None, alias="NetCharge", description="Quoted price")
    quote_id: str = Field("", alias="QuoteID")
    rate_details: List[RateDetail] = Field(
        default_factory=list, alias="RateDetails", json_schema_extra={"xml_item": "RateDetail"}
    )


class RateQuoteResponse(WardModel):
    create_result: RateQuoteResult = Field(default_factory=RateQuoteResult, alias="CreateResult")

    @property
    def has_quote(self) -> bool:
        """True when Ward returned a quote id or a net charge"""
        result = self.create_result
        return result.quote_id != "" or result.net_charge is not None
