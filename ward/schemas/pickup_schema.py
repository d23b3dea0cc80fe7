"""
Pydantic models for the Ward pickup request API.

Field formats follow Ward's documentation: states are 2 letters, phone
numbers digits only, times hhmm (24h), dates mmddyyyy and flags Y or N.
Formats are not checked here, Ward validates them.
"""

from pydantic import Field

from ward.schemas.base_schema import (
    WardModel, XSI_NAMESPACE, XSD_NAMESPACE, SOAP12_NAMESPACE
)


class ShipperInformation(WardModel):
    """Ship-from address, contacts and pickup window"""
    shipper_code: str = Field("", alias="ShipperCode", description="Ward account number")
    shipper_name: str = Field("", alias="ShipperName", description="Company name")
    shipper_address1: str = Field("", alias="ShipperAddress1")
    shipper_address2: str = Field("", alias="ShipperAddress2")
    shipper_city: str = Field("", alias="ShipperCity")
    shipper_state: str = Field("", alias="ShipperState")
    shipper_zipcode: str = Field("", alias="ShipperZipcode")
    shipper_contact_name: str = Field("", alias="ShipperContactName")
    shipper_contact_telephone: str = Field("", alias="ShipperContactTelephone")
    shipper_contact_email: str = Field("", alias="ShipperContactEmail")
    shipper_ready_time: str = Field("", alias="ShipperReadyTime", description="hhmm, 24 hour")
    shipper_close_time: str = Field("", alias="ShipperCloseTime", description="hhmm, 24 hour")
    pickup_date: str = Field("", alias="PickupDate", description="mmddyyyy")
    third_party: str = Field("", alias="ThirdParty")
    third_party_name: str = Field("", alias="ThirdPartyName")
    third_party_contact_name: str = Field("", alias="ThirdPartyContactName")
    third_party_contact_telephone: str = Field("", alias="ThirdPartyContactTelephone")
    third_party_contact_email: str = Field("", alias="ThirdPartyContactEmail")
    ward_assured_contact_name: str = Field("", alias="WardAssuredContactName")
    ward_assured_contact_telephone: str = Field("", alias="WardAssuredContactTelephone")
    ward_assured_contact_email: str = Field("", alias="WardAssuredContactEmail")
    shipper_restriction: str = Field("", alias="ShipperRestriction")
    driver_note1: str = Field("", alias="DriverNote1")
    driver_note2: str = Field("", alias="DriverNote2")
    driver_note3: str = Field("", alias="DriverNote3")
    request_origin: str = Field("", alias="RequestOrigin", description="Who is making the pickup request")
    requestor_user: str = Field("", alias="RequestorUser")
    requestor_role: str = Field("", alias="RequestorRole")
    requestor_contact_name: str = Field("", alias="RequestorContactName")
    requestor_contact_telephone: str = Field("", alias="RequestorContactTelephone")
    requestor_contact_email: str = Field("", alias="RequestorContactEmail")


class Shipment(WardModel):
    """The freight a pickup is requested for"""
    pieces: int = Field(0, ge=0, alias="Pieces")
    package_code: str = Field("", alias="PackageCode", description="Package code per Ward's website")
    weight: int = Field(0, ge=0, alias="Weight", description="lbs")
    consignee_code: str = Field("", alias="ConsigneeCode")
    consignee_name: str = Field("", alias="ConsigneeName")
    consignee_address1: str = Field("", alias="ConsigneeAddress1")
    consignee_address2: str = Field("", alias="ConsigneeAddress2")
    consignee_city: str = Field("", alias="ConsigneeCity")
    consignee_state: str = Field("", alias="ConsigneeState")
    consignee_zipcode: str = Field("", alias="ConsigneeZipcode")
    shipper_routing_scac: str = Field("", alias="ShipperRoutingSCAC")
    hazardous: str = Field("", alias="Hazardous", description="Y or N")
    freezable: str = Field("", alias="Freezable", description="Y or N")
    delivery_appointment_flag: str = Field("", alias="DeliveryAppntFlag", description="Y or N")
    delivery_appointment_date: str = Field("", alias="DeliveryAppntDate")
    ward_assured_12pm: str = Field("", alias="WardAssured12PM")
    ward_assured_03pm: str = Field("", alias="WardAssured03PM")
    ward_assured_time_definite: str = Field("", alias="WardAssuredTimeDefinite")
    ward_assured_time_definite_start: str = Field("", alias="WardAssuredTimeDefiniteStart")
    ward_assured_time_definite_end: str = Field("", alias="WardAssuredTimeDefiniteEnd")
    full_value: str = Field("", alias="FullValue")
    full_value_insured_amount: str = Field("", alias="FullValueInsuredAmount")
    non_standard_size: str = Field("", alias="NonStandardSize")
    non_standard_size_description: str = Field("", alias="NonStandardSizeDescription")
    requestor_reference: str = Field("", alias="RequestorReference")
    pickup_shipment_instruction1: str = Field("", alias="PickupShipmentInstruction1")
    pickup_shipment_instruction2: str = Field("", alias="PickupShipmentInstruction2")
    pickup_shipment_instruction3: str = Field("", alias="PickupShipmentInstruction3")
    pickup_shipment_instruction4: str = Field("", alias="PickupShipmentInstruction4")
    request_origin: str = Field("", alias="RequestOrigin")


class PickupRequest(WardModel):
    """Main body of the pickup request envelope"""
    xsi_attr: str = Field(XSI_NAMESPACE, alias="xmlns:xsi")
    xsd_attr: str = Field(XSD_NAMESPACE, alias="xmlns:xsd")
    soap12_attr: str = Field(SOAP12_NAMESPACE, alias="xmlns:soap12")

    shipper_information: ShipperInformation = Field(default_factory=ShipperInformation, alias="ShipperInformation")
    shipment: Shipment = Field(default_factory=Shipment, alias="Shipment")


class PickupResult(WardModel):
    pickup_confirmation: str = Field("", alias="PickupConfirmation", description="Pickup confirmation number")
    message: str = Field("", alias="Message")
    pickup_terminal: str = Field("", alias="PickupTerminal")
    ward_telephone: str = Field("", alias="WardTelephone")
    ward_email: str = Field("", alias="WardEmail")


class PickupResponse(WardModel):
    """Data returned when a pickup is scheduled"""
    create_result: PickupResult = Field(default_factory=PickupResult, alias="CreateResult")

    @property
    def confirmation(self) -> str:
        return self.create_result.pickup_confirmation

    @property
    def is_confirmed(self) -> bool:
        return self.confirmation != ""
