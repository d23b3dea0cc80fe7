"""XML parser for Ward SOAP envelopes: responses and our own request documents."""

import logging
import xml.etree.ElementTree as ET
from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import ValidationError

from ward.core.exceptions import DeserializationError
from ward.schemas.base_schema import (
    WardModel, nested_model, list_item_type, list_item_tag, is_text_field
)
from ward.schemas.pickup_schema import (
    PickupRequest, PickupResponse, ShipperInformation, Shipment
)
from ward.schemas.rate_quote_schema import (
    RateQuoteRequest, RateQuoteRequestInner, RateQuoteResponse
)

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=WardModel)

RESULT_PATH = ["Body", "CreateResponse", "CreateResult"]
REQUEST_PATH = ["Body", "request"]


def _local_name(tag: str) -> str:
    """Strip the {namespace} ElementTree puts in front of qualified tags."""
    return tag.rsplit("}", 1)[-1]


def _child(elem: ET.Element, name: str) -> Optional[ET.Element]:
    for child in elem:
        if _local_name(child.tag) == name:
            return child
    return None


def _find_path(elem: ET.Element, path: List[str]) -> Optional[ET.Element]:
    for name in path:
        elem = _child(elem, name)
        if elem is None:
            return None
    return elem


class WardXMLParser:
    """
    Parser for Ward XML documents.

    Expected response structure (prefixes are ignored):
    <soap:Envelope>
      <soap:Body>
        <CreateResponse>
          <CreateResult>
            ...
          </CreateResult>
        </CreateResponse>
      </soap:Body>
    </soap:Envelope>

    Missing elements leave the model defaults in place.
    """

    @staticmethod
    def parse_pickup_response(body: str) -> PickupResponse:
        """
        Parse a pickup response body.

        Raises:
            DeserializationError: If the body is not XML, the root is not an
                Envelope or a field has the wrong type
        """
        root = WardXMLParser._parse_envelope(body)
        return WardXMLParser._read_result(root, PickupResponse, body)

    @staticmethod
    def parse_rate_quote_response(body: str) -> RateQuoteResponse:
        """
        Parse a rate quote response body.

        Raises:
            DeserializationError: If the body is not XML, the root is not an
                Envelope or a field has the wrong type
        """
        root = WardXMLParser._parse_envelope(body)
        return WardXMLParser._read_result(root, RateQuoteResponse, body)

    @staticmethod
    def parse_pickup_request(document: str) -> PickupRequest:
        """Read a pickup request envelope back into a PickupRequest."""
        root = WardXMLParser._parse_envelope(document)
        request_elem = _find_path(root, REQUEST_PATH)
        data: Dict[str, Any] = {}
        if request_elem is not None:
            shipper_elem = _child(request_elem, "ShipperInformation")
            if shipper_elem is not None:
                data["ShipperInformation"] = WardXMLParser._read_model(shipper_elem, ShipperInformation)
            shipment_elem = _child(request_elem, "Shipment")
            if shipment_elem is not None:
                data["Shipment"] = WardXMLParser._read_model(shipment_elem, Shipment)
        return WardXMLParser._validate(PickupRequest, data, document)

    @staticmethod
    def parse_rate_quote_request(document: str) -> RateQuoteRequest:
        """Read a rate quote request envelope back into a RateQuoteRequest."""
        root = WardXMLParser._parse_envelope(document)
        request_elem = _find_path(root, REQUEST_PATH)
        data: Dict[str, Any] = {}
        if request_elem is not None:
            data["request"] = WardXMLParser._read_model(request_elem, RateQuoteRequestInner)
        return WardXMLParser._validate(RateQuoteRequest, data, document)

    @staticmethod
    def to_dict(body: str) -> Dict[str, Any]:
        """
        Loose re-parse of any XML body into nested dicts, for diagnostics.

        Repeated tags become lists, leaf elements their text. Returns an
        empty dict when the body is not XML.
        """
        try:
            root = ET.fromstring(body)
        except ET.ParseError as e:
            logger.debug(f"Body is not XML, no diagnostic data: {e}")
            return {}
        return {_local_name(root.tag): WardXMLParser._element_to_value(root)}

    @staticmethod
    def _element_to_value(elem: ET.Element) -> Any:
        children = list(elem)
        if not children:
            return (elem.text or "").strip()

        value: Dict[str, Any] = {}
        for child in children:
            name = _local_name(child.tag)
            child_value = WardXMLParser._element_to_value(child)
            if name in value:
                if not isinstance(value[name], list):
                    value[name] = [value[name]]
                value[name].append(child_value)
            else:
                value[name] = child_value
        return value

    @staticmethod
    def _parse_envelope(body: str) -> ET.Element:
        try:
            root = ET.fromstring(body)
        except ET.ParseError as e:
            logger.error(f"Error parsing Ward XML: {e}")
            raise DeserializationError(f"Malformed XML response: {e}", raw_body=body) from e

        if _local_name(root.tag) != "Envelope":
            raise DeserializationError(
                f"Expected element <Envelope> but found <{_local_name(root.tag)}>",
                raw_body=body
            )
        return root

    @staticmethod
    def _read_result(root: ET.Element, model_cls: Type[M], body: str) -> M:
        result_elem = _find_path(root, RESULT_PATH)
        data: Dict[str, Any] = {}
        if result_elem is not None:
            result_cls = nested_model(model_cls.model_fields["create_result"])
            data["CreateResult"] = WardXMLParser._read_model(result_elem, result_cls)
        return WardXMLParser._validate(model_cls, data, body)

    @staticmethod
    def _read_model(elem: ET.Element, model_cls: Type[WardModel]) -> Dict[str, Any]:
        """Collect the children of elem matching the model's field aliases."""
        data: Dict[str, Any] = {}
        for name, field in model_cls.model_fields.items():
            tag = field.alias or name
            child = _child(elem, tag)
            if child is None:
                continue

            sub_model = nested_model(field)
            if sub_model is not None:
                data[tag] = WardXMLParser._read_model(child, sub_model)
                continue

            item_type = list_item_type(field)
            if item_type is not None:
                item_tag = list_item_tag(field)
                items = [c for c in child if _local_name(c.tag) == item_tag]
                if isinstance(item_type, type) and issubclass(item_type, WardModel):
                    data[tag] = [WardXMLParser._read_model(c, item_type) for c in items]
                else:
                    data[tag] = [c.text or "" for c in items]
                continue

            text = child.text or ""
            # Empty numeric elements keep the field default
            if text == "" and not is_text_field(field):
                continue
            data[tag] = text
        return data

    @staticmethod
    def _validate(model_cls: Type[M], data: Dict[str, Any], body: str) -> M:
        try:
            return model_cls.model_validate(data)
        except ValidationError as e:
            logger.error(f"Ward XML does not match {model_cls.__name__}: {e}")
            raise DeserializationError(
                f"Could not read {model_cls.__name__}: {e.error_count()} invalid field(s)",
                raw_body=body,
                details={"errors": e.errors(include_url=False)}
            ) from e
