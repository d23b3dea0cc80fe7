"""XML builder for Ward SOAP 1.2 request envelopes."""

import re
import xml.etree.ElementTree as ET
from typing import Any, Tuple

from ward.schemas.base_schema import (
    WardModel, XSI_NAMESPACE, XSD_NAMESPACE, SOAP12_NAMESPACE,
    nested_model, list_item_type, list_item_tag
)
from ward.schemas.pickup_schema import PickupRequest
from ward.schemas.rate_quote_schema import RateQuoteRequest

# Ward's parser rejects requests without the declaration and the trailing newline
XML_HEADER = '<?xml version="1.0" encoding="UTF-8"?>\n'

# Characters outside the XML 1.0 Char production
_INVALID_XML_CHARS = re.compile(
    r"[^\x09\x0A\x0D\x20-\uD7FF\uE000-\uFFFD\U00010000-\U0010FFFF]"
)


class WardXMLBuilder:
    """Builder for Ward request envelopes."""

    def build_pickup_xml(self, request: PickupRequest) -> str:
        """
        Build the full pickup request document.

        Args:
            request: Populated pickup request

        Returns:
            XML string ready to be POSTed to Ward

        Raises:
            ValueError: If a field cannot be represented in XML
        """
        root, request_elem = self._build_envelope()

        shipper_elem = ET.SubElement(request_elem, "ShipperInformation")
        self._build_model(shipper_elem, request.shipper_information)

        shipment_elem = ET.SubElement(request_elem, "Shipment")
        self._build_model(shipment_elem, request.shipment)

        return self._to_document(root)

    def build_rate_quote_xml(self, request: RateQuoteRequest) -> str:
        """
        Build the full rate quote request document.

        Raises:
            ValueError: If a field cannot be represented in XML
        """
        root, request_elem = self._build_envelope()
        self._build_model(request_elem, request.request)
        return self._to_document(root)

    def _build_envelope(self) -> Tuple[ET.Element, ET.Element]:
        """Build soap12:Envelope > soap12:Body > request and return (root, request)."""
        root = ET.Element("soap12:Envelope")

        # Namespace values are fixed, whatever the request model carries
        root.set("xmlns:xsi", XSI_NAMESPACE)
        root.set("xmlns:xsd", XSD_NAMESPACE)
        root.set("xmlns:soap12", SOAP12_NAMESPACE)

        body = ET.SubElement(root, "soap12:Body")
        request_elem = ET.SubElement(body, "request")
        return root, request_elem

    def _build_model(self, parent: ET.Element, model: WardModel) -> None:
        """Write every field of the model as a child of parent, in declaration order."""
        for name, field in type(model).model_fields.items():
            value = getattr(model, name)
            tag = field.alias or name

            if nested_model(field) is not None:
                self._build_model(ET.SubElement(parent, tag), value)
                continue

            if list_item_type(field) is not None:
                container = ET.SubElement(parent, tag)
                item_tag = list_item_tag(field)
                for item in value:
                    if isinstance(item, WardModel):
                        self._build_model(ET.SubElement(container, item_tag), item)
                    else:
                        self._safe_set_text(container, item_tag, item)
                continue

            self._safe_set_text(parent, tag, value)

    def _safe_set_text(self, parent: ET.Element, tag: str, value: Any) -> None:
        """Add a text element, writing None as an empty element."""
        element = ET.SubElement(parent, tag)
        if value is None:
            element.text = ""
            return

        text = str(value)
        match = _INVALID_XML_CHARS.search(text)
        if match:
            raise ValueError(
                f"Field {tag} contains a character not allowed in XML: {match.group()!r}"
            )
        element.text = text

    def _to_document(self, root: ET.Element) -> str:
        # Empty fields are sent as <Tag></Tag>, never <Tag />
        xml_str = ET.tostring(root, encoding="unicode", short_empty_elements=False)
        # ElementTree leaves \r in text as is, and parsers normalize \r\n to \n
        xml_str = xml_str.replace("\r", "&#xD;")
        return f"{XML_HEADER}{xml_str}\n"
