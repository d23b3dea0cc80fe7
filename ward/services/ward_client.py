import logging
import time
from typing import Optional

import httpx

from ward.builders.xml_builder import WardXMLBuilder
from ward.core.exceptions import (
    SerializationError, TransportError, DeserializationError, EmptyResultError
)
from ward.core.settings import WardSettings, get_ward_settings
from ward.parsers.xml_parser import WardXMLParser
from ward.schemas.pickup_schema import PickupRequest, PickupResponse
from ward.schemas.rate_quote_schema import RateQuoteRequest, RateQuoteResponse


# Ward's parser expects this content type even though the body is XML
WARD_CONTENT_TYPE = "application/x-www-form-encoded"


class WardClient:
    """
    Ward Trucking XML/SOAP API client.

    Endpoint mode and timeout are fixed when the client is created, so
    clients with different settings can be used side by side. Each call
    opens a fresh HTTP connection and blocks until Ward answers or the
    timeout expires.
    """

    def __init__(
        self,
        settings: Optional[WardSettings] = None,
        *,
        production: Optional[bool] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Args:
            settings: Base settings, defaults to the WARD_* environment
            production: Use the production pickup endpoint instead of the test one
            timeout: Seconds to wait for Ward, for the whole exchange
            transport: httpx transport to send requests through (tests, proxies)
            logger: Logger receiving request and failure diagnostics
        """
        base = settings or get_ward_settings()
        overrides = {}
        if production is not None:
            overrides["production_mode"] = production
        if timeout is not None:
            overrides["timeout"] = timeout
        self.settings = WardSettings(**{**base.model_dump(), **overrides}) if overrides else base

        self.xml_builder = WardXMLBuilder()
        self.parser = WardXMLParser()
        self._transport = transport
        self.logger = logger or logging.getLogger(__name__)

    @property
    def production_mode(self) -> bool:
        return self.settings.production_mode

    @property
    def timeout(self) -> float:
        return self.settings.timeout

    @property
    def pickup_url(self) -> str:
        return self.settings.pickup_url

    @property
    def rate_quote_url(self) -> str:
        # Single endpoint, production_mode does not apply
        return self.settings.rate_quote_url

    def request_pickup(self, request: PickupRequest) -> PickupResponse:
        """
        Schedule a pickup with Ward.

        Args:
            request: Shipper information and shipment data

        Returns:
            Ward response with the pickup confirmation number

        Raises:
            SerializationError: If the request cannot be converted to XML
            TransportError: On network errors or timeout
            DeserializationError: If the response is not a Ward envelope
            EmptyResultError: If Ward returned no confirmation number
        """
        try:
            document = self.xml_builder.build_pickup_xml(request)
        except (ValueError, TypeError) as e:
            raise SerializationError(f"Ward pickup request: could not build request XML - {e}") from e

        body = self._post_xml(self.pickup_url, document, "pickup")

        try:
            response_data = self.parser.parse_pickup_response(body)
        except DeserializationError as e:
            raise DeserializationError(
                f"Ward pickup request: could not read response - {e.message}",
                raw_body=body,
                details=e.details
            ) from e

        if not response_data.is_confirmed:
            diagnostics = self.parser.to_dict(body)
            self.logger.error("Ward pickup request failed: no confirmation number returned")
            self.logger.error(f"Ward pickup raw response: {body}")
            self.logger.error(f"Ward pickup response data: {diagnostics}")
            raise EmptyResultError(
                "Ward pickup request failed: no confirmation number returned",
                raw_body=body,
                diagnostics=diagnostics,
                details={"message": response_data.create_result.message}
            )

        self.logger.info(f"Ward pickup scheduled, confirmation {response_data.confirmation}")
        return response_data

    def request_rate_quote(self, request: RateQuoteRequest, *, require_quote: bool = False) -> RateQuoteResponse:
        """
        Get a rate quote from Ward.

        The response is returned as parsed. With require_quote=True a
        response carrying neither a quote id nor a net charge raises
        EmptyResultError, like a pickup without confirmation.

        Raises:
            SerializationError: If the request cannot be converted to XML
            TransportError: On network errors or timeout
            DeserializationError: If the response is not a Ward envelope
            EmptyResultError: Only with require_quote, when no quote was returned
        """
        try:
            document = self.xml_builder.build_rate_quote_xml(request)
        except (ValueError, TypeError) as e:
            raise SerializationError(f"Ward rate quote request: could not build request XML - {e}") from e

        body = self._post_xml(self.rate_quote_url, document, "rate quote")

        try:
            response_data = self.parser.parse_rate_quote_response(body)
        except DeserializationError as e:
            raise DeserializationError(
                f"Ward rate quote request: could not read response - {e.message}",
                raw_body=body,
                details=e.details
            ) from e

        if require_quote and not response_data.has_quote:
            diagnostics = self.parser.to_dict(body)
            self.logger.error("Ward rate quote request failed: no quote returned")
            self.logger.error(f"Ward rate quote raw response: {body}")
            raise EmptyResultError(
                "Ward rate quote request failed: no quote returned",
                raw_body=body,
                diagnostics=diagnostics
            )

        return response_data

    def _post_xml(self, url: str, document: str, operation: str) -> str:
        """
        POST an XML document to Ward and return the full response body.

        The HTTP status is not checked: Ward reports failures in the body,
        which the caller parses.
        """
        headers = {"Content-Type": WARD_CONTENT_TYPE}
        timeout = self.settings.timeout
        deadline = time.monotonic() + timeout

        self.logger.info(f"Ward {operation} Request URL: {url}")
        self.logger.debug(f"Ward {operation} Request Payload:\n{document}")

        try:
            with httpx.Client(timeout=timeout, transport=self._transport) as client:
                with client.stream("POST", url, content=document.encode("utf-8"), headers=headers) as response:
                    chunks = []
                    for chunk in response.iter_bytes():
                        chunks.append(chunk)
                        self._check_deadline(deadline, url, operation)
                    # An empty body never enters the loop
                    self._check_deadline(deadline, url, operation)
                    body = b"".join(chunks).decode(response.encoding or "utf-8", errors="replace")
                    status_code = response.status_code
        except httpx.TimeoutException as e:
            self.logger.error(f"Ward {operation} request timeout: {e}")
            raise TransportError(
                f"Ward {operation} request: timed out after {timeout}s - {e}",
                url=url,
                timed_out=True
            ) from e
        except httpx.HTTPError as e:
            self.logger.error(f"Ward {operation} request error: {e}")
            raise TransportError(f"Ward {operation} request: could not make post request - {e}", url=url) from e

        self.logger.info(f"Ward {operation} Response Status: {status_code}")
        if status_code >= 400:
            self.logger.warning(f"Ward {operation} returned HTTP {status_code}")
        self.logger.debug(f"Ward {operation} Response Body:\n{body}")
        return body

    def _check_deadline(self, deadline: float, url: str, operation: str) -> None:
        """Raise a timeout TransportError once the whole exchange is past the deadline."""
        if time.monotonic() <= deadline:
            return
        timeout = self.settings.timeout
        self.logger.error(f"Ward {operation} request timeout: no complete response within {timeout}s")
        raise TransportError(
            f"Ward {operation} request: timed out after {timeout}s reading response",
            url=url,
            timed_out=True
        )
