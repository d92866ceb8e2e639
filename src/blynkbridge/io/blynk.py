"""Client for the Blynk cloud "external" HTTP API."""

from typing import Dict, Optional, Union
import asyncio
import logging

import httpx

from ..model.payload import PinUpdateResult

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://blynk.cloud/external/api"


def format_value(value: Union[int, float]) -> str:
    """Render a pin value the way the Blynk firmware prints numbers ("5", not "5.0")."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class BlynkClient:
    """Pushes values to virtual pins of a single Blynk device."""

    def __init__(
        self,
        auth_token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the client.

        Args:
            auth_token: Device auth token issued by Blynk
            base_url: Root of the external API
            timeout: Per-request timeout in seconds
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self.auth_token = auth_token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(self.timeout),
            transport=self._transport,
        )

    async def update_pin(
        self,
        client: httpx.AsyncClient,
        pin: int,
        value: Union[int, float],
    ) -> PinUpdateResult:
        """Write one value to one virtual pin.

        Failures are returned as an unsuccessful result, never raised.

        Args:
            client: Open httpx client to send the request with
            pin: Virtual pin number (3 becomes "V3")
            value: Numeric value to store

        Returns:
            Outcome of the update
        """
        name = f"V{pin}"
        params = {"token": self.auth_token, "pin": name, "value": format_value(value)}
        try:
            resp = await client.get("/update", params=params)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"Error sending to {name}: {e}")
            return PinUpdateResult(pin=name, value=value, success=False, status=0, response=str(e))

        success = resp.is_success
        if not success:
            logger.error(f"Failed {name}: HTTP {resp.status_code} -> {resp.text}")
        return PinUpdateResult(
            pin=name,
            value=value,
            success=success,
            status=resp.status_code,
            response=resp.text,
        )

    async def update_pins(self, parameters: Dict[int, Union[int, float]]) -> Dict[str, PinUpdateResult]:
        """Write every pin concurrently.

        Args:
            parameters: Mapping of pin number -> value

        Returns:
            Mapping of pin name ("V3") -> result, in the order given
        """
        try:
            client = self._client()
        except httpx.InvalidURL as e:
            logger.error(f"Invalid Blynk base URL {self.base_url!r}: {e}")
            return {
                f"V{pin}": PinUpdateResult(pin=f"V{pin}", value=value, success=False, status=0, response=str(e))
                for pin, value in parameters.items()
            }
        async with client:
            results = await asyncio.gather(
                *(self.update_pin(client, pin, value) for pin, value in parameters.items())
            )
        return {r.pin: r for r in results}
