"""REST endpoint that forwards device payloads to Blynk."""

from datetime import date
from typing import Callable, Optional
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .. import __version__
from ..config import BridgeSettings
from ..core.parameters import build_parameters
from ..io.blynk import BlynkClient
from ..model.payload import ForwardReport, SensorPayload

logger = logging.getLogger(__name__)

SEND_PATH = "/api/sendBlynk"
FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


class BridgeRestAPI:
    """FastAPI application wrapping the payload -> pins pipeline."""

    def __init__(
        self,
        settings: BridgeSettings,
        blynk_client: Optional[BlynkClient] = None,
        today: Callable[[], date] = date.today,
    ):
        """Initialize REST API.

        Args:
            settings: Resolved bridge settings
            blynk_client: Client to push updates with (built from settings if omitted)
            today: Source of the current date for sun time calculation
        """
        self.settings = settings
        self.today = today
        if blynk_client is None and settings.auth_token:
            blynk_client = BlynkClient(
                settings.auth_token,
                base_url=settings.base_url,
                timeout=settings.timeout_seconds,
            )
        self.blynk_client = blynk_client
        self.app = FastAPI(
            title="Blynk Bridge API",
            description="Parses sensor ranges and sun times and forwards them to Blynk",
            version=__version__,
        )

        self._setup_routes()

    def _setup_routes(self) -> None:
        """Setup all API routes."""

        @self.app.get("/api/")
        async def api_discovery():
            """API discovery endpoint."""
            return {
                "message": "API running.",
                "version": __version__,
            }

        @self.app.get("/health")
        async def health_check():
            """Health check endpoint."""
            return {
                "status": "healthy",
                "token_configured": self.blynk_client is not None,
            }

        @self.app.post(SEND_PATH)
        async def send(request: Request):
            """Parse the payload and push every pin."""
            if self.blynk_client is None:
                return JSONResponse(
                    status_code=500,
                    content={"message": "Missing Blynk token in environment vars"},
                )

            content_type = request.headers.get("content-type", "")
            if content_type.startswith(FORM_TYPES):
                data = dict(await request.form())
            else:
                try:
                    data = await request.json()
                except ValueError:
                    data = {}
            if not isinstance(data, dict):
                data = {}
            logger.info(f"Received body: {data}")

            payload = SensorPayload.model_validate(data)
            parameters = build_parameters(
                payload,
                self.today(),
                default=self.settings.default_coordinate,
                utc_offset=self.settings.utc_offset_hours,
            )
            report = ForwardReport(details=await self.blynk_client.update_pins(parameters))
            return JSONResponse(
                status_code=200 if report.ok else 500,
                content=report.to_body(),
            )

        @self.app.api_route(SEND_PATH, methods=["GET", "HEAD", "PUT", "PATCH", "DELETE", "OPTIONS"])
        async def send_wrong_method():
            """Only POST is accepted."""
            return JSONResponse(status_code=405, content={"message": "Method not allowed"})

    def get_app(self) -> FastAPI:
        """Get the FastAPI app instance."""
        return self.app


def create_app(settings: Optional[BridgeSettings] = None) -> FastAPI:
    """Build the ASGI app, reading settings from the environment if not given."""
    return BridgeRestAPI(settings or BridgeSettings()).get_app()
