"""HTTP API for the Blynk bridge."""

from .rest import BridgeRestAPI, create_app

__all__ = [
    "BridgeRestAPI",
    "create_app",
]
