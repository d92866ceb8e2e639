"""Forward sensor ranges and sun times to Blynk virtual pins."""

__version__ = "1.0.0"
