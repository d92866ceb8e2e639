from datetime import date

import httpx
import pytest

from blynkbridge.io.blynk import BlynkClient


class BlynkRecorder:
  """Fake Blynk cloud: records every update and fails the pins it is told to."""

  def __init__(self):
    self.calls = []
    self.reject = set()
    self.unreachable = set()

  def __call__(self, request: httpx.Request) -> httpx.Response:
    params = request.url.params
    pin = params["pin"]
    self.calls.append((pin, params["value"], params["token"]))
    if pin in self.unreachable:
      raise httpx.ConnectError("connection refused", request=request)
    if pin in self.reject:
      return httpx.Response(400, text="Invalid pin.")
    return httpx.Response(200, text="")

  def values(self) -> dict:
    return {pin: value for pin, value, _ in self.calls}


@pytest.fixture
def recorder():
  return BlynkRecorder()


@pytest.fixture
def blynk_client(recorder):
  return BlynkClient("test-token", transport=httpx.MockTransport(recorder))


@pytest.fixture
def midsummer():
  return date(2025, 6, 21)
