from datetime import date

import pytest
from fastapi.testclient import TestClient

from blynkbridge.api import BridgeRestAPI, create_app
from blynkbridge.config import BridgeSettings

SEND = "/api/sendBlynk"


@pytest.fixture
def client(blynk_client, midsummer):
  api = BridgeRestAPI(BridgeSettings(auth_token="test-token"), blynk_client=blynk_client, today=lambda: midsummer)
  return TestClient(api.get_app())


def test_all_pins_sent(client, recorder):
  resp = client.post(SEND, json={"nd": "5-10", "da": "20-30", "as": "x, 1-2"})
  assert resp.status_code == 200
  body = resp.json()
  assert body["message"] == "All sent successfully!"
  assert list(body["details"]) == ["V3", "V4", "V8", "V9", "V12", "V13", "V20", "V21", "V22", "V23"]
  assert body["details"]["V4"] == {"value": 10, "success": True, "status": 200, "response": ""}
  assert recorder.values() == {
    "V3": "5", "V4": "10", "V8": "20", "V9": "30", "V12": "1",
    "V13": "2", "V20": "0", "V21": "0", "V22": "0", "V23": "0",
  }


def test_sun_marker_sends_times(client, recorder):
  resp = client.post(SEND, json={"as": "~", "lat": 13.75, "lon": 100.5})
  assert resp.status_code == 200
  values = recorder.values()
  assert values["V20"] != "0"
  assert values["V21"] != "0"


def test_one_failure_fails_the_request(client, recorder):
  recorder.reject.add("V12")
  resp = client.post(SEND, json={"as": "x, 1-2"})
  assert resp.status_code == 500
  body = resp.json()
  assert body["message"] == "Some parameters failed."
  assert body["details"]["V12"]["success"] is False
  assert body["details"]["V12"]["status"] == 400
  assert body["details"]["V13"]["success"] is True
  assert len(recorder.calls) == 10


def test_unreachable_cloud(client, recorder):
  recorder.unreachable.update({"V3", "V4"})
  resp = client.post(SEND, json={})
  assert resp.status_code == 500
  assert resp.json()["details"]["V3"]["status"] == 0


def test_invalid_json_body_is_treated_as_empty(client, recorder):
  resp = client.post(SEND, content="not json", headers={"content-type": "application/json"})
  assert resp.status_code == 200
  assert set(recorder.values().values()) == {"0"}


def test_non_object_body_is_treated_as_empty(client):
  resp = client.post(SEND, json=["5-10"])
  assert resp.status_code == 200


@pytest.mark.parametrize("method", ["GET", "PUT", "PATCH", "DELETE", "OPTIONS"])
def test_other_methods_rejected(client, recorder, method):
  resp = client.request(method, SEND)
  assert resp.status_code == 405
  assert resp.json() == {"message": "Method not allowed"}
  assert recorder.calls == []


def test_missing_token():
  api = BridgeRestAPI(BridgeSettings(auth_token=None))
  resp = TestClient(api.get_app()).post(SEND, json={"nd": "1-2"})
  assert resp.status_code == 500
  assert resp.json() == {"message": "Missing Blynk token in environment vars"}


def test_health(client):
  resp = client.get("/health")
  assert resp.json() == {"status": "healthy", "token_configured": True}


def test_discovery(client):
  assert client.get("/api/").json()["message"] == "API running."


def test_create_app_uses_settings():
  app = create_app(BridgeSettings(auth_token=None))
  assert TestClient(app).get("/health").json()["token_configured"] is False


def test_today_is_read_per_request(blynk_client, recorder):
  days = iter([date(2025, 6, 21), date(2025, 12, 21)])
  api = BridgeRestAPI(BridgeSettings(auth_token="t"), blynk_client=blynk_client, today=lambda: next(days))
  client = TestClient(api.get_app())
  client.post(SEND, json={"as": "~"})
  summer = recorder.values()["V20"]
  client.post(SEND, json={"as": "~"})
  winter = recorder.values()["V20"]
  assert (summer, winter) == ("5", "6")


def test_whole_values_reported_without_fraction(client):
  body = client.post(SEND, json={"nd": "5-10"}).json()
  assert body["details"]["V4"]["value"] == 10
  assert isinstance(body["details"]["V4"]["value"], int)


def test_form_encoded_body(client, recorder):
  resp = client.post(SEND, data={"nd": "5-10", "da": "20-30", "as": "x, 1-2"})
  assert resp.status_code == 200
  values = recorder.values()
  assert (values["V3"], values["V4"], values["V8"], values["V13"]) == ("5", "10", "20", "2")


def test_infinite_coordinate_still_sends_every_pin(client, recorder):
  resp = client.post(SEND, json={"as": "~", "lon": "inf"})
  assert resp.status_code == 200
  assert len(resp.json()["details"]) == 10
  assert recorder.values()["V20"] != "0"
