from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SensorPayload(BaseModel):
  # Fields are kept loose; the device sends whatever its form produced.
  model_config = ConfigDict(populate_by_name=True, extra="allow")

  nd: Optional[Any] = None
  da: Optional[Any] = None
  as_: Optional[Any] = Field(default=None, alias="as")
  lat: Optional[Any] = None
  lon: Optional[Any] = None


class PinUpdateResult(BaseModel):
  pin: str
  value: Union[int, float]
  success: bool
  status: int
  response: str

  @field_validator("value")
  @classmethod
  def _whole_numbers_as_int(cls, v):
    # report 10, not 10.0, matching what was sent
    if isinstance(v, float) and v.is_integer():
      return int(v)
    return v

  def detail(self) -> Dict[str, Any]:
    return self.model_dump(exclude={"pin"})


class ForwardReport(BaseModel):
  details: Dict[str, PinUpdateResult]

  @property
  def ok(self) -> bool:
    return all(r.success for r in self.details.values())

  @property
  def message(self) -> str:
    return "All sent successfully!" if self.ok else "Some parameters failed."

  def to_body(self) -> Dict[str, Any]:
    return {
      "message": self.message,
      "details": {pin: r.detail() for pin, r in self.details.items()},
    }
