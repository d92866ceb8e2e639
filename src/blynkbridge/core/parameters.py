from datetime import date
from typing import Any, Dict, Optional, Tuple
import logging
import math

from ..model.payload import SensorPayload
from .daylight import DEFAULT_LATITUDE, DEFAULT_LONGITUDE, DEFAULT_UTC_OFFSET, get_sun_times
from .ranges import parse_range

logger = logging.getLogger(__name__)

SUN_MARKER = "~"


def _coordinate(value: Any, name: str) -> Optional[float]:
  if not value:
    return None
  try:
    coord = float(value)
  except (TypeError, ValueError):
    logger.warning(f"Ignoring non-numeric {name}: {value!r}")
    return None
  if not math.isfinite(coord):
    logger.warning(f"Ignoring non-finite {name}: {value!r}")
    return None
  return coord


def _as_range(raw: Any) -> Tuple[float, float]:
  # "as" looks like "<label>, <low>-<high>"; only the part after the first ", " counts
  if raw is None:
    return (0.0, 0.0)
  if not isinstance(raw, str):
    logger.warning(f"Failed to parse 'as': {raw!r}")
    return (0.0, 0.0)
  pieces = raw.split(", ")
  return parse_range(pieces[1] if len(pieces) > 1 else "")


def build_parameters(payload: SensorPayload, today: date,
                     default: Tuple[float, float] = (DEFAULT_LATITUDE, DEFAULT_LONGITUDE),
                     utc_offset: float = DEFAULT_UTC_OFFSET) -> Dict[int, float]:
  """
  Map an incoming payload onto the ten virtual pins.

  Sun times are only computed when the "as" field carries a "~" marker;
  otherwise (or when the sun does not rise that day) pins 20-23 are 0.
  """
  nd_low, nd_high = parse_range(payload.nd)
  da_low, da_high = parse_range(payload.da)
  as_low, as_high = _as_range(payload.as_)

  sunrise_h = sunrise_m = sunset_h = sunset_m = 0
  if isinstance(payload.as_, str) and SUN_MARKER in payload.as_:
    lat = _coordinate(payload.lat, "lat")
    lon = _coordinate(payload.lon, "lon")
    times = get_sun_times(today.year, today.month, today.day, lat, lon,
                          default=default, utc_offset=utc_offset)
    if times is not None:
      sunrise_h, sunrise_m = times.sunrise_h, times.sunrise_m
      sunset_h, sunset_m = times.sunset_h, times.sunset_m

  parameters = {
    3: nd_low,
    4: nd_high,
    8: da_low,
    9: da_high,
    12: as_low,
    13: as_high,
    20: sunrise_h,
    21: sunset_h,
    22: sunrise_m,
    23: sunset_m,
  }
  logger.info(f"Parsed parameters: {parameters}")
  return parameters
