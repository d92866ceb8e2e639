from dataclasses import asdict, dataclass
from datetime import date, datetime, time, timedelta, timezone
from typing import Optional, Tuple
import logging
import math

logger = logging.getLogger(__name__)

DEG_TO_RAD = math.pi / 180

# Ho Chi Minh City area, matches the fixed UTC+7 offset
DEFAULT_LATITUDE = 10.9
DEFAULT_LONGITUDE = 106.7
DEFAULT_UTC_OFFSET = 7.0

# sun centre at -0.83 degrees accounts for refraction and the solar disc
SUNRISE_ELEVATION = -0.83
OBLIQUITY = 23.44
J2000 = 2451545.0


def _wrap_degrees(value: float) -> float:
  return (math.fmod(value, 360.0) + 360.0) % 360.0


def julian_day(year: int, month: int, day: int, longitude: float) -> float:
  return (
    367 * year
    - (7 * (year + (month + 9) // 12)) // 4
    + (275 * month) // 9
    + day
    + 1721013.5
    - longitude / 360
  )


def calc_sun_time(year: int, month: int, day: int, latitude: float, longitude: float,
                  is_sunrise: bool, utc_offset: float = DEFAULT_UTC_OFFSET) -> float:
  """
  Local clock time of sunrise (or sunset) as decimal hours in [0, 24).

  Returns NaN when the sun never crosses the horizon that day (polar day or
  night), or when the coordinate is not a finite number.
  """
  if not (math.isfinite(latitude) and math.isfinite(longitude)):
    return math.nan
  n = julian_day(year, month, day, longitude) - J2000
  M = _wrap_degrees(357.5291 + 0.98560028 * n)
  C = (1.9148 * math.sin(M * DEG_TO_RAD)
       + 0.0200 * math.sin(2 * M * DEG_TO_RAD)
       + 0.0003 * math.sin(3 * M * DEG_TO_RAD))
  lam = _wrap_degrees(M + 102.9372 + C + 180)

  j_transit = J2000 + n + 0.0053 * math.sin(M * DEG_TO_RAD) - 0.0069 * math.sin(2 * lam * DEG_TO_RAD)
  decl = math.asin(math.sin(lam * DEG_TO_RAD) * math.sin(OBLIQUITY * DEG_TO_RAD))

  cos_omega = (
    (math.sin(SUNRISE_ELEVATION * DEG_TO_RAD) - math.sin(latitude * DEG_TO_RAD) * math.sin(decl))
    / (math.cos(latitude * DEG_TO_RAD) * math.cos(decl))
  )
  if math.isnan(cos_omega) or not -1.0 <= cos_omega <= 1.0:
    return math.nan
  hour_angle = math.acos(cos_omega)

  if is_sunrise:
    j = j_transit - hour_angle / (2 * math.pi)
  else:
    j = j_transit + hour_angle / (2 * math.pi)
  return ((j - math.floor(j)) * 24 + utc_offset) % 24


def decimal_to_hm(decimal: float) -> Tuple[int, int]:
  h = math.floor(decimal)
  m = math.floor((decimal - h) * 60 + 0.5)
  if m == 60:
    m = 0
    h += 1
  if h >= 24:
    h -= 24
  return h, m


@dataclass(frozen=True)
class SunTimes:
  sunrise_h: int
  sunrise_m: int
  sunset_h: int
  sunset_m: int

  def to_dict(self) -> dict:
    return asdict(self)


def get_sun_times(year: int, month: int, day: int,
                  latitude: Optional[float] = None, longitude: Optional[float] = None,
                  default: Tuple[float, float] = (DEFAULT_LATITUDE, DEFAULT_LONGITUDE),
                  utc_offset: float = DEFAULT_UTC_OFFSET) -> Optional[SunTimes]:
  """
  Sunrise and sunset as hour/minute pairs for one day and place.

  A missing latitude or longitude falls back to `default`. Returns None when
  there is no sunrise or sunset on that day.
  """
  if latitude is not None and longitude is not None:
    logger.info(f"Using user latitude/longitude: {latitude}, {longitude}")
  else:
    latitude = default[0] if latitude is None else latitude
    longitude = default[1] if longitude is None else longitude
    logger.info(f"No lat/lon provided, using default: {latitude}, {longitude}")

  rise = calc_sun_time(year, month, day, latitude, longitude, True, utc_offset)
  set_ = calc_sun_time(year, month, day, latitude, longitude, False, utc_offset)
  if math.isnan(rise) or math.isnan(set_):
    logger.warning(f"No sunrise/sunset on {year:04d}-{month:02d}-{day:02d} at {latitude}, {longitude}")
    return None

  sunrise_h, sunrise_m = decimal_to_hm(rise)
  sunset_h, sunset_m = decimal_to_hm(set_)
  return SunTimes(sunrise_h, sunrise_m, sunset_h, sunset_m)


@dataclass
class Daylight:
  latitude: float = DEFAULT_LATITUDE
  longitude: float = DEFAULT_LONGITUDE
  utc_offset: float = DEFAULT_UTC_OFFSET

  def sunrise_sunset(self, d: date) -> Optional[Tuple[datetime, datetime]]:
    # Whole minutes in the fixed offset zone; None during polar day/night.
    times = get_sun_times(d.year, d.month, d.day, self.latitude, self.longitude,
                          utc_offset=self.utc_offset)
    if times is None:
      return None
    tz = timezone(timedelta(hours=self.utc_offset))
    sunrise = datetime.combine(d, time(times.sunrise_h, times.sunrise_m), tzinfo=tz)
    sunset = datetime.combine(d, time(times.sunset_h, times.sunset_m), tzinfo=tz)
    return sunrise, sunset
