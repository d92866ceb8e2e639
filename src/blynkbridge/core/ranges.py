import math
import re
from typing import Any, Tuple

# hyphen, en dash, em dash, non-breaking hyphen
DASHES = re.compile("[-–—‑]")
NOT_NUMERIC = re.compile(r"[^0-9.,]")
# a separator in front of a closing three-digit group is a thousands mark
GROUPING = re.compile(r"[.,](?=[0-9]{3}(?![0-9]))")


def _parse_number(part: str) -> float:
  clean = NOT_NUMERIC.sub("", part)
  clean = GROUPING.sub("", clean)
  clean = clean.replace(",", ".", 1)
  if not clean:
    return 0.0
  try:
    value = float(clean)
  except ValueError:
    return 0.0
  # digit runs too long for a float overflow to inf
  return value if math.isfinite(value) else 0.0


def parse_range(text: Any) -> Tuple[float, float]:
  """
  Turn a human written range like "12-34" or "1,234 – 2,345" into (low, high).
  Anything that does not split into exactly two parts yields (0, 0).
  """
  if not text or not isinstance(text, str):
    return (0.0, 0.0)
  parts = DASHES.split(text)
  if len(parts) != 2:
    return (0.0, 0.0)
  low, high = (_parse_number(p) for p in parts)
  return (low, high)
