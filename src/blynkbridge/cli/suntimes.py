from datetime import date, datetime
import sys

import click

from ..core.daylight import DEFAULT_LATITUDE, DEFAULT_LONGITUDE, DEFAULT_UTC_OFFSET, Daylight


@click.command()
@click.option("--date", "day", type=click.DateTime(formats=["%Y-%m-%d"]), help="Day to compute (default: today)")
@click.option("--lat", type=float, default=DEFAULT_LATITUDE, show_default=True)
@click.option("--lon", type=float, default=DEFAULT_LONGITUDE, show_default=True)
@click.option("--utc-offset", type=float, default=DEFAULT_UTC_OFFSET, show_default=True)
def main(day, lat, lon, utc_offset):
  d = day.date() if isinstance(day, datetime) else date.today()
  times = Daylight(latitude=lat, longitude=lon, utc_offset=utc_offset).sunrise_sunset(d)
  if times is None:
    click.echo(f"No sunrise or sunset on {d.isoformat()} at {lat}, {lon}", err=True)
    sys.exit(1)
  sunrise, sunset = times
  click.echo(f"Date:    {d.isoformat()} ({lat}, {lon})")
  click.echo(f"Sunrise: {sunrise.strftime('%H:%M')}")
  click.echo(f"Sunset:  {sunset.strftime('%H:%M')}")


if __name__ == "__main__":
  main()
