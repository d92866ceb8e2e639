"""CLI command to start the Blynk bridge server."""

import logging
import click
import uvicorn

from ..api import BridgeRestAPI
from ..config import load_settings

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@click.command()
@click.option(
    "--config",
    type=click.Path(exists=True),
    help="YAML configuration file path",
)
@click.option(
    "--host",
    default="0.0.0.0",
    help="Host to bind to (default: 0.0.0.0)",
)
@click.option(
    "--port",
    default=3000,
    type=int,
    help="Port to bind to (default: 3000)",
)
@click.option(
    "--token",
    envvar="BLYNK_AUTH_TOKEN",
    help="Blynk device auth token (default: $BLYNK_AUTH_TOKEN)",
)
def main(config, host, port, token):
    """Start the Blynk bridge server.

    Accepts device payloads on POST /api/sendBlynk and forwards the parsed
    ranges and sun times to Blynk virtual pins.

    Examples:
        # Token from the environment
        BLYNK_AUTH_TOKEN=... blynkbridge-serve

        # Explicit token and port
        blynkbridge-serve --token abc123 --port 8080

        # Load configuration file
        blynkbridge-serve --config bridge.yaml
    """
    try:
        settings = load_settings(config, auth_token=token)
    except Exception as e:
        logger.exception("Configuration error")
        raise click.ClickException(f"Error loading configuration: {e}")

    if not settings.auth_token:
        click.echo("⚠️  No Blynk token configured; /api/sendBlynk will answer 500", err=True)

    app = BridgeRestAPI(settings).get_app()

    click.echo(f"🌐 Starting API server on http://{host}:{port}")
    click.echo(f"   • Send endpoint: http://{host}:{port}/api/sendBlynk")
    click.echo(f"   • Health Check:  http://{host}:{port}/health")
    click.echo(f"   • API Docs:      http://{host}:{port}/docs")
    click.echo()

    uvicorn.run(app, host=host, port=port, log_level="info")


if __name__ == "__main__":
    main()
