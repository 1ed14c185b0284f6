from typing import Optional

import click

from .auth import RequestSigner
from .configuration import DEFAULT_PROFILE, AppConfig, ConfigLoader, LoggingConfig, OciConfig
from .entities.exceptions import OciError
from .utils.logging_utils import get_logger, init_logger

logger = get_logger()


@click.group()
def cli():
    pass


def _load_oci_config(app_config: Optional[AppConfig], oci_config_path: Optional[str], profile: str) -> OciConfig:
    if oci_config_path:
        return ConfigLoader.load_from_file(oci_config_path, profile)

    if app_config:
        return app_config.load_oci_config()

    return OciConfig.from_env()


@cli.command()
@click.option("--configuration-file", "configuration_file_path", type=click.Path(exists=True, dir_okay=False), default=None, help="Path to an application configuration file (YAML).")
@click.option("--oci-config", "oci_config_path", type=click.Path(exists=True, dir_okay=False), default=None, help="Path to an OCI config file. Credentials are read from the environment when omitted.")
@click.option("--profile", default=DEFAULT_PROFILE, show_default=True, help="Profile to use from the OCI config file.")
@click.option("--method", default="GET", show_default=True, help="HTTP method.")
@click.option("--path", "request_path", required=True, help="Request path including the query string.")
@click.option("--host", required=True, help="Host header value.")
@click.option("--body", default=None, help="Request body.")
@click.option("--date", default=None, help="Date header value, defaults to now.")
@click.option("--content-type", default=None, help="Content type of the body, defaults to application/json.")
def sign(
    configuration_file_path: Optional[str],
    oci_config_path: Optional[str],
    profile: str,
    method: str,
    request_path: str,
    host: str,
    body: Optional[str],
    date: Optional[str],
    content_type: Optional[str],
):
    """Print the date and authorization headers of a signed request."""
    try:
        app_config = AppConfig.from_file(configuration_file_path) if configuration_file_path else None
        init_logger(app_config.logging if app_config else LoggingConfig(level="warning"))

        config = _load_oci_config(app_config, oci_config_path, profile)
        logger.debug("Signing %s %s for %s as %s", method, request_path, host, config.user_id)
        with RequestSigner.from_config(config) as signer:
            signed = signer.sign(method, request_path, host, body, date=date, content_type=content_type)
    except OciError as error:
        raise click.ClickException(str(error)) from error

    click.echo(f"date: {signed.date}")
    click.echo(f"authorization: {signed.authorization}")


if __name__ == "__main__":
    cli()
