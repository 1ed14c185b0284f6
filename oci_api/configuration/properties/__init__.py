import os
from typing import Optional

from pydantic import Field, ValidationError

from ...entities.exceptions import ConfigError
from ._base import BaseConfig as _BaseConfig
from ._logging import FileLoggingConfig as FileLoggingConfig
from ._logging import LoggingConfig
from ._oci import OciConfig


class OciProfileConfig(_BaseConfig):
    config_file: str = Field("~/.oci/config", description="Path to the OCI config file")
    profile: str = Field("DEFAULT", description="Profile to read from the OCI config file")


class AppConfig(_BaseConfig):
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    oci: Optional[OciProfileConfig] = Field(None, description="OCI config file profile, credentials are read from the environment when unset")

    def load_oci_config(self) -> OciConfig:
        if self.oci is None:
            return OciConfig.from_env()

        from .._loader import ConfigLoader
        return ConfigLoader.load_from_file(self.oci.config_file, self.oci.profile)

    @staticmethod
    def from_yaml(yaml_content: str) -> 'AppConfig':
        """
        Raises:
            ConfigError: If the YAML is malformed or does not describe a valid configuration.
        """
        import yaml
        expanded = os.path.expandvars(yaml_content)

        try:
            data = yaml.safe_load(expanded) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Failed to parse application configuration: {e}") from e

        try:
            return AppConfig(**data)
        except ValidationError as validation_error:
            details = "; ".join(
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                for error in validation_error.errors()
            )
            raise ConfigError(f"Invalid application configuration: {details}") from validation_error

    @staticmethod
    def from_file(file_path: str) -> 'AppConfig':
        try:
            with open(file_path, 'r') as f:
                content = f.read()
        except OSError as e:
            raise ConfigError(f"Failed to read application configuration file: {e}") from e

        return AppConfig.from_yaml(content)
