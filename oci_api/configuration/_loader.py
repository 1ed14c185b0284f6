"""
OCI config file loader.

Reads the INI format used by ``~/.oci/config``:

    [DEFAULT]
    user=ocid1.user.oc1..aaaa
    tenancy=ocid1.tenancy.oc1..aaaa
    region=us-ashburn-1
    fingerprint=aa:bb:cc:dd:ee:ff
    key_file=~/.oci/oci_api_key.pem

Named profiles inherit the values of ``[DEFAULT]``.
"""

from __future__ import annotations

import configparser
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..auth import KeyMaterialLoader
from ..entities.exceptions import ConfigError, IniError
from ..utils.logging_utils import get_logger
from .properties import OciConfig

logger = get_logger()

DEFAULT_PROFILE = "DEFAULT"


@dataclass(frozen=True)
class PartialOciConfig:
    """Identity fields of a profile, any of which may be missing."""
    user_id: Optional[str] = None
    tenancy_id: Optional[str] = None
    region: Optional[str] = None
    fingerprint: Optional[str] = None
    key_file: Optional[str] = None
    compartment_id: Optional[str] = None


def _is_existing_file(value: str) -> bool:
    if "\n" in value:
        return False

    try:
        return Path(value).expanduser().is_file()
    except (OSError, ValueError):
        return False


class ConfigLoader:

    @classmethod
    def load_from_env_var(cls, value: str, profile: str = DEFAULT_PROFILE) -> OciConfig:
        """Load from a value that is either a config file path or inline INI content."""
        if _is_existing_file(value):
            return cls.load_from_file(value, profile)

        return cls.load_from_ini_content(value, profile)

    @classmethod
    def load_from_file(cls, path: str | os.PathLike, profile: str = DEFAULT_PROFILE) -> OciConfig:
        parser = cls._read_file(path)
        logger.debug("Loading OCI profile %s from %s", profile, path)

        return cls._build_config(cls._section(parser, profile))

    @classmethod
    def load_from_ini_content(cls, content: str, profile: str = DEFAULT_PROFILE) -> OciConfig:
        parser = cls._parse(content)

        return cls._build_config(cls._section(parser, profile))

    @classmethod
    def load_partial(cls, value: str) -> PartialOciConfig:
        """
        Read whatever fields the ``DEFAULT`` profile of a file path or inline
        INI content provides, without requiring any of them.
        """
        parser = cls._read_file(value) if _is_existing_file(value) else cls._parse(value)
        section = cls._section(parser, DEFAULT_PROFILE)

        key_file = section.get("key_file")
        return PartialOciConfig(
            user_id=section.get("user"),
            tenancy_id=section.get("tenancy"),
            region=section.get("region"),
            fingerprint=section.get("fingerprint"),
            key_file=os.path.expanduser(key_file) if key_file else None,
            compartment_id=section.get("compartment"),
        )

    @classmethod
    def _read_file(cls, path: str | os.PathLike) -> configparser.ConfigParser:
        file_path = Path(path).expanduser()
        try:
            content = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise IniError(f"Failed to load INI file: {e}") from e

        return cls._parse(content, source=str(file_path))

    @staticmethod
    def _parse(content: str, source: str = "<string>") -> configparser.ConfigParser:
        parser = configparser.ConfigParser(interpolation=None)
        try:
            parser.read_string(content, source=source)
        except configparser.Error as e:
            raise IniError(f"Failed to parse INI content: {e}") from e

        return parser

    @staticmethod
    def _section(parser: configparser.ConfigParser, profile: str) -> configparser.SectionProxy:
        if profile == parser.default_section:
            found = bool(parser.defaults())
        else:
            found = parser.has_section(profile)

        if not found:
            raise ConfigError(f"Profile '{profile}' not found")

        return parser[profile]

    @staticmethod
    def _build_config(section: configparser.SectionProxy) -> OciConfig:
        def require(field: str) -> str:
            value = section.get(field)
            if not value:
                raise ConfigError(f"{field} field not found in config")
            return value

        user_id = require("user")
        tenancy_id = require("tenancy")
        region = require("region")
        fingerprint = require("fingerprint")
        key_file = require("key_file")

        return OciConfig(
            user_id=user_id,
            tenancy_id=tenancy_id,
            region=region,
            fingerprint=fingerprint,
            private_key=KeyMaterialLoader.load(os.path.expanduser(key_file)),
            compartment_id=section.get("compartment"),
        )
