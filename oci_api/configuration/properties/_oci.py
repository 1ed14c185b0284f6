from __future__ import annotations

import os
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...auth import KeyMaterialLoader
from ...entities import CredentialIdentity
from ...entities.exceptions import EnvError


class OciConfig(BaseModel):
    """
    Credentials and region of an OCI user.

    ``private_key`` accepts inline PEM text or a key file path; either way it
    holds validated PEM text once the model is built.
    """
    model_config = ConfigDict(extra='forbid', frozen=True)

    user_id: str = Field(..., min_length=1, description="User OCID")
    tenancy_id: str = Field(..., min_length=1, description="Tenancy OCID")
    region: str = Field(..., min_length=1, description="Region identifier, e.g. us-ashburn-1")
    fingerprint: str = Field(..., min_length=1, description="Fingerprint of the API signing key")
    private_key: str = Field(..., repr=False, description="PEM-encoded private key")
    compartment_id: Optional[str] = Field(None, description="Compartment OCID, defaults to the tenancy")

    @field_validator("private_key", mode="before")
    @classmethod
    def _load_private_key(cls, value):
        if isinstance(value, (str, os.PathLike)):
            return KeyMaterialLoader.load(value)

        return value

    @property
    def compartment(self) -> str:
        return self.compartment_id or self.tenancy_id

    @property
    def identity(self) -> CredentialIdentity:
        return CredentialIdentity(
            tenancy_id=self.tenancy_id,
            user_id=self.user_id,
            fingerprint=self.fingerprint,
        )

    @classmethod
    def from_env(cls) -> OciConfig:
        """
        Load the configuration from environment variables.

        ``OCI_USER_ID``, ``OCI_TENANCY_ID``, ``OCI_REGION`` and ``OCI_FINGERPRINT``
        take priority over the matching fields of ``OCI_CONFIG`` (an INI file
        path or inline INI content, ``DEFAULT`` profile). The private key comes
        from ``OCI_PRIVATE_KEY`` (path or PEM text), or else from the
        ``key_file`` of ``OCI_CONFIG``. ``OCI_COMPARTMENT_ID`` is optional.
        Empty variables count as unset.

        Raises:
            EnvError: If a required value is found nowhere.
            ConfigError: If ``OCI_CONFIG`` cannot be parsed.
            PrivateKeyError: If the private key cannot be loaded.
        """
        from .._loader import ConfigLoader, PartialOciConfig

        oci_config = os.environ.get("OCI_CONFIG")
        partial = ConfigLoader.load_partial(oci_config) if oci_config else PartialOciConfig()

        def require(variable: str, fallback: Optional[str]) -> str:
            value = os.environ.get(variable) or fallback
            if not value:
                raise EnvError(f"{variable} must be set (either directly or via OCI_CONFIG)")
            return value

        user_id = require("OCI_USER_ID", partial.user_id)
        tenancy_id = require("OCI_TENANCY_ID", partial.tenancy_id)
        region = require("OCI_REGION", partial.region)
        fingerprint = require("OCI_FINGERPRINT", partial.fingerprint)

        key_input = os.environ.get("OCI_PRIVATE_KEY") or partial.key_file
        if not key_input:
            raise EnvError("OCI_PRIVATE_KEY must be set (or key_file must be in OCI_CONFIG)")

        return cls(
            user_id=user_id,
            tenancy_id=tenancy_id,
            region=region,
            fingerprint=fingerprint,
            private_key=key_input,
            compartment_id=os.environ.get("OCI_COMPARTMENT_ID") or partial.compartment_id,
        )
