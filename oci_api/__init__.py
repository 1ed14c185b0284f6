"""
Client for Oracle Cloud Infrastructure (OCI) signed REST APIs.

    from oci_api import OciConfig, OciClient

    config = OciConfig.from_env()
    with OciClient(config) as client:
        client.get(host, "/20170907/configuration", params={"compartmentId": client.compartment_id})
"""

from .auth import KeyMaterialLoader, RequestSigner, SigningKeyHandle, SigningKeyProvider
from .configuration import ConfigLoader, OciConfig
from .entities import CredentialIdentity, SignedHeaders
from .entities.exceptions import ApiError, AuthError, ConfigError, EnvError, HttpError, IniError, OciError, PrivateKeyError
from .infrastructure.http import OciClient, service_host

__all__ = [
    "KeyMaterialLoader",
    "RequestSigner",
    "SigningKeyHandle",
    "SigningKeyProvider",
    "ConfigLoader",
    "OciConfig",
    "CredentialIdentity",
    "SignedHeaders",
    "OciError",
    "ConfigError",
    "IniError",
    "EnvError",
    "AuthError",
    "PrivateKeyError",
    "HttpError",
    "ApiError",
    "OciClient",
    "service_host",
]
