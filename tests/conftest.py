import tempfile

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from oci_api.entities import CredentialIdentity


@pytest.fixture(scope="session")
def rsa_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def pkcs8_pem(rsa_key) -> str:
    return rsa_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode()


@pytest.fixture
def key_file(tmp_path, pkcs8_pem):
    path = tmp_path / "oci_api_key.pem"
    path.write_text(pkcs8_pem)
    return path


@pytest.fixture
def staging_dir(tmp_path, monkeypatch):
    """Redirect ephemeral key files to a directory the test can inspect."""
    directory = tmp_path / "staging"
    directory.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(directory))
    return directory


@pytest.fixture
def identity():
    return CredentialIdentity(
        tenancy_id="ocid1.tenancy.oc1..test",
        user_id="ocid1.user.oc1..test",
        fingerprint="aa:bb:cc:dd:ee:ff",
    )


@pytest.fixture
def clean_env(monkeypatch):
    for variable in (
        "OCI_CONFIG",
        "OCI_USER_ID",
        "OCI_TENANCY_ID",
        "OCI_REGION",
        "OCI_FINGERPRINT",
        "OCI_PRIVATE_KEY",
        "OCI_COMPARTMENT_ID",
    ):
        monkeypatch.delenv(variable, raising=False)
