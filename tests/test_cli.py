import re
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from oci_api.cli import cli
from oci_api.configuration import AppConfig
from oci_api.utils.logging_utils import get_logger

DATE = "Thu, 05 Jan 2023 00:00:00 GMT"


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger = get_logger()
    for handler in list(logger.handlers):
        logger.removeHandler(handler)


@pytest.fixture
def oci_env(clean_env, monkeypatch, staging_dir, key_file):
    monkeypatch.setenv("OCI_USER_ID", "ocid1.user.oc1..test")
    monkeypatch.setenv("OCI_TENANCY_ID", "ocid1.tenancy.oc1..test")
    monkeypatch.setenv("OCI_REGION", "us-ashburn-1")
    monkeypatch.setenv("OCI_FINGERPRINT", "aa:bb")
    monkeypatch.setenv("OCI_PRIVATE_KEY", str(key_file))


class TestSignCommand:

    def test_sign_from_environment(self, oci_env, staging_dir):
        result = CliRunner().invoke(cli, ["sign", "--path", "/foo", "--host", "example.com", "--date", DATE])

        assert result.exit_code == 0, result.output
        lines = result.output.splitlines()
        assert lines[0] == f"date: {DATE}"
        assert re.match(
            r'authorization: Signature version="1",headers="date \(request-target\) host",'
            r'keyId="ocid1.tenancy.oc1..test/ocid1.user.oc1..test/aa:bb",algorithm="rsa-sha256",signature=".+"',
            lines[1],
        )
        assert list(staging_dir.iterdir()) == []

    def test_sign_with_body(self, oci_env):
        result = CliRunner().invoke(cli, ["sign", "--method", "POST", "--path", "/foo", "--host", "example.com", "--body", "{}"])

        assert result.exit_code == 0, result.output
        assert "content-length content-type x-content-sha256" in result.output

    def test_sign_from_oci_config_file(self, clean_env, staging_dir, tmp_path, key_file):
        config_file = tmp_path / "config"
        config_file.write_text(f"[DEFAULT]\nuser=u\ntenancy=t\nregion=r\nfingerprint=f\nkey_file={key_file}\n")

        result = CliRunner().invoke(cli, ["sign", "--oci-config", str(config_file), "--path", "/foo", "--host", "h", "--date", DATE])

        assert result.exit_code == 0, result.output
        assert 'keyId="t/u/f"' in result.output

    def test_missing_credentials(self, clean_env):
        result = CliRunner().invoke(cli, ["sign", "--path", "/foo", "--host", "example.com"])

        assert result.exit_code == 1
        assert "Environment variable error: OCI_USER_ID" in result.output

    def test_sign_from_configuration_file_reads_it_once(self, clean_env, staging_dir, tmp_path, key_file):
        oci_config = tmp_path / "config"
        oci_config.write_text(f"[PROD]\nuser=u\ntenancy=t\nregion=r\nfingerprint=f\nkey_file={key_file}\n")
        configuration_file = tmp_path / "oci-api.yaml"
        configuration_file.write_text(f"logging:\n  level: warning\noci:\n  config-file: {oci_config}\n  profile: PROD\n")

        with patch.object(AppConfig, "from_file", wraps=AppConfig.from_file) as from_file:
            result = CliRunner().invoke(cli, ["sign", "--configuration-file", str(configuration_file), "--path", "/foo", "--host", "h", "--date", DATE])

        assert result.exit_code == 0, result.output
        assert 'keyId="t/u/f"' in result.output
        from_file.assert_called_once_with(str(configuration_file))

    def test_invalid_configuration_file(self, clean_env, tmp_path):
        configuration_file = tmp_path / "oci-api.yaml"
        configuration_file.write_text("unknown: 1\n")

        result = CliRunner().invoke(cli, ["sign", "--configuration-file", str(configuration_file), "--path", "/foo", "--host", "h"])

        assert result.exit_code == 1
        assert "Configuration error: Invalid application configuration" in result.output
