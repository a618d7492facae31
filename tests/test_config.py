"""
Unit tests for the provider configuration.
"""

import pytest

from bigippg.config import ProviderConfig
from bigippg.errors import ConfigurationError
from bigippg.version import BuildInfo


class TestProviderConfig:
    """Tests for ProviderConfig."""

    def test_minimal_config(self):
        """Test defaults for a minimal configuration."""
        config = ProviderConfig(address="10.0.0.1", username="admin", password="secret")
        assert config.port is None
        assert config.token_auth is False
        assert config.login_ref == "tmos"
        assert config.login_reference is None
        assert config.base_url == "https://10.0.0.1"

    def test_port_in_base_url(self):
        """Test that the port is appended to the base URL."""
        config = ProviderConfig(
            address="bigip.example.com", port=8443, username="admin", password="x"
        )
        assert config.port == "8443"
        assert config.base_url == "https://bigip.example.com:8443"

    def test_explicit_scheme_kept(self):
        """Test that an address with a scheme is used as-is."""
        config = ProviderConfig(address="http://127.0.0.1/", username="a", password="b")
        assert config.base_url == "http://127.0.0.1"

    def test_login_reference_with_token_auth(self):
        """Test that the login reference applies only with token auth."""
        config = ProviderConfig(
            address="h", username="a", password="b", token_auth=True, login_ref="ldap"
        )
        assert config.login_reference == "ldap"

    def test_from_env(self):
        """Test filling values from BIGIP_* variables."""
        environ = {
            "BIGIP_HOST": "10.1.1.1",
            "BIGIP_PORT": "443",
            "BIGIP_USER": "admin",
            "BIGIP_PASSWORD": "secret",
            "BIGIP_TOKEN_AUTH": "true",
            "TEEM_DISABLE": "1",
        }
        config = ProviderConfig.from_env(environ)
        assert config.address == "10.1.1.1"
        assert config.port == "443"
        assert config.token_auth is True
        assert config.teem_disable is True

    def test_overrides_win_over_env(self):
        """Test that explicit values take precedence over the environment."""
        environ = {"BIGIP_HOST": "10.1.1.1", "BIGIP_USER": "env", "BIGIP_PASSWORD": "p"}
        config = ProviderConfig.from_env(environ, username="explicit")
        assert config.username == "explicit"
        assert config.address == "10.1.1.1"

    def test_missing_required_values(self):
        """Test that missing credentials raise ConfigurationError."""
        with pytest.raises(ConfigurationError) as exc_info:
            ProviderConfig.from_env({}, address="10.0.0.1")
        assert "username" in str(exc_info.value)

    def test_invalid_port(self):
        """Test that a non-numeric port is rejected."""
        with pytest.raises(ConfigurationError):
            ProviderConfig.load(
                {"address": "h", "port": "https", "username": "a", "password": "b"}
            )

    def test_token_auth_requires_login_ref(self):
        """Test that token auth needs a login reference."""
        with pytest.raises(ConfigurationError):
            ProviderConfig.load(
                {
                    "address": "h",
                    "username": "a",
                    "password": "b",
                    "token_auth": True,
                    "login_ref": "",
                }
            )


class TestBuildInfo:
    """Tests for BuildInfo."""

    def test_user_agent(self):
        """Test the outbound identification string."""
        info = BuildInfo(version="1.2.3", host_version="1.5.7")
        assert info.user_agent() == "Terraform/1.5.7/terraform-provider-bigip/1.2.3"

    def test_missing_host_version(self):
        """Test the fallback when the host reports no version."""
        assert BuildInfo.for_host("").host_version == "0.11+compatible"
