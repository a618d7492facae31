"""Provider configuration for the BIG-IP management connection."""

import os
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from bigippg.errors import ConfigurationError

# Environment variables consulted for unset values
ENV_DEFAULTS: Dict[str, str] = {
    "address": "BIGIP_HOST",
    "port": "BIGIP_PORT",
    "username": "BIGIP_USER",
    "password": "BIGIP_PASSWORD",
    "token_auth": "BIGIP_TOKEN_AUTH",
    "teem_disable": "TEEM_DISABLE",
    "login_ref": "BIGIP_LOGIN_REF",
}

_TRUE_WORDS = {"1", "true", "yes", "on"}


class ProviderConfig(BaseModel):
    address: str = Field(..., description="Domain name/IP of the BigIP")
    port: Optional[str] = Field(None, description="Management port to connect to BigIP")
    username: str = Field(..., description="Username with API access to the BigIP")
    password: str = Field(..., description="The user's password")
    token_auth: bool = Field(
        False,
        description="Enable to use an external authentication source (LDAP, TACACS, etc)",
    )
    teem_disable: bool = Field(False, description="Disable telemetry reporting")
    login_ref: str = Field(
        "tmos", description="Login reference for token authentication"
    )
    verify_tls: bool = Field(False, description="Verify the device's TLS certificate")
    timeout_seconds: int = Field(30, gt=0, description="HTTP request timeout")

    @field_validator("address")
    @classmethod
    def validate_address(cls, v):
        if not v or not v.strip():
            raise ValueError("address must not be empty")
        return v.strip().rstrip("/")

    @field_validator("port", mode="before")
    @classmethod
    def validate_port(cls, v):
        if v in (None, ""):
            return None
        if not str(v).isdigit() or not 0 < int(v) < 65536:
            raise ValueError(f"Invalid port: {v}")
        return str(v)

    @field_validator("username")
    @classmethod
    def validate_username(cls, v):
        if not v:
            raise ValueError("username must not be empty")
        return v

    @model_validator(mode="after")
    def validate_login_ref(self):
        if self.token_auth and not self.login_ref:
            raise ValueError("login_ref is required when token_auth is enabled")
        return self

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None, **overrides: Any) -> "ProviderConfig":
        """Build a config from explicit values, falling back to BIGIP_* variables.

        Raises:
            ConfigurationError: If the resulting configuration is invalid
        """
        environ = os.environ if environ is None else environ
        values: Dict[str, Any] = {}
        for name, variable in ENV_DEFAULTS.items():
            if overrides.get(name) is not None:
                continue
            raw = environ.get(variable)
            if raw is None:
                continue
            if name in ("token_auth", "teem_disable"):
                values[name] = raw.strip().lower() in _TRUE_WORDS
            else:
                values[name] = raw
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls.load(values)

    @classmethod
    def load(cls, values: Dict[str, Any]) -> "ProviderConfig":
        """Validate a configuration mapping.

        Raises:
            ConfigurationError: If validation fails
        """
        try:
            return cls(**values)
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in error['loc']) or 'config'}: {error['msg']}"
                for error in e.errors()
            )
            raise ConfigurationError("Invalid provider configuration", problems) from e

    @property
    def base_url(self) -> str:
        """Management URL, https unless the address carries its own scheme."""
        if "://" in self.address:
            base = self.address
        else:
            base = f"https://{self.address}"
        if self.port:
            base = f"{base}:{self.port}"
        return base

    @property
    def login_reference(self) -> Optional[str]:
        return self.login_ref if self.token_auth else None
