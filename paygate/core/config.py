import os
from typing import List, Literal, Mapping, Optional, Tuple

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, SecretStr, ValidationError, field_validator

from paygate.core.errors import ConfigError


REQUIRED_VARS = ("RAZORPAY_API_KEY", "RAZORPAY_SECRET_KEY")


class Settings(BaseModel):
    """immutable runtime configuration, built once at startup."""

    model_config = ConfigDict(frozen=True)

    # app settings
    APP_ENV: str = "dev"
    HOST: str = "0.0.0.0"
    PORT: int = Field(default=8080, ge=1, le=65535)
    LOG_LEVEL: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = "INFO"

    # razorpay credentials
    RAZORPAY_API_KEY: str = Field(..., min_length=1)
    RAZORPAY_SECRET_KEY: SecretStr

    # CORS stuff
    ALLOWED_ORIGINS: Tuple[str, ...] = ()

    PAYMENTS_PROVIDER: Literal["razorpay", "mock"] = "razorpay"

    @field_validator("RAZORPAY_SECRET_KEY")
    @classmethod
    def _secret_not_empty(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value():
            raise ValueError("secret key must not be empty")
        return v

    @field_validator("ALLOWED_ORIGINS", mode="before")
    @classmethod
    def _split_origins(cls, v):
        if isinstance(v, str):
            return split_origins(v)
        return v

    @property
    def secret_key_bytes(self) -> bytes:
        return self.RAZORPAY_SECRET_KEY.get_secret_value().encode("utf-8")


def split_origins(raw: Optional[str]) -> List[str]:
    """split a comma-separated origin list, dropping blanks."""
    if not raw:
        return []
    return [o.strip() for o in raw.split(",") if o.strip()]


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from the process environment (or a given mapping).

    When reading the real environment a .env file is loaded first if present.
    Raises ConfigError when the gateway credentials are missing so the
    service never starts with empty keys.
    """
    if environ is None:
        # grab env vars from .env file in the working dir
        load_dotenv(find_dotenv(usecwd=True))
        environ = os.environ

    missing = [name for name in REQUIRED_VARS if not (environ.get(name) or "").strip()]
    if missing:
        raise ConfigError(f"missing required configuration: {', '.join(missing)}")

    values = {
        "RAZORPAY_API_KEY": environ["RAZORPAY_API_KEY"].strip(),
        # secret is used for HMAC as given; only the emptiness check strips it
        "RAZORPAY_SECRET_KEY": environ["RAZORPAY_SECRET_KEY"],
        "ALLOWED_ORIGINS": environ.get("ALLOWED_ORIGINS", ""),
    }
    for name in ("APP_ENV", "HOST", "PORT", "LOG_LEVEL", "PAYMENTS_PROVIDER"):
        raw = (environ.get(name) or "").strip()
        if raw:
            if name == "PAYMENTS_PROVIDER":
                raw = raw.lower()
            elif name == "LOG_LEVEL":
                raw = raw.upper()
            values[name] = raw

    try:
        return Settings(**values)
    except ValidationError as e:
        # only report field names; values may hold secrets
        fields = sorted({str(err["loc"][0]) for err in e.errors() if err.get("loc")})
        raise ConfigError(f"invalid configuration: {', '.join(fields)}") from None
