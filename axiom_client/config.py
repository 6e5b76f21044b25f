"""
Axiom client configuration.

Reads the deployment URL, access token and organization id from the
environment and resolves them against explicitly passed values.
"""

from enum import Enum

from pydantic_settings import BaseSettings, SettingsConfigDict

CLOUD_URL = "https://cloud.axiom.co"


class TokenType(str, Enum):
    """Access token classes, identified by their prefix."""

    API = "xaat-"
    INGEST = "xait-"
    PERSONAL = "xapt-"


class AxiomSettings(BaseSettings):
    """Environment settings (AXIOM_URL, AXIOM_TOKEN, AXIOM_ORG_ID)."""

    url: str | None = None
    token: str | None = None
    org_id: str | None = None

    model_config = SettingsConfigDict(
        env_prefix="AXIOM_",
        case_sensitive=False,
        extra="ignore",
    )


def resolve_setting(explicit: str | None, environment: str | None) -> str | None:
    """
    Resolve a setting from an explicit value and its environment fallback.

    An explicit value is used whenever it is not None, even if blank. A blank
    environment value counts as unset.

    Args:
        explicit: Value passed by the caller
        environment: Value read from the environment

    Returns:
        The explicit value if set, else the environment value, else None
    """
    if explicit is not None:
        return explicit
    if environment is not None and environment.strip():
        return environment
    return None


def token_type(token: str) -> TokenType | None:
    """Return the class of an access token, or None if the prefix is unknown."""
    for kind in TokenType:
        if token.startswith(kind.value):
            return kind
    return None


def is_valid_token(token: str) -> bool:
    return token_type(token) is not None


def is_cloud_url(url: str) -> bool:
    return url.rstrip("/") == CLOUD_URL
