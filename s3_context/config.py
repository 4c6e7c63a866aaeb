"""S3 connection configuration (mapping, env or YAML) and client construction."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import boto3
import yaml
from botocore.config import Config


@dataclass(frozen=True)
class S3ConnectionConfig:
    """Connection settings for S3 or an S3-compatible service (MinIO).

    Leaving ``access_key``/``secret_key`` unset delegates to boto3's ambient
    credential chain (env vars, ``~/.aws/credentials``, instance role).
    """

    endpoint_url: str | None = None
    access_key: str | None = None
    secret_key: str | None = None
    region: str = "us-east-1"
    use_ssl: bool | None = None
    url_style: str = "path"
    session_token: str | None = None

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "S3ConnectionConfig":
        endpoint = values.get("endpoint_url") or values.get("endpoint")
        use_ssl = values.get("use_ssl")
        if isinstance(use_ssl, str):
            use_ssl = _parse_bool(use_ssl)
        return cls(
            endpoint_url=str(endpoint).strip() if endpoint else None,
            access_key=_optional_str(values.get("access_key")),
            secret_key=_optional_str(values.get("secret_key")),
            region=str(values.get("region") or "us-east-1"),
            use_ssl=None if use_ssl is None else bool(use_ssl),
            url_style=str(values.get("url_style") or "path"),
            session_token=_optional_str(values.get("session_token")),
        )


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _parse_bool(value: str | None, *, default: bool | None = None) -> bool | None:
    if value is None:
        return default
    text = value.strip().lower()
    if text in {"1", "true", "yes", "y"}:
        return True
    if text in {"0", "false", "no", "n"}:
        return False
    return default


def build_s3_connection_config_from_env(
    env: Mapping[str, str] | None = None,
) -> S3ConnectionConfig:
    """Resolve S3 connection config from ``S3_*`` environment variables.

    Access key and secret key must be set together or not at all.
    """

    env = dict(os.environ) if env is None else env
    access_key = _optional_str(env.get("S3_ACCESS_KEY_ID"))
    secret_key = _optional_str(env.get("S3_SECRET_ACCESS_KEY"))
    if bool(access_key) != bool(secret_key):
        raise ValueError("S3_ACCESS_KEY_ID and S3_SECRET_ACCESS_KEY must be set together")

    return S3ConnectionConfig(
        endpoint_url=_optional_str(env.get("S3_ENDPOINT_URL")),
        access_key=access_key,
        secret_key=secret_key,
        region=str(env.get("S3_REGION") or "us-east-1"),
        use_ssl=_parse_bool(env.get("S3_USE_SSL")),
        url_style=str(env.get("S3_URL_STYLE") or "path"),
        session_token=_optional_str(env.get("S3_SESSION_TOKEN")),
    )


def load_s3_connection_config(path: str | Path) -> S3ConnectionConfig:
    """Load connection settings from a YAML file, optionally nested under ``s3:``."""

    with open(path, encoding="utf-8") as handle:
        payload = yaml.safe_load(handle) or {}
    if not isinstance(payload, dict):
        raise ValueError(f"{path} must contain a YAML mapping")
    section = payload.get("s3", payload)
    if not isinstance(section, dict):
        raise ValueError(f"{path}: 's3' must be a mapping")
    return S3ConnectionConfig.from_mapping(section)


def coerce_config(config: S3ConnectionConfig | Mapping[str, Any] | None) -> S3ConnectionConfig:
    if config is None:
        return S3ConnectionConfig()
    if isinstance(config, S3ConnectionConfig):
        return config
    if isinstance(config, Mapping):
        return S3ConnectionConfig.from_mapping(config)
    raise TypeError(f"Unsupported S3 config type: {type(config)}")


def create_s3_client(config: S3ConnectionConfig, **client_kwargs: Any) -> Any:
    """Create a boto3 S3 client for config; extra kwargs are passed to ``boto3.client``."""

    use_ssl = config.use_ssl
    if use_ssl is None:
        use_ssl = not (config.endpoint_url and config.endpoint_url.startswith("http://"))

    kwargs: dict[str, Any] = dict(
        service_name="s3",
        endpoint_url=config.endpoint_url,
        region_name=config.region,
        use_ssl=use_ssl,
        aws_access_key_id=config.access_key,
        aws_secret_access_key=config.secret_key,
        aws_session_token=config.session_token,
        config=Config(s3={"addressing_style": config.url_style}),
    )
    kwargs.update(client_kwargs)
    return boto3.client(**kwargs)
