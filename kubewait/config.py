import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

import requests
import yaml

from kubewait.errors import ConfigError
from kubewait.kube.resources import ResourceKind

logger = logging.getLogger("kubewait.config")

DEFAULT_INTERVAL = 5.0
DEFAULT_REQUEST_TIMEOUT = 30.0

# setting -> (environment variable, settings file key)
_SOURCES = {
    "namespace": ("NAMESPACE", "namespace"),
    "label_selector": ("LABEL_SELECTOR", "labelSelector"),
    "resource_type": ("RESOURCE_TYPE", "resourceType"),
    "kubeconfig": ("KUBECONFIG", "kubeconfig"),
    "timeout": ("TIMEOUT_SECONDS", "timeoutSeconds"),
    "interval": ("INTERVAL_SECONDS", "intervalSeconds"),
    "request_timeout": ("REQUEST_TIMEOUT_SECONDS", "requestTimeoutSeconds"),
}


@dataclass(frozen=True)
class WaitSettings:
    resource_kind: ResourceKind
    namespace: str = ""
    label_selector: str = ""
    kubeconfig: Optional[str] = None
    timeout: float = 0
    interval: float = DEFAULT_INTERVAL
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT


def load_settings_file(source: str) -> Dict[str, Any]:
    """Read a YAML mapping of settings from a local path or an http(s) URL."""
    try:
        if source.startswith("http://") or source.startswith("https://"):
            resp = requests.get(source, timeout=20)
            resp.raise_for_status()
            text = resp.text
        else:
            with open(source, "r") as f:
                text = f.read()
        data = yaml.safe_load(text)
    except (OSError, requests.RequestException, yaml.YAMLError) as e:
        raise ConfigError(f"failed to read settings file {source}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"settings file {source} must contain a mapping")
    return data


def _number(name: str, raw: Any, default: float) -> float:
    if raw is None or raw == "":
        return default
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise ConfigError(f"expected a numeric value for {name} but got: {raw!r}") from None
    if value < 0:
        raise ConfigError(f"{name} must not be negative, got: {raw!r}")
    return value


def resolve_settings(args: Any, environ: Mapping[str, str]) -> WaitSettings:
    """Merge flags, environment and the optional settings file into one immutable object.

    A flag wins over its environment variable, which wins over the settings
    file; unset values fall back to the defaults.
    """
    config_source = getattr(args, "config", None) or environ.get("KUBEWAIT_CONFIG")
    file_values = load_settings_file(config_source) if config_source else {}

    raw: Dict[str, Any] = {}
    for attr, (env_name, file_key) in _SOURCES.items():
        value = getattr(args, attr, None)
        if value in (None, ""):
            value = environ.get(env_name)
        if value in (None, ""):
            value = file_values.get(file_key)
        raw[attr] = value

    kind = ResourceKind.parse(raw["resource_type"])
    interval = _number("interval", raw["interval"], DEFAULT_INTERVAL)
    if interval <= 0:
        raise ConfigError(f"interval must be positive, got: {raw['interval']!r}")
    request_timeout = _number("request timeout", raw["request_timeout"], DEFAULT_REQUEST_TIMEOUT)
    if request_timeout <= 0:
        raise ConfigError(
            f"request timeout must be positive, got: {raw['request_timeout']!r}"
        )

    settings = WaitSettings(
        resource_kind=kind,
        namespace=str(raw["namespace"] or ""),
        label_selector=str(raw["label_selector"] or ""),
        kubeconfig=raw["kubeconfig"] or None,
        timeout=_number("timeout", raw["timeout"], 0),
        interval=interval,
        request_timeout=request_timeout,
    )
    logger.debug("Resolved settings: %s", settings)
    return settings
