"""YAML configuration loader with environment variable overrides.

Configuration is layered, later layers winning:

  1. Built-in defaults     - the field defaults on :class:`Settings`
  2. config/config.yaml    - per-deployment values checked into the repo
  3. .env / environment    - anything explicitly set there

Only settings that were actually supplied (``Settings.model_fields_set``)
override the YAML file; an untouched default never hides a YAML value.
The token is the one exception: it is read from Settings alone and never
placed in the returned dict.
"""

from pathlib import Path

import yaml

from src.config.settings import Settings
from src.utils.errors import ConfigurationError

# (section, key) in config.yaml -> Settings field name.
_FIELD_MAP: dict[tuple[str, str], str] = {
    ("app", "env"): "app_env",
    ("stock_photo", "base_url"): "stock_photo_base_url",
    ("stock_photo", "image_endpoint"): "stock_photo_image_endpoint",
    ("stock_photo", "category_endpoint"): "stock_photo_category_endpoint",
    ("stock_photo", "timeout"): "stock_photo_timeout",
    ("cache", "image_prefix"): "image_cache_prefix",
    ("cache", "category_key"): "category_cache_key",
    ("cache", "image_ttl"): "image_cache_ttl",
    ("cache", "category_ttl"): "category_cache_ttl",
    ("cache", "max_size"): "cache_max_size",
    ("lookup", "max_parent_hops"): "max_parent_hops",
    ("lookup", "category_aliases_path"): "category_aliases_path",
    ("logging", "level"): "log_level",
}


def load_config(path: str = "config/config.yaml", settings: Settings | None = None) -> dict:
    """Load YAML config and merge it between defaults and explicit settings.

    Args:
        path: Path to the YAML configuration file.  A missing file is
            treated as empty.
        settings: Pre-built settings; a fresh ``Settings()`` when omitted.

    Returns:
        Fully resolved configuration dictionary.  Every key in
        ``_FIELD_MAP`` is present.
    """
    config_path = Path(path)
    if config_path.exists():
        with open(config_path, encoding="utf-8") as f:
            yaml_config = yaml.safe_load(f) or {}
    else:
        yaml_config = {}

    # An empty section ("cache:" with nothing under it) loads as None.
    if isinstance(yaml_config, dict):
        yaml_config = {k: v for k, v in yaml_config.items() if v is not None}

    if not isinstance(yaml_config, dict) or not all(
        isinstance(yaml_config.get(section, {}), dict) for section, _ in _FIELD_MAP
    ):
        raise ConfigurationError(
            message=f"{config_path} must be a mapping of sections", provider_name="config_yaml"
        )

    settings = settings or Settings()

    resolved: dict = {}
    _deep_merge(resolved, _section_values(settings, explicit_only=False))
    _deep_merge(resolved, yaml_config)
    _deep_merge(resolved, _section_values(settings, explicit_only=True))

    resolved["stock_photo"]["token_configured"] = bool(settings.stock_photo_token)
    return resolved


def _section_values(settings: Settings, explicit_only: bool) -> dict:
    """Nest Settings values under their config.yaml sections."""
    explicit = settings.model_fields_set
    values: dict = {}
    for (section, key), field in _FIELD_MAP.items():
        if explicit_only and field not in explicit:
            continue
        values.setdefault(section, {})[key] = getattr(settings, field)
    return values


def _deep_merge(base: dict, overrides: dict) -> None:
    """Recursively merge overrides into base dict, mutating base in place."""
    for key, value in overrides.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
