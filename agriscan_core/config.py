"""
Configuration for the AgriScan app.

Values come from three layers, later layers winning:

1. the defaults on ``AppConfig``
2. ``[agriscan]`` in ``.streamlit/secrets.toml`` (when Streamlit has secrets)
3. ``AGRISCAN_*`` environment variables

Expected secrets.toml format:
    [agriscan]
    data_dir = "/srv/agriscan/data"
    storage_path = "/srv/agriscan/local_data/agriscan.db"
    force_offline = false
    log_level = "INFO"
"""

from __future__ import annotations
import os
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple

from agriscan_core.errors.exceptions import ConfigurationError
from agriscan_core.logging import get_logger

logger = get_logger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent

ENV_PREFIX = "AGRISCAN_"
MB = 1024 * 1024

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class AppConfig:
    """Runtime configuration shared by services and pages."""

    # ==================== CONTENT ====================
    data_dir: Path = PROJECT_ROOT / "data"

    # ==================== LOCAL STORAGE ====================
    storage_path: Path = PROJECT_ROOT / "local_data" / "agriscan.db"

    # ==================== SCANNER ====================
    scan_delay_min: float = 2.0
    scan_delay_max: float = 4.0
    max_scan_image_bytes: int = 10 * MB

    # ==================== REPORTS ====================
    max_report_images: int = 5
    max_report_image_bytes: int = 5 * MB
    report_submit_delay: float = 2.0

    # ==================== CONNECTIVITY ====================
    probe_hosts: List[Tuple[str, int]] = field(default_factory=lambda: [
        ("8.8.8.8", 53),
        ("1.1.1.1", 53),
        ("208.67.222.222", 53),
    ])
    probe_timeout: float = 3.0
    check_interval_online: float = 30.0
    check_interval_offline: float = 10.0
    monitor_idle_timeout: float = 300.0
    force_offline: bool = False

    # ==================== LOGGING ====================
    log_level: str = "INFO"
    log_to_file: bool = False

    def validate(self) -> AppConfig:
        if self.scan_delay_min < 0 or self.scan_delay_max < self.scan_delay_min:
            raise ConfigurationError(
                "Scan delay bounds must satisfy 0 <= min <= max",
                config_key="scan_delay_min",
            )
        if self.max_scan_image_bytes <= 0 or self.max_report_image_bytes <= 0:
            raise ConfigurationError(
                "Image size limits must be positive",
                config_key="max_scan_image_bytes",
                expected_type="int",
            )
        if self.max_report_images < 1:
            raise ConfigurationError(
                "At least one report image must be allowed",
                config_key="max_report_images",
                expected_type="int",
            )
        return self


def _coerce(name: str, raw: Any, default: Any) -> Any:
    """Convert a raw secret/env value to the type of the default."""
    try:
        if isinstance(default, bool):
            if isinstance(raw, bool):
                return raw
            text = str(raw).strip().lower()
            if text in _TRUE:
                return True
            if text in _FALSE:
                return False
            raise ValueError(raw)
        if isinstance(default, Path):
            return Path(str(raw)).expanduser()
        if isinstance(default, int):
            return int(raw)
        if isinstance(default, float):
            return float(raw)
        if isinstance(default, list):
            if not isinstance(raw, (list, tuple)):
                raise ValueError(raw)
            return [tuple(item) for item in raw]
        return str(raw)
    except (TypeError, ValueError):
        raise ConfigurationError(
            f"Invalid value for {name}: {raw!r}",
            config_key=name,
            expected_type=type(default).__name__,
        )


def _load_secrets() -> Dict[str, Any]:
    try:
        import streamlit as st

        if "agriscan" in st.secrets:
            return dict(st.secrets["agriscan"])
    except Exception as e:
        # No secrets.toml is the normal case outside deployment
        logger.debug(f"Streamlit secrets not available: {e}")
    return {}


def load_config(
    overrides: Optional[Mapping[str, Any]] = None,
    environ: Optional[Mapping[str, str]] = None,
    use_secrets: bool = True,
) -> AppConfig:
    """
    Build the app configuration.

    Args:
        overrides: Explicit values applied last (tests use this)
        environ: Environment mapping (default: os.environ)
        use_secrets: Whether to read st.secrets["agriscan"]

    Returns:
        Validated AppConfig
    """
    base = AppConfig()
    environ = os.environ if environ is None else environ
    values: Dict[str, Any] = {}

    layers: List[Mapping[str, Any]] = []
    if use_secrets:
        layers.append(_load_secrets())
    layers.append({
        key[len(ENV_PREFIX):].lower(): value
        for key, value in environ.items()
        if key.startswith(ENV_PREFIX)
    })
    if overrides:
        layers.append(overrides)

    known = {f.name: getattr(base, f.name) for f in fields(AppConfig)}
    for layer in layers:
        for name, raw in layer.items():
            if name not in known:
                logger.debug(f"Ignoring unknown config key: {name}")
                continue
            values[name] = _coerce(name, raw, known[name])

    return replace(base, **values).validate()


_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Process-wide configuration, loaded on first use."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    global _config
    _config = None
