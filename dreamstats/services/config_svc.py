#!/usr/bin/env python3
# ======================================================================
#  Config Service - Configuration loading and caching
#  - Loads config from YAML files and env vars
#  - Caches composed config for performance
#  - Builds the validated AnalyticsConfig used by the engine
# ======================================================================

from __future__ import annotations

import contextlib
import logging
import os
from collections.abc import Mapping
from typing import Any

import yaml

from dreamstats.__version__ import __version__
from dreamstats.helpers.dto.analytics_dto import AnalyticsConfig
from dreamstats.helpers.exceptions import ConfigError
from dreamstats.helpers.time_helper import resolve_timezone

ENV_PREFIX = "DREAMSTATS_"
SYSTEM_CONFIG_PATH = "/etc/dreamstats/config.yaml"
LUCID_TREND_ORDERS = ("input", "calendar")


class ConfigService:
    """
    Service for loading and caching application configuration.

    Loads config from multiple sources (defaults → YAML → overrides → env),
    caches the result, and provides reload capability.
    """

    def __init__(self, overrides: dict[str, Any] | None = None, environ: Mapping[str, str] | None = None) -> None:
        """
        Initialize ConfigService with empty cache.

        Args:
            overrides: Values applied after YAML files (e.g. CLI flags)
            environ: Environment mapping; defaults to os.environ
        """
        self._overrides = overrides or {}
        self._environ = environ if environ is not None else os.environ
        self._config: dict[str, Any] | None = None
        self._logger = logging.getLogger(__name__)

    def get_config(self, force_reload: bool = False) -> dict[str, Any]:
        """
        Get the composed configuration.

        Args:
            force_reload: If True, bypass cache and reload from sources

        Returns:
            Complete configuration dict
        """
        if self._config is None or force_reload:
            self._config = self._compose()
        return self._config

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a config value by dotted path.

        Example:
            >>> ConfigService(environ={}).get("top_n")
            10
        """
        cfg = self.get_config()
        node: Any = cfg
        for part in key_path.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def reload(self) -> dict[str, Any]:
        """Force reload configuration from all sources."""
        self._logger.info("Reloading configuration from all sources")
        return self.get_config(force_reload=True)

    def get_analytics_config(self) -> AnalyticsConfig:
        """
        Build an AnalyticsConfig from the current configuration.

        This is the boundary where raw config values are validated and
        converted for the aggregation engine.

        Raises:
            ConfigError: On unknown timezone, bad trend order or non-positive limits
        """
        cfg = self.get_config()

        order = str(cfg["lucid_trend_order"]).lower()
        if order not in LUCID_TREND_ORDERS:
            raise ConfigError(f"lucid_trend_order must be one of {LUCID_TREND_ORDERS}, got {order!r}")

        limits = {}
        for key in ("top_n", "mood_trend_days", "lucid_trend_months"):
            try:
                limits[key] = int(cfg[key])
            except (TypeError, ValueError) as e:
                raise ConfigError(f"{key} must be an integer, got {cfg[key]!r}") from e
            if limits[key] <= 0:
                raise ConfigError(f"{key} must be positive, got {limits[key]}")

        return AnalyticsConfig(
            tz=resolve_timezone(cfg.get("timezone")),
            top_n=limits["top_n"],
            mood_trend_days=limits["mood_trend_days"],
            lucid_trend_months=limits["lucid_trend_months"],
            lucid_trend_order=order,  # type: ignore[arg-type]
        )

    def get_cache_size(self) -> int:
        """
        Max memoized results for AnalyticsService; 0 disables the cache.

        Raises:
            ConfigError: If cache_size is not a non-negative integer
        """
        raw = self.get("cache_size")
        try:
            size = int(raw)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"cache_size must be an integer, got {raw!r}") from e
        if size < 0:
            raise ConfigError(f"cache_size must not be negative, got {size}")
        return size

    # ----------------------------------------------------------------------
    # Private composition logic
    # ----------------------------------------------------------------------

    def _compose(self) -> dict[str, Any]:
        """
        Load final configuration from:
          1) Built-in defaults
          2) /etc/dreamstats/config.yaml  (if present)
          3) ./config/config.yaml
          4) $DREAMSTATS_CONFIG_PATH (if set)
          5) overrides dict passed in
          6) Environment variables (DREAMSTATS_*)

        Returns merged config as dict.
        """
        cfg = self._default_config()

        self._deep_merge(cfg, self._load_yaml(SYSTEM_CONFIG_PATH))
        self._deep_merge(cfg, self._load_yaml(os.path.join(os.getcwd(), "config", "config.yaml")))

        env_path = self._environ.get(f"{ENV_PREFIX}CONFIG_PATH")
        if env_path:
            self._deep_merge(cfg, self._load_yaml(env_path))

        if self._overrides:
            self._deep_merge(cfg, {k: v for k, v in self._overrides.items() if v is not None})

        self._apply_env_overrides(cfg)

        with contextlib.suppress(Exception):
            self._logger.debug("compose() loaded config; keys: %s", list(cfg.keys()))

        return cfg

    def _default_config(self) -> dict[str, Any]:
        """
        Base defaults; all fields present so no KeyErrors downstream.
        """
        return {
            "version": __version__,
            # Bucketing
            "timezone": None,  # IANA name; None = host local time
            # Ranking and window sizes
            "top_n": 10,
            "mood_trend_days": 30,
            "lucid_trend_months": 6,
            "lucid_trend_order": "input",  # "input" | "calendar"
            # Service
            "cache_size": 64,  # memoized results kept per AnalyticsService
            "log_level": "INFO",
        }

    def _deep_merge(self, a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
        """
        Recursively merge dict b into dict a (mutates a, returns it).
        """
        for k, v in b.items():
            if isinstance(v, dict) and isinstance(a.get(k), dict):
                self._deep_merge(a[k], v)
            else:
                a[k] = v
        return a

    def _load_yaml(self, path: str) -> dict[str, Any]:
        """
        Load a YAML file; returns {} if not found or invalid.
        """
        if not path or not os.path.exists(path):
            return {}
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            self._logger.warning(f"Ignoring unreadable config file {path}: {e}")
            return {}
        if not isinstance(data, dict):
            self._logger.warning(f"Ignoring config file {path}: top level is not a mapping")
            return {}
        return data

    def _apply_env_overrides(self, cfg: dict[str, Any]) -> None:
        """
        Support environment overrides of the form:
          DREAMSTATS_TIMEZONE=Europe/Berlin
          DREAMSTATS_TOP_N=5
          DREAMSTATS_LUCID_TREND_ORDER=calendar
        """
        for k, v in self._environ.items():
            if not k.startswith(ENV_PREFIX):
                continue
            key = k[len(ENV_PREFIX) :].lower()
            if key not in cfg or key == "version":
                continue

            val: Any
            if v.lower() in ("true", "false"):
                val = v.lower() == "true"
            elif v.isdigit():
                val = int(v)
            elif v.lower() in ("", "none", "null"):
                val = None
            else:
                val = v
            cfg[key] = val
