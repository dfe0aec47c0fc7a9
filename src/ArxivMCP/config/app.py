from __future__ import annotations

"""Application config orchestration and YAML loading entrypoints."""

import os
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any, Mapping

import yaml

from ArxivMCP.config.arxiv import ArxivConfig, check_arxiv, load_arxiv
from ArxivMCP.config.runtime import RuntimeConfig, check_runtime, load_runtime
from ArxivMCP.config.server import ServerConfig, check_server, load_server

ENV_PORT = "PORT"
ENV_LOG_LEVEL = "ARXIV_MCP_LOG_LEVEL"


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application root configuration."""

    runtime: RuntimeConfig
    server: ServerConfig
    arxiv: ArxivConfig


def parse_config_dict(raw: Mapping[str, Any]) -> AppConfig:
    """Parse normalized mapping into AppConfig."""
    runtime = load_runtime(raw)
    server = load_server(raw)
    arxiv = load_arxiv(raw)

    check_runtime(runtime)
    check_server(server)
    check_arxiv(arxiv)

    return AppConfig(runtime=runtime, server=server, arxiv=arxiv)


def default_config_text() -> str:
    """Return the packaged default YAML."""
    return resources.files("ArxivMCP.config").joinpath("default.yml").read_text(encoding="utf-8")


def load_config(
    config_path: Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> AppConfig:
    """Load packaged defaults, an optional override file, then env overrides."""
    return load_config_with_defaults(config_path, environ=environ)


def load_config_with_defaults(
    config_path: Path | None,
    *,
    environ: Mapping[str, str] | None = None,
    _defaults_text: str | None = None,
) -> AppConfig:
    """Load config by merging defaults, optional override file and environment.

    Args:
        config_path: Optional YAML override file.
        environ: Environment mapping; defaults to ``os.environ``.
        _defaults_text: Replacement for the packaged default YAML.

    Returns:
        Validated application configuration.
    """
    merged = parse_yaml(_defaults_text if _defaults_text is not None else default_config_text())
    if config_path is not None:
        override = parse_yaml(config_path.read_text(encoding="utf-8"))
        merged = merge_config_dicts(merged, override)
    merged = apply_env_overrides(merged, os.environ if environ is None else environ)
    return parse_config_dict(merged)


def apply_env_overrides(raw: Mapping[str, Any], environ: Mapping[str, str]) -> dict[str, Any]:
    """Overlay supported environment variables onto a config mapping.

    `PORT` sets ``server.port``; `ARXIV_MCP_LOG_LEVEL` sets ``log.level``.
    Empty values are ignored.

    Raises:
        ValueError: If `PORT` is not an integer.
    """
    override: dict[str, Any] = {}
    port = environ.get(ENV_PORT, "").strip()
    if port:
        try:
            override["server"] = {"port": int(port)}
        except ValueError as e:
            raise ValueError(f"{ENV_PORT} must be an integer, got {port!r}") from e
    level = environ.get(ENV_LOG_LEVEL, "").strip()
    if level:
        override["log"] = {"level": level}
    return merge_config_dicts(raw, override)


def parse_yaml(text: str) -> dict[str, Any]:
    """Parse raw YAML text into a mapping."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, Mapping):
        raise ValueError("Config root must be a mapping/object")
    return dict(data)


def merge_config_dicts(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge two config mappings."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], Mapping) and isinstance(value, Mapping):
            merged[key] = merge_config_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
