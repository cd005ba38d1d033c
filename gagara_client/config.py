"""Client configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

# Config file search paths (in order of precedence, last wins)
CONFIG_SEARCH_PATHS = [
    Path.home() / ".gagara" / "client.yaml",  # User-level defaults
    Path(".gagara.yaml"),  # Project-level overrides
]

DEFAULT_BASE_URL = "http://localhost:3039"
DEFAULT_TIMEOUT = 30.0
DEFAULT_FORMAT = "csv"


@dataclass
class ClientConfig:
    """
    Configuration for the gagara client.

    Precedence (lowest to highest):
    1. Defaults
    2. Environment variables (GAGARA_*)
    3. ~/.gagara/client.yaml
    4. .gagara.yaml (project root)
    5. Constructor arguments
    """
    # Gagara service URL (trailing slashes are stripped)
    base_url: str = field(
        default_factory=lambda: os.environ.get("GAGARA_URL", DEFAULT_BASE_URL)
    )

    # Per-request timeout (seconds), covering the whole request/response exchange
    timeout: float = field(
        default_factory=lambda: float(os.environ.get("GAGARA_TIMEOUT", DEFAULT_TIMEOUT))
    )

    # Format header sent on upload when the caller does not pass one
    default_format: str = field(
        default_factory=lambda: os.environ.get("GAGARA_FORMAT", DEFAULT_FORMAT)
    )

    def __post_init__(self) -> None:
        self.base_url = self.base_url.rstrip("/")
        self.timeout = float(self.timeout)
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ClientConfig:
        """Create config from dictionary."""
        return cls(
            base_url=data.get("base_url", os.environ.get("GAGARA_URL", DEFAULT_BASE_URL)),
            timeout=float(data.get("timeout", os.environ.get("GAGARA_TIMEOUT", DEFAULT_TIMEOUT))),
            default_format=data.get("default_format", os.environ.get("GAGARA_FORMAT", DEFAULT_FORMAT)),
        )

    @classmethod
    def from_yaml(cls, path: str | Path) -> ClientConfig:
        """Load config from YAML file."""
        import yaml
        with open(path, "r") as f:
            data = yaml.safe_load(f)
        return cls.from_dict(data or {})

    @classmethod
    def load(cls, config_file: str | Path | None = None) -> ClientConfig:
        """
        Load config with auto-discovery.

        Search order (last wins):
        1. ~/.gagara/client.yaml
        2. .gagara.yaml
        3. Explicit config_file argument
        Environment variables fill in any key no file sets.
        """
        import yaml

        merged: dict[str, Any] = {}

        # Load from default paths
        for path in CONFIG_SEARCH_PATHS:
            if path.exists():
                with open(path, "r") as f:
                    data = yaml.safe_load(f) or {}
                merged.update(data)

        # Load explicit config file
        if config_file:
            with open(config_file, "r") as f:
                data = yaml.safe_load(f) or {}
            merged.update(data)

        return cls.from_dict(merged)
