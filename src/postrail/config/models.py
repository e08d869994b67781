"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, postrail.toml only contains
overrides. A fresh project needs no config file at all.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel


class DatabaseConfig(BaseModel):
    """[database] section."""

    model_config = {"frozen": True}

    # Relative paths resolve against the project root.
    path: Path = Path(".postrail") / "postrail.db"


class ServerConfig(BaseModel):
    """[server] section."""

    model_config = {"frozen": True}

    host: str = "127.0.0.1"
    port: int = 8000
