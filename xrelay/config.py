"""Configuration loading and validation using Pydantic."""

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from xrelay.domain import DEFAULT_PAIR_BUFFER_SIZE, DEFAULT_SHELL_BUFFER_SIZE, DEFAULT_SOCKET_DIR
from xrelay.infrastructure.config import YAMLConfigLoader

CONFIG_PATH_ENV = "XRELAY_CONFIG_PATH"
DEFAULT_CONFIG_PATH = "xrelay.yaml"


class SSHConfig(BaseModel):
    """SSH connection configuration."""

    host: str = ""
    port: int = Field(default=22, ge=1, le=65535)
    username: str = ""
    key_filename: str | None = None
    known_hosts: str | None = "~/.ssh/known_hosts"
    connect_timeout: float = Field(default=30.0, gt=0)


class TerminalConfig(BaseModel):
    """Local terminal configuration."""

    term_type: str = "xterm"
    # Stdin readiness wait per tick; 0 polls without waiting
    input_wait: float = Field(default=0.0, ge=0, le=1.0)


class ForwardingConfig(BaseModel):
    """X11 forwarding configuration."""

    enabled: bool = True
    display: str | None = None
    screen_number: int = Field(default=0, ge=0)
    single_connection: bool = False
    socket_dir: str = DEFAULT_SOCKET_DIR
    buffer_size: int = Field(default=DEFAULT_PAIR_BUFFER_SIZE, gt=0)

    def current_display(self) -> str | None:
        """Configured display, falling back to $DISPLAY at call time."""
        return self.display or os.environ.get("DISPLAY")


class RelayConfig(BaseModel):
    """Primary shell relay configuration."""

    shell_buffer_size: int = Field(default=DEFAULT_SHELL_BUFFER_SIZE, gt=0)


class Config(BaseModel):
    """Application configuration."""

    ssh: SSHConfig = Field(default_factory=SSHConfig)
    terminal: TerminalConfig = Field(default_factory=TerminalConfig)
    forwarding: ForwardingConfig = Field(default_factory=ForwardingConfig)
    relay: RelayConfig = Field(default_factory=RelayConfig)


def _merge(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    """Merge section overrides into raw config data, ignoring None values."""
    merged = {section: dict(values) for section, values in base.items() if isinstance(values, dict)}
    for section, values in overrides.items():
        target = merged.setdefault(section, {})
        for key, value in values.items():
            if value is not None:
                target[key] = value
    return merged


def load_config(
    config_path: Path | str | None = None,
    overrides: dict[str, dict[str, Any]] | None = None,
) -> Config:
    """Load configuration from YAML, then apply overrides.

    Args:
        config_path: YAML file; defaults to $XRELAY_CONFIG_PATH or xrelay.yaml.
        overrides: Per-section values (typically from the command line).
            None values leave the file value in place.

    Raises:
        pydantic.ValidationError: If the merged configuration is invalid.
    """
    if config_path is None:
        config_path = os.environ.get(CONFIG_PATH_ENV, DEFAULT_CONFIG_PATH)

    data = YAMLConfigLoader(config_path).load()
    if overrides:
        data = _merge(data, overrides)

    return Config.model_validate(data)
