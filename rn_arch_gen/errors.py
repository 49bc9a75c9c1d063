"""Exceptions raised by the rn-arch-gen generators."""

from __future__ import annotations

from pathlib import Path


class GeneratorError(Exception):
    """Base class for every error raised by the generators."""


class ConfigError(GeneratorError):
    """Raised when the ``.rn_arch_gen.json`` sidecar cannot be used."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        super().__init__(message)


class ConfigNotFoundError(ConfigError):
    """Raised when a command needs a persisted config and none exists."""

    def __init__(self, path: Path) -> None:
        super().__init__(
            'Architecture not initialized. Run "rn-arch-gen init" first.',
            path=path,
        )
