"""rn-arch-gen project configuration.

The architectural choices made at ``init`` time are held in a frozen Pydantic
v2 model and persisted to a ``.rn_arch_gen.json`` sidecar at the project root.
Every later command reads the sidecar back; nothing ever mutates it after
``init``.
"""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from rn_arch_gen.errors import ConfigError

CONFIG_FILE = ".rn_arch_gen.json"
DEFAULT_PROJECT_NAME = "react_native_project"


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class Architecture(str, Enum):
    """Project layout strategy used for every generated feature."""
    CLEAN_ARCHITECTURE = "cleanArchitecture"
    FEATURE_BASED = "featureBased"
    ATOMIC_DESIGN = "atomicDesign"
    MVVM = "mvvm"


class StateManagement(str, Enum):
    """State container wired into the app entry point and feature modules."""
    REDUX = "redux"
    ZUSTAND = "zustand"
    CONTEXT = "context"


class Routing(str, Enum):
    """Navigation library. Expo Router is file-based and has no registry."""
    REACT_NAVIGATION = "reactNavigation"
    EXPO_ROUTER = "expoRouter"


ARCHITECTURE_LABELS: dict[Architecture, str] = {
    Architecture.CLEAN_ARCHITECTURE: "Clean Architecture (Domain -> Data -> Presentation)",
    Architecture.FEATURE_BASED: "Feature-Based (Lightweight, flat structure)",
    Architecture.ATOMIC_DESIGN: "Atomic Design + Feature (Atoms -> Molecules -> Organisms)",
    Architecture.MVVM: "MVVM with Hooks (Model -> ViewModel -> View)",
}


# ---------------------------------------------------------------------------
# Generator configuration
# ---------------------------------------------------------------------------


class GeneratorConfig(BaseModel):
    """Architectural configuration of one generated project.

    Field names are snake_case in Python; the sidecar file uses the camelCase
    aliases so it stays readable by the original Node tooling.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    architecture: Architecture = Field(default=Architecture.CLEAN_ARCHITECTURE)
    state_management: StateManagement = Field(
        default=StateManagement.REDUX, alias="stateManagement"
    )
    routing: Routing = Field(default=Routing.REACT_NAVIGATION)
    localization: bool = Field(default=True, description="Generate i18next setup")
    firebase: bool = Field(default=False, description="Initialise Firebase in App.tsx")
    tests: bool = Field(default=True, description="Generate Jest scaffolding")

    # ------------------------------------------------------------------
    # Derived helpers
    # ------------------------------------------------------------------

    @property
    def uses_navigation_registry(self) -> bool:
        """``True`` when screens must be registered in ``AppNavigator.tsx``."""
        return self.routing == Routing.REACT_NAVIGATION

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    @staticmethod
    def path_for(root: Path) -> Path:
        """Return the sidecar location for the project at *root*."""
        return Path(root) / CONFIG_FILE

    def save(self, root: Path) -> Path:
        """Persist the configuration as ``<root>/.rn_arch_gen.json``.

        Returns:
            The path where the file was written.
        """
        target = self.path_for(root)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(
            self.model_dump_json(by_alias=True, indent=2) + "\n", encoding="utf-8"
        )
        return target

    @classmethod
    def load(cls, root: Path) -> "GeneratorConfig | None":
        """Load the sidecar config of the project at *root*.

        Returns:
            The validated config, or ``None`` when the project has not been
            initialised.

        Raises:
            ConfigError: If the sidecar exists but is not a valid config.
        """
        path = cls.path_for(root)
        if not path.exists():
            return None
        try:
            return cls.model_validate_json(path.read_text(encoding="utf-8"))
        except ValidationError as exc:
            raise ConfigError(f"Invalid config in {path}: {exc}", path=path) from exc


def get_project_name(root: Path) -> str:
    """Return the ``name`` declared in ``package.json``.

    Falls back to ``react_native_project`` when the manifest is missing,
    unreadable or unnamed.
    """
    pkg_path = Path(root) / "package.json"
    if not pkg_path.exists():
        return DEFAULT_PROJECT_NAME
    try:
        pkg = json.loads(pkg_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        return DEFAULT_PROJECT_NAME
    if not isinstance(pkg, dict):
        return DEFAULT_PROJECT_NAME
    return pkg.get("name") or DEFAULT_PROJECT_NAME
