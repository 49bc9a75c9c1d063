"""Shared pytest fixtures for the rn-arch-gen test suite.

Provides reusable fixtures for:
- Temporary React Native project roots (with and without package.json)
- Configs for each architecture pattern
- A freshly rendered AppNavigator.tsx registry
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from rn_arch_gen.config import Architecture, GeneratorConfig, Routing, StateManagement
from rn_arch_gen.scaffolder.navigation import NAVIGATOR_PATH, PARAMS_MARKER, SCREENS_MARKER
from rn_arch_gen.scaffolder.templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Empty project directory (auto-cleanup)."""
    root = tmp_path / "my-app"
    root.mkdir()
    yield root


@pytest.fixture
def npm_project(project_root: Path) -> Path:
    """Project directory holding a minimal ``package.json``."""
    manifest = {
        "name": "my-app",
        "version": "0.0.1",
        "dependencies": {"react": "19.1.0", "axios": "^0.27.0"},
    }
    (project_root / "package.json").write_text(
        json.dumps(manifest, indent=2) + "\n", encoding="utf-8"
    )
    return project_root


# ---------------------------------------------------------------------------
# Configs
# ---------------------------------------------------------------------------

@pytest.fixture
def clean_config() -> GeneratorConfig:
    return GeneratorConfig()


@pytest.fixture
def feature_based_config() -> GeneratorConfig:
    return GeneratorConfig(
        architecture=Architecture.FEATURE_BASED,
        state_management=StateManagement.ZUSTAND,
        routing=Routing.REACT_NAVIGATION,
        tests=True,
    )


@pytest.fixture
def expo_config() -> GeneratorConfig:
    return GeneratorConfig(routing=Routing.EXPO_ROUTER)


# ---------------------------------------------------------------------------
# Renderer & navigation registry
# ---------------------------------------------------------------------------

@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


def render_navigator(renderer: TemplateRenderer, config: GeneratorConfig) -> str:
    """Render ``AppNavigator.tsx`` exactly as ``init`` writes it."""
    return renderer.render(
        "base/AppNavigator.tsx.j2",
        {
            "config": config,
            "params_marker": PARAMS_MARKER,
            "screens_marker": SCREENS_MARKER,
        },
    )


@pytest.fixture
def navigator_text(renderer: TemplateRenderer, clean_config: GeneratorConfig) -> str:
    return render_navigator(renderer, clean_config)


@pytest.fixture
def navigator_project(project_root: Path, navigator_text: str) -> Path:
    """Project root with a pristine ``src/navigation/AppNavigator.tsx``."""
    path = project_root / NAVIGATOR_PATH
    path.parent.mkdir(parents=True)
    path.write_text(navigator_text, encoding="utf-8")
    return project_root
