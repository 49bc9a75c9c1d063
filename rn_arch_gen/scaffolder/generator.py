"""Project skeleton generation for ``rn-arch-gen init``.

Takes a ``GeneratorConfig`` and lays down the shared, architecture-independent
part of a React Native project: core API client, error types, theme, the
navigation registry, the app-level store, env files and optional i18n and
Jest scaffolding.  Feature modules are generated separately by
``FeatureGenerator``.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

from rn_arch_gen.config import CONFIG_FILE, GeneratorConfig, StateManagement, get_project_name
from rn_arch_gen.utils import ensure_dir

from .navigation import PARAMS_MARKER, SCREENS_MARKER
from .package_json import add_dependencies
from .templates import TemplateRenderer

DEFAULT_API_BASE_URL = "https://api.example.com"

ENV_FILES: dict[str, str] = {
    ".env.development": "https://dev.api.example.com",
    ".env.production": DEFAULT_API_BASE_URL,
}

FAILURES: list[dict[str, str]] = [
    {"name": "ServerFailure", "message": "Server Error"},
    {"name": "CacheFailure", "message": "Cache Error"},
    {"name": "NetworkFailure", "message": "Network Error"},
    {"name": "GeneralFailure", "message": "Unexpected Error"},
]


class ProjectGenerator:
    """Scaffolds the base project structure.

    Given a ``GeneratorConfig``, generates:
    - ``src/App.tsx`` wired to the chosen state management and Firebase
    - ``src/core`` API client, failures, theme, theme context and constants
    - ``src/navigation/AppNavigator.tsx`` (the registry patched by later commands)
    - the app-level store in ``src/state``
    - env files and ``.gitignore``
    - i18n setup and a sample Jest test when enabled
    It then merges dependencies into ``package.json`` and saves the config.
    """

    def __init__(
        self,
        root: Path,
        config: GeneratorConfig,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.root = Path(root)
        self.config = config
        self.renderer = renderer or TemplateRenderer()

    # -- Public API --------------------------------------------------------

    async def generate(self) -> list[Path]:
        """Generate the skeleton under ``self.root``.

        Returns:
            Every file written, the sidecar config included.
        """
        context = self._build_context()

        # 1. Directory tree
        await self._create_directory_structure()

        # 2. Base files
        written: list[Path] = []
        for template, rel_path in self._base_files():
            written.append(
                await self.renderer.render_to_file(template, self.root / rel_path, context)
            )

        # 3. Env files
        written.extend(await self._render_env_files(context))

        # 4. package.json
        await add_dependencies(self.root, self.config)

        # 5. Sidecar config
        written.append(await asyncio.to_thread(self.config.save, self.root))
        return written

    # -- Context building --------------------------------------------------

    def _build_context(self) -> dict[str, Any]:
        """Build the Jinja2 template context from the config."""
        project_name = get_project_name(self.root)
        return {
            "config": self.config,
            "project_name": project_name,
            "api_base_url": DEFAULT_API_BASE_URL,
            "config_file": CONFIG_FILE,
            "failures": FAILURES,
            "params_marker": PARAMS_MARKER,
            "screens_marker": SCREENS_MARKER,
            "strings": {
                "appTitle": project_name,
                "welcome": "Welcome",
                "login": "Login",
                "register": "Register",
                "email": "Email",
                "password": "Password",
            },
        }

    # -- Directory structure -----------------------------------------------

    def directories(self) -> list[str]:
        dirs = [
            "src/core/api",
            "src/core/errors",
            "src/core/theme",
            "src/core/utils",
            "src/core/components",
            "src/features",
            "src/navigation",
            "src/state",
            "assets/images",
            "assets/fonts",
        ]
        if self.config.localization:
            dirs.append("src/i18n/locales")
        if self.config.tests:
            dirs.extend(["__tests__/unit", "__tests__/integration"])
        return dirs

    async def _create_directory_structure(self) -> None:
        for d in self.directories():
            await asyncio.to_thread(ensure_dir, self.root / d)

    # -- File lists --------------------------------------------------------

    def _base_files(self) -> list[tuple[str, str]]:
        """Template -> output path pairs for the current config."""
        if self.config.state_management == StateManagement.CONTEXT:
            store = ("base/AppContext.tsx.j2", "src/state/AppContext.tsx")
        else:
            store = ("base/store.ts.j2", "src/state/store.ts")

        files = [
            ("base/App.tsx.j2", "src/App.tsx"),
            ("base/apiClient.ts.j2", "src/core/api/apiClient.ts"),
            ("base/failures.ts.j2", "src/core/errors/failures.ts"),
            ("base/AppTheme.ts.j2", "src/core/theme/AppTheme.ts"),
            ("base/ThemeContext.tsx.j2", "src/core/theme/ThemeContext.tsx"),
            ("base/AppConstants.ts.j2", "src/core/constants/AppConstants.ts"),
            ("base/AppNavigator.tsx.j2", "src/navigation/AppNavigator.tsx"),
            store,
            ("base/gitignore.j2", ".gitignore"),
        ]
        if self.config.localization:
            files.append(("base/i18n.ts.j2", "src/i18n/i18n.ts"))
            files.append(("base/en.json.j2", "src/i18n/locales/en.json"))
        if self.config.tests:
            files.append(("base/sample.test.ts.j2", "__tests__/unit/sample.test.ts"))
        return files

    # -- Env files ---------------------------------------------------------

    async def _render_env_files(self, ctx: dict[str, Any]) -> list[Path]:
        """Render ``.env.development`` and ``.env.production``."""
        written: list[Path] = []
        for output_name, base_url in ENV_FILES.items():
            written.append(
                await self.renderer.render_to_file(
                    "base/env.j2", self.root / output_name, {**ctx, "api_base_url": base_url}
                )
            )
        return written
