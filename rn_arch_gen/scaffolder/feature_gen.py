"""Feature module generation for the four architecture patterns.

``FeatureGenerator`` turns a feature name into a vertical slice under
``src/features/<snake_name>/``.  The architecture recorded in the project's
config picks one of four fixed layouts:

1. Clean Architecture (Domain -> Data -> Presentation)
2. Feature-Based (lightweight, flat)
3. Atomic Design + Feature (Atoms -> Molecules -> Organisms)
4. MVVM with Hooks (Model -> ViewModel -> View)

Generated files overwrite existing ones; only the navigation registry edits
are idempotent.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from rn_arch_gen.config import Architecture, GeneratorConfig, StateManagement
from rn_arch_gen.errors import GeneratorError
from rn_arch_gen.utils import NameForms, ensure_dir, relative_import

from .navigation import AUTH_FEATURE, AUTH_SCREENS, NavigationPatcher, screen_dir_for
from .templates import TemplateRenderer

CORE_DIR = Path("src") / "core"

# Feature-level test templates per architecture.  None ship yet, so the
# test hook writes nothing for any variant.
_TEST_TEMPLATES: dict[Architecture, tuple[tuple[str, str], ...]] = {
    Architecture.CLEAN_ARCHITECTURE: (),
    Architecture.FEATURE_BASED: (),
    Architecture.ATOMIC_DESIGN: (),
    Architecture.MVVM: (),
}

# (template, path inside the feature).  Paths are ``str.format``-ed with the
# name forms: {snake}, {pascal}, {camel}.
CLEAN_LAYERS: tuple[tuple[str, str], ...] = (
    ("clean/entity.ts.j2", "domain/entities/{snake}Entity.ts"),
    ("clean/repository.ts.j2", "domain/repositories/{pascal}Repository.ts"),
    ("clean/usecase.ts.j2", "domain/usecases/Get{pascal}UseCase.ts"),
    ("clean/model.ts.j2", "data/models/{pascal}Model.ts"),
    ("clean/datasource.ts.j2", "data/datasources/{pascal}RemoteDataSource.ts"),
    ("clean/repository_impl.ts.j2", "data/repositories/{pascal}RepositoryImpl.ts"),
)

DATA_HOOK_LAYERS: tuple[tuple[str, str], ...] = (
    ("feature_based/types.ts.j2", "types/{camel}.types.ts"),
    ("feature_based/service.ts.j2", "services/{camel}.service.ts"),
    ("feature_based/hook.ts.j2", "hooks/use{pascal}.ts"),
)

ATOMIC_LAYERS: tuple[tuple[str, str], ...] = (
    ("atomic/button.tsx.j2", "atoms/{pascal}Button.tsx"),
    ("atomic/input.tsx.j2", "atoms/{pascal}Input.tsx"),
    ("atomic/form_field.tsx.j2", "molecules/{pascal}FormField.tsx"),
    ("atomic/card.tsx.j2", "organisms/{pascal}Card.tsx"),
    ("atomic/layout.tsx.j2", "templates/{pascal}Layout.tsx"),
)

MVVM_LAYERS: tuple[tuple[str, str], ...] = (
    ("mvvm/model.ts.j2", "models/{pascal}Model.ts"),
    ("mvvm/service.ts.j2", "services/{camel}.service.ts"),
    ("mvvm/viewmodel.ts.j2", "viewmodels/use{pascal}ViewModel.ts"),
    ("mvvm/list_item.tsx.j2", "views/components/{pascal}ListItem.tsx"),
)

# Per-feature store modules.  Context has no entry: its only store is the
# app-level AppContext.
STATE_MODULES: dict[StateManagement, tuple[str, str]] = {
    StateManagement.REDUX: ("shared/redux_slice.ts.j2", "{camel}Slice.ts"),
    StateManagement.ZUSTAND: ("shared/zustand_store.ts.j2", "use{pascal}Store.ts"),
}

AUTH_TITLES: dict[str, str] = {
    "Login": "Welcome",
    "Register": "Create Account",
}


def _path_fields(forms: NameForms) -> dict[str, str]:
    return {"snake": forms.snake, "pascal": forms.pascal, "camel": forms.camel}


def feature_directories(config: GeneratorConfig) -> list[str]:
    """Return the fixed sub-directory set of a feature for *config*."""
    arch = config.architecture
    if arch == Architecture.CLEAN_ARCHITECTURE:
        return [
            "domain/entities",
            "domain/repositories",
            "domain/usecases",
            "data/models",
            "data/datasources",
            "data/repositories",
            "presentation/screens",
            "presentation/components",
            "presentation/hooks",
            f"presentation/{config.state_management.value}",
        ]
    if arch == Architecture.FEATURE_BASED:
        return ["components", "hooks", "screens", "services", "types", "utils"]
    if arch == Architecture.ATOMIC_DESIGN:
        return [
            "atoms",
            "molecules",
            "organisms",
            "templates",
            "screens",
            "hooks",
            "services",
            "types",
        ]
    if arch == Architecture.MVVM:
        return ["models", "viewmodels", "views/screens", "views/components", "services"]
    raise GeneratorError(f"Unsupported architecture: {arch!r}")


@dataclass
class GenerationResult:
    """What one ``feature`` invocation produced."""

    feature_path: Path
    directories: list[Path] = field(default_factory=list)
    files: list[Path] = field(default_factory=list)
    screens: list[str] = field(default_factory=list)
    registered: bool = False
    warnings: list[str] = field(default_factory=list)


class FeatureGenerator:
    """Generates a feature module in the project's configured architecture.

    Attributes:
        root: Project root (the directory holding ``.rn_arch_gen.json``).
        config: The project's persisted configuration.
        renderer: Template renderer shared by every artifact.
        navigation: Patcher for ``src/navigation/AppNavigator.tsx``.
    """

    def __init__(
        self,
        root: Path,
        config: GeneratorConfig,
        renderer: TemplateRenderer | None = None,
        navigation: NavigationPatcher | None = None,
    ) -> None:
        self.root = Path(root)
        self.config = config
        self.renderer = renderer or TemplateRenderer()
        self.navigation = navigation or NavigationPatcher(self.root)

    # -- Public API --------------------------------------------------------

    async def generate(self, name: str) -> GenerationResult:
        """Generate the feature *name*.

        Filesystem errors propagate unchanged; files written before the
        failure stay on disk.

        Raises:
            GeneratorError: If *name* has no alphanumeric characters.
        """
        forms = NameForms.from_raw(name)
        if not forms.snake:
            raise GeneratorError(f"Feature name '{name}' produces an empty identifier.")

        result = GenerationResult(feature_path=self.root / "src" / "features" / forms.snake)
        await self._create_directories(result)

        arch = self.config.architecture
        if arch == Architecture.CLEAN_ARCHITECTURE:
            await self._generate_clean(forms, result)
        elif arch == Architecture.FEATURE_BASED:
            await self._generate_feature_based(forms, result)
        elif arch == Architecture.ATOMIC_DESIGN:
            await self._generate_atomic(forms, result)
        elif arch == Architecture.MVVM:
            await self._generate_mvvm(forms, result)
        else:
            raise GeneratorError(f"Unsupported architecture: {arch!r}")

        if self.config.uses_navigation_registry:
            result.registered = await self.navigation.register_feature(
                name, self.config, screen_dir_for(arch)
            )

        if self.config.tests:
            result.files.extend(await self._generate_tests(forms, result))

        return result

    # -- 1. Clean Architecture ---------------------------------------------

    async def _generate_clean(self, forms: NameForms, result: GenerationResult) -> None:
        await self._render_layers(CLEAN_LAYERS, forms, result)
        await self._generate_state_management(forms, result, "presentation")
        await self._generate_screens(forms, result)

    # -- 2. Feature-Based --------------------------------------------------

    async def _generate_feature_based(self, forms: NameForms, result: GenerationResult) -> None:
        await self._render_layers(DATA_HOOK_LAYERS, forms, result)
        await self._generate_screens(forms, result)
        await self._render(
            "feature_based/index.ts.j2", "index.ts", forms, result, screens=result.screens
        )

    # -- 3. Atomic Design --------------------------------------------------

    async def _generate_atomic(self, forms: NameForms, result: GenerationResult) -> None:
        await self._render_layers(ATOMIC_LAYERS, forms, result)
        await self._render_layers(DATA_HOOK_LAYERS, forms, result)
        await self._generate_screens(forms, result)

    # -- 4. MVVM with Hooks ------------------------------------------------

    async def _generate_mvvm(self, forms: NameForms, result: GenerationResult) -> None:
        await self._render_layers(MVVM_LAYERS, forms, result)
        await self._generate_screens(forms, result)

    # -- Shared pieces -----------------------------------------------------

    async def _generate_state_management(
        self, forms: NameForms, result: GenerationResult, base_folder: str
    ) -> None:
        """Write the per-feature store for Redux or Zustand.

        Context has no per-feature module: the app-level ``AppContext`` is the
        only Context store.  The gap is reported rather than filled in.
        """
        sm = self.config.state_management
        folder = f"{base_folder}/{sm.value}"
        module = STATE_MODULES.get(sm)
        if module is None:
            result.warnings.append(
                f"No per-feature Context module is generated for '{forms.raw}'; "
                f"{folder}/ was left empty and src/state/AppContext.tsx is the only "
                "Context store."
            )
            return
        template, file_name = module
        rel_path = f"{folder}/{file_name.format(**_path_fields(forms))}"
        await self._render(template, rel_path, forms, result)

    async def _generate_screens(self, forms: NameForms, result: GenerationResult) -> None:
        """Write the feature's screen(s); ``auth`` gets a Login/Register pair."""
        screen_dir = screen_dir_for(self.config.architecture)
        if forms.raw == AUTH_FEATURE:
            for label in AUTH_SCREENS:
                await self._render(
                    "shared/auth_screen.tsx.j2",
                    f"{screen_dir}/{label}Screen.tsx",
                    forms,
                    result,
                    label=label,
                    title=AUTH_TITLES[label],
                )
                result.screens.append(f"{label}Screen")
        else:
            await self._render(
                "shared/screen.tsx.j2", f"{screen_dir}/{forms.pascal}Screen.tsx", forms, result
            )
            result.screens.append(f"{forms.pascal}Screen")

    async def _generate_tests(self, forms: NameForms, result: GenerationResult) -> list[Path]:
        """Architecture-specific test hook; writes whatever templates are registered."""
        written: list[Path] = []
        for template, rel_path in _TEST_TEMPLATES[self.config.architecture]:
            output = result.feature_path / rel_path.format(**_path_fields(forms))
            written.append(await self._render_file(template, output, forms))
        return written

    # -- Internals ---------------------------------------------------------

    async def _render_layers(
        self,
        layers: tuple[tuple[str, str], ...],
        forms: NameForms,
        result: GenerationResult,
    ) -> None:
        fields = _path_fields(forms)
        for template, rel_path in layers:
            await self._render(template, rel_path.format(**fields), forms, result)

    async def _create_directories(self, result: GenerationResult) -> None:
        for rel in feature_directories(self.config):
            path = result.feature_path / rel
            await asyncio.to_thread(ensure_dir, path)
            result.directories.append(path)

    async def _render(
        self,
        template: str,
        rel_path: str,
        forms: NameForms,
        result: GenerationResult,
        **extra: Any,
    ) -> Path:
        out = await self._render_file(template, result.feature_path / rel_path, forms, **extra)
        result.files.append(out)
        return out

    async def _render_file(
        self, template: str, output_path: Path, forms: NameForms, **extra: Any
    ) -> Path:
        context = {
            "name": forms,
            "config": self.config,
            "core": relative_import(output_path.parent.relative_to(self.root), CORE_DIR),
            **extra,
        }
        return await self.renderer.render_to_file(template, output_path, context)
