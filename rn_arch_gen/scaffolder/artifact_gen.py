"""Single-file generators behind the ``model`` and ``screen`` commands.

Both work with or without a persisted config; without one they assume the
Clean Architecture layout.  Only the screen generator touches the navigation
registry, and only when the project uses React Navigation.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from rn_arch_gen.config import Architecture, GeneratorConfig
from rn_arch_gen.errors import GeneratorError
from rn_arch_gen.utils import NameForms, to_snake_case

from .navigation import NavigationPatcher, screen_dir_for
from .templates import TemplateRenderer

# Architecture -> (directory inside a feature, template)
_MODEL_LAYOUTS: dict[Architecture, tuple[str, str]] = {
    Architecture.CLEAN_ARCHITECTURE: ("data/models", "artifacts/class_model.ts.j2"),
    Architecture.MVVM: ("models", "artifacts/functional_model.ts.j2"),
    Architecture.FEATURE_BASED: ("types", "artifacts/types_model.ts.j2"),
    Architecture.ATOMIC_DESIGN: ("types", "artifacts/types_model.ts.j2"),
}

_TYPES_STYLE = (Architecture.FEATURE_BASED, Architecture.ATOMIC_DESIGN)


def _architecture(config: GeneratorConfig | None) -> Architecture:
    return config.architecture if config else Architecture.CLEAN_ARCHITECTURE


def _names(name: str) -> NameForms:
    forms = NameForms.from_raw(name)
    if not forms.snake:
        raise GeneratorError(f"Name '{name}' produces an empty identifier.")
    return forms


def _feature_root(root: Path, feature: str) -> Path:
    snake = to_snake_case(feature)
    if not snake:
        raise GeneratorError(f"Feature name '{feature}' produces an empty identifier.")
    return root / "src" / "features" / snake


def model_file_name(forms: NameForms, architecture: Architecture) -> str:
    """``<camel>.types.ts`` for type-style layouts, ``<Pascal>Model.ts`` otherwise."""
    if architecture in _TYPES_STYLE:
        return f"{forms.camel}.types.ts"
    return f"{forms.pascal}Model.ts"


class ModelGenerator:
    """Generates one model/type file."""

    def __init__(
        self,
        root: Path,
        config: GeneratorConfig | None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.root = Path(root)
        self.config = config
        self.renderer = renderer or TemplateRenderer()

    def target_dir(self, feature: str | None = None) -> Path:
        if not feature:
            return self.root / "src" / "core" / "models"
        model_dir, _ = _MODEL_LAYOUTS[_architecture(self.config)]
        return _feature_root(self.root, feature) / model_dir

    async def generate(self, name: str, feature: str | None = None) -> Path:
        """Write the model for *name* and return its path."""
        forms = _names(name)
        arch = _architecture(self.config)
        _, template = _MODEL_LAYOUTS[arch]
        output = self.target_dir(feature) / model_file_name(forms, arch)
        return await self.renderer.render_to_file(template, output, {"name": forms})


@dataclass
class ScreenResult:
    """Path of a generated screen and whether it was registered."""

    path: Path
    registered: bool = False


class ScreenGenerator:
    """Generates one screen and registers it with React Navigation."""

    def __init__(
        self,
        root: Path,
        config: GeneratorConfig | None,
        renderer: TemplateRenderer | None = None,
        navigation: NavigationPatcher | None = None,
    ) -> None:
        self.root = Path(root)
        self.config = config
        self.renderer = renderer or TemplateRenderer()
        self.navigation = navigation or NavigationPatcher(self.root)

    @property
    def screen_dir(self) -> str:
        return screen_dir_for(_architecture(self.config))

    def target_dir(self, feature: str | None = None) -> Path:
        if feature:
            return _feature_root(self.root, feature) / self.screen_dir
        return self.root / "src" / self.screen_dir

    async def generate(self, name: str, feature: str | None = None) -> ScreenResult:
        """Write ``<Pascal>Screen.tsx`` and register it when applicable."""
        forms = _names(name)
        output = self.target_dir(feature) / f"{forms.pascal}Screen.tsx"
        path = await self.renderer.render_to_file(
            "artifacts/screen.tsx.j2", output, {"name": forms}
        )

        result = ScreenResult(path=path)
        if self.config is not None and self.config.uses_navigation_registry:
            result.registered = await self.navigation.register_screen(
                forms.pascal, forms.snake, feature, self.screen_dir
            )
        return result
