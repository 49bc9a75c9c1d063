"""rn-arch-gen -- React Native architecture scaffolding.

Generates the directory tree and boilerplate for a React Native project in one
of four architecture patterns, and keeps the navigation registry and
``package.json`` in sync as features, models and screens are added.

Quick usage::

    from pathlib import Path
    from rn_arch_gen import FeatureGenerator, GeneratorConfig

    config = GeneratorConfig.load(Path("."))
    await FeatureGenerator(Path("."), config).generate("billing")
"""

from rn_arch_gen.config import (
    ARCHITECTURE_LABELS,
    Architecture,
    GeneratorConfig,
    Routing,
    StateManagement,
)
from rn_arch_gen.errors import ConfigError, ConfigNotFoundError, GeneratorError
from rn_arch_gen.scaffolder import (
    FeatureGenerator,
    ModelGenerator,
    NavigationPatcher,
    ProjectGenerator,
    ScreenGenerator,
    TemplateRenderer,
)

__version__ = "1.1.0"

__all__ = [
    "ARCHITECTURE_LABELS",
    "Architecture",
    "ConfigError",
    "ConfigNotFoundError",
    "FeatureGenerator",
    "GeneratorConfig",
    "GeneratorError",
    "ModelGenerator",
    "NavigationPatcher",
    "ProjectGenerator",
    "Routing",
    "ScreenGenerator",
    "StateManagement",
    "TemplateRenderer",
    "__version__",
]
