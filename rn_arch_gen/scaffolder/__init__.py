"""rn-arch-gen scaffolder -- generates React Native project structures.

``ProjectGenerator`` lays down the base skeleton at ``init`` time;
``FeatureGenerator`` adds a feature module in one of four architecture
patterns; ``ModelGenerator`` and ``ScreenGenerator`` add single files.  Every
screen-producing generator registers its screens through
``NavigationPatcher``.

Quick usage::

    from rn_arch_gen.scaffolder import FeatureGenerator

    generator = FeatureGenerator(project_root, config)
    result = await generator.generate("billing")
"""

from rn_arch_gen.scaffolder.artifact_gen import ModelGenerator, ScreenGenerator, ScreenResult
from rn_arch_gen.scaffolder.feature_gen import FeatureGenerator, GenerationResult
from rn_arch_gen.scaffolder.generator import ProjectGenerator
from rn_arch_gen.scaffolder.navigation import NavigationPatcher, RouteEntry, patch_navigator
from rn_arch_gen.scaffolder.templates import TemplateRenderer

__all__ = [
    "FeatureGenerator",
    "GenerationResult",
    "ModelGenerator",
    "NavigationPatcher",
    "ProjectGenerator",
    "RouteEntry",
    "ScreenGenerator",
    "ScreenResult",
    "TemplateRenderer",
    "patch_navigator",
]
