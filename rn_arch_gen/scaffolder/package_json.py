"""``package.json`` dependency merging.

Adds the npm packages implied by a ``GeneratorConfig`` to the project's
manifest.  Keys the user already declared are left alone, whatever their
version.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

from rn_arch_gen.config import GeneratorConfig, Routing, StateManagement
from rn_arch_gen.utils import load_json, save_json

COMMON_DEPENDENCIES: dict[str, str] = {
    "axios": "^1.13.5",
    "react-native-config": "^1.6.1",
}

STATE_DEPENDENCIES: dict[StateManagement, dict[str, str]] = {
    StateManagement.REDUX: {
        "@reduxjs/toolkit": "^2.11.2",
        "react-redux": "^9.2.0",
    },
    StateManagement.ZUSTAND: {
        "zustand": "^5.0.11",
    },
    # React Context ships with React.
    StateManagement.CONTEXT: {},
}

ROUTING_DEPENDENCIES: dict[Routing, dict[str, str]] = {
    Routing.REACT_NAVIGATION: {
        "@react-navigation/native": "^7.1.28",
        "@react-navigation/native-stack": "^7.13.0",
        "react-native-screens": "^4.23.0",
        "react-native-safe-area-context": "^5.6.2",
    },
    Routing.EXPO_ROUTER: {
        "expo-router": "^6.0.23",
    },
}

FIREBASE_DEPENDENCIES: dict[str, str] = {
    "@react-native-firebase/app": "^23.8.6",
}

LOCALIZATION_DEPENDENCIES: dict[str, str] = {
    "i18next": "^25.8.13",
    "react-i18next": "^16.5.4",
}

DEV_DEPENDENCIES: dict[str, str] = {
    "@types/react": "^19.2.14",
    "typescript": "^5.9.3",
}

TEST_DEV_DEPENDENCIES: dict[str, str] = {
    "jest": "^30.2.0",
    "@testing-library/react-native": "^13.3.3",
}


def dependencies_for(config: GeneratorConfig) -> tuple[dict[str, str], dict[str, str]]:
    """Return the ``(dependencies, devDependencies)`` implied by *config*."""
    deps = {
        **COMMON_DEPENDENCIES,
        **STATE_DEPENDENCIES[config.state_management],
        **ROUTING_DEPENDENCIES[config.routing],
    }
    if config.firebase:
        deps.update(FIREBASE_DEPENDENCIES)
    if config.localization:
        deps.update(LOCALIZATION_DEPENDENCIES)

    dev_deps = dict(DEV_DEPENDENCIES)
    if config.tests:
        dev_deps.update(TEST_DEV_DEPENDENCIES)
    return deps, dev_deps


def merge_dependencies(manifest: dict[str, Any], config: GeneratorConfig) -> list[str]:
    """Merge the config's dependencies into *manifest* in place.

    Returns:
        Names of the packages that were added (in either section).
    """
    deps, dev_deps = dependencies_for(config)
    added: list[str] = []
    for section, wanted in (("dependencies", deps), ("devDependencies", dev_deps)):
        current = manifest.get(section)
        if not isinstance(current, dict):
            current = {}
            manifest[section] = current
        for package, version in wanted.items():
            if not current.get(package):
                current[package] = version
                added.append(package)
    return added


async def add_dependencies(root: Path, config: GeneratorConfig) -> list[str]:
    """Merge dependencies into ``<root>/package.json``.

    A project without a manifest is left untouched.
    """
    pkg_path = Path(root) / "package.json"
    if not pkg_path.exists():
        return []
    manifest = await asyncio.to_thread(load_json, pkg_path)
    added = merge_dependencies(manifest, config)
    await save_json(manifest, pkg_path)
    return added
