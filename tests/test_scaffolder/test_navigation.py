"""Tests for navigation registry patching.

Covers:
- RouteEntry rendering
- patch_navigator insertion zones and idempotence
- Silent degradation when markers are missing
- NavigationPatcher: absent file, single screens, the auth pair, Expo Router
"""

from __future__ import annotations

from pathlib import Path

import pytest

from rn_arch_gen.config import Architecture, GeneratorConfig, Routing
from rn_arch_gen.scaffolder.navigation import (
    NAVIGATOR_PATH,
    PARAMS_MARKER,
    SCREENS_MARKER,
    NavigationPatcher,
    RouteEntry,
    patch_navigator,
    screen_dir_for,
)


# ---------------------------------------------------------------------------
# Markers
# ---------------------------------------------------------------------------

pytestmark = pytest.mark.unit


def _read(root: Path) -> str:
    return (root / NAVIGATOR_PATH).read_text(encoding="utf-8")


# ---------------------------------------------------------------------------
# RouteEntry / patch_navigator
# ---------------------------------------------------------------------------


class TestRouteEntry:
    def test_lines(self):
        entry = RouteEntry(name="Order", import_path="../screens/OrderScreen")
        assert entry.component == "OrderScreen"
        assert entry.import_line == "import { OrderScreen } from '../screens/OrderScreen';"
        assert entry.param_line == "  Order: undefined;"
        assert entry.declaration == '<Stack.Screen name="Order" component={OrderScreen} />'

    def test_has_param_matches_whole_name_only(self):
        entry = RouteEntry(name="Item", import_path="./ItemScreen")
        assert not entry.has_param("  OrderItem: undefined;")
        assert entry.has_param("  Item: undefined;")


class TestPatchNavigator:
    def test_inserts_all_three_zones(self, navigator_text: str):
        entry = RouteEntry(name="Order", import_path="../screens/OrderScreen")
        patched = patch_navigator(navigator_text, [entry])

        assert patched.startswith(entry.import_line + "\n")
        assert f"{PARAMS_MARKER}\n  Order: undefined;" in patched
        assert f"{entry.declaration}\n        {SCREENS_MARKER}" in patched
        # Markers survive for later insertions
        assert PARAMS_MARKER in patched
        assert SCREENS_MARKER in patched

    def test_idempotent(self, navigator_text: str):
        entry = RouteEntry(name="Order", import_path="../screens/OrderScreen")
        once = patch_navigator(navigator_text, [entry])
        twice = patch_navigator(once, [entry])
        assert twice == once

    def test_similar_names_are_registered_separately(self, navigator_text: str):
        order_item = RouteEntry(name="OrderItem", import_path="../screens/OrderItemScreen")
        item = RouteEntry(name="Item", import_path="../screens/ItemScreen")
        patched = patch_navigator(patch_navigator(navigator_text, [order_item]), [item])

        assert "  Item: undefined;" in patched
        assert '<Stack.Screen name="Item" component={ItemScreen} />' in patched
        assert "import { ItemScreen } from '../screens/ItemScreen';" in patched

    def test_missing_markers_degrade_silently(self):
        content = "import React from 'react';\n"
        entry = RouteEntry(name="Order", import_path="./OrderScreen")
        patched = patch_navigator(content, [entry])
        assert patched == f"{entry.import_line}\n{content}"

    def test_empty_entries(self, navigator_text: str):
        assert patch_navigator(navigator_text, []) == navigator_text


# ---------------------------------------------------------------------------
# NavigationPatcher
# ---------------------------------------------------------------------------


class TestNavigationPatcher:
    @pytest.mark.asyncio
    async def test_absent_file_is_noop(self, project_root: Path):
        patcher = NavigationPatcher(project_root)
        registered = await patcher.register_screen("Order", "order", None, "screens")
        assert registered is False
        assert not (project_root / NAVIGATOR_PATH).exists()
        assert not (project_root / "src").exists()

    @pytest.mark.asyncio
    async def test_register_screen_twice_is_byte_identical(self, navigator_project: Path):
        patcher = NavigationPatcher(navigator_project)
        assert await patcher.register_screen("Order", "order", None, "screens")
        once = _read(navigator_project)
        assert await patcher.register_screen("Order", "order", None, "screens")
        assert _read(navigator_project) == once

    @pytest.mark.asyncio
    async def test_standalone_screen_import_path(self, navigator_project: Path):
        await NavigationPatcher(navigator_project).register_screen(
            "Settings", "settings", None, "presentation/screens"
        )
        content = _read(navigator_project)
        assert (
            "import { SettingsScreen } from '../presentation/screens/SettingsScreen';"
            in content
        )

    @pytest.mark.asyncio
    async def test_feature_screen_import_path(self, navigator_project: Path):
        await NavigationPatcher(navigator_project).register_screen(
            "Invoice", "invoice", "Billing", "views/screens"
        )
        content = _read(navigator_project)
        assert (
            "import { InvoiceScreen } from '../features/billing/views/screens/InvoiceScreen';"
            in content
        )

    @pytest.mark.asyncio
    async def test_register_auth_feature(self, navigator_project: Path):
        config = GeneratorConfig()
        registered = await NavigationPatcher(navigator_project).register_feature("auth", config)
        assert registered is True

        content = _read(navigator_project)
        for label in ("Login", "Register"):
            assert (
                f"import {{ {label}Screen }} from "
                f"'../features/auth/presentation/screens/{label}Screen';" in content
            )
            assert f"  {label}: undefined;" in content
            assert f'<Stack.Screen name="{label}" component={{{label}Screen}} />' in content
        assert content.count("<Stack.Screen ") == 2

    @pytest.mark.asyncio
    async def test_register_feature_uses_architecture_screen_dir(self, navigator_project: Path):
        config = GeneratorConfig(architecture=Architecture.MVVM)
        await NavigationPatcher(navigator_project).register_feature("user profile", config)
        content = _read(navigator_project)
        assert (
            "import { UserProfileScreen } from "
            "'../features/user_profile/views/screens/UserProfileScreen';" in content
        )
        assert "  UserProfile: undefined;" in content

    @pytest.mark.asyncio
    async def test_register_feature_skipped_for_expo_router(self, navigator_project: Path):
        before = _read(navigator_project)
        config = GeneratorConfig(routing=Routing.EXPO_ROUTER)
        registered = await NavigationPatcher(navigator_project).register_feature("billing", config)
        assert registered is False
        assert _read(navigator_project) == before


@pytest.mark.parametrize(
    "architecture, expected",
    [
        (Architecture.CLEAN_ARCHITECTURE, "presentation/screens"),
        (Architecture.FEATURE_BASED, "screens"),
        (Architecture.ATOMIC_DESIGN, "screens"),
        (Architecture.MVVM, "views/screens"),
    ],
)
def test_screen_dir_for(architecture, expected):
    assert screen_dir_for(architecture) == expected
