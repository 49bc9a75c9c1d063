"""Tests for the single-file model and screen generators."""

from __future__ import annotations

from pathlib import Path

import pytest

from rn_arch_gen.config import Architecture, GeneratorConfig, Routing
from rn_arch_gen.errors import GeneratorError
from rn_arch_gen.scaffolder.artifact_gen import ModelGenerator, ScreenGenerator, model_file_name
from rn_arch_gen.scaffolder.navigation import NAVIGATOR_PATH
from rn_arch_gen.utils import NameForms

pytestmark = pytest.mark.unit


class TestModelGenerator:
    @pytest.mark.parametrize(
        "architecture, rel_path",
        [
            (Architecture.CLEAN_ARCHITECTURE, "src/features/billing/data/models/InvoiceModel.ts"),
            (Architecture.MVVM, "src/features/billing/models/InvoiceModel.ts"),
            (Architecture.FEATURE_BASED, "src/features/billing/types/invoice.types.ts"),
            (Architecture.ATOMIC_DESIGN, "src/features/billing/types/invoice.types.ts"),
        ],
    )
    @pytest.mark.asyncio
    async def test_layout_per_architecture(
        self, project_root: Path, architecture: Architecture, rel_path: str
    ):
        config = GeneratorConfig(architecture=architecture)
        path = await ModelGenerator(project_root, config).generate("invoice", "billing")
        assert path == project_root / rel_path
        assert path.is_file()

    @pytest.mark.asyncio
    async def test_without_config_defaults_to_clean(self, project_root: Path):
        path = await ModelGenerator(project_root, None).generate("invoice", "billing")
        assert path == project_root / "src/features/billing/data/models/InvoiceModel.ts"

    @pytest.mark.asyncio
    async def test_without_feature_goes_to_core(self, project_root: Path):
        path = await ModelGenerator(project_root, None).generate("user profile")
        assert path == project_root / "src/core/models/UserProfileModel.ts"
        assert "UserProfile" in path.read_text(encoding="utf-8")

    @pytest.mark.asyncio
    async def test_types_content(self, project_root: Path):
        config = GeneratorConfig(architecture=Architecture.FEATURE_BASED)
        path = await ModelGenerator(project_root, config).generate("invoice", "billing")
        assert "export interface Invoice {" in path.read_text(encoding="utf-8")

    @pytest.mark.asyncio
    async def test_empty_name(self, project_root: Path):
        with pytest.raises(GeneratorError):
            await ModelGenerator(project_root, None).generate("  ")

    @pytest.mark.asyncio
    async def test_empty_feature_name(self, project_root: Path):
        with pytest.raises(GeneratorError):
            await ModelGenerator(project_root, None).generate("invoice", "--")
        assert not (project_root / "src").exists()

    def test_model_file_name(self):
        forms = NameForms.from_raw("order item")
        assert model_file_name(forms, Architecture.MVVM) == "OrderItemModel.ts"
        assert model_file_name(forms, Architecture.ATOMIC_DESIGN) == "orderItem.types.ts"


class TestScreenGenerator:
    @pytest.mark.asyncio
    async def test_standalone_screen_registered(self, navigator_project: Path, clean_config):
        result = await ScreenGenerator(navigator_project, clean_config).generate("settings")

        assert result.path == navigator_project / "src/presentation/screens/SettingsScreen.tsx"
        assert result.registered is True
        content = (navigator_project / NAVIGATOR_PATH).read_text(encoding="utf-8")
        assert (
            "import { SettingsScreen } from '../presentation/screens/SettingsScreen';"
            in content
        )
        assert '<Stack.Screen name="Settings" component={SettingsScreen} />' in content

    @pytest.mark.asyncio
    async def test_feature_screen_mvvm(self, navigator_project: Path):
        config = GeneratorConfig(architecture=Architecture.MVVM)
        result = await ScreenGenerator(navigator_project, config).generate("invoice", "billing")

        assert result.path == (
            navigator_project / "src/features/billing/views/screens/InvoiceScreen.tsx"
        )
        content = (navigator_project / NAVIGATOR_PATH).read_text(encoding="utf-8")
        assert "'../features/billing/views/screens/InvoiceScreen'" in content

    @pytest.mark.asyncio
    async def test_standalone_import_follows_screen_dir(self, navigator_project: Path):
        config = GeneratorConfig(architecture=Architecture.FEATURE_BASED)
        result = await ScreenGenerator(navigator_project, config).generate("settings")
        assert result.path == navigator_project / "src/screens/SettingsScreen.tsx"
        content = (navigator_project / NAVIGATOR_PATH).read_text(encoding="utf-8")
        assert "'../screens/SettingsScreen'" in content

    @pytest.mark.asyncio
    async def test_expo_router_not_registered(self, navigator_project: Path):
        before = (navigator_project / NAVIGATOR_PATH).read_text(encoding="utf-8")
        config = GeneratorConfig(routing=Routing.EXPO_ROUTER)
        result = await ScreenGenerator(navigator_project, config).generate("settings")
        assert result.path.is_file()
        assert result.registered is False
        assert (navigator_project / NAVIGATOR_PATH).read_text(encoding="utf-8") == before

    @pytest.mark.asyncio
    async def test_without_config_not_registered(self, navigator_project: Path):
        before = (navigator_project / NAVIGATOR_PATH).read_text(encoding="utf-8")
        result = await ScreenGenerator(navigator_project, None).generate("settings")
        assert result.path == navigator_project / "src/presentation/screens/SettingsScreen.tsx"
        assert result.registered is False
        assert (navigator_project / NAVIGATOR_PATH).read_text(encoding="utf-8") == before

    @pytest.mark.asyncio
    async def test_screen_content(self, project_root: Path, clean_config):
        result = await ScreenGenerator(project_root, clean_config).generate("order item")
        text = result.path.read_text(encoding="utf-8")
        assert "export const OrderItemScreen" in text
        assert result.registered is False

    @pytest.mark.asyncio
    async def test_empty_feature_name(self, navigator_project: Path, clean_config):
        before = (navigator_project / NAVIGATOR_PATH).read_text(encoding="utf-8")
        with pytest.raises(GeneratorError):
            await ScreenGenerator(navigator_project, clean_config).generate("settings", "!!")
        assert not (navigator_project / "src/features").exists()
        assert (navigator_project / NAVIGATOR_PATH).read_text(encoding="utf-8") == before
