"""Navigation registry patching.

Every screen-producing command registers its screens in the single shared
``src/navigation/AppNavigator.tsx`` file generated at ``init`` time.  The file
carries two placeholder comments; new route-param entries are inserted right
after the first and new ``<Stack.Screen>`` declarations right before the
second.  Import lines are prepended to the top of the file.

Each insertion is skipped when its expected text is already present, so
registering the same screen twice leaves the file byte-identical.  When a
placeholder has been edited away, its insertion silently does nothing.
"""

from __future__ import annotations

import asyncio
import re
from dataclasses import dataclass
from pathlib import Path

from rn_arch_gen.config import Architecture, GeneratorConfig
from rn_arch_gen.utils import NameForms, relative_import, to_snake_case, write_file

NAVIGATOR_PATH = Path("src") / "navigation" / "AppNavigator.tsx"

PARAMS_MARKER = "// Define your route params here"
SCREENS_MARKER = "{/* Add your screens here */}"

# Indentation of <Stack.Screen> lines inside <Stack.Navigator>.
_DECLARATION_INDENT = " " * 8

AUTH_FEATURE = "auth"
AUTH_SCREENS = ("Login", "Register")

SCREEN_DIRS: dict[Architecture, str] = {
    Architecture.CLEAN_ARCHITECTURE: "presentation/screens",
    Architecture.FEATURE_BASED: "screens",
    Architecture.ATOMIC_DESIGN: "screens",
    Architecture.MVVM: "views/screens",
}


def screen_dir_for(architecture: Architecture) -> str:
    """Return the screen directory, relative to a feature root."""
    return SCREEN_DIRS[architecture]


# ---------------------------------------------------------------------------
# Route entries
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RouteEntry:
    """One screen to register: route ``name`` and the module exporting it."""

    name: str
    import_path: str

    @property
    def component(self) -> str:
        return f"{self.name}Screen"

    @property
    def import_line(self) -> str:
        return f"import {{ {self.component} }} from '{self.import_path}';"

    @property
    def param_line(self) -> str:
        return f"  {self.name}: undefined;"

    def has_param(self, content: str) -> bool:
        """Whether a route-param entry for exactly this name is present."""
        return re.search(rf"(?<![\w$]){re.escape(self.name)}: undefined", content) is not None

    @property
    def route_key(self) -> str:
        return f'name="{self.name}"'

    @property
    def declaration(self) -> str:
        return f"<Stack.Screen {self.route_key} component={{{self.component}}} />"


def patch_navigator(content: str, entries: list[RouteEntry]) -> str:
    """Return *content* with *entries* registered.

    A group of entries (the Login/Register pair) is inserted as a block; the
    presence check for each of the three zones uses the first entry only.
    """
    if not entries:
        return content
    first = entries[0]

    # 1. Imports at the top of the file
    if first.import_line not in content:
        imports = "\n".join(entry.import_line for entry in entries)
        content = f"{imports}\n{content}"

    # 2. Route params after the params marker
    if not first.has_param(content):
        params = "\n".join(entry.param_line for entry in entries)
        content = content.replace(PARAMS_MARKER, f"{PARAMS_MARKER}\n{params}", 1)

    # 3. <Stack.Screen> declarations before the screens marker
    if first.route_key not in content:
        declarations = "".join(
            f"{entry.declaration}\n{_DECLARATION_INDENT}" for entry in entries
        )
        content = content.replace(SCREENS_MARKER, f"{declarations}{SCREENS_MARKER}", 1)

    return content


# ---------------------------------------------------------------------------
# NavigationPatcher
# ---------------------------------------------------------------------------


class NavigationPatcher:
    """Registers generated screens in the project's ``AppNavigator.tsx``.

    The patcher never creates the registry file: projects that use Expo
    Router, or that were never initialised, simply have nothing to patch.
    """

    def __init__(self, root: Path) -> None:
        self.root = Path(root)
        self.path = self.root / NAVIGATOR_PATH

    def exists(self) -> bool:
        return self.path.is_file()

    # -- Public API --------------------------------------------------------

    async def register_screen(
        self,
        pascal_name: str,
        snake_name: str,
        feature: str | None = None,
        screen_dir: str = "presentation/screens",
    ) -> bool:
        """Register a single ``<pascal_name>Screen``.

        Args:
            pascal_name: Route name and component prefix.
            snake_name: Snake form of the screen name (kept for parity with
                ``register_feature``; the import path does not use it).
            feature: Owning feature; when ``None`` the screen lives directly
                under ``src/<screen_dir>``.
            screen_dir: Screen directory relative to the feature (or ``src``).

        Returns:
            ``True`` when the registry file was rewritten, ``False`` when it
            does not exist.
        """
        if feature:
            screen_base = Path("src") / "features" / to_snake_case(feature) / screen_dir
        else:
            screen_base = Path("src") / screen_dir
        entry = self._entry(pascal_name, screen_base)
        return await self._apply([entry])

    async def register_feature(
        self,
        name: str,
        config: GeneratorConfig,
        screen_sub_path: str | None = None,
    ) -> bool:
        """Register the screen(s) generated for feature *name*.

        The raw name ``"auth"`` registers the Login/Register pair; any other
        name registers ``<Pascal>Screen``.  A no-op for file-based routing.
        """
        if not config.uses_navigation_registry:
            return False

        forms = NameForms.from_raw(name)
        screen_dir = screen_sub_path or screen_dir_for(config.architecture)
        screen_base = Path("src") / "features" / forms.snake / screen_dir

        if name == AUTH_FEATURE:
            entries = [self._entry(label, screen_base) for label in AUTH_SCREENS]
        else:
            entries = [self._entry(forms.pascal, screen_base)]
        return await self._apply(entries)

    # -- Internals ---------------------------------------------------------

    def _entry(self, pascal_name: str, screen_base: Path) -> RouteEntry:
        module = screen_base / f"{pascal_name}Screen"
        return RouteEntry(
            name=pascal_name,
            import_path=relative_import(NAVIGATOR_PATH.parent, module),
        )

    async def _apply(self, entries: list[RouteEntry]) -> bool:
        if not self.exists():
            return False
        content = await asyncio.to_thread(self.path.read_text, encoding="utf-8")
        patched = patch_navigator(content, entries)
        await asyncio.to_thread(write_file, self.path, patched)
        return True
