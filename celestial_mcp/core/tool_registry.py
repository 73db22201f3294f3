# Discovers and manages all available tools automatically.
# Date: 2026-10-18
# Version: 1.1.0

import pkgutil
from typing import Dict, Iterable, List, Any, Optional
from celestial_mcp import tools as tools_package
from celestial_mcp.tools.base_tool import BaseTool
from celestial_mcp.core.exceptions import DuplicateToolError
from celestial_mcp.utils.logger import console

# Listing order of the tool modules. Modules not named here follow in name order.
CATALOG_ORDER = [
    "stations_tool",
    "launches_tool",
    "news_tool",
    "mars_tool",
    "stars_tool",
    "neo_tool",
    "reference_tool",
    "satellites_tool",
    "reentries_tool",
]


def _catalog_position(modname: str):
    short_name = modname.rsplit(".", 1)[-1]
    if short_name in CATALOG_ORDER:
        return (CATALOG_ORDER.index(short_name), short_name)
    return (len(CATALOG_ORDER), short_name)


class ToolRegistry:
    """
    An ordered, name-unique collection of tools.

    Tools are kept in registration order, which is also the order they are
    listed in. When no tools are given, every module of the celestial_mcp.tools
    package is scanned for a module-level TOOLS list.
    """
    def __init__(self, tools: Optional[Iterable[BaseTool]] = None):
        self.tools: Dict[str, BaseTool] = {}
        if tools is None:
            tools = self._discover_tools()
        for tool in tools:
            self.register(tool)
        console.success(f"Tool registry ready with {len(self.tools)} tools.")

    def _discover_tools(self) -> List[BaseTool]:
        """
        Scans the celestial_mcp.tools package in catalog order, imports each
        module and collects the tools it exports.
        """
        discovered: List[BaseTool] = []
        modules = sorted(
            (modname for _, modname, _ in pkgutil.iter_modules(tools_package.__path__, f"{tools_package.__name__}.")),
            key=_catalog_position,
        )
        for modname in modules:
            if modname == f"{tools_package.__name__}.base_tool":
                continue
            try:
                module = __import__(modname, fromlist="dummy")
            except Exception as e:
                console.error(f"Failed to load tools from module {modname}: {e}")
                continue
            module_tools = getattr(module, "TOOLS", [])
            console.debug(f"Module {modname} provides {len(module_tools)} tools.")
            discovered.extend(module_tools)
        return discovered

    def register(self, tool: BaseTool):
        """Adds a tool, refusing a second tool with the same name."""
        if tool.name in self.tools:
            raise DuplicateToolError(tool.name)
        self.tools[tool.name] = tool
        console.debug(f"Registered tool: '{tool.name}'")

    def get(self, tool_name: str) -> Optional[BaseTool]:
        """Returns the tool with this name, or None when there is none."""
        return self.tools.get(tool_name)

    def get_definitions(self) -> List[Dict[str, Any]]:
        """Returns the public definition of every tool, in registration order."""
        return [tool.get_definition() for tool in self.tools.values()]

    def __contains__(self, tool_name: str) -> bool:
        return tool_name in self.tools

    def __len__(self) -> int:
        return len(self.tools)


def build_default_registry() -> ToolRegistry:
    """Builds the registry from every module of the celestial_mcp.tools package."""
    return ToolRegistry()
