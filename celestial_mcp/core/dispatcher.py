# The module maps tool calls onto Celestial Node API requests and turns every outcome into a result.
# Date: 2026-10-18
# Version: 1.1.0

from typing import Any, Dict, List, Optional
from pydantic import ValidationError
from celestial_mcp.core.exceptions import CelestialAPIError
from celestial_mcp.core.tool_registry import ToolRegistry, build_default_registry
from celestial_mcp.models.common import CallResult, ToolFailure, ToolSuccess
from celestial_mcp.services.celestial_client import CelestialClient
from celestial_mcp.utils.logger import console


def _format_validation_error(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item.get("loc", ())) or "arguments"
        parts.append(f"{location}: {item.get('msg', 'invalid value')}")
    return "; ".join(parts)


class Dispatcher:
    """
    Translates 'list tools' and 'call tool' requests into registry lookups and
    single GET requests.

    call() never raises: unknown tools, bad arguments, API errors and transport
    or parsing failures all come back as a ToolFailure.
    """
    def __init__(self, registry: ToolRegistry, client: CelestialClient):
        self.registry = registry
        self.client = client

    def list_tools(self) -> List[Dict[str, Any]]:
        """Returns name, description and inputSchema of every tool, in registration order."""
        return self.registry.get_definitions()

    async def call(self, tool_name: str, arguments: Optional[Dict[str, Any]] = None) -> CallResult:
        tool = self.registry.get(tool_name)
        if tool is None:
            console.error(f"Attempted to execute unknown tool: {tool_name}")
            return ToolFailure(message=f"Unknown tool: {tool_name}")

        try:
            validated = tool.validate(arguments or {})
        except ValidationError as e:
            message = f"Invalid arguments for tool '{tool_name}': {_format_validation_error(e)}"
            console.warning(message)
            return ToolFailure(message=message)

        try:
            path = tool.build_path(validated)
            console.info(f"Executing tool '{tool_name}' -> GET {path}")
            payload = await self.client.fetch(path)
        except CelestialAPIError as e:
            console.warning(f"Tool '{tool_name}' failed with API status {e.status_code} {e.reason}: {e}")
            return ToolFailure(message=str(e))
        except Exception as e:
            console.exception(f"An error occurred while executing tool '{tool_name}'")
            return ToolFailure(message=str(e) or type(e).__name__)

        console.success(f"Tool '{tool_name}' executed successfully.")
        return ToolSuccess(payload=payload)


def create_dispatcher(settings, registry: Optional[ToolRegistry] = None, transport=None) -> Dispatcher:
    """Wires a Dispatcher from settings, discovering the tools when no registry is given."""
    return Dispatcher(
        registry=registry if registry is not None else build_default_registry(),
        client=CelestialClient(settings, transport=transport),
    )
