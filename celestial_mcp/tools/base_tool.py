# The module is to define the base classes for all tools exposed by the server.
# Date: 2026-10-18
# Version: 1.1.0

import string
from abc import ABC, abstractmethod
from pydantic import BaseModel
from typing import Dict, Any, Type
from urllib.parse import quote


class NoInput(BaseModel):
    """Input model for tools that take no arguments."""


def _clean_schema(schema: Dict[str, Any]) -> Dict[str, Any]:
    # Pydantic adds a 'title' to the model and every field, and turns the model
    # docstring into a top-level 'description'; MCP clients need neither.
    cleaned = {key: value for key, value in schema.items() if key not in ("title", "description")}
    if "properties" in cleaned:
        cleaned["properties"] = {
            name: {key: value for key, value in prop.items() if key != "title"}
            for name, prop in cleaned["properties"].items()
        }
    return cleaned


class BaseTool(ABC):
    """
    Abstract Base Class for all tools.

    A tool maps validated arguments to a relative path on the Celestial Node API.
    It never talks to the network itself; the dispatcher does that.
    Attributes:
        name (str): The name of the tool, used for identification.
        description (str): A brief description of what the tool does.
        args_schema (Type[BaseModel]): A Pydantic model defining the arguments
            that the tool accepts, which will be validated before the path is built.
    """
    name: str
    description: str
    args_schema: Type[BaseModel] = NoInput

    @abstractmethod
    def build_path(self, arguments: BaseModel) -> str:
        """
        Returns the relative API path for already-validated arguments.

        Args:
            arguments: An instance of args_schema.

        Returns:
            A path such as '/iss/position' or '/stars/search?q=Sirius'.
        """
        pass

    def validate(self, arguments: Dict[str, Any]) -> BaseModel:
        """Validates a raw argument bag, raising pydantic.ValidationError when it doesn't fit."""
        return self.args_schema.model_validate(arguments or {})

    def get_definition(self) -> Dict[str, Any]:
        """
        Returns the tool's public definition in the shape MCP uses for tools/list.
        The path builder is deliberately not part of it.
        """
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": _clean_schema(self.args_schema.model_json_schema()),
        }


class EndpointTool(BaseTool):
    """
    A tool backed by one GET endpoint, described entirely by data.

    The path is a template whose '{field}' placeholders are filled with
    percent-escaped argument values, e.g. '/stars/{id}' or '/encyclopedia?q={query}'.
    """

    def __init__(self, name: str, description: str, path: str,
                 args_schema: Type[BaseModel] = NoInput):
        self.name = name
        self.description = description
        self.path = path
        self.args_schema = args_schema

        fields = {field for _, field, _, _ in string.Formatter().parse(path) if field}
        missing = fields - set(args_schema.model_fields)
        if missing:
            raise ValueError(f"Path template for tool '{name}' uses undeclared fields: {sorted(missing)}")

    def build_path(self, arguments: BaseModel) -> str:
        values = {
            key: quote(str(value), safe="")
            for key, value in arguments.model_dump().items()
            if value is not None
        }
        return self.path.format(**values)

    def __repr__(self) -> str:
        return f"EndpointTool(name={self.name!r}, path={self.path!r})"
