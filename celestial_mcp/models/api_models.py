# The module is to define the REST API models of the server.
# Date: 2026-10-18
# Version: 1.1.0

from pydantic import BaseModel, Field
from typing import List
from celestial_mcp.models.common import ToolDefinition

class ToolListResponse(BaseModel):
    """
    Defines the response body for the /v1/tools endpoint.
    Attributes:
        tools (List[ToolDefinition]): Every registered tool, in registration order.
    """
    tools: List[ToolDefinition]

class ToolCallResponse(BaseModel):
    """
    Defines the response body for the /v1/tools/call endpoint.
    Attributes:
        name (str): The tool that was called.
        is_error (bool): Whether the call failed.
        content (str): JSON text of the API response, or the failure message.
    """
    name: str
    is_error: bool = Field(..., description="Whether the call failed.")
    content: str = Field(..., description="JSON text of the API response, or the failure message.")
