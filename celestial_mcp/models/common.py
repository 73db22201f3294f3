# The module is to define the common models shared by the dispatcher and both protocol surfaces.
# Date: 2026-10-18
# Version: 1.1.0

import json
from pydantic import BaseModel, Field
from typing import Any, Dict, Literal, Optional, Union


class ToolDefinition(BaseModel):
    """
    The public view of a registered tool, as returned when listing tools.
    Attributes:
        name (str): The unique name of the tool.
        description (str): A human-readable description of the tool.
        inputSchema (Dict[str, Any]): JSON schema of the accepted arguments.
    """
    name: str = Field(..., description="The unique name of the tool.")
    description: str = Field(..., description="A human-readable description of the tool.")
    inputSchema: Dict[str, Any] = Field(..., description="JSON schema of the accepted arguments.")


class ToolSuccess(BaseModel):
    """
    Result of a tool call that reached the API and got a JSON body back.
    Attributes:
        payload (Any): The parsed response body, untouched.
    """
    kind: Literal["success"] = "success"
    payload: Any = None

    @property
    def is_error(self) -> bool:
        return False

    def to_text(self) -> str:
        return json.dumps(self.payload, indent=2, ensure_ascii=False)


class ToolFailure(BaseModel):
    """
    Result of a tool call that failed anywhere between lookup and body parsing.
    Attributes:
        message (str): A human-readable explanation of the failure.
    """
    kind: Literal["failure"] = "failure"
    message: str

    @property
    def is_error(self) -> bool:
        return True

    def to_text(self) -> str:
        return self.message


CallResult = Union[ToolSuccess, ToolFailure]


class ToolCallRequest(BaseModel):
    """
    A single tool invocation.
    Attributes:
        name (str): The name of the tool to call.
        arguments (Optional[Dict[str, Any]]): The argument bag; None is treated as empty.
    """
    name: str = Field(..., description="The name of the tool to call.")
    arguments: Optional[Dict[str, Any]] = Field(default=None, description="The arguments for the tool.")
