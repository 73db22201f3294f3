# The module is to define the REST endpoints for listing and calling tools.
# Date: 2026-10-18
# Version: 1.1.0

from functools import lru_cache
from fastapi import APIRouter, Depends
from celestial_mcp.core.config import get_settings
from celestial_mcp.core.dispatcher import Dispatcher, create_dispatcher
from celestial_mcp.models.api_models import ToolCallResponse, ToolListResponse
from celestial_mcp.models.common import ToolCallRequest
from celestial_mcp.utils.logger import console

router = APIRouter()

@lru_cache
def get_dispatcher() -> Dispatcher:
    return create_dispatcher(get_settings())

@router.get("/",
            response_model=ToolListResponse)
def list_tools(dispatcher: Dispatcher = Depends(get_dispatcher)):
    """
    Lists every tool with its name, description and input schema.
    """
    return ToolListResponse(tools=dispatcher.list_tools())

@router.post("/call",
             response_model=ToolCallResponse)
async def call_tool(request: ToolCallRequest, dispatcher: Dispatcher = Depends(get_dispatcher)):
    """
    Calls one tool. Tool failures are part of the response body, not HTTP errors.
    """
    console.info(f"Received REST call for tool: {request.name}")
    result = await dispatcher.call(request.name, request.arguments)
    return ToolCallResponse(
        name=request.name,
        is_error=result.is_error,
        content=result.to_text(),
    )
