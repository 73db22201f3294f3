# The module defines the reference tools: space agencies and the encyclopedia.
# Date: 2026-10-18
# Version: 1.1.0

from pydantic import BaseModel, Field
from .base_tool import EndpointTool

class SearchEncyclopediaInput(BaseModel):
    """Input model for the search_encyclopedia tool."""
    query: str = Field(..., min_length=1, description="Search query (e.g. 'Hubble', 'Saturn V', 'black hole')")

TOOLS = [
    EndpointTool(
        name="get_space_agencies",
        description="Get a list of all space agencies worldwide including name, country, type (government/commercial/intergovernmental), founding year, description, and website.",
        path="/agencies",
    ),
    EndpointTool(
        name="search_encyclopedia",
        description="Search the space encyclopedia for information about spacecraft, missions, rocket engines, instruments, and space concepts.",
        path="/encyclopedia?q={query}",
        args_schema=SearchEncyclopediaInput,
    ),
]
