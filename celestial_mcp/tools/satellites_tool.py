# The module defines the satellite tracking tools.
# Date: 2026-10-18
# Version: 1.1.0

from pydantic import BaseModel, Field
from .base_tool import EndpointTool

class SearchSatellitesInput(BaseModel):
    """Input model for the search_satellites tool."""
    query: str = Field(..., min_length=1, description="Satellite name to search for (e.g. 'Hubble', 'Starlink', 'GOES')")

TOOLS = [
    EndpointTool(
        name="get_satellite_categories",
        description="Get satellite categories (communications, Earth observation, weather, navigation, scientific, etc.) with the number of tracked satellites in each.",
        path="/satellites/categories",
    ),
    EndpointTool(
        name="search_satellites",
        description="Search tracked satellites by name. Returns satellite name, NORAD ID, category, operator, launch date, and TLE orbital data.",
        path="/satellites/search?q={query}",
        args_schema=SearchSatellitesInput,
    ),
]
