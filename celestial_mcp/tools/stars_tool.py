# The module defines the star catalog tools backed by ESA Gaia data.
# Date: 2026-10-18
# Version: 1.1.0

from pydantic import BaseModel, ConfigDict, Field
from .base_tool import EndpointTool

class SearchStarsInput(BaseModel):
    """
    Input model for the search_stars tool.
    Attributes:
        query (str): Star name or designation.
    """
    query: str = Field(..., min_length=1, description="Star name or designation to search for (e.g. 'Sirius', 'Betelgeuse', 'Alpha Centauri')")

class StarDetailsInput(BaseModel):
    """
    Input model for the get_star_details tool.
    Attributes:
        id (str): Gaia source ID. Numeric IDs are accepted and turned into strings,
            since Gaia IDs are often passed as plain numbers.
    """
    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str = Field(..., min_length=1, description="Gaia source ID of the star")

TOOLS = [
    EndpointTool(
        name="search_stars",
        description="Search the star catalog (1M+ stars from ESA Gaia) by name or designation. Returns position (RA/Dec), magnitude, spectral type, distance, temperature, luminosity, and more.",
        path="/stars/search?q={query}",
        args_schema=SearchStarsInput,
    ),
    EndpointTool(
        name="get_star_details",
        description="Get full astronomical data for a specific star by its Gaia source ID. Includes position, magnitudes, color index, spectral type, temperature, luminosity, radius, mass, proper motion, radial velocity, variability, binary status, and exoplanet count.",
        path="/stars/{id}",
        args_schema=StarDetailsInput,
    ),
    EndpointTool(
        name="get_constellations",
        description="List all 88 IAU constellations with their names, abbreviations, and descriptions.",
        path="/stars/constellations",
    ),
]
