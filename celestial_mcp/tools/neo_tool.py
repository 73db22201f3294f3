# The module defines the near-Earth object tools.
# Date: 2026-10-18
# Version: 1.1.0

from .base_tool import EndpointTool

TOOLS = [
    EndpointTool(
        name="get_near_earth_objects",
        description="Get upcoming close approaches of near-Earth objects (asteroids). Returns approach date, miss distance (km and AU), relative velocity, diameter estimates, and hazard assessment.",
        path="/neo/close-approaches",
    ),
    EndpointTool(
        name="get_hazardous_asteroids",
        description="Get the list of potentially hazardous asteroids (PHAs) with diameter, absolute magnitude, orbital elements (semi-major axis, eccentricity, inclination), orbital period, and orbit classification.",
        path="/neo/hazardous",
    ),
]
