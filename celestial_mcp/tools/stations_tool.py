# The module defines the tools for crewed space stations and the people aboard them.
# Date: 2026-10-18
# Version: 1.1.0

from .base_tool import EndpointTool

TOOLS = [
    EndpointTool(
        name="get_iss_position",
        description="Get the real-time position of the International Space Station (ISS) including latitude, longitude, altitude in km, and velocity in km/h.",
        path="/iss/position",
    ),
    EndpointTool(
        name="get_tiangong_position",
        description="Get the real-time position of China's Tiangong space station including latitude, longitude, altitude, and velocity.",
        path="/stations/tiangong/position",
    ),
    EndpointTool(
        name="get_crew_in_space",
        description="List all astronauts, cosmonauts, and taikonauts currently in orbit. Returns names, nationalities, agencies, stations, and arrival dates.",
        path="/crew",
    ),
]
