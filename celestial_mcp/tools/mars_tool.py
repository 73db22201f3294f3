# The module defines the Mars exploration tools.
# Date: 2026-10-18
# Version: 1.1.0

from .base_tool import EndpointTool

TOOLS = [
    EndpointTool(
        name="get_mars_missions",
        description="Get detailed information about all 18 Mars missions including full instrument suites, key scientific discoveries, mission objectives, technical specs (mass, cost, power source), and current operational status.",
        path="/mars/missions",
    ),
    EndpointTool(
        name="get_mars_rovers",
        description="Get detailed data on Mars rovers (Perseverance, Curiosity, Zhurong, Opportunity, Spirit, Sojourner) including instruments, discoveries, distance traveled, and status.",
        path="/mars/rovers",
    ),
    EndpointTool(
        name="get_mars_weather",
        description="Get the latest Mars surface weather data including temperature range (min/max in Celsius), atmospheric pressure (Pa), wind speed (m/s), wind direction, and Martian season.",
        path="/mars/weather",
    ),
]
