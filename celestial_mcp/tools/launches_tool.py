# The module defines the rocket launch tool.
# Date: 2026-10-18
# Version: 1.1.0

from .base_tool import EndpointTool

TOOLS = [
    EndpointTool(
        name="get_upcoming_launches",
        description="Get upcoming rocket launches worldwide. Returns launch provider, vehicle, payload, launch site, date/time, and mission description.",
        path="/launches/upcoming",
    ),
]
