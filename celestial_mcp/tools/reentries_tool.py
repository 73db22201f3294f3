# The module defines the tool for objects coming back down through the atmosphere.
# Date: 2026-10-18
# Version: 1.1.0

from .base_tool import EndpointTool

TOOLS = [
    EndpointTool(
        name="get_upcoming_reentries",
        description="Get predicted satellite and rocket stage re-entries into Earth's atmosphere with estimated re-entry windows.",
        path="/reentries/upcoming",
    ),
]
