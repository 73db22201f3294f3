# The module defines the space news tool.
# Date: 2026-10-18
# Version: 1.1.0

from .base_tool import EndpointTool

TOOLS = [
    EndpointTool(
        name="get_space_news",
        description="Get the latest curated space news articles from global sources including NASA, ESA, CNSA, JAXA, Roscosmos, ISRO, and independent journalists.",
        path="/news",
    ),
]
