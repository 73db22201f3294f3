# The module provides a FastAPI application that mirrors the MCP tools over REST.
# Date: 2026-10-18
# Version: 1.1.0

from fastapi import FastAPI
from celestial_mcp.api.v1.api import api_router
from celestial_mcp.utils.logger import console

app = FastAPI(
    title="Celestial Node MCP Server",
    version="1.1.0",
    description="Real-time space data from celestialnode.com, exposed as read-only tools.",
)

@app.get("/", summary="Health Check", tags=["Status"])
def read_root():
    """Root endpoint to check if the service is alive."""
    console.info("Health check endpoint was hit.")
    return {"message": "Celestial Node MCP Server is alive and running!"}

# Include the v1 router with a global '/v1' prefix
app.include_router(api_router, prefix="/v1")
