from mcp.server.fastmcp import FastMCP
from starlette.types import Receive, Scope, Send

from .actions.registry import register_tools
from .config import Settings, get_settings
from .dependencies import get_transport_security
from .logger import log

def create_mcp_server(settings: Settings | None = None) -> FastMCP:
    """
    Build the FastMCP server with every registered tool.
    The streamable HTTP session manager is created eagerly so that the
    hosting app can run it from its own lifespan.
    """
    settings = settings or get_settings()
    mcp = FastMCP(
        settings.MCP_SERVER_NAME,
        stateless_http=settings.MCP_STATELESS_HTTP,
        json_response=settings.MCP_JSON_RESPONSE,
        transport_security=get_transport_security(settings),
    )
    register_tools(mcp)
    mcp.streamable_http_app()
    log.info(f"MCP server '{settings.MCP_SERVER_NAME}' created", extra={"stateless": settings.MCP_STATELESS_HTTP})
    return mcp

class MCPEndpoint:
    """ASGI endpoint handing requests to the MCP session manager untouched."""

    def __init__(self, mcp: FastMCP):
        self.mcp = mcp

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        await self.mcp.session_manager.handle_request(scope, receive, send)
