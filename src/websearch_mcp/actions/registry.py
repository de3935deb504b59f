from typing import Annotated

from mcp.server.fastmcp import Context, FastMCP
from mcp.types import TextContent
from pydantic import Field

from ..config import get_settings
from .search import search_web, render_outcome

SEARCH_TOOL_DESCRIPTION = (
    "Search the internet with Brave Search. "
    "Returns the titles, URLs and snippets of the top results."
)

async def search_tool(
    query: Annotated[str, Field(description="The search query to look up on the internet")],
    ctx: Context,
) -> list[TextContent]:
    outcome = await search_web(query, get_settings(), ctx)
    return render_outcome(outcome)

def register_tools(mcp: FastMCP) -> None:
    # Content blocks are returned as-is, no structured output
    mcp.add_tool(search_tool, name="search", description=SEARCH_TOOL_DESCRIPTION, structured_output=False)
