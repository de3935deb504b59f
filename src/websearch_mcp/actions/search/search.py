from typing import List, Optional

import httpx
from mcp.server.fastmcp import Context
from mcp.types import TextContent

from ...config import Settings
from ...logger import log
from .models import SearchResult, SearchSuccess, SearchFailure, SearchFailureKind, SearchOutcome
from .utils import build_search_url, extract_results, format_results

MISSING_API_KEY_MESSAGE = "Error: Search API key is not configured by the administrator."
NO_RESULTS_MESSAGE = "No relevant search results found."
SEARCH_FAILED_MESSAGE = "Error: Failed to perform search. Details: {details}"

class BraveSearchError(Exception):
    """Raised when Brave answers with a non-2xx status."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Brave API error: {status_code} {body}")

async def fetch_brave_results(query: str, api_key: str, settings: Settings) -> List[SearchResult]:
    url = build_search_url(settings.BRAVE_SEARCH_URL, query)

    async with httpx.AsyncClient(
        timeout=httpx.Timeout(settings.BRAVE_SEARCH_TIMEOUT),
        follow_redirects=True,
    ) as client:
        response = await client.get(
            url,
            headers={
                "Accept": "application/json",
                "X-Subscription-Token": api_key,
            },
        )
        if not response.is_success:
            raise BraveSearchError(response.status_code, response.text)

        return extract_results(response.json())

async def search_web(query: str, settings: Settings, ctx: Optional[Context] = None) -> SearchOutcome:
    """
    Run one Brave search for `query`.

    Never raises: every failure is returned as a SearchFailure whose kind tells
    configuration, upstream and network problems apart.
    """
    extra = {"request_id": ctx.request_id} if ctx is not None else {}
    log.info(f"Received search query: {query}", extra=extra)

    api_key = settings.BRAVE_API_KEY
    if not api_key:
        log.error("BRAVE_API_KEY is not set in environment", extra=extra)
        return SearchFailure(kind=SearchFailureKind.CONFIGURATION, message=MISSING_API_KEY_MESSAGE)

    try:
        results = await fetch_brave_results(query, api_key, settings)
    except BraveSearchError as e:
        log.error(f"Brave search failed: {e}", extra={**extra, "status_code": e.status_code})
        return SearchFailure(
            kind=SearchFailureKind.UPSTREAM,
            message=SEARCH_FAILED_MESSAGE.format(details=e),
            status_code=e.status_code,
            body=e.body,
        )
    except Exception as e:
        details = str(e) or e.__class__.__name__
        log.error(f"Error during Brave search: {details}", exc_info=True, extra=extra)
        return SearchFailure(kind=SearchFailureKind.NETWORK, message=SEARCH_FAILED_MESSAGE.format(details=details))

    log.info(f"Brave returned {len(results)} results", extra=extra)
    return SearchSuccess(results=results)

def render_outcome(outcome: SearchOutcome) -> List[TextContent]:
    """Turn a search outcome into the single text block the tool returns."""
    if isinstance(outcome, SearchFailure):
        text = outcome.message
    elif not outcome.results:
        text = NO_RESULTS_MESSAGE
    else:
        text = format_results(outcome.results)
    return [TextContent(type="text", text=text)]
