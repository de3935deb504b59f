from typing import Any, List
from urllib.parse import quote

from .models import SearchResult

MAX_RESULTS = 5
RESULT_SEPARATOR = "\n\n---\n\n"

def build_search_url(base_url: str, query: str) -> str:
    """Percent-encodes the whole query, reserved characters included."""
    return f"{base_url}?q={quote(query, safe='')}"

def extract_results(data: Any, limit: int = MAX_RESULTS) -> List[SearchResult]:
    """
    Pull `web.results` out of a Brave response body.
    Anything that is not shaped as expected counts as no results.
    """
    web = data.get("web") if isinstance(data, dict) else None
    results = web.get("results") if isinstance(web, dict) else None
    if not isinstance(results, list):
        return []

    return [SearchResult.model_validate(item) for item in results if isinstance(item, dict)][:limit]

def format_result(result: SearchResult) -> str:
    return f"Title: {result.title}\nURL: {result.url}\nSnippet: {result.description}"

def format_results(results: List[SearchResult]) -> str:
    return RESULT_SEPARATOR.join(format_result(result) for result in results[:MAX_RESULTS])
