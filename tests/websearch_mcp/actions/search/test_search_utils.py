from websearch_mcp.actions.search.models import SearchResult
from websearch_mcp.actions.search.utils import (
    build_search_url,
    extract_results,
    format_result,
    format_results,
)

def test_build_search_url_encodes_everything():
    url = build_search_url("https://api.search.brave.com/res/v1/web/search", "a b&c?d#e+f")

    assert url == "https://api.search.brave.com/res/v1/web/search?q=a%20b%26c%3Fd%23e%2Bf"

def test_build_search_url_encodes_unicode():
    assert build_search_url("https://x.test/s", "погода") == "https://x.test/s?q=%D0%BF%D0%BE%D0%B3%D0%BE%D0%B4%D0%B0"

def test_extract_results_takes_verbatim_fields():
    data = {"web": {"results": [{"title": "T", "url": "U", "description": "<strong>D</strong>", "age": "1d"}]}}

    assert extract_results(data) == [SearchResult(title="T", url="U", description="<strong>D</strong>")]

def test_extract_results_missing_fields_become_empty():
    assert extract_results({"web": {"results": [{}]}}) == [SearchResult()]

def test_format_result():
    result = SearchResult(title="Weather", url="https://weather.example", description="Sunny")

    assert format_result(result) == "Title: Weather\nURL: https://weather.example\nSnippet: Sunny"

def test_format_results_single_entry_has_no_separator():
    assert "---" not in format_results([SearchResult(title="Only")])
