from .search import search_web, render_outcome
from .models import (
    SearchResult,
    SearchToolArgs,
    SearchSuccess,
    SearchFailure,
    SearchFailureKind,
    SearchOutcome,
)
