"""Search — mediant-бисекция по дереву Штерна-Броко.

- MediantSearchEngine с лимитом итераций и injectable trace sink
- SearchConfig / SearchResult / TraceRecord
"""

from .engine import (
    DEFAULT_MAX_ITERATIONS,
    BisectionDecision,
    MediantSearchEngine,
    SearchConfig,
    SearchResult,
    SearchState,
    TraceRecord,
    TraceSink,
    search,
)

__all__ = [
    "DEFAULT_MAX_ITERATIONS",
    "BisectionDecision",
    "MediantSearchEngine",
    "SearchConfig",
    "SearchResult",
    "SearchState",
    "TraceRecord",
    "TraceSink",
    "search",
]
