"""Display-side ordering and "load more" windowing over search results.

These run after the engine and never feed back into it: the engine owns the
distance ordering, the presenter only reorders a copy for display.
"""

from typing import List, Sequence

from faithfinder.models import SearchResult, safe_float

SORT_KEYS = ("distance", "rating", "name")
DEFAULT_PAGE_SIZE = 4


def sort_results(results: Sequence[SearchResult], sort_by: str = "distance") -> List[SearchResult]:
    if sort_by == "distance":
        return sorted(results, key=lambda result: result.distance or 0)
    if sort_by == "rating":
        return sorted(results, key=lambda result: safe_float(result.record.rating) or 0.0, reverse=True)
    if sort_by == "name":
        return sorted(results, key=lambda result: result.record.name.casefold())
    raise ValueError(f"unknown sort key {sort_by!r}; expected one of {', '.join(SORT_KEYS)}")


class ResultWindow:
    """Growing prefix of a result list, as shown by a paged list view."""

    def __init__(self, results: Sequence[SearchResult], page_size: int = DEFAULT_PAGE_SIZE) -> None:
        if page_size <= 0:
            raise ValueError("page_size must be positive")
        self._results = list(results)
        self.page_size = page_size
        self.display_count = page_size

    @property
    def visible(self) -> List[SearchResult]:
        return self._results[: self.display_count]

    @property
    def has_more(self) -> bool:
        return len(self._results) > self.display_count

    @property
    def remaining(self) -> int:
        return max(len(self._results) - self.display_count, 0)

    def load_more(self) -> List[SearchResult]:
        self.display_count = min(self.display_count + self.page_size, max(len(self._results), self.page_size))
        return self.visible

    def reset(self) -> None:
        self.display_count = self.page_size
