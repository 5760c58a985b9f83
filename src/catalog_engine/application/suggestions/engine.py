"""Application suggestions – autocomplete from a reduced search pass.

The query runs through the regular search service with a small page. The
names and brands of the matches that contain the query become suggestions,
deduplicated case-insensitively and capped at ``suggestion_limit``.
"""
from __future__ import annotations

import dataclasses
import re
from enum import Enum

from catalog_engine.application.search.criteria import Criteria
from catalog_engine.application.search.service import CatalogSearchService
from catalog_engine.config.settings import CatalogSettings
from catalog_engine.domain.normalization import fold_aligned, normalize
from catalog_engine.observability.logging import get_logger

log = get_logger(__name__)


class SuggestionType(str, Enum):
    PRODUCT = "product"
    BRAND = "brand"


@dataclasses.dataclass(frozen=True)
class Suggestion:
    text: str
    type: str
    highlight: str

    def to_dict(self) -> dict[str, str]:
        return {"text": self.text, "type": self.type, "highlight": self.highlight}


def highlight(text: str, query: str) -> str:
    """Wrap every occurrence of *query* in ``<mark>`` tags.

    Matching ignores case and Turkish letter variants, so ``"cesme"`` marks
    ``"Çeşme"``. The marked text keeps its original spelling.
    """
    if not text or not query:
        return text
    folded = fold_aligned(text)
    parts: list[str] = []
    last = 0
    for match in re.finditer(re.escape(fold_aligned(query)), folded):
        start, end = match.span()
        parts.append(text[last:start])
        parts.append(f"<mark>{text[start:end]}</mark>")
        last = end
    parts.append(text[last:])
    return "".join(parts)


class SuggestionEngine:
    def __init__(
        self,
        search: CatalogSearchService,
        settings: CatalogSettings | None = None,
    ) -> None:
        self._search = search
        self._settings = settings or CatalogSettings()

    async def suggest(self, query: str | None) -> list[Suggestion]:
        term = (query or "").strip()
        if len(term) < self._settings.suggestion_min_length:
            return []
        try:
            result = await self._search.search(
                Criteria(search_text=term, page=1, page_size=self._settings.suggestion_scan_size)
            )
        except Exception:
            log.exception("suggestions.search_failed", query=term)
            return []

        wanted = normalize(term)
        limit = self._settings.suggestion_limit
        emitted: set[str] = set()
        suggestions: list[Suggestion] = []
        for product in result.items:
            for value, kind in ((product.name, SuggestionType.PRODUCT), (product.brand, SuggestionType.BRAND)):
                if len(suggestions) >= limit:
                    return suggestions
                if not value or wanted not in normalize(value):
                    continue
                seen_key = value.casefold()
                if seen_key in emitted:
                    continue
                emitted.add(seen_key)
                suggestions.append(Suggestion(value, kind.value, highlight(value, term)))
        return suggestions


__all__ = ["Suggestion", "SuggestionEngine", "SuggestionType", "highlight"]
