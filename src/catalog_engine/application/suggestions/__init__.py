"""Application suggestions – search-box autocomplete."""
from catalog_engine.application.suggestions.engine import (
    Suggestion,
    SuggestionEngine,
    SuggestionType,
    highlight,
)

__all__ = ["Suggestion", "SuggestionEngine", "SuggestionType", "highlight"]
