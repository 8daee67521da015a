"""Lexical relevance ranking for product catalogs."""

from .fuzzy import edit_distance, fuzzy_score, word_overlap
from .query import keywords, suggest_correction
from .ranking import RankedResult, SearchSummary, rank, summarize
from .scoring import SearchableItem, SearchMatch, explain, score_item
