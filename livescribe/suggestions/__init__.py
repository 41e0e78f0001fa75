from .generator import ResponseGenerator
from .refresher import SuggestionRefresher
from .heuristics import next_word_heuristics

__all__ = ["ResponseGenerator", "SuggestionRefresher", "next_word_heuristics"]
