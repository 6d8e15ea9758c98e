from .command_interpreter import VoiceCommandInterpreter
from .keyword_tables import KeywordTables, DEFAULT_KEYWORD_TABLES
from .text_normalizer import normalize
from .vocabulary_matcher import VocabularyMatcher

__all__ = [
    "VoiceCommandInterpreter",
    "KeywordTables",
    "DEFAULT_KEYWORD_TABLES",
    "normalize",
    "VocabularyMatcher",
]
