"""
Interpretador de comandos de voz do catálogo de brindes
"""
from .interpreter import VoiceCommandInterpreter, KeywordTables, DEFAULT_KEYWORD_TABLES, normalize
from .models import ParsedCommand, FilterFragment, FilterKey, CommandType, SortValue, CatalogVocabulary

__all__ = [
    "VoiceCommandInterpreter",
    "KeywordTables",
    "DEFAULT_KEYWORD_TABLES",
    "normalize",
    "ParsedCommand",
    "FilterFragment",
    "FilterKey",
    "CommandType",
    "SortValue",
    "CatalogVocabulary",
]
