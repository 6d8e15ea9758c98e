from .command import (
    FilterKey,
    CommandType,
    SortValue,
    FilterFragment,
    ParsedCommand,
)
from .vocabulary import ColorEntry, CategoryEntry, SupplierEntry, CatalogVocabulary
from .history import HistoryCommandType, VoiceCommandRecord, CommandPattern

__all__ = [
    "FilterKey",
    "CommandType",
    "SortValue",
    "FilterFragment",
    "ParsedCommand",
    "ColorEntry",
    "CategoryEntry",
    "SupplierEntry",
    "CatalogVocabulary",
    "HistoryCommandType",
    "VoiceCommandRecord",
    "CommandPattern",
]
