from .catalog_vocabulary import CatalogVocabularyService, get_vocabulary_service, default_vocabulary
from .command_history import CommandHistory, detect_command_type

__all__ = [
    "CatalogVocabularyService",
    "get_vocabulary_service",
    "default_vocabulary",
    "CommandHistory",
    "detect_command_type",
]
