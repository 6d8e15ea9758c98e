"""
Modelos do histórico de comandos de voz
"""
from enum import Enum
from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, Field


class HistoryCommandType(str, Enum):
    """Classificação grosseira usada só no histórico"""
    FILTER = "filter"
    SEARCH = "search"
    NAVIGATION = "navigation"
    SORT = "sort"
    CLEAR = "clear"
    UNKNOWN = "unknown"


class VoiceCommandRecord(BaseModel):
    """Um comando falado/digitado pelo usuário"""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    command: str
    normalized_command: str = Field(..., alias="normalizedCommand")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    type: HistoryCommandType
    successful: bool = True


class CommandPattern(BaseModel):
    """Comando agrupado pelo texto normalizado"""
    model_config = ConfigDict(populate_by_name=True)

    command: str
    count: int
    last_used: datetime = Field(..., alias="lastUsed")
    type: HistoryCommandType
