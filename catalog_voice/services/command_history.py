"""
Histórico de comandos de voz

Funcionalidades:
- Guarda os últimos comandos (mais novo primeiro, limite configurável)
- Detecta o tipo do comando quando não informado
- Agrupa comandos repetidos em padrões (frequência + recência)
- Sugestões para autocompletar a partir de um texto parcial

Estado em memória do processo, como o SessionManager.
"""
import re
import uuid
from datetime import datetime, timezone
from typing import Dict, List, Optional
from loguru import logger

from .. import config
from ..interpreter.text_normalizer import normalize
from ..models.command import CommandType
from ..models.history import HistoryCommandType, VoiceCommandRecord, CommandPattern


RECENT_LIMIT = 5
FREQUENT_LIMIT = 6

# Padrões para detectar o tipo (ordem importa!)
TYPE_PATTERNS = [
    (HistoryCommandType.CLEAR, r"^(limpar|resetar|remover filtros|limpar tudo)"),
    (HistoryCommandType.NAVIGATION, r"^(ir para|abrir|navegar|mostrar pagina)"),
    (HistoryCommandType.SORT, r"(ordenar|ordem|mais barato|mais caro|alfabetica)"),
    (HistoryCommandType.FILTER, r"(filtrar|buscar|mostrar|encontrar|quero|preciso)"),
]

# Tipo do comando interpretado -> tipo no histórico
COMMAND_TYPE_MAP = {
    CommandType.CLEAR: HistoryCommandType.CLEAR,
    CommandType.SORT: HistoryCommandType.SORT,
    CommandType.FILTER: HistoryCommandType.FILTER,
    CommandType.COMPOUND: HistoryCommandType.FILTER,
    CommandType.SEARCH: HistoryCommandType.SEARCH,
    CommandType.UNKNOWN: HistoryCommandType.UNKNOWN,
}


def detect_command_type(command: str) -> HistoryCommandType:
    """Classificação por regex do texto normalizado; padrão é busca"""
    normalized = normalize(command)
    for command_type, pattern in TYPE_PATTERNS:
        if re.search(pattern, normalized):
            return command_type
    return HistoryCommandType.SEARCH


class CommandHistory:
    """Histórico em memória dos comandos de voz"""

    def __init__(self, max_history: Optional[int] = None):
        """
        Args:
            max_history: Limite de registros (ou usa env VOICE_HISTORY_MAX)
        """
        self.max_history = max_history or config.get_history_max()
        self._history: List[VoiceCommandRecord] = []

    # ==================== Escrita ====================

    def add_command(
        self,
        command: str,
        command_type: Optional[HistoryCommandType] = None,
        successful: bool = True,
    ) -> VoiceCommandRecord:
        """
        Registra um comando.

        Args:
            command: Texto falado/digitado
            command_type: Tipo já conhecido (senão é detectado)
            successful: Se o comando gerou um resultado útil
        """
        record = VoiceCommandRecord(
            id=str(uuid.uuid4()),
            command=command,
            normalized_command=normalize(command),
            type=command_type or detect_command_type(command),
            successful=successful,
        )
        self._history.insert(0, record)

        # Manter apenas os últimos N registros
        if len(self._history) > self.max_history:
            self._history = self._history[:self.max_history]

        logger.debug(f"📝 Histórico +1 ({record.type.value}): {command[:50]}")
        return record

    def remove_command(self, record_id: str) -> bool:
        before = len(self._history)
        self._history = [r for r in self._history if r.id != record_id]
        return len(self._history) < before

    def clear_history(self):
        self._history = []
        logger.info("🧹 Histórico de comandos limpo")

    # ==================== Leitura ====================

    @property
    def history(self) -> List[VoiceCommandRecord]:
        return list(self._history)

    def recent_commands(self) -> List[VoiceCommandRecord]:
        """Últimos comandos distintos (pelo texto normalizado)"""
        seen = set()
        recent = []
        for record in self._history:
            if record.normalized_command in seen:
                continue
            seen.add(record.normalized_command)
            recent.append(record)
            if len(recent) >= RECENT_LIMIT:
                break
        return recent

    def patterns(self, now: Optional[datetime] = None) -> List[CommandPattern]:
        """
        Comandos bem-sucedidos agrupados, do mais relevante para o menos.

        Relevância = 70% frequência + 30% recência (decai por dia).
        """
        now = now or datetime.now(timezone.utc)
        grouped: Dict[str, CommandPattern] = {}

        for record in self._history:
            if not record.successful:
                continue
            existing = grouped.get(record.normalized_command)
            if existing:
                existing.count += 1
                if record.timestamp > existing.last_used:
                    existing.last_used = record.timestamp
            else:
                grouped[record.normalized_command] = CommandPattern(
                    command=record.command,
                    count=1,
                    last_used=record.timestamp,
                    type=record.type,
                )

        def score(pattern: CommandPattern) -> float:
            days = (now - pattern.last_used).total_seconds() / 86400
            recency = 1 / (1 + max(days, 0))
            return pattern.count * 0.7 + recency * 10 * 0.3

        return sorted(grouped.values(), key=score, reverse=True)

    def frequent_commands(self, now: Optional[datetime] = None) -> List[CommandPattern]:
        """Padrões usados 2+ vezes"""
        return [p for p in self.patterns(now) if p.count >= 2][:FREQUENT_LIMIT]

    def get_suggestions(self, partial: Optional[str] = None, now: Optional[datetime] = None) -> List[CommandPattern]:
        """Sem texto parcial devolve os frequentes"""
        if not partial:
            return self.frequent_commands(now)
        termo = normalize(partial)
        return [
            p for p in self.patterns(now)
            if termo in normalize(p.command)
        ][:FREQUENT_LIMIT]
