"""
Padrões antigos de filtro único.

Só roda quando o builder composto não extraiu nada. A prioridade é:
cor -> categoria -> busca explícita.
"""
import re
from typing import Optional
from loguru import logger

from ..models.command import FilterKey, FilterFragment, ParsedCommand
from .extractors import ExtractionContext, category_label, color_label


class LegacyFallback:
    """Interpretação de filtro único por padrões estreitos"""

    # Padrões de cor (ordem importa!)
    COLOR_PATTERNS = [
        r"filtrar\s+(?:por\s+)?cor\s+(\w+)",
        r"\bcor\s+(\w+)",
        r"\b(?:so|apenas|somente)\s+(\w+)",
        r"\bmostrar\s+(\w+)",
    ]
    # Padrões de cor só valem quando a frase fala de cor ou de filtrar
    COLOR_GATE = r"\b(?:cor|filtrar)"

    CATEGORY_PATTERNS = [
        r"\bcategoria\s+(\w+)",
        r"\btipo\s+(\w+)",
    ]

    SEARCH_PATTERN = r"\b(?:buscar|procurar|pesquisar)\s+(.+)"

    def __init__(self, context: ExtractionContext):
        self.context = context

    def _match_color(self, normalized: str) -> Optional[ParsedCommand]:
        if not re.search(self.COLOR_GATE, normalized):
            return None
        for pattern in self.COLOR_PATTERNS:
            match = re.search(pattern, normalized)
            if not match:
                continue
            color = self.context.matcher.find_color(match.group(1))
            if color:
                return ParsedCommand.single_filter(FilterFragment(
                    filter_key=FilterKey.COLORS,
                    value=[color],
                    label=color_label([color]),
                ))
        return None

    def _match_category(self, normalized: str) -> Optional[ParsedCommand]:
        for pattern in self.CATEGORY_PATTERNS:
            match = re.search(pattern, normalized)
            if not match:
                continue
            category_id = self.context.matcher.find_category(match.group(1))
            if category_id is not None:
                ids = [str(category_id)]
                return ParsedCommand.single_filter(FilterFragment(
                    filter_key=FilterKey.CATEGORIES,
                    value=ids,
                    label=category_label(self.context.vocabulary, ids),
                ))
        return None

    def _match_search(self, normalized: str) -> Optional[ParsedCommand]:
        match = re.search(self.SEARCH_PATTERN, normalized)
        if match:
            return ParsedCommand.search(match.group(1).strip())
        return None

    def resolve(self, normalized: str) -> Optional[ParsedCommand]:
        """Primeiro padrão antigo que casar, ou None"""
        for resolver in (self._match_color, self._match_category, self._match_search):
            command = resolver(normalized)
            if command:
                logger.debug(f"🕰️ Padrão antigo casou: {command.type.value}")
                return command
        return None
