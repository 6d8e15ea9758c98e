"""
Interpretador de Comandos de Voz - transforma uma frase em comando do catálogo

Fluxo:
1. Normaliza a frase (sem acento, minúsculas)
2. Builder composto: limpar, ordenar ou N filtros
3. Nenhum filtro: padrões antigos de filtro único
4. Nada casou: busca livre com a frase original

Nunca lança exceção: toda frase vira exatamente um ParsedCommand.
"""
from typing import Optional
from loguru import logger

from ..models.command import ParsedCommand
from ..models.vocabulary import CatalogVocabulary
from .compound_builder import CompoundCommandBuilder
from .extractors import ExtractionContext
from .keyword_tables import KeywordTables, DEFAULT_KEYWORD_TABLES
from .legacy_fallback import LegacyFallback
from .text_normalizer import normalize
from .vocabulary_matcher import VocabularyMatcher


class VoiceCommandInterpreter:
    """Ponto de entrada único do interpretador"""

    def __init__(
        self,
        vocabulary: CatalogVocabulary,
        tables: Optional[KeywordTables] = None,
    ):
        """
        Args:
            vocabulary: Vocabulário do catálogo (somente leitura)
            tables: Tabelas de palavras-chave (padrão: pt-BR)
        """
        self.vocabulary = vocabulary
        self.tables = tables or DEFAULT_KEYWORD_TABLES
        self.matcher = VocabularyMatcher(vocabulary)

        context = ExtractionContext(
            vocabulary=vocabulary,
            matcher=self.matcher,
            tables=self.tables,
        )
        self.compound_builder = CompoundCommandBuilder(context)
        self.legacy_fallback = LegacyFallback(context)

    def parse(self, transcript: Optional[str]) -> ParsedCommand:
        """
        Interpreta uma frase falada/digitada.

        Args:
            transcript: Frase crua vinda da captura de voz ou do campo de texto

        Returns:
            Exatamente um ParsedCommand

        Example:
            >>> interpreter.parse("canetas azuis até 30 reais").type
            <CommandType.COMPOUND: 'compound'>
        """
        transcript = transcript or ""
        normalized = normalize(transcript)

        command = self.compound_builder.build(normalized)
        if command is None:
            command = self.legacy_fallback.resolve(normalized)
        if command is None:
            logger.debug("🤷 Nenhum filtro reconhecido, usando busca livre")
            command = ParsedCommand.search(transcript)

        logger.info(f"🎙️ Comando '{transcript[:50]}' -> {command.type.value}: {command.action}")
        return command
