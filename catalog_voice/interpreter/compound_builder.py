"""
Builder de comando composto: vários filtros a partir de uma única frase.

Ordem fixa (define a ordem dos filtros no comando composto):
1. limpar  (curto-circuito)
2. ordenar (curto-circuito)
3. categorias, cores, preço (teto), preço (faixa), ecológico, material,
   estoque, destaque, fornecedor, kit
"""
from typing import Callable, List, Optional, Tuple
from loguru import logger

from ..models.command import FilterKey, FilterFragment, ParsedCommand
from . import extractors
from .extractors import ExtractionContext
from .fragment_merger import FragmentAccumulator

Extractor = Callable[[str, ExtractionContext], Optional[FilterFragment]]

PIPELINE: Tuple[Tuple[str, Extractor], ...] = (
    ("categorias", extractors.extract_categories),
    ("cores", extractors.extract_colors),
    ("preco_teto", extractors.extract_price_upper_bound),
    ("preco_faixa", extractors.extract_price_range),
    ("ecologico", extractors.extract_eco_material),
    ("material", extractors.extract_material_phrase),
    ("estoque", extractors.extract_in_stock),
    ("destaque", extractors.extract_featured),
    ("fornecedor", extractors.extract_supplier),
    ("kit", extractors.extract_kit),
)


class CompoundCommandBuilder:
    """Roda o pipeline de extratores e decide entre composto, filtro ou nada"""

    SEPARATOR = " • "

    def __init__(self, context: ExtractionContext, pipeline=PIPELINE):
        self.context = context
        self.pipeline = pipeline

    def _accumulator(self) -> FragmentAccumulator:
        vocabulary = self.context.vocabulary
        return FragmentAccumulator(label_builders={
            FilterKey.COLORS: extractors.color_label,
            FilterKey.CATEGORIES: lambda ids: extractors.category_label(vocabulary, ids),
            FilterKey.SUPPLIERS: lambda ids: extractors.supplier_label(vocabulary, ids),
        })

    def collect(self, normalized: str) -> List[FilterFragment]:
        """Fragmentos extraídos, na ordem do pipeline"""
        accumulator = self._accumulator()
        for step, extractor in self.pipeline:
            fragment = extractor(normalized, self.context)
            if fragment is None:
                continue
            if accumulator.add(fragment):
                logger.debug(f"🧩 [{step}] {fragment.filter_key.value}={fragment.value}")
            else:
                logger.debug(f"⏭️ [{step}] {fragment.filter_key.value} ignorado (já definido)")
        return accumulator.fragments

    def build(self, normalized: str) -> Optional[ParsedCommand]:
        """
        Interpreta a frase normalizada.

        Returns:
            clear/sort (curto-circuito), compound (2+ filtros), filter (1)
            ou None quando nada foi extraído
        """
        if extractors.detect_clear(normalized, self.context.tables):
            return ParsedCommand.clear()

        sort = extractors.detect_sort(normalized)
        if sort:
            sort_value, action = sort
            return ParsedCommand.sort(sort_value, action)

        fragments = self.collect(normalized)
        if len(fragments) >= 2:
            return ParsedCommand.compound(fragments, separator=self.SEPARATOR)
        if len(fragments) == 1:
            return ParsedCommand.single_filter(fragments[0])
        return None
