"""
Extratores do interpretador de voz.

Cada extrator é uma função pura sobre o texto JÁ normalizado e devolve no
máximo um fragmento (ou, para limpar/ordenar, a decisão de curto-circuito).
O builder composto chama os extratores numa ordem fixa.
"""
import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import List, Optional, Tuple

from ..models.command import FilterKey, FilterFragment, SortValue
from ..models.vocabulary import CatalogVocabulary
from .keyword_tables import KeywordTables
from .vocabulary_matcher import VocabularyMatcher


@dataclass(frozen=True)
class ExtractionContext:
    """Dependências somente leitura compartilhadas pelos extratores"""
    vocabulary: CatalogVocabulary
    matcher: VocabularyMatcher
    tables: KeywordTables


# ==================== Utilitários ====================

def find_trigger(text: str, trigger: str) -> Optional[int]:
    """Posição do gatilho como palavra inteira (aceita plural em -s), ou None"""
    match = re.search(r"(?<!\w)" + re.escape(trigger) + r"s?(?!\w)", text)
    return match.start() if match else None


def has_any(text: str, triggers) -> bool:
    return any(find_trigger(text, t) is not None for t in triggers)


# Aceita "30", "29,90", "29.90" e "1.500,00"; número malformado não casa pela metade
NUMBER = (
    r"(?<![\d.,])"
    r"(?:\d{1,3}(?:\.\d{3})+(?:,\d{1,2})?|\d+(?:[.,]\d{1,2})?)"
    r"(?![\d]|[.,]\d)"
)


def parse_amount(raw: str) -> Optional[str]:
    """
    Converte o número falado para a string usada no filtro de preço.

    Example:
        >>> parse_amount("29,90")
        '29.90'
        >>> parse_amount("1.500")
        '1500'
    """
    if re.fullmatch(r"\d{1,3}(?:\.\d{3})+(?:,\d{1,2})?", raw):
        raw = raw.replace(".", "")
    raw = raw.replace(",", ".")
    try:
        amount = Decimal(raw)
    except InvalidOperation:
        return None
    if amount == amount.to_integral_value():
        return str(int(amount))
    return format(amount, "f")


def format_brl(amount: str) -> str:
    return f"R$ {amount.replace('.', ',')}"


# ==================== Labels ====================

def color_label(names: List[str]) -> str:
    if len(names) == 1:
        return f"cor {names[0]}"
    return f"cores {', '.join(names)}"


def category_label(vocabulary: CatalogVocabulary, ids: List[str]) -> str:
    names = [vocabulary.category_name(int(i)) or i for i in ids]
    if len(names) == 1:
        return f"categoria {names[0]}"
    return f"categorias {', '.join(names)}"


def supplier_label(vocabulary: CatalogVocabulary, ids: List[str]) -> str:
    names = [vocabulary.supplier_name(i) or i for i in ids]
    if len(names) == 1:
        return f"fornecedor {names[0]}"
    return f"fornecedores {', '.join(names)}"


# ==================== Curto-circuito ====================

def detect_clear(text: str, tables: KeywordTables) -> bool:
    """Limpar/resetar vence qualquer outra interpretação"""
    return any(phrase in text for phrase in tables.clear_phrases)


SORT_TRIGGERS = ("ordenar", "ordem")
PRICE_WORDS = ("preco", "valor")
DESC_WORDS = ("maior", "caro", "alto")
ASC_WORDS = ("menor", "barato", "baixo")
NAME_WORDS = ("nome", "alfabetica")


def detect_sort(text: str) -> Optional[Tuple[SortValue, str]]:
    """
    Ordenação: "ordenar"/"ordem" + alvo (preço, nome, estoque).

    Sem alvo reconhecido não é ordenação e o pipeline segue.
    """
    if not any(t in text for t in SORT_TRIGGERS):
        return None

    if any(w in text for w in PRICE_WORDS):
        if any(w in text for w in DESC_WORDS):
            return SortValue.PRICE_DESC, "Ordenar por maior preço"
        if any(w in text for w in ASC_WORDS):
            return SortValue.PRICE_ASC, "Ordenar por menor preço"
        return SortValue.PRICE_ASC, "Ordenar por preço"

    if any(w in text for w in NAME_WORDS):
        return SortValue.NAME, "Ordenar por nome"

    if "estoque" in text:
        return SortValue.STOCK, "Ordenar por estoque"

    return None


# ==================== Fragmentos ====================

def extract_categories(text: str, ctx: ExtractionContext) -> Optional[FilterFragment]:
    """Conceitos de categoria mencionados, resolvidos no catálogo"""
    ids: List[str] = []
    for concept, triggers in ctx.tables.category_keywords.items():
        if not has_any(text, triggers):
            continue
        for term in ctx.tables.category_lookup_terms(concept):
            category_id = ctx.matcher.find_category(term)
            if category_id is not None:
                if str(category_id) not in ids:
                    ids.append(str(category_id))
                break
    if not ids:
        return None
    return FilterFragment(
        filter_key=FilterKey.CATEGORIES,
        value=ids,
        label=category_label(ctx.vocabulary, ids),
    )


def extract_colors(text: str, ctx: ExtractionContext) -> Optional[FilterFragment]:
    """Todas as cores comuns mencionadas, na ordem em que aparecem"""
    found: List[Tuple[int, str]] = []
    for anchor, forms in ctx.tables.color_keywords.items():
        positions = [p for p in (find_trigger(text, f) for f in forms) if p is not None]
        if not positions:
            continue
        name = ctx.matcher.find_color(anchor)
        if name:
            found.append((min(positions), name))

    names: List[str] = []
    for _, name in sorted(found, key=lambda item: item[0]):
        if name not in names:
            names.append(name)
    if not names:
        return None
    return FilterFragment(filter_key=FilterKey.COLORS, value=names, label=color_label(names))


UPPER_BOUND_PATTERNS = [
    rf"\b(?:ate|menos\s+de|abaixo\s+de|no\s+maximo)\s+(?:r\$\s*)?({NUMBER})",
    rf"({NUMBER})\s*(?:reais|r\$)",
    rf"r\$\s*({NUMBER})",
]

RANGE_PATTERN = rf"\bentre\s+(?:r\$\s*)?({NUMBER})\s+(?:e|a)\s+(?:r\$\s*)?({NUMBER})"


def extract_price_upper_bound(text: str, ctx: ExtractionContext) -> Optional[FilterFragment]:
    """"até 50", "menos de 100", "30 reais" -> [0, N]"""
    for pattern in UPPER_BOUND_PATTERNS:
        match = re.search(pattern, text)
        if not match:
            continue
        amount = parse_amount(match.group(1))
        if amount is None:
            continue
        return FilterFragment(
            filter_key=FilterKey.PRICE_RANGE,
            value=["0", amount],
            label=f"até {format_brl(amount)}",
        )
    return None


def extract_price_range(text: str, ctx: ExtractionContext) -> Optional[FilterFragment]:
    """"entre 10 e 30" -> [10, 30]"""
    match = re.search(RANGE_PATTERN, text)
    if not match:
        return None
    low, high = parse_amount(match.group(1)), parse_amount(match.group(2))
    if low is None or high is None:
        return None
    if Decimal(low) > Decimal(high):
        low, high = high, low
    return FilterFragment(
        filter_key=FilterKey.PRICE_RANGE,
        value=[low, high],
        label=f"{format_brl(low)} a {format_brl(high)}",
    )


def extract_eco_material(text: str, ctx: ExtractionContext) -> Optional[FilterFragment]:
    """Gatilho ecológico que também é material do catálogo (bambu, cortiça...)"""
    for trigger in ctx.tables.eco_keywords:
        if find_trigger(text, trigger) is None:
            continue
        material = ctx.matcher.find_material(trigger)
        if material:
            return FilterFragment(
                filter_key=FilterKey.MATERIALS,
                value=[material],
                label=f"material {material}",
            )
    return None


def extract_material_phrase(text: str, ctx: ExtractionContext) -> Optional[FilterFragment]:
    """"material bambu", "de metal", "em inox" """
    patterns = [r"\bmaterial\s+(?:de\s+)?(\w+)"]
    if ctx.tables.material_terms:
        terms = "|".join(re.escape(t) for t in ctx.tables.material_terms)
        patterns.append(rf"\b(?:de|em)\s+({terms})\b")

    for pattern in patterns:
        match = re.search(pattern, text)
        if not match:
            continue
        material = ctx.matcher.find_material(match.group(1))
        if material:
            return FilterFragment(
                filter_key=FilterKey.MATERIALS,
                value=[material],
                label=f"material {material}",
            )
    return None


def extract_in_stock(text: str, ctx: ExtractionContext) -> Optional[FilterFragment]:
    if has_any(text, ctx.tables.stock_phrases):
        return FilterFragment(filter_key=FilterKey.IN_STOCK, value="true", label="em estoque")
    return None


def extract_featured(text: str, ctx: ExtractionContext) -> Optional[FilterFragment]:
    if has_any(text, ctx.tables.featured_phrases):
        return FilterFragment(filter_key=FilterKey.FEATURED, value="true", label="destaques")
    return None


def extract_supplier(text: str, ctx: ExtractionContext) -> Optional[FilterFragment]:
    """"fornecedor xbz", "marca stricker" """
    match = re.search(r"\b(?:fornecedor|marca)\s+(?:da\s+|do\s+)?(\w+)", text)
    if not match:
        return None
    supplier_id = ctx.matcher.find_supplier(match.group(1))
    if supplier_id is None:
        return None
    return FilterFragment(
        filter_key=FilterKey.SUPPLIERS,
        value=[supplier_id],
        label=supplier_label(ctx.vocabulary, [supplier_id]),
    )


def extract_kit(text: str, ctx: ExtractionContext) -> Optional[FilterFragment]:
    words = "|".join(re.escape(w) for w in ctx.tables.kit_words)
    if words and re.search(rf"\b(?:{words})\b", text):
        return FilterFragment(filter_key=FilterKey.IS_KIT, value="true", label="kits")
    return None
