"""
Acúmulo de fragmentos de filtro com regra explícita por chave.

- colors, categories, suppliers: acrescenta sem repetir
- priceRange: substitui (o último vence, mantendo a posição original)
- materials, inStock, featured, isKit: o primeiro vence
"""
from enum import Enum
from typing import Callable, Dict, List, Optional

from ..models.command import FilterKey, FilterFragment


class MergeStrategy(str, Enum):
    APPEND_UNIQUE = "append-unique"
    REPLACE = "replace"
    FIRST_WINS = "first-wins"


MERGE_STRATEGIES: Dict[FilterKey, MergeStrategy] = {
    FilterKey.COLORS: MergeStrategy.APPEND_UNIQUE,
    FilterKey.CATEGORIES: MergeStrategy.APPEND_UNIQUE,
    FilterKey.SUPPLIERS: MergeStrategy.APPEND_UNIQUE,
    FilterKey.PRICE_RANGE: MergeStrategy.REPLACE,
    FilterKey.MATERIALS: MergeStrategy.FIRST_WINS,
    FilterKey.IN_STOCK: MergeStrategy.FIRST_WINS,
    FilterKey.FEATURED: MergeStrategy.FIRST_WINS,
    FilterKey.IS_KIT: MergeStrategy.FIRST_WINS,
}

# Monta o rótulo a partir da lista acumulada (ex: "cores Azul, Vermelho")
LabelBuilder = Callable[[List[str]], str]


def _as_list(value) -> List[str]:
    return list(value) if isinstance(value, list) else [value]


class FragmentAccumulator:
    """Lista ordenada de fragmentos, no máximo um por chave"""

    def __init__(self, label_builders: Optional[Dict[FilterKey, LabelBuilder]] = None):
        self._fragments: List[FilterFragment] = []
        self._label_builders = label_builders or {}

    def __len__(self) -> int:
        return len(self._fragments)

    def get(self, key: FilterKey) -> Optional[FilterFragment]:
        for fragment in self._fragments:
            if fragment.filter_key == key:
                return fragment
        return None

    def has(self, key: FilterKey) -> bool:
        return self.get(key) is not None

    @property
    def fragments(self) -> List[FilterFragment]:
        return list(self._fragments)

    def add(self, fragment: Optional[FilterFragment]) -> bool:
        """
        Incorpora o fragmento segundo a estratégia da chave.

        Returns:
            True se a lista mudou
        """
        if fragment is None:
            return False

        existing = self.get(fragment.filter_key)
        if existing is None:
            self._fragments.append(fragment)
            return True

        strategy = MERGE_STRATEGIES[fragment.filter_key]
        if strategy == MergeStrategy.FIRST_WINS:
            return False

        if strategy == MergeStrategy.REPLACE:
            self._swap(existing, fragment)
            return True

        merged = _as_list(existing.value)
        novos = [v for v in _as_list(fragment.value) if v not in merged]
        if not novos:
            return False
        merged.extend(novos)

        builder = self._label_builders.get(fragment.filter_key)
        label = builder(merged) if builder else f"{existing.label}, {fragment.label}"
        self._swap(existing, FilterFragment(filter_key=fragment.filter_key, value=merged, label=label))
        return True

    def _swap(self, old: FilterFragment, new: FilterFragment):
        index = self._fragments.index(old)
        self._fragments[index] = new
