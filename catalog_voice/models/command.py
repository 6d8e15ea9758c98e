"""
Modelos do comando interpretado (saída do interpretador de voz)

O comando é entregue ao despachante do painel de filtros, que espera as
chaves em camelCase (filterKey, sortValue). Por isso os campos têm alias.
"""
from enum import Enum
from typing import Optional, List, Union
from pydantic import BaseModel, ConfigDict, Field, model_validator


class FilterKey(str, Enum):
    """Chaves que o painel de filtros entende"""
    CATEGORIES = "categories"
    COLORS = "colors"
    SUPPLIERS = "suppliers"
    MATERIALS = "materials"
    PRICE_RANGE = "priceRange"
    IN_STOCK = "inStock"
    FEATURED = "featured"
    IS_KIT = "isKit"


class CommandType(str, Enum):
    """Tipo do comando interpretado"""
    CLEAR = "clear"
    SORT = "sort"
    FILTER = "filter"
    COMPOUND = "compound"
    SEARCH = "search"
    UNKNOWN = "unknown"  # Nunca retornado: busca é o fallback universal


class SortValue(str, Enum):
    """Ordenações suportadas pela listagem"""
    PRICE_ASC = "price-asc"
    PRICE_DESC = "price-desc"
    NAME = "name"
    STOCK = "stock"


FragmentValue = Union[str, List[str]]


class FilterFragment(BaseModel):
    """Uma mudança de filtro extraída da frase"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    filter_key: FilterKey = Field(..., alias="filterKey")
    value: FragmentValue
    label: str = Field(..., description="Trecho legível usado no texto de ação")

    @model_validator(mode="after")
    def _sem_cores_repetidas(self):
        if self.filter_key == FilterKey.COLORS and isinstance(self.value, list):
            if len(set(self.value)) != len(self.value):
                raise ValueError("fragmento de cores com nomes repetidos")
        return self


class ParsedCommand(BaseModel):
    """
    Resultado único de uma interpretação.

    Variante marcada por `type`:
    - clear: action
    - sort: sort_value, action
    - filter: filter_key, value, action
    - compound: filters (2+), action
    - search: value, action
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: CommandType
    action: str
    value: Optional[FragmentValue] = None
    filter_key: Optional[FilterKey] = Field(None, alias="filterKey")
    sort_value: Optional[SortValue] = Field(None, alias="sortValue")
    filters: Optional[List[FilterFragment]] = None

    @model_validator(mode="after")
    def _validar_variante(self):
        if self.type == CommandType.COMPOUND:
            if not self.filters or len(self.filters) < 2:
                raise ValueError("comando composto exige 2 ou mais filtros")
        elif self.filters is not None:
            raise ValueError(f"comando '{self.type.value}' não carrega lista de filtros")

        if self.type == CommandType.FILTER:
            if self.filter_key is None or self.value is None:
                raise ValueError("comando de filtro exige filterKey e value")
        elif self.filter_key is not None:
            raise ValueError(f"comando '{self.type.value}' não carrega filterKey")

        if self.type == CommandType.SORT:
            if self.sort_value is None:
                raise ValueError("comando de ordenação exige sortValue")
        elif self.sort_value is not None:
            raise ValueError(f"comando '{self.type.value}' não carrega sortValue")

        if self.type == CommandType.SEARCH and self.value is None:
            raise ValueError("comando de busca exige value")
        return self

    # ==================== Construtores ====================

    @classmethod
    def clear(cls, action: str = "Limpar todos os filtros") -> "ParsedCommand":
        return cls(type=CommandType.CLEAR, action=action)

    @classmethod
    def sort(cls, sort_value: SortValue, action: str) -> "ParsedCommand":
        return cls(type=CommandType.SORT, sort_value=sort_value, action=action)

    @classmethod
    def search(cls, query: str) -> "ParsedCommand":
        return cls(type=CommandType.SEARCH, value=query, action=f'Buscar "{query}"')

    @classmethod
    def single_filter(cls, fragment: FilterFragment) -> "ParsedCommand":
        return cls(
            type=CommandType.FILTER,
            filter_key=fragment.filter_key,
            value=fragment.value,
            action=f"Filtrar por {fragment.label}",
        )

    @classmethod
    def compound(cls, fragments: List[FilterFragment], separator: str = " • ") -> "ParsedCommand":
        return cls(
            type=CommandType.COMPOUND,
            filters=list(fragments),
            action=separator.join(f.label for f in fragments),
        )

    def to_payload(self) -> dict:
        """Formato consumido pelo despachante (camelCase, sem campos vazios)"""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
