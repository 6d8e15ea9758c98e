"""
Modelos do vocabulário do catálogo (cores, categorias, fornecedores, materiais)
"""
from typing import Optional, List, Tuple
from pydantic import BaseModel, ConfigDict, Field


# ==================== Entradas ====================

class ColorEntry(BaseModel):
    """Cor do catálogo"""
    model_config = ConfigDict(frozen=True)

    name: str
    id: Optional[str] = None
    hex: Optional[str] = None
    group: Optional[str] = None  # Família usada para destacar cores parecidas


class CategoryEntry(BaseModel):
    """Categoria principal do catálogo"""
    model_config = ConfigDict(frozen=True)

    id: int
    name: str


class SupplierEntry(BaseModel):
    """Fornecedor"""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str


# ==================== Vocabulário ====================

class CatalogVocabulary(BaseModel):
    """Vocabulário completo, somente leitura, na ordem do catálogo"""
    model_config = ConfigDict(frozen=True)

    colors: Tuple[ColorEntry, ...] = Field(default_factory=tuple)
    categories: Tuple[CategoryEntry, ...] = Field(default_factory=tuple)
    suppliers: Tuple[SupplierEntry, ...] = Field(default_factory=tuple)
    materials: Tuple[str, ...] = Field(default_factory=tuple)

    def summary(self) -> dict:
        """Contagem por coleção (usado no health check)"""
        return {
            "colors": len(self.colors),
            "categories": len(self.categories),
            "suppliers": len(self.suppliers),
            "materials": len(self.materials),
        }

    def category_name(self, category_id: int) -> Optional[str]:
        for category in self.categories:
            if category.id == category_id:
                return category.name
        return None

    def supplier_name(self, supplier_id: str) -> Optional[str]:
        for supplier in self.suppliers:
            if supplier.id == supplier_id:
                return supplier.name
        return None

    @classmethod
    def from_lists(
        cls,
        colors: List[dict],
        categories: List[dict],
        suppliers: List[dict],
        materials: List[str],
    ) -> "CatalogVocabulary":
        """Monta o vocabulário a partir de dicts crus (JSON ou banco)"""
        return cls(
            colors=tuple(ColorEntry(**c) for c in colors),
            categories=tuple(CategoryEntry(**c) for c in categories),
            suppliers=tuple(SupplierEntry(**s) for s in suppliers),
            materials=tuple(materials),
        )
