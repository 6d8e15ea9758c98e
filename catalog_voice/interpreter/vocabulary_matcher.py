"""
Busca aproximada no vocabulário do catálogo.

Regra única para as quatro coleções: normaliza o termo falado e o nome do
candidato; casa se forem iguais, se o nome contém o termo ou se o termo
contém o nome. Vence o primeiro na ordem do catálogo.
"""
from typing import Iterable, Optional, Tuple, TypeVar

from ..models.vocabulary import CatalogVocabulary
from .text_normalizer import normalize

T = TypeVar("T")


def _first_match(token: str, candidates: Iterable[Tuple[str, T]]) -> Optional[T]:
    termo = normalize(token)
    if not termo:
        # Termo vazio estaria contido em qualquer nome
        return None
    for name, result in candidates:
        nome = normalize(name)
        if not nome:
            continue
        if nome == termo or termo in nome or nome in termo:
            return result
    return None


class VocabularyMatcher:
    """Resolve termos falados para entidades canônicas do catálogo"""

    def __init__(self, vocabulary: CatalogVocabulary):
        self.vocabulary = vocabulary

    def find_color(self, token: str) -> Optional[str]:
        """Nome canônico da cor (ex: "marinho" -> "Azul Marinho")"""
        return _first_match(token, ((c.name, c.name) for c in self.vocabulary.colors))

    def find_category(self, token: str) -> Optional[int]:
        """ID da categoria"""
        return _first_match(token, ((c.name, c.id) for c in self.vocabulary.categories))

    def find_supplier(self, token: str) -> Optional[str]:
        """ID do fornecedor"""
        return _first_match(token, ((s.name, s.id) for s in self.vocabulary.suppliers))

    def find_material(self, token: str) -> Optional[str]:
        """Nome do material como está no catálogo"""
        return _first_match(token, ((m, m) for m in self.vocabulary.materials))
