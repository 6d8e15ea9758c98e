"""
Normalização de texto para comparações sem acento e sem caixa
"""
import unicodedata
from typing import Optional


def normalize(text: Optional[str]) -> str:
    """
    Minúsculas, decomposição NFD, remove acentos e espaços sobrando.

    Example:
        >>> normalize("  Canetas  AZUIS até R$ 30 ")
        'canetas azuis ate r$ 30'
    """
    if not text:
        return ""
    decomposed = unicodedata.normalize("NFD", text.lower())
    sem_acentos = "".join(c for c in decomposed if not unicodedata.combining(c))
    return " ".join(sem_acentos.split())
