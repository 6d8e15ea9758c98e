"""
Fixtures compartilhadas dos testes do interpretador
"""
import pytest

from catalog_voice.interpreter import VoiceCommandInterpreter
from catalog_voice.models.vocabulary import CatalogVocabulary


@pytest.fixture
def vocabulary():
    """Vocabulário pequeno, com categorias que batem com os conceitos padrão"""
    return CatalogVocabulary.from_lists(
        colors=[
            {"id": "c1", "name": "Vermelho", "group": "VERMELHO"},
            {"id": "c2", "name": "Azul", "group": "AZUL"},
            {"id": "c3", "name": "Verde", "group": "VERDE"},
            {"id": "c4", "name": "Preto", "group": "PRETO"},
            {"id": "c5", "name": "Branco", "group": "BRANCO"},
            {"id": "c6", "name": "Transparente", "group": "TRANSPARENTE"},
        ],
        categories=[
            {"id": 1, "name": "Canetas"},
            {"id": 2, "name": "Mochilas"},
            {"id": 3, "name": "Garrafas"},
            {"id": 4, "name": "Canecas"},
            {"id": 6, "name": "Agro"},
        ],
        suppliers=[
            {"id": "xbz", "name": "XBZ Brindes"},
            {"id": "stricker", "name": "Stricker Brasil"},
        ],
        materials=["Metal", "Plástico", "Bambu", "Vidro", "Aço Inox"],
    )


@pytest.fixture
def interpreter(vocabulary):
    return VoiceCommandInterpreter(vocabulary)
