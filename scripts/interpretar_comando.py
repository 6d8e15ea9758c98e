#!/usr/bin/env python3
"""
Script para testar o interpretador de voz na linha de comando

Uso:
    python scripts/interpretar_comando.py "canetas azuis até 30 reais"
    python scripts/interpretar_comando.py          # frases de exemplo
"""
import json
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT_DIR))

from catalog_voice.config import configure_logging
from catalog_voice.interpreter import VoiceCommandInterpreter
from catalog_voice.services.catalog_vocabulary import CatalogVocabularyService

FRASES_EXEMPLO = [
    "canetas azuis até 30 reais",
    "mochilas ecológicas",
    "produtos azuis e vermelhos",
    "garrafas de metal entre 20 e 50 reais em estoque",
    "ordenar por maior preço",
    "limpar filtros de cor azul",
    "buscar squeeze personalizado",
    "qual o sentido da vida",
]


def main():
    configure_logging("WARNING")
    vocabulary = CatalogVocabularyService().load()
    interpreter = VoiceCommandInterpreter(vocabulary)

    frases = sys.argv[1:] or FRASES_EXEMPLO
    for frase in frases:
        command = interpreter.parse(frase)
        print("=" * 70)
        print(f"🎙️  {frase}")
        print(f"➡️  {command.type.value}: {command.action}")
        print(json.dumps(command.to_payload(), ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
