"""
Configuração via variáveis de ambiente (.env carregado com python-dotenv)

Variáveis:
- DATABASE_URL / DIRECT_URL: Postgres com as tabelas de vocabulário
- CATALOG_VOCABULARY_PATH: JSON com o vocabulário (alternativa ao banco)
- VOICE_HISTORY_MAX: tamanho máximo do histórico de comandos
- LOG_LEVEL: nível do loguru (padrão INFO)
"""
import os
import sys
from typing import Optional
from dotenv import load_dotenv
from loguru import logger

load_dotenv()


def get_database_url() -> Optional[str]:
    return os.getenv("DIRECT_URL") or os.getenv("DATABASE_URL")


def get_vocabulary_path() -> Optional[str]:
    return os.getenv("CATALOG_VOCABULARY_PATH")


def get_history_max() -> int:
    raw = os.getenv("VOICE_HISTORY_MAX", "100")
    try:
        return max(1, int(raw))
    except ValueError:
        logger.warning(f"⚠️ VOICE_HISTORY_MAX inválido ({raw}), usando 100")
        return 100


def configure_logging(level: Optional[str] = None):
    """Reconfigura o sink padrão do loguru com o nível do ambiente"""
    logger.remove()
    logger.add(sys.stderr, level=(level or os.getenv("LOG_LEVEL", "INFO")).upper())
