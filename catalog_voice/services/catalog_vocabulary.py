"""
Serviço de vocabulário do catálogo

Fontes, em ordem:
1. Postgres (DATABASE_URL/DIRECT_URL) - tabelas cores, categorias, fornecedores, materiais
2. Arquivo JSON (CATALOG_VOCABULARY_PATH)
3. Vocabulário padrão embutido
"""
import json
from typing import Optional
from urllib.parse import urlparse, parse_qsl, urlencode, urlunparse

import psycopg2
from psycopg2 import pool
from psycopg2.extras import RealDictCursor
from loguru import logger

from .. import config
from ..models.vocabulary import CatalogVocabulary
from . import default_catalog


DROP_QS_KEYS = {"pgbouncer", "connection_limit"}

QUERIES = {
    "colors": "SELECT id, nome AS name, hex, grupo AS \"group\" FROM cores WHERE ativo = TRUE ORDER BY ordem, nome",
    "categories": "SELECT id, nome AS name FROM categorias WHERE ativo = TRUE ORDER BY nome",
    "suppliers": "SELECT id, nome AS name FROM fornecedores WHERE ativo = TRUE ORDER BY nome",
    "materials": "SELECT nome FROM materiais WHERE ativo = TRUE ORDER BY ordem, nome",
}


def sanitize_pg_dsn(database_url: str) -> str:
    """Remove parâmetros incompatíveis com psycopg2"""
    u = urlparse(database_url)
    qs = dict(parse_qsl(u.query, keep_blank_values=True))
    for k in list(qs.keys()):
        if k in DROP_QS_KEYS:
            qs.pop(k, None)
    new_query = urlencode(qs, doseq=True)
    return urlunparse((u.scheme, u.netloc, u.path, u.params, new_query, u.fragment))


def default_vocabulary() -> CatalogVocabulary:
    return CatalogVocabulary.from_lists(
        colors=default_catalog.COLORS,
        categories=default_catalog.CATEGORIES,
        suppliers=default_catalog.SUPPLIERS,
        materials=default_catalog.MATERIALS,
    )


class CatalogVocabularyService:
    """Carrega o vocabulário usado pelo interpretador de voz"""

    def __init__(self, database_url: Optional[str] = None, vocabulary_path: Optional[str] = None):
        """
        Args:
            database_url: DSN do Postgres (ou usa env DATABASE_URL/DIRECT_URL)
            vocabulary_path: JSON com o vocabulário (ou usa env CATALOG_VOCABULARY_PATH)
        """
        self.database_url = database_url or config.get_database_url()
        self.vocabulary_path = vocabulary_path or config.get_vocabulary_path()
        self._pool = None
        self._vocabulary: Optional[CatalogVocabulary] = None

        if self.database_url:
            self.database_url = sanitize_pg_dsn(self.database_url)
            try:
                self._pool = pool.ThreadedConnectionPool(
                    minconn=1,
                    maxconn=2,
                    dsn=self.database_url,
                    sslmode="require",
                )
                logger.info("Connection pool Vocabulario criado (1-2 conexoes)")
            except Exception as e:
                logger.error(f"Erro ao criar pool vocabulario: {e}")
                self._pool = None

    def _get_connection(self):
        """Obtém conexão do pool, com fallback para conexão direta"""
        if self._pool:
            try:
                return self._pool.getconn()
            except Exception as e:
                logger.warning(f"Pool falhou, tentando conexao direta: {e}")
        if self.database_url:
            try:
                return psycopg2.connect(self.database_url, sslmode="require")
            except Exception as e:
                logger.error(f"Erro ao conectar diretamente: {e}")
        return None

    def _put_connection(self, conn):
        """Devolve conexão ao pool ou fecha se foi direta"""
        if not conn:
            return
        if self._pool:
            try:
                self._pool.putconn(conn)
                return
            except Exception as e:
                logger.debug(f"putconn falhou, fechando conexao: {e}")
        try:
            conn.close()
        except Exception as e:
            logger.debug(f"Erro ao fechar conexao: {e}")

    # ==================== Fontes ====================

    def load_from_database(self) -> Optional[CatalogVocabulary]:
        """Lê as quatro tabelas de vocabulário; None se indisponível"""
        if not self.database_url:
            return None

        conn = self._get_connection()
        if not conn:
            logger.error("Sem conexao disponivel para carregar vocabulario")
            return None

        try:
            cursor = conn.cursor(cursor_factory=RealDictCursor)
            rows = {}
            for key, query in QUERIES.items():
                cursor.execute(query)
                rows[key] = cursor.fetchall()
            cursor.close()

            vocabulary = CatalogVocabulary.from_lists(
                colors=[
                    {
                        "id": str(r["id"]) if r.get("id") is not None else None,
                        "name": r["name"],
                        "hex": r.get("hex"),
                        "group": r.get("group"),
                    }
                    for r in rows["colors"]
                ],
                categories=[dict(r) for r in rows["categories"]],
                suppliers=[{"id": str(r["id"]), "name": r["name"]} for r in rows["suppliers"]],
                materials=[r["nome"] for r in rows["materials"]],
            )
            logger.info(f"💾 Vocabulário carregado do banco: {vocabulary.summary()}")
            return vocabulary

        except Exception as e:
            logger.error(f"❌ Erro ao carregar vocabulário do banco: {e}")
            return None
        finally:
            self._put_connection(conn)

    def load_from_file(self) -> Optional[CatalogVocabulary]:
        """JSON no formato {colors, categories, suppliers, materials}"""
        if not self.vocabulary_path:
            return None
        try:
            with open(self.vocabulary_path, encoding="utf-8") as f:
                data = json.load(f)
            vocabulary = CatalogVocabulary.from_lists(
                colors=data.get("colors", []),
                categories=data.get("categories", []),
                suppliers=data.get("suppliers", []),
                materials=data.get("materials", []),
            )
            logger.info(f"📄 Vocabulário carregado de {self.vocabulary_path}: {vocabulary.summary()}")
            return vocabulary
        except Exception as e:
            logger.error(f"❌ Erro ao ler vocabulário {self.vocabulary_path}: {e}")
            return None

    def load(self) -> CatalogVocabulary:
        """Banco -> arquivo -> padrão embutido"""
        vocabulary = self.load_from_database() or self.load_from_file()
        if vocabulary is None:
            logger.info("ℹ️ Usando vocabulário padrão embutido")
            vocabulary = default_vocabulary()
        self._vocabulary = vocabulary
        return vocabulary

    @property
    def vocabulary(self) -> CatalogVocabulary:
        if self._vocabulary is None:
            return self.load()
        return self._vocabulary


# Singleton
_vocabulary_service: Optional[CatalogVocabularyService] = None


def get_vocabulary_service() -> CatalogVocabularyService:
    """Obtém instância singleton do serviço de vocabulário"""
    global _vocabulary_service
    if _vocabulary_service is None:
        _vocabulary_service = CatalogVocabularyService()
    return _vocabulary_service
