"""
Testes dos extratores individuais (texto já normalizado)
"""
import pytest

from catalog_voice.interpreter import extractors
from catalog_voice.interpreter.extractors import ExtractionContext
from catalog_voice.interpreter.keyword_tables import DEFAULT_KEYWORD_TABLES, KeywordTables
from catalog_voice.interpreter.vocabulary_matcher import VocabularyMatcher
from catalog_voice.models.command import FilterKey, SortValue
from catalog_voice.services.catalog_vocabulary import default_vocabulary


@pytest.fixture
def ctx(vocabulary):
    return ExtractionContext(
        vocabulary=vocabulary,
        matcher=VocabularyMatcher(vocabulary),
        tables=DEFAULT_KEYWORD_TABLES,
    )


class TestParseAmount:

    @pytest.mark.parametrize("raw,esperado", [
        ("30", "30"),
        ("29,90", "29.90"),
        ("29.90", "29.90"),
        ("1.500", "1500"),
        ("1.500,50", "1500.50"),
        ("100,00", "100"),
    ])
    def test_valores(self, raw, esperado):
        assert extractors.parse_amount(raw) == esperado


class TestShortCircuitDetectors:

    def test_clear(self):
        assert extractors.detect_clear("limpar filtros de cor azul", DEFAULT_KEYWORD_TABLES)
        assert not extractors.detect_clear("canetas azuis", DEFAULT_KEYWORD_TABLES)

    def test_sort_sem_alvo(self):
        assert extractors.detect_sort("ordenar canetas") is None

    def test_sort_preco_padrao_crescente(self):
        sort_value, action = extractors.detect_sort("ordenar por preco")
        assert sort_value == SortValue.PRICE_ASC
        assert action == "Ordenar por preço"

    def test_sort_maior_preco(self):
        sort_value, _ = extractors.detect_sort("ordenar por maior preco")
        assert sort_value == SortValue.PRICE_DESC


class TestPriceExtractors:

    @pytest.mark.parametrize("texto,teto", [
        ("ate 50", "50"),
        ("menos de 100", "100"),
        ("abaixo de 200", "200"),
        ("no maximo 15", "15"),
        ("30 reais", "30"),
        ("ate r$ 45", "45"),
        ("r$ 12", "12"),
    ])
    def test_teto(self, ctx, texto, teto):
        fragment = extractors.extract_price_upper_bound(texto, ctx)
        assert fragment.filter_key == FilterKey.PRICE_RANGE
        assert fragment.value == ["0", teto]

    def test_sem_numero(self, ctx):
        assert extractors.extract_price_upper_bound("ate amanha", ctx) is None

    def test_ate_precisa_ser_palavra(self, ctx):
        assert extractors.extract_price_upper_bound("abacate 30", ctx) is None

    def test_faixa(self, ctx):
        fragment = extractors.extract_price_range("entre 10 e 30 reais", ctx)
        assert fragment.value == ["10", "30"]
        assert fragment.label == "R$ 10 a R$ 30"

    def test_faixa_ausente(self, ctx):
        assert extractors.extract_price_range("ate 30", ctx) is None


class TestKeywordScans:

    def test_categorias_varios_conceitos(self, ctx):
        fragment = extractors.extract_categories("canetas e mochilas", ctx)
        assert fragment.value == ["1", "2"]
        assert fragment.label == "categorias Canetas, Mochilas"

    def test_categoria_sem_correspondencia_no_catalogo(self, ctx):
        # conceito "chaveiro" existe na tabela mas não no vocabulário de teste
        assert extractors.extract_categories("chaveiros", ctx) is None

    def test_gatilho_no_inicio_da_palavra(self, ctx):
        # "copo" não deve disparar dentro de "microcopo"
        assert extractors.extract_categories("microcopo", ctx) is None

    def test_cores_na_ordem_da_frase(self, ctx):
        fragment = extractors.extract_colors("pretas, brancas e azuis", ctx)
        assert fragment.value == ["Preto", "Branco", "Azul"]

    def test_cor_comum_fora_do_catalogo_e_ignorada(self, ctx):
        assert extractors.extract_colors("canetas roxas", ctx) is None

    def test_material_por_frase(self, ctx):
        fragment = extractors.extract_material_phrase("material de vidro", ctx)
        assert fragment.value == ["Vidro"]

    def test_material_em_inox(self, ctx):
        fragment = extractors.extract_material_phrase("garrafa em inox", ctx)
        assert fragment.value == ["Aço Inox"]

    def test_material_desconhecido(self, ctx):
        assert extractors.extract_material_phrase("material madeira", ctx) is None

    def test_estoque_destaque_kit(self, ctx):
        assert extractors.extract_in_stock("so o que tem em estoque", ctx).value == "true"
        assert extractors.extract_featured("produtos destacados", ctx).value == "true"
        assert extractors.extract_kit("kit churrasco", ctx).filter_key == FilterKey.IS_KIT
        assert extractors.extract_kit("kitchenette", ctx) is None

    def test_tabelas_customizadas(self, vocabulary):
        tables = KeywordTables(
            category_keywords={"mochila": ("backpack",)},
            color_keywords={"azul": ("blue",)},
        )
        ctx = ExtractionContext(
            vocabulary=vocabulary,
            matcher=VocabularyMatcher(vocabulary),
            tables=tables,
        )
        assert extractors.extract_categories("blue backpack", ctx).value == ["2"]
        assert extractors.extract_colors("blue backpack", ctx).value == ["Azul"]
        assert extractors.extract_kit("kit", ctx) is None


class TestNumeroMalformado:

    @pytest.mark.parametrize("texto", ["ate 1.5000", "ate 1.5000 reais", "ate 12,345"])
    def test_nao_corta_o_numero(self, ctx, texto):
        assert extractors.extract_price_upper_bound(texto, ctx) is None

    def test_milhar_com_centavos(self, ctx):
        fragment = extractors.extract_price_upper_bound("ate 1.500,50", ctx)
        assert fragment.value == ["0", "1500.50"]
        assert fragment.label == "até R$ 1500,50"

    def test_virgula_depois_do_numero(self, ctx):
        fragment = extractors.extract_price_upper_bound("ate 30, so azul", ctx)
        assert fragment.value == ["0", "30"]


class TestPalavraInteira:
    """Gatilho casa como palavra inteira, aceitando plural em -s"""

    @pytest.fixture
    def default_ctx(self):
        vocabulary = default_vocabulary()
        return ExtractionContext(
            vocabulary=vocabulary,
            matcher=VocabularyMatcher(vocabulary),
            tables=DEFAULT_KEYWORD_TABLES,
        )

    def test_prefixo_nao_dispara_categoria(self, default_ctx):
        assert extractors.extract_categories("agendar reuniao amanha", default_ctx) is None

    def test_plural_dispara_categoria(self, default_ctx):
        assert extractors.extract_categories("agendas", default_ctx).value == ["214"]

    def test_prefixo_nao_dispara_cor(self, default_ctx):
        assert extractors.extract_colors("azulejo para cozinha", default_ctx) is None

    def test_find_trigger(self):
        assert extractors.find_trigger("canetas verdes", "verde") == 8
        assert extractors.find_trigger("esverdeado", "verde") is None
        assert extractors.find_trigger("verdejante", "verde") is None
