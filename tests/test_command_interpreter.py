"""
Testes do interpretador de comandos de voz (fluxo completo)
"""
import pytest

from catalog_voice.interpreter import VoiceCommandInterpreter
from catalog_voice.models.command import CommandType, FilterKey, SortValue
from catalog_voice.services.catalog_vocabulary import default_vocabulary


class TestShortCircuit:
    """Limpar e ordenar vencem qualquer filtro"""

    def test_limpar_filtros(self, interpreter):
        command = interpreter.parse("limpar filtros")
        assert command.type == CommandType.CLEAR

    def test_limpar_vence_filtros_na_mesma_frase(self, interpreter):
        command = interpreter.parse("limpar filtros de cor azul")
        assert command.type == CommandType.CLEAR
        assert command.filters is None

    @pytest.mark.parametrize("frase", ["resetar", "Remover filtros", "LIMPAR tudo"])
    def test_sinonimos_de_limpar(self, interpreter, frase):
        assert interpreter.parse(frase).type == CommandType.CLEAR

    @pytest.mark.parametrize("frase,esperado", [
        ("ordenar por maior preço", SortValue.PRICE_DESC),
        ("ordenar por menor preço", SortValue.PRICE_ASC),
        ("ordenar pelo valor mais caro", SortValue.PRICE_DESC),
        ("ordem de preço", SortValue.PRICE_ASC),
        ("ordenar por nome", SortValue.NAME),
        ("ordem alfabética", SortValue.NAME),
        ("ordenar por estoque", SortValue.STOCK),
    ])
    def test_ordenacao(self, interpreter, frase, esperado):
        command = interpreter.parse(frase)
        assert command.type == CommandType.SORT
        assert command.sort_value == esperado

    def test_ordenar_sem_alvo_segue_pipeline(self, interpreter):
        command = interpreter.parse("ordenar canetas")
        assert command.type == CommandType.FILTER
        assert command.filter_key == FilterKey.CATEGORIES

    def test_ordenacao_ignora_filtros(self, interpreter):
        command = interpreter.parse("ordenar canetas azuis por menor preço")
        assert command.type == CommandType.SORT
        assert command.sort_value == SortValue.PRICE_ASC


class TestCompoundCommands:
    """Vários filtros numa frase só"""

    def test_canetas_azuis_ate_30_reais(self, interpreter):
        command = interpreter.parse("canetas azuis até 30 reais")

        assert command.type == CommandType.COMPOUND
        assert [f.filter_key for f in command.filters] == [
            FilterKey.CATEGORIES,
            FilterKey.COLORS,
            FilterKey.PRICE_RANGE,
        ]
        assert command.filters[0].value == ["1"]
        assert command.filters[1].value == ["Azul"]
        assert command.filters[2].value == ["0", "30"]
        assert command.action == "categoria Canetas • cor Azul • até R$ 30"

    def test_entre_substitui_teto_de_preco(self, interpreter):
        command = interpreter.parse("garrafas entre 20 e 50 reais")

        assert command.type == CommandType.COMPOUND
        price = [f for f in command.filters if f.filter_key == FilterKey.PRICE_RANGE]
        assert len(price) == 1
        assert price[0].value == ["20", "50"]
        assert "R$ 20 a R$ 50" in command.action

    def test_ordem_dos_filtros_segue_o_pipeline(self, interpreter):
        command = interpreter.parse("em estoque garrafas de metal entre 20 e 50 reais")

        assert [f.filter_key for f in command.filters] == [
            FilterKey.CATEGORIES,
            FilterKey.PRICE_RANGE,
            FilterKey.MATERIALS,
            FilterKey.IN_STOCK,
        ]
        assert command.filters[2].value == ["Metal"]

    def test_primeiro_material_vence(self, interpreter):
        command = interpreter.parse("canecas de bambu de vidro")

        materials = [f for f in command.filters if f.filter_key == FilterKey.MATERIALS]
        assert len(materials) == 1
        assert materials[0].value == ["Bambu"]

    def test_destaque_e_kit(self, interpreter):
        command = interpreter.parse("kits em destaque")

        assert command.type == CommandType.COMPOUND
        assert [f.filter_key for f in command.filters] == [FilterKey.FEATURED, FilterKey.IS_KIT]
        assert command.action == "destaques • kits"

    def test_separador_do_texto_de_acao(self, interpreter):
        command = interpreter.parse("canetas disponíveis")
        assert command.action == "categoria Canetas • em estoque"


class TestSingleFilter:
    """Exatamente um fragmento vira comando de filtro"""

    def test_mochilas_ecologicas_sem_material(self, interpreter):
        command = interpreter.parse("mochilas ecológicas")

        assert command.type == CommandType.FILTER
        assert command.filter_key == FilterKey.CATEGORIES
        assert command.value == ["2"]
        assert command.action == "Filtrar por categoria Mochilas"

    def test_gatilho_ecologico_que_e_material(self, interpreter):
        command = interpreter.parse("produtos de bambu")
        assert command.type == CommandType.FILTER
        assert command.filter_key == FilterKey.MATERIALS
        assert command.value == ["Bambu"]

    def test_cores_acumulam_num_fragmento(self, interpreter):
        command = interpreter.parse("produtos azuis e vermelhos")

        assert command.type == CommandType.FILTER
        assert command.filter_key == FilterKey.COLORS
        assert command.value == ["Azul", "Vermelho"]
        assert command.action == "Filtrar por cores Azul, Vermelho"

    def test_cor_repetida_nao_duplica(self, interpreter):
        command = interpreter.parse("azul, mais azul e azuis")
        assert command.value == ["Azul"]

    def test_fornecedor(self, interpreter):
        command = interpreter.parse("produtos do fornecedor xbz")
        assert command.filter_key == FilterKey.SUPPLIERS
        assert command.value == ["xbz"]
        assert command.action == "Filtrar por fornecedor XBZ Brindes"

    def test_preco_com_centavos(self, interpreter):
        command = interpreter.parse("até 29,90")
        assert command.filter_key == FilterKey.PRICE_RANGE
        assert command.value == ["0", "29.90"]
        assert command.action == "Filtrar por até R$ 29,90"

    def test_faixa_invertida_e_ordenada(self, interpreter):
        command = interpreter.parse("entre 50 e 10")
        assert command.value == ["10", "50"]


class TestLegacyFallback:
    """Padrões antigos só quando o builder composto não achou nada"""

    def test_cor_fora_das_cores_comuns(self, interpreter):
        command = interpreter.parse("filtrar por cor transparente")
        assert command.type == CommandType.FILTER
        assert command.filter_key == FilterKey.COLORS
        assert command.value == ["Transparente"]

    def test_categoria_por_tipo(self, interpreter):
        command = interpreter.parse("tipo agro")
        assert command.type == CommandType.FILTER
        assert command.filter_key == FilterKey.CATEGORIES
        assert command.value == ["6"]

    def test_busca_explicita_usa_o_resto_da_frase(self, interpreter):
        command = interpreter.parse("procurar brindes para evento")
        assert command.type == CommandType.SEARCH
        assert command.value == "brindes para evento"

    def test_cor_desconhecida_cai_na_busca(self, interpreter):
        command = interpreter.parse("cor fucsia")
        assert command.type == CommandType.SEARCH
        assert command.value == "cor fucsia"

    def test_somente_cor_quando_fala_em_filtrar(self, interpreter):
        command = interpreter.parse("filtrar só transparente")
        assert command.type == CommandType.FILTER
        assert command.filter_key == FilterKey.COLORS
        assert command.value == ["Transparente"]

    @pytest.mark.parametrize("frase", [
        "mostrar o catalogo",
        "mostrar a vitrine",
        "so o necessario",
        "apenas a lista",
    ])
    def test_frase_de_navegacao_nao_vira_cor(self, interpreter, frase):
        command = interpreter.parse(frase)
        assert command.type == CommandType.SEARCH
        assert command.value == frase

    def test_frase_de_navegacao_com_vocabulario_padrao(self):
        interpreter = VoiceCommandInterpreter(default_vocabulary())
        assert interpreter.parse("Mostrar o catálogo").type == CommandType.SEARCH


class TestUniversalFallback:
    """Toda frase gera exatamente um comando"""

    def test_frase_sem_filtro_vira_busca_original(self, interpreter):
        command = interpreter.parse("Qual o sentido da vida?")
        assert command.type == CommandType.SEARCH
        assert command.value == "Qual o sentido da vida?"
        assert command.action == 'Buscar "Qual o sentido da vida?"'

    @pytest.mark.parametrize("frase", [
        "", "   ", "!!!", "???", "12345", "r$", "entre e", "ção", "\n\t", None,
        "cor", "material", "fornecedor", "até", "ordenar",
    ])
    def test_nunca_falha(self, interpreter, frase):
        command = interpreter.parse(frase)
        assert command.type in (
            CommandType.SEARCH,
            CommandType.FILTER,
            CommandType.COMPOUND,
            CommandType.CLEAR,
            CommandType.SORT,
        )

    def test_unknown_nunca_e_retornado(self, interpreter):
        for frase in ["", "xyz", "limpar", "ordenar por nome", "canetas"]:
            assert interpreter.parse(frase).type != CommandType.UNKNOWN


class TestPayload:
    """Formato entregue ao despachante"""

    def test_payload_composto_em_camel_case(self, interpreter):
        payload = interpreter.parse("canetas azuis até 30 reais").to_payload()

        assert payload["type"] == "compound"
        assert payload["filters"][0]["filterKey"] == "categories"
        assert payload["filters"][2]["value"] == ["0", "30"]
        assert "sortValue" not in payload

    def test_payload_ordenacao(self, interpreter):
        payload = interpreter.parse("ordenar por nome").to_payload()
        assert payload == {"type": "sort", "action": "Ordenar por nome", "sortValue": "name"}
