"""
Tabelas de palavras-chave do interpretador de voz (pt-BR).

Único lugar onde sinônimos entram. O interpretador recebe um KeywordTables
explícito; DEFAULT_KEYWORD_TABLES é só o padrão do catálogo de brindes.

Todas as palavras já estão normalizadas (minúsculas, sem acento). Cada
gatilho casa como palavra inteira e aceita plural em -s; outras flexões
(azuis, vermelha) precisam estar listadas.
"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple


def _frozen(mapping: dict) -> Mapping[str, Tuple[str, ...]]:
    return MappingProxyType({k: tuple(v) for k, v in mapping.items()})


@dataclass(frozen=True)
class KeywordTables:
    """Configuração imutável de vocabulário de gatilhos"""

    # conceito -> palavras que disparam o conceito
    category_keywords: Mapping[str, Tuple[str, ...]] = field(default_factory=lambda: _frozen({}))
    # conceito -> nome da categoria no catálogo (quando o conceito não é o nome)
    category_aliases: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    # cor comum -> formas flexionadas
    color_keywords: Mapping[str, Tuple[str, ...]] = field(default_factory=lambda: _frozen({}))
    eco_keywords: Tuple[str, ...] = ()
    # materiais aceitos em "de <material>" / "em <material>"
    material_terms: Tuple[str, ...] = ()

    clear_phrases: Tuple[str, ...] = ()
    stock_phrases: Tuple[str, ...] = ()
    featured_phrases: Tuple[str, ...] = ()
    kit_words: Tuple[str, ...] = ()

    def category_lookup_terms(self, concept: str) -> Tuple[str, ...]:
        """Termos tentados no catálogo para um conceito, em ordem"""
        alias = self.category_aliases.get(concept)
        return (alias, concept) if alias else (concept,)


DEFAULT_KEYWORD_TABLES = KeywordTables(
    category_keywords=_frozen({
        "caneta": ["caneta", "canetas", "esferografica", "lapiseira"],
        "caderno": ["caderno", "cadernos", "bloco de notas", "blocos de notas", "agenda", "agendas"],
        "mochila": ["mochila", "mochilas", "bolsa", "bolsas", "sacola", "sacolas", "necessaire"],
        "garrafa": ["garrafa", "garrafas", "squeeze", "squeezes", "garrafinha"],
        "caneca": ["caneca", "canecas", "copo", "copos", "taca", "tacas"],
        "chaveiro": ["chaveiro", "chaveiros"],
        "camiseta": ["camiseta", "camisetas", "camisa", "camisas", "avental", "aventais"],
        "eletronico": ["pendrive", "pen drive", "carregador", "carregadores", "power bank", "fone", "fones", "caixa de som"],
        "toalha": ["toalha", "toalhas", "guarda-sol"],
        "brinquedo": ["brinquedo", "brinquedos", "quebra-cabeca", "jogo de tabuleiro"],
        "ferramenta": ["ferramenta", "ferramentas", "lanterna", "lanternas", "canivete", "trena"],
        "embalagem": ["embalagem", "embalagens", "caixinha", "caixinhas"],
        "guarda-chuva": ["guarda-chuva", "guarda-chuvas", "sombrinha"],
    }),
    category_aliases=MappingProxyType({
        "caneta": "papelaria",
        "caderno": "papelaria",
        "mochila": "acessorios",
        "garrafa": "esportes",
        "caneca": "cozinha",
        "chaveiro": "chaveiros",
        "camiseta": "roupas",
        "eletronico": "tecnologia",
        "toalha": "toalhas",
        "brinquedo": "brinquedos",
        "ferramenta": "ferramentas",
        "embalagem": "embalagens",
        "guarda-chuva": "acessorios",
    }),
    color_keywords=_frozen({
        "azul": ["azul", "azuis"],
        "vermelho": ["vermelho", "vermelha"],
        "verde": ["verde"],
        "amarelo": ["amarelo", "amarela"],
        "preto": ["preto", "preta"],
        "branco": ["branco", "branca"],
        "rosa": ["rosa", "rosinha"],
        "roxo": ["roxo", "roxa"],
        "laranja": ["laranja"],
        "cinza": ["cinza"],
        "marrom": ["marrom", "marrons"],
        "dourado": ["dourado", "dourada"],
        "prata": ["prata", "prateado", "prateada"],
    }),
    eco_keywords=(
        "ecologico", "ecologica", "sustentavel", "sustentaveis",
        "reciclado", "reciclada", "reciclavel", "reciclaveis",
        "biodegradavel", "bambu", "cortica", "algodao",
    ),
    material_terms=(
        "metal", "plastico", "vidro", "silicone", "couro", "tecido", "aluminio", "inox",
    ),
    clear_phrases=("limpar", "resetar", "remover filtros", "limpar filtros"),
    stock_phrases=("em estoque", "disponivel", "disponiveis"),
    featured_phrases=("destaque", "destacado", "destacada"),
    kit_words=("kit", "kits"),
)
