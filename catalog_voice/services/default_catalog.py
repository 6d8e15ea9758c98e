"""
Vocabulário padrão do catálogo de brindes (usado sem banco nem JSON)
"""

COLORS = [
    {"name": "Vermelho", "hex": "#EF4444", "group": "VERMELHO"},
    {"name": "Azul", "hex": "#3B82F6", "group": "AZUL"},
    {"name": "Verde", "hex": "#22C55E", "group": "VERDE"},
    {"name": "Branco", "hex": "#FFFFFF", "group": "BRANCO"},
    {"name": "Preto", "hex": "#1F2937", "group": "PRETO"},
    {"name": "Laranja", "hex": "#F97316", "group": "LARANJA"},
    {"name": "Amarelo", "hex": "#EAB308", "group": "AMARELO"},
    {"name": "Rosa", "hex": "#EC4899", "group": "ROSA"},
    {"name": "Cinza", "hex": "#6B7280", "group": "CINZA"},
    {"name": "Prata", "hex": "#C0C0C0", "group": "PRATA"},
    {"name": "Marrom", "hex": "#78350F", "group": "MARROM"},
    {"name": "Roxo", "hex": "#8B5CF6", "group": "ROXO"},
    {"name": "Dourado", "hex": "#D4AF37", "group": "DOURADO"},
    {"name": "Transparente", "hex": "transparent", "group": "TRANSPARENTE"},
]

CATEGORIES = [
    {"id": 192, "name": "AGRO"},
    {"id": 554, "name": "ALIMENTOS E BEBIDAS"},
    {"id": 124, "name": "BAR | COZINHA"},
    {"id": 194, "name": "CHAVEIROS"},
    {"id": 196, "name": "ECOLOGIA"},
    {"id": 198, "name": "EMBALAGENS"},
    {"id": 202, "name": "ESPORTES | AVENTURA | LAZER"},
    {"id": 126, "name": "FERRAMENTAS | UTILIDADES"},
    {"id": 204, "name": "FESTAS | EVENTOS"},
    {"id": 206, "name": "JOGOS E BRINQUEDOS"},
    {"id": 210, "name": "KIT GOURMET"},
    {"id": 214, "name": "PAPELARIA | ESCRITÓRIO"},
    {"id": 216, "name": "PET CARE"},
    {"id": 220, "name": "ROUPAS | CALÇADOS | ACESSÓRIOS"},
    {"id": 222, "name": "SAÚDE | BELEZA | BEM ESTAR"},
    {"id": 224, "name": "TECNOLOGIA | ELETRÔNICOS"},
    {"id": 552, "name": "TOALHAS | PRAIA"},
    {"id": 226, "name": "UTENSÍLIOS | DECORAÇÃO"},
    {"id": 228, "name": "VEÍCULOS"},
]

SUPPLIERS = [
    {"id": "xbz", "name": "XBZ Brindes"},
    {"id": "stricker", "name": "Stricker Brasil"},
    {"id": "asia", "name": "Asia Import"},
    {"id": "somarcas", "name": "Só Marcas"},
]

MATERIALS = [
    "ALUMÍNIO", "AÇO INOX", "METAL", "PLÁSTICO", "PLÁSTICO RÍGIDO",
    "PLÁSTICO FLEXÍVEL", "BAMBU", "MADEIRA", "VIDRO", "CERÂMICA",
    "PORCELANA", "TECIDO", "ALGODÃO", "POLIÉSTER", "COURO",
    "COURO SINTÉTICO", "SILICONE", "BORRACHA", "PAPEL", "CORTIÇA",
]
