"""Static institutional content rendered on the home page."""

from typing import Any

CNPJ = "10.379.758/0001-36"
FOUNDED_ON = "01/10/1983"

HERO_STATS = [
    {"number": "40+", "label": "Anos de História"},
    {"number": "8", "label": "Municípios Atendidos"},
    {"number": "1000+", "label": "Vidas Impactadas"},
]

VALUES = [
    {"title": "Solidariedade", "description": "Amor ao próximo e compromisso com os mais vulneráveis"},
    {"title": "Justiça Social", "description": "Luta pela igualdade e dignidade humana"},
    {"title": "Participação", "description": "Protagonismo das comunidades em seu desenvolvimento"},
    {"title": "Sustentabilidade", "description": "Ações duradouras que respeitam o meio ambiente"},
]

PROJECTS = [
    {
        "title": "Convivência com o Semiárido",
        "description": (
            "Ações de convivência com o semiárido através de cisternas, quintais produtivos, "
            "feiras agroecológicas e casas de sementes crioulas."
        ),
    },
    {
        "title": "Economia Solidária",
        "description": (
            "Acompanhamento e fortalecimento de grupos de produção artesanal e agricultura familiar, "
            "promovendo autonomia econômica."
        ),
    },
    {
        "title": "Juventudes",
        "description": "Formação de jovens sobre políticas públicas, participação social e protagonismo comunitário.",
    },
    {
        "title": "Políticas Públicas",
        "description": (
            "Elaboração de Planos de Desenvolvimento Local Sustentável e participação em mesas "
            "de negociação com o poder público."
        ),
    },
]

BOARD = [
    {"role": "Presidente", "name": "Pe. Tomé da Silva"},
    {"role": "Vice-Presidente", "name": "Pe. Francisco de Assis Neto"},
    {"role": "Tesoureiro", "name": "Pe. José Marcone Martins"},
    {"role": "Secretária", "name": "Irmã Maria Elizete Sousa Carneiro"},
]
EXECUTIVE_COORDINATION = {"role": "Coordenação Executiva", "name": "José Maria Gomes Vasconcelos"}
COUNCIL = [
    {"kind": "Titular", "name": "Francisco Mendes Silva"},
    {"kind": "Titular", "name": "Maria Luciana Torres Ribeiro"},
    {"kind": "Titular", "name": "Antônio Elizeu Gomes da Silva"},
    {"kind": "Suplente", "name": "Aline Patrícia Nobre Pereira"},
    {"kind": "Suplente", "name": "Francisca Edileusa de Oliveira"},
    {"kind": "Suplente", "name": "Francisca Lucivânia Rodrigues de Sousa"},
]

DONATION = {
    "bank": "Bradesco (237)",
    "agency": "0702",
    "account": "15631-0",
    "cnpj": CNPJ,
    "pix": "caritassobral@hotmail.com",
}

CEARA_SEM_FOME_URL = "https://www.cearasemfome.ce.gov.br/"

CONTACT_INFO = [
    {
        "title": "Endereço",
        "content": "Praça Quirino Rodrigues, 76 - Sala 04",
        "subtitle": "Centro - Sobral/CE - CEP 62011-260",
    },
    {"title": "Telefones", "content": "(88) 9.9425-3039", "subtitle": "(88) 9.9961-9348"},
    {"title": "E-mail", "content": "caritassobral@hotmail.com", "subtitle": ""},
    {"title": "Instagram", "content": "@caritassobral", "subtitle": ""},
]

MAP_CENTER = (-3.6, -40.35)
MAP_ZOOM = 9
MAP_LOTS: dict[str, list[dict[str, Any]]] = {
    "Lote 22": [
        {"name": "Sobral", "coords": [-3.6866, -40.3497]},
        {"name": "Forquilha", "coords": [-3.7972, -40.2672]},
        {"name": "Groaíras", "coords": [-3.9167, -40.3833]},
    ],
    "Lote 37": [
        {"name": "Alcântaras", "coords": [-3.5833, -40.5500]},
        {"name": "Meruoca", "coords": [-3.5472, -40.4561]},
        {"name": "Massapê", "coords": [-3.5186, -40.3453]},
        {"name": "Santana do Acaraú", "coords": [-3.4619, -40.2156]},
        {"name": "Senador Sá", "coords": [-3.3531, -40.4692]},
    ],
}


def map_markers() -> list[dict[str, Any]]:
    """Flattens the served municipalities into Leaflet markers.

    Returns:
        One dictionary per municipality with `name`, `lot` and `coords`.
    """
    return [
        {"name": place["name"], "lot": lot, "coords": place["coords"]}
        for lot, places in MAP_LOTS.items()
        for place in places
    ]
