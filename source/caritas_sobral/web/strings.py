"""
This module contains the display strings for the site.
Keeping them here allows the codebase to remain in English while serving Portuguese content.
"""

# Meta
SITE_TITLE = "Cáritas Diocesana de Sobral"
SITE_DESCRIPTION = "Desde 1983 transformando vidas no semiárido cearense."
SITE_TAGLINE = "A Solidariedade que Transforma"
FOOTER_TEXT = "© Cáritas Diocesana de Sobral. Todos os direitos reservados."

# Navigation
NAV_HOME = "Início"
NAV_ABOUT = "Sobre"
NAV_PROJECTS = "Projetos"
NAV_TEAM = "Equipe"
NAV_COLLABORATE = "Colabore"
NAV_NEWS = "Notícias"
NAV_EDITAIS = "Editais"
NAV_CONTACT = "Contato"
NAV_ADMIN = "Área administrativa"

# Hero
HERO_BADGE = "Desde 1983 transformando vidas"
HERO_TITLE = "SOLIDARIEDADE QUE TRANSFORMA VIDAS"
HERO_SUBTITLE = (
    "Atuamos junto às comunidades do semiárido cearense promovendo justiça social, "
    "convivência com o semiárido e economia solidária."
)
HERO_CTA_PRIMARY = "Conheça nossos projetos"
HERO_CTA_SECONDARY = "Como ajudar"

# About
ABOUT_TITLE = "Cáritas Diocesana"
ABOUT_HISTORY_TITLE = "Nossa História"
ABOUT_HISTORY = (
    "A Cáritas Diocesana de Sobral foi fundada em 1 de outubro de 1983 com a missão de "
    "testemunhar a solidariedade cristã junto aos mais pobres."
)
ABOUT_MISSION_TITLE = "Nossa Missão"
ABOUT_MISSION = (
    "Testemunhar e anunciar o Evangelho de Jesus Cristo, defendendo e promovendo a vida, "
    "participando da construção solidária de uma sociedade justa e igualitária."
)
ABOUT_CNPJ_LABEL = "CNPJ"
ABOUT_FOUNDED_LABEL = "Fundação"

# Projects / team / programs
PROJECTS_TITLE = "Nossos Projetos"
TEAM_TITLE = "Nossa Equipe"
TEAM_SUBTITLE = "Pessoas dedicadas que fazem a diferença todos os dias"
TEAM_BOARD = "Diretoria"
TEAM_COUNCIL = "Conselho Fiscal"
CSF_BADGE = "Programa Estadual"
CSF_TITLE = "Ceará Sem Fome"
CSF_TEXT = (
    "A Cáritas Diocesana de Sobral é gestora local do Programa Ceará Sem Fome, "
    "garantindo alimentação adequada às famílias em situação de vulnerabilidade."
)
CSF_LINK_LABEL = "Conheça o programa"

# Collaborate
COLLAB_TITLE = "Colabore Conosco"
COLLAB_VOLUNTEER_TITLE = "Seja Voluntário"
COLLAB_DONATE_TITLE = "Faça uma Doação"
COLLAB_BANK_LABEL = "Banco"
COLLAB_AGENCY_LABEL = "Agência"
COLLAB_ACCOUNT_LABEL = "Conta"
COLLAB_PIX_LABEL = "PIX (E-mail)"

# News
NEWS_TITLE = "Últimas Notícias"
NEWS_EMPTY = "Nenhuma notícia publicada ainda."
NEWS_READ_MORE = "Leia mais"
NEWS_BACK = "Voltar"

# Map
MAP_TITLE = "Onde Atuamos"
MAP_SUBTITLE = "Municípios atendidos pelos Lotes 22 e 37"

# Contact
CONTACT_TITLE = "Entre em Contato"
CONTACT_SUBTITLE = "Estamos prontos para ouvir você"
CONTACT_NAME = "Nome"
CONTACT_EMAIL = "E-mail"
CONTACT_PHONE = "Telefone"
CONTACT_MESSAGE = "Mensagem"
CONTACT_SUBMIT = "Enviar pelo WhatsApp"
CONTACT_MISSING_FIELDS = "Informe seu nome e sua mensagem."

# Public editais
EDITAIS_TITLE = "Editais"
EDITAIS_SUBTITLE = "Acompanhe os editais publicados pela Cáritas Diocesana de Sobral"
EDITAIS_SEARCH_PLACEHOLDER = "Buscar por nome..."
EDITAIS_ALL_STATUSES = "Todos os status"
EDITAIS_EMPTY = "Nenhum edital encontrado."
EDITAIS_PUBLISHED_ON = "Publicado em"
EDITAIS_DEADLINE = "Finalização"
EDITAIS_DOCUMENT = "Ver documento"

# Auth
LOGIN_TITLE = "Acesso administrativo"
LOGIN_EMAIL = "E-mail"
LOGIN_PASSWORD = "Senha"
LOGIN_SUBMIT = "Entrar"
LOGOUT = "Sair"
SESSION_EXPIRED = "Sessão expirada. Faça login novamente."
SIGNED_OUT = "Você saiu da área administrativa."

# Admin
ADMIN_EDITAIS = "Editais"
ADMIN_NOTICIAS = "Notícias"
ADMIN_PATRIMONIO = "Patrimônio"
ADMIN_NEW = "Novo"
ADMIN_EDIT = "Editar"
ADMIN_DELETE = "Excluir"
ADMIN_SAVE = "Salvar"
ADMIN_CANCEL = "Cancelar"
ADMIN_SEARCH = "Buscar"
ADMIN_CONFIRM_DELETE = "Tem certeza que deseja excluir"
ADMIN_CONFIRM_DELETE_HINT = "Esta ação não pode ser desfeita."
ADMIN_SAVED = "Registro salvo com sucesso."
ADMIN_DELETED = "Registro excluído com sucesso."
ADMIN_FORM_ERRORS = "Corrija os campos destacados."
ADMIN_IN_PROGRESS_HINT = '"Em andamento" fica disponível apenas após a data de finalização.'
ADMIN_ACTIVE = "Ativa"
ADMIN_INACTIVE = "Inativa"
ADMIN_TOGGLED = "Visibilidade da notícia atualizada."
ADMIN_MOVEMENT_SAVED = "Movimentação registrada com sucesso."
ADMIN_MOVEMENTS_TITLE = "Histórico de Movimentações"
ADMIN_MOVEMENTS_EMPTY = "Nenhuma movimentação registrada."
ADMIN_NEW_MOVEMENT = "Registrar Nova Movimentação"
ADMIN_REPORT = "Relatório"
ADMIN_REPORT_GENERATE = "Gerar relatório"
ADMIN_REPORT_PRINT = "Imprimir"
ADMIN_REPORT_CSV = "Baixar CSV"
ADMIN_REPORT_EMPTY = "Nenhum bem encontrado para os filtros informados."

# Pagination
PAGINATION_PREV = "Anterior"
PAGINATION_NEXT = "Próxima"
PAGINATION_OF = "de"

# Errors
NOT_FOUND_TITLE = "Página não encontrada"
NOT_FOUND_TEXT = "O endereço acessado não existe ou foi removido."
NOT_FOUND_BACK = "Voltar para o início"
