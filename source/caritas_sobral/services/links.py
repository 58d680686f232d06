"""This module builds outbound links: external news URLs and the contact link."""

from urllib.parse import quote

from caritas_sobral.models.noticias import LinkKind, Noticia, NoticiaLink

WHATSAPP_BASE_URL = "https://wa.me"


def normalize_url(url: str) -> str:
    """Makes a user-typed address absolute.

    Args:
        url: The address, such as "example.com" or "//example.com".

    Returns:
        The address with an explicit scheme. `http://` and `https://`
        addresses are returned unchanged; scheme-relative and bare ones get
        `https://`.
    """
    url = url.strip()
    lowered = url.lower()
    if lowered.startswith(("http://", "https://")):
        return url
    if url.startswith("//"):
        return f"https:{url}"
    return f"https://{url}"


def noticia_link(noticia: Noticia) -> NoticiaLink:
    """Resolves where a news article's "read more" link points to.

    Args:
        noticia: The article.

    Returns:
        An external link when the article has a URL, even if it also has a
        body; otherwise a link to the article's own page.
    """
    if noticia.url and noticia.url.strip():
        return NoticiaLink(kind=LinkKind.EXTERNAL, href=normalize_url(noticia.url))
    return NoticiaLink(kind=LinkKind.INTERNAL, href=f"/noticia/{noticia.id}")


def build_whatsapp_url(
    phone_number: str,
    nome: str,
    mensagem: str,
    email: str | None = None,
    telefone: str | None = None,
) -> str:
    """Builds the prefilled WhatsApp link the contact form opens.

    Args:
        phone_number: The destination number with country code.
        nome: The visitor's name.
        mensagem: The visitor's message.
        email: The visitor's optional e-mail.
        telefone: The visitor's optional phone number.

    Returns:
        A `https://wa.me/<number>?text=<message>` URL with the message
        percent-encoded.
    """
    digits = "".join(char for char in phone_number if char.isdigit())
    text = "\n".join(
        [
            "*Contato via Site*",
            "",
            f"*Nome:* {nome.strip()}",
            f"*Email:* {(email or '').strip()}",
            f"*Telefone:* {(telefone or '').strip()}",
            f"*Mensagem:* {mensagem.strip()}",
        ]
    )
    return f"{WHATSAPP_BASE_URL}/{digits}?text={quote(text, safe='')}"
