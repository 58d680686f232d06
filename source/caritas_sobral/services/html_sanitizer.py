"""This module cleans the rich-text body of news articles before it is stored.

The admin editor produces a small subset of HTML (paragraphs, headings,
lists, emphasis, links and images). Anything outside that subset is
removed so the body can be rendered unescaped on the public site.
"""

from bs4 import BeautifulSoup, Comment

ALLOWED_TAGS = {
    "p",
    "br",
    "strong",
    "b",
    "em",
    "i",
    "u",
    "s",
    "blockquote",
    "h1",
    "h2",
    "h3",
    "h4",
    "ul",
    "ol",
    "li",
    "a",
    "img",
    "span",
}
ALLOWED_ATTRIBUTES = {
    "a": {"href", "title", "target", "rel"},
    "img": {"src", "alt", "title"},
}
REMOVED_WITH_CONTENT = {"script", "style", "iframe", "object", "embed", "form", "noscript"}
SAFE_URL_SCHEMES = ("http://", "https://", "mailto:", "/", "#")


def _is_safe_url(value: str) -> bool:
    return value.strip().lower().startswith(SAFE_URL_SCHEMES)


def sanitize_html(html: str | None) -> str | None:
    """Reduces an HTML fragment to the allowed tags and attributes.

    Disallowed tags are unwrapped (their text is kept), except for active
    content such as `<script>`, which is dropped together with its content.
    Links and images only keep http(s), mailto and site-relative targets,
    and links opening a new tab get `rel="noopener noreferrer"`.

    Args:
        html: The fragment submitted by the editor.

    Returns:
        The cleaned fragment, or None when nothing meaningful is left.
    """
    if html is None:
        return None

    soup = BeautifulSoup(html, "html.parser")
    for comment in soup.find_all(string=lambda node: isinstance(node, Comment)):
        comment.extract()

    for tag in soup.find_all(True):
        if tag.decomposed:
            continue
        if tag.name in REMOVED_WITH_CONTENT:
            tag.decompose()
            continue
        if tag.name not in ALLOWED_TAGS:
            tag.unwrap()
            continue

        allowed = ALLOWED_ATTRIBUTES.get(tag.name, set())
        for attribute in list(tag.attrs):
            if attribute not in allowed:
                del tag.attrs[attribute]
        for url_attribute in ("href", "src"):
            if url_attribute in tag.attrs and not _is_safe_url(str(tag.attrs[url_attribute])):
                del tag.attrs[url_attribute]
        if tag.name == "a" and tag.get("target") == "_blank":
            tag["rel"] = "noopener noreferrer"

    cleaned = str(soup).strip()
    if not soup.get_text(strip=True) and soup.find("img") is None:
        return None
    return cleaned
