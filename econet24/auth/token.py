"""Anti-forgery token extraction from the econet24 login page."""

from bs4 import BeautifulSoup

try:
    import lxml  # noqa: F401 – used as BeautifulSoup parser backend
    _BS4_PARSER = "lxml"
except ImportError:
    _BS4_PARSER = "html.parser"


def extract_form_field(html: str, name: str) -> str | None:
    """
    Return the ``value`` of the first ``<input name="...">`` in *html*.

    Returns None when the document has no such input or its value is empty.
    """
    soup = BeautifulSoup(html, _BS4_PARSER)
    field = soup.find("input", attrs={"name": name})
    if field is None:
        return None
    value = field.get("value")
    return value or None
