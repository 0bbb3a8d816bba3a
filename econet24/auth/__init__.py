"""Authentication submodule – login handshake and anti-forgery token scraping."""

from econet24.auth.login import establish
from econet24.auth.token import extract_form_field

__all__ = [
    "establish",
    "extract_form_field",
]
