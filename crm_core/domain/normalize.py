import re
import unicodedata

SLUG_MAX_LENGTH = 50
DEFAULT_SLUG = "workspace"


def normalize_email(email: str) -> str:
    """
    Normalize an email address for storage and lookup.

    Used by signup, login and password reset so matching is case-insensitive.

    >>> normalize_email("  User@Example.COM  ")
    'user@example.com'
    """
    return email.strip().lower()


def generate_slug(name: str) -> str:
    """
    Build a URL slug from a workspace name.

    Accents are stripped, runs of other characters collapse to a single dash.

    >>> generate_slug("Café Déjà Vu!")
    'cafe-deja-vu'
    """
    decomposed = unicodedata.normalize("NFD", name.lower())
    ascii_only = "".join(c for c in decomposed if not unicodedata.combining(c))
    slug = re.sub(r"[^a-z0-9]+", "-", ascii_only).strip("-")
    return slug[:SLUG_MAX_LENGTH] or DEFAULT_SLUG
