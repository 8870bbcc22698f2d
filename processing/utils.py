import re
from typing import List, Optional
from urllib.parse import urljoin, urlsplit

# coupure de lignes : "\n" ou "\r\n"
LINE_BREAK_RE = re.compile(r"\r?\n")
SCHEME_RE = re.compile(r"^https?://", re.I)


def split_lines(text: str) -> List[str]:
    """
    Découpe un texte en lignes nettoyées.

    Args:
        text (str): Texte multi-lignes.
    Returns:
        list: Lignes sans espaces superflus, les lignes vides sont retirées.
    """
    return [line.strip() for line in LINE_BREAK_RE.split(text) if line.strip()]


def clean_entries(entries: List[str]) -> List[str]:
    """Trim each entry and drop the empty ones, order preserved."""
    return [entry.strip() for entry in entries if entry.strip()]


def normalize_target_url(value: Optional[str], base_url: str) -> str:
    """
    Normalise l'URL saisie dans le formulaire.

    Args:
        value (str): Saisie brute (domaine nu, chemin relatif ou URL absolue).
        base_url (str): Origine de la page courante, pour les chemins commençant par "/".
    Returns:
        str: URL absolue.
    Raises:
        ValueError: Si la saisie est vide ou ne ressemble pas à une URL.
    """
    trimmed = (value or "").strip()
    if not trimmed:
        raise ValueError("Please enter a recipe URL.")

    if trimmed.startswith("/"):
        return urljoin(base_url, trimmed)

    # pas de schéma : on suppose https
    normalized = trimmed if SCHEME_RE.match(trimmed) else f"https://{trimmed}"
    try:
        parts = urlsplit(normalized)
        hostname = parts.hostname
    except ValueError:
        raise ValueError("That does not look like a valid URL.")
    if not hostname or " " in normalized:
        raise ValueError("That does not look like a valid URL.")
    return parts.geturl()
