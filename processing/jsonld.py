import json
import logging
import re
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

RECIPE_TYPE = "Recipe"

# balises <script type="application/ld+json">, sans parseur HTML complet
JSONLD_SCRIPT_RE = re.compile(
    r"<script[^>]*type=['\"]application/ld\+json['\"][^>]*>([\s\S]*?)</script>",
    re.I,
)


def _reject_constant(name: str):
    # NaN, Infinity et -Infinity ne sont pas du JSON valide
    raise ValueError(f"Invalid JSON constant: {name}")


def find_jsonld_scripts(html: str) -> List[str]:
    """
    Repère le contenu de chaque bloc JSON-LD d'une page HTML.

    Args:
        html (str): HTML brut de la page.
    Returns:
        list: Contenus des balises script, nettoyés, dans l'ordre du document (les blocs vides sont ignorés).
    """
    if not html:
        return []
    return [block.strip() for block in JSONLD_SCRIPT_RE.findall(html) if block.strip()]


def flatten_jsonld(value: Any) -> List[Any]:
    """
    Aplatit récursivement une valeur JSON-LD en liste de candidats.

    Un objet portant une liste "@graph" est conservé lui-même, suivi des
    éléments du graphe, aplatis à leur tour.

    Args:
        value: Valeur JSON décodée (liste, dict ou scalaire).
    Returns:
        list: Objets candidats, dans l'ordre du document puis du graphe.
    """
    if isinstance(value, list):
        return [item for entry in value for item in flatten_jsonld(entry)]
    if isinstance(value, dict):
        graph = value.get("@graph")
        if isinstance(graph, list):
            return [value] + flatten_jsonld(graph)
        return [value]
    return []


def is_recipe(value: Any) -> bool:
    """Vrai si "@type" vaut "Recipe" ou en contient un exemplaire."""
    if not isinstance(value, dict):
        return False
    type_ = value.get("@type")
    if isinstance(type_, list):
        return RECIPE_TYPE in type_
    return type_ == RECIPE_TYPE


def extract_recipe_from_html(html: str) -> Optional[Dict[str, Any]]:
    """
    Extrait la première recette schema.org (JSON-LD) d'une page HTML.

    Args:
        html (str): HTML brut de la page.
    Returns:
        dict or None: Données de la recette telles que publiées, ou None si aucune recette.
    """
    candidates: List[Any] = []
    for index, raw in enumerate(find_jsonld_scripts(html)):
        try:
            parsed = json.loads(raw, parse_constant=_reject_constant)
        except ValueError:
            # bloc mal formé : on passe au suivant
            logger.debug(f"Skipping malformed JSON-LD block #{index}")
            continue
        candidates.extend(flatten_jsonld(parsed))

    for candidate in candidates:
        if is_recipe(candidate):
            return candidate
    return None
