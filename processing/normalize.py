from typing import Any, Dict, List, Optional

from api.schemas.recipe import MetaItem, RecipeCard
from processing.utils import clean_entries, split_lines

# valeur affichée pour un champ absent ou vide
PLACEHOLDER = "—"
UNTITLED = "Untitled recipe"


def normalize_ingredients(value: Any) -> List[str]:
    """
    Normalise "recipeIngredient" en liste de lignes.

    Args:
        value: Liste de chaînes, ou une seule chaîne multi-lignes.
    Returns:
        list: Ingrédients nettoyés, dans l'ordre.
    """
    if isinstance(value, list):
        return clean_entries([item for item in value if isinstance(item, str)])
    if isinstance(value, str):
        return split_lines(value)
    return []


def _instruction_texts(item: Any) -> List[str]:
    if isinstance(item, str):
        return [item]
    if isinstance(item, dict):
        text = item.get("text")
        if isinstance(text, str) and text:
            return [text]
        if isinstance(item.get("itemListElement"), str):
            return [item["itemListElement"]]
    return []


def normalize_instructions(value: Any) -> List[str]:
    """
    Normalise "recipeInstructions" en liste d'étapes.

    Args:
        value: Chaîne, liste de chaînes/objets HowToStep, ou un objet unique.
    Returns:
        list: Étapes nettoyées, dans l'ordre ; un objet sans texte n'apporte rien.
    """
    if isinstance(value, str):
        return split_lines(value)
    if isinstance(value, list):
        return clean_entries([text for item in value for text in _instruction_texts(item)])
    if isinstance(value, dict):
        text = value.get("text")
        if isinstance(text, str):
            return clean_entries([text])
    return []


def _image_url(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return value
    if isinstance(value, dict):
        url = value.get("url")
        return url if isinstance(url, str) else None
    return None


def resolve_image_url(value: Any) -> Optional[str]:
    """Return at most one image URL, the first one when several are published."""
    if isinstance(value, list):
        return _image_url(value[0]) if value else None
    return _image_url(value)


def format_author(value: Any) -> Optional[str]:
    if isinstance(value, list):
        names = [entry.get("name") for entry in value if isinstance(entry, dict)]
        return ", ".join(name for name in names if isinstance(name, str) and name)
    if isinstance(value, dict):
        name = value.get("name")
        return name if isinstance(name, str) else None
    return None


def format_yield(value: Any) -> Optional[str]:
    if isinstance(value, list):
        return ", ".join(str(item) for item in value)
    if isinstance(value, str):
        return value
    return None


def display_value(value: Optional[str]) -> str:
    """Absent and empty values collapse to the same placeholder."""
    return value if value else PLACEHOLDER


def build_recipe_card(recipe: Dict[str, Any]) -> RecipeCard:
    """
    Construit la fiche affichable d'une recette extraite.

    Args:
        recipe (dict): Objet Recipe JSON-LD tel qu'extrait de la page.
    Returns:
        RecipeCard: Titre, description, image, métadonnées et listes normalisées.
    """
    name = recipe.get("name")
    description = recipe.get("description")
    meta = [
        ("Yield", format_yield(recipe.get("recipeYield"))),
        ("Prep", recipe.get("prepTime")),
        ("Cook", recipe.get("cookTime")),
        ("Total", recipe.get("totalTime")),
        ("Author", format_author(recipe.get("author"))),
    ]
    return RecipeCard(
        title=name if isinstance(name, str) and name else UNTITLED,
        description=description if isinstance(description, str) and description else None,
        image_url=resolve_image_url(recipe.get("image")),
        meta=[MetaItem(label=label, value=display_value(value if isinstance(value, str) else None)) for label, value in meta],
        ingredients=normalize_ingredients(recipe.get("recipeIngredient")),
        instructions=normalize_instructions(recipe.get("recipeInstructions")),
    )
