from pathlib import Path
from typing import Optional
from fastapi import APIRouter, BackgroundTasks, Query, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from api.services.recipe_fetch import RecipeFetchError, RecipeNotFoundError, get_recipe, log_fetch_result
from processing.normalize import build_recipe_card
from processing.utils import normalize_target_url

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))

router = APIRouter()

EMPTY_MESSAGE = "No recipe yet. Paste a link above to get started."
RETRY_MESSAGE = "Double-check the URL and try again."
SUCCESS_MESSAGE = "Recipe extracted successfully."


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
def recipe_page(
    request: Request,
    background_tasks: BackgroundTasks,
    recipe: Optional[str] = Query(None, description="Recipe page URL, as typed or shared"),
):
    """
    Page de saisie et d'affichage d'une recette.

    Le paramètre `recipe` fait de l'URL de la page un lien partageable :
    à l'ouverture, la recette est extraite et la fiche affichée.
    La page passe par `get_recipe`, le même pipeline que `GET /api/recipe`,
    appelé dans le processus plutôt que via HTTP.
    """
    context = {
        "recipe_url": recipe or "",
        "card": None,
        "status": None,
        "status_state": None,
        "empty_message": EMPTY_MESSAGE,
        "share_url": str(request.url),
    }
    if recipe is None:
        return templates.TemplateResponse(request, "index.html", context)

    try:
        target = normalize_target_url(recipe, str(request.base_url))
        context["recipe_url"] = target
        context["share_url"] = str(request.url.include_query_params(recipe=target))
        target_url, upstream_status, found = get_recipe(target)
        background_tasks.add_task(log_fetch_result, target_url, upstream_status, found is not None)
        if found is None:
            raise RecipeNotFoundError()
        context["card"] = build_recipe_card(found)
        context["status"] = SUCCESS_MESSAGE
        context["status_state"] = "success"
    except (ValueError, RecipeFetchError) as e:
        context["status"] = str(e)
        context["status_state"] = "error"
        context["empty_message"] = RETRY_MESSAGE

    return templates.TemplateResponse(request, "index.html", context, background=background_tasks)
