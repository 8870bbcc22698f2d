from typing import Optional
from fastapi import APIRouter, BackgroundTasks, Query
from fastapi.responses import JSONResponse, PlainTextResponse

from api.schemas.recipe import Recipe, RECIPE_RESPONSE_EXAMPLE
from api.services.recipe_fetch import RecipeFetchError, RecipeNotFoundError, get_recipe, log_fetch_result

router = APIRouter()

@router.get(
    "/recipe",
    summary="Extract the recipe of a Bon Appetit page",
    description="Fetch an allow-listed recipe page and return its schema.org Recipe JSON-LD object as published.",
    response_description="The Recipe object found in the page.",
    responses={
        200: {
            "model": Recipe,
            "description": "Recipe found.",
            "content": {"application/json": {"example": RECIPE_RESPONSE_EXAMPLE}},
        },
        400: {"description": "Missing or invalid url, or host not allowed.", "content": {"text/plain": {}}},
        422: {"description": "Page fetched but no Recipe JSON-LD found.", "content": {"text/plain": {}}},
        502: {"description": "Upstream request failed.", "content": {"text/plain": {}}},
    }
)
def extract_recipe(
    background_tasks: BackgroundTasks,
    url: Optional[str] = Query(None, description="Absolute URL of a bonappetit.com recipe page"),
):
    """
    Extract the Recipe JSON-LD object of a publisher page.

    Args:
        url: Absolute URL of the recipe page.
    Returns:
        JSONResponse: The Recipe object, never cached.
        PlainTextResponse: The error message, with 400, 422 or 502.
    """
    try:
        target_url, upstream_status, recipe = get_recipe(url)
    except RecipeFetchError as e:
        return PlainTextResponse(e.message, status_code=e.status_code)

    background_tasks.add_task(log_fetch_result, target_url, upstream_status, recipe is not None)

    if recipe is None:
        not_found = RecipeNotFoundError()
        return PlainTextResponse(not_found.message, status_code=not_found.status_code, background=background_tasks)

    return JSONResponse(content=recipe, headers={"cache-control": "no-store"}, background=background_tasks)
