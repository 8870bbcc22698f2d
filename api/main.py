import time
import logging
from typing import Callable
from fastapi import FastAPI, Request

from api import config
from api.routers import public, ui

logger = logging.getLogger(__name__)
logging.basicConfig(level=getattr(logging, config.LOG_LEVEL, logging.INFO), format=config.LOG_FORMAT)


app = FastAPI(
    title="Recipe Card API",
    description="""Extract the schema.org Recipe published as JSON-LD on a Bon Appetit page,
    and render it as a clean recipe card.""",
    version="1.0.0",
    openapi_tags=[
        {"name": "Public", "description": "Recipe extraction routes"},
    ]
)

@app.middleware("http")
async def add_execution_time_header(request: Request, call_next: Callable):
    """
    Ajoute la durée de traitement, en secondes, dans l'en-tête X-Execution-Time.

    Pour /api/recipe, cette durée inclut la requête vers le site de l'éditeur.
    """
    started = time.perf_counter()
    response = await call_next(request)
    response.headers["X-Execution-Time"] = f"{time.perf_counter() - started:.2f}"
    return response

app.include_router(
    public.router,
    prefix="/api",
    tags=["Public"]
)
app.include_router(ui.router)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("api.main:app", host="0.0.0.0", port=8000, reload=True, workers=1, log_level="info")
