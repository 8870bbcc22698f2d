from typing import Any, Dict, List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field

class RecipeAuthor(BaseModel):
    model_config = ConfigDict(extra="allow")

    type_: Optional[str] = Field(default=None, alias="@type")
    name: Optional[str] = None

class ImageObject(BaseModel):
    model_config = ConfigDict(extra="allow")

    type_: Optional[str] = Field(default=None, alias="@type")
    url: Optional[str] = None

class HowToStep(BaseModel):
    model_config = ConfigDict(extra="allow")

    type_: Optional[str] = Field(default=None, alias="@type")
    name: Optional[str] = None
    text: Optional[str] = None
    itemListElement: Optional[Any] = None

class Recipe(BaseModel):
    """
    Schema.org Recipe as published in the page JSON-LD. Unknown keys are kept.

    These models document the `/api/recipe` response in the OpenAPI schema only:
    the endpoint returns the extracted dict as is and never validates it here.
    """
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    context: Optional[Any] = Field(default=None, alias="@context")
    type_: Optional[Union[str, List[str]]] = Field(default=None, alias="@type")
    name: Optional[str] = None
    description: Optional[str] = None
    image: Optional[Union[str, ImageObject, List[Union[str, ImageObject]]]] = None
    recipeYield: Optional[Union[str, List[str]]] = None
    prepTime: Optional[str] = None
    cookTime: Optional[str] = None
    totalTime: Optional[str] = None
    recipeIngredient: Optional[Union[List[str], str]] = None
    recipeInstructions: Optional[Union[str, HowToStep, List[Union[str, HowToStep]]]] = None
    author: Optional[Union[RecipeAuthor, List[RecipeAuthor]]] = None

class MetaItem(BaseModel):
    label: str
    value: str

class RecipeCard(BaseModel):
    title: str = Field(..., description="Recipe name, or a fallback title")
    description: Optional[str] = None
    image_url: Optional[str] = Field(default=None, description="First image of the recipe")
    meta: List[MetaItem] = Field(default_factory=list, description="Yield, Prep, Cook, Total and Author rows")
    ingredients: List[str] = Field(default_factory=list)
    instructions: List[str] = Field(default_factory=list)

RECIPE_RESPONSE_EXAMPLE: Dict[str, Any] = {
    "@context": "https://schema.org",
    "@type": "Recipe",
    "name": "Crispy Chickpea Salad",
    "recipeYield": "4 servings",
    "recipeIngredient": ["1 can chickpeas", "2 tbsp olive oil"],
    "recipeInstructions": [{"@type": "HowToStep", "text": "Roast the chickpeas."}],
    "author": [{"@type": "Person", "name": "Jane Doe"}],
}
