import os
from dotenv import load_dotenv

load_dotenv()

# hôtes autorisés, fixés au démarrage
ALLOWED_HOSTS = frozenset({"bonappetit.com", "www.bonappetit.com"})

USER_AGENT = os.getenv("RECIPE_FETCH_USER_AGENT", "ba-recipe-extractor/1.0")
ACCEPT_HEADER = "text/html,application/xhtml+xml"

# pas de timeout par défaut : comportement natif de requests
FETCH_TIMEOUT = float(os.environ["RECIPE_FETCH_TIMEOUT"]) if os.getenv("RECIPE_FETCH_TIMEOUT") else None

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = '%(asctime)s %(levelname)s %(module)s %(message)s'
