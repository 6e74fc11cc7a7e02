"""ASGI entrypoint for the recipe macro API."""

from recipe_macros.api.app import create_app
from recipe_macros.containers import build_container

app = create_app(build_container())
