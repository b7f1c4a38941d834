"""ASGI entrypoint for the FitAI API."""

from fitai.api.app import create_app
from fitai.containers import build_container

app = create_app(build_container())
