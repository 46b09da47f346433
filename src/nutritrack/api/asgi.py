"""ASGI entrypoint for the NutriTrack API."""

from nutritrack.api.app import create_app
from nutritrack.containers import build_container

app = create_app(build_container())
