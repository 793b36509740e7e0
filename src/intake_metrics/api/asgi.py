"""ASGI entrypoint for the intake metrics API."""

from intake_metrics.api.app import create_app
from intake_metrics.containers import build_container

app = create_app(build_container())
