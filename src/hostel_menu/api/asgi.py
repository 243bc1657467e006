"""ASGI entrypoint for the hostel menu API."""

from hostel_menu.api.app import create_app
from hostel_menu.containers import build_container

app = create_app(build_container())
