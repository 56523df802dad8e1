# autocorrector/web/__init__.py
# HTTP front end (Flask)

from .app import AutocorrectorSlot, create_app, load_default

__all__ = ["AutocorrectorSlot", "create_app", "load_default"]
