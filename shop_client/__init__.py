"""
Python client for the sculpture shop API.

`ApiClient` talks to the server, the stores keep the visitor's selection and
the admin session across runs, and the page models in `pages` hold the
storefront and admin screen state a front end renders.
"""
from .api import ApiClient, ApiError
from .storage import LocalStorage, MemoryStorage
from .stores import AdminSessionStore, SelectionStore

__all__ = [
    "AdminSessionStore",
    "ApiClient",
    "ApiError",
    "LocalStorage",
    "MemoryStorage",
    "SelectionStore",
]
