"""
Persisted client stores.

Each store owns one storage entry holding a JSON snapshot
`{"state": {...}, "version": 0}`. The snapshot is read once when the store is
created and rewritten after every mutation. Stores never talk to each other;
two processes sharing a storage file can drift apart.
"""
# Standard Library
import copy
import json
import logging

logger = logging.getLogger(__name__)

TOKEN_KEY = "admin_token"


class PersistedStore:
    name = None
    version = 0

    def __init__(self, storage):
        self.storage = storage
        self._state = self.initial_state()
        self.hydrate()

    def initial_state(self):
        raise NotImplementedError

    def hydrate(self):
        raw = self.storage.get_item(self.name)
        if not raw:
            return
        try:
            state = json.loads(raw)["state"]
        except (ValueError, KeyError, TypeError):
            logger.warning("Discarding unreadable %s snapshot", self.name)
            return
        if not isinstance(state, dict):
            logger.warning("Discarding unreadable %s snapshot", self.name)
            return
        for key in self._state:
            if key in state:
                self._state[key] = state[key]

    def flush(self):
        snapshot = {"state": self._state, "version": self.version}
        self.storage.set_item(self.name, json.dumps(snapshot))

    @property
    def state(self):
        return copy.deepcopy(self._state)


class SelectionStore(PersistedStore):
    """Ordered set of sculptures the visitor has picked, keyed by id."""

    name = "selected-sculptures-storage"

    def initial_state(self):
        return {"selected_sculptures": []}

    @property
    def sculptures(self):
        return list(self._state["selected_sculptures"])

    def ids(self):
        return [s["id"] for s in self._state["selected_sculptures"]]

    def add(self, sculpture):
        if self.is_selected(sculpture["id"]):
            return False
        self._state["selected_sculptures"] = self.sculptures + [dict(sculpture)]
        self.flush()
        return True

    def remove(self, sculpture_id):
        remaining = [s for s in self._state["selected_sculptures"] if s["id"] != sculpture_id]
        if len(remaining) == len(self._state["selected_sculptures"]):
            return False
        self._state["selected_sculptures"] = remaining
        self.flush()
        return True

    def clear(self):
        self._state["selected_sculptures"] = []
        self.flush()

    def is_selected(self, sculpture_id):
        return any(s["id"] == sculpture_id for s in self._state["selected_sculptures"])

    def count(self):
        return len(self._state["selected_sculptures"])

    def __len__(self):
        return self.count()

    def __contains__(self, sculpture_id):
        return self.is_selected(sculpture_id)


class AdminSessionStore(PersistedStore):
    """
    Signed-in admin identity. The bearer token lives in its own raw storage
    entry (`admin_token`) so the API client can read it without this store.
    """

    name = "admin-auth-storage"

    def initial_state(self):
        return {
            "is_authenticated": False,
            "admin_id": None,
            "username": None,
            "full_name": None,
        }

    @property
    def is_authenticated(self):
        return bool(self._state["is_authenticated"])

    @property
    def admin_id(self):
        return self._state["admin_id"]

    @property
    def username(self):
        return self._state["username"]

    @property
    def full_name(self):
        return self._state["full_name"]

    @property
    def token(self):
        return self.storage.get_item(TOKEN_KEY)

    def login(self, admin_id, username, full_name, token=None):
        if token:
            self.storage.set_item(TOKEN_KEY, token)
        self._state.update({
            "is_authenticated": True,
            "admin_id": admin_id,
            "username": username,
            "full_name": full_name,
        })
        self.flush()

    def logout(self):
        self.storage.remove_item(TOKEN_KEY)
        self._state = self.initial_state()
        self.flush()
