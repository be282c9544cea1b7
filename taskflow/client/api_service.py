"""
Client HTTP de l'API TaskFlow.

Fonctionne avec n'importe quel objet qui a la même interface que
requests.Session (request(method, url, params=..., json=...)), y compris le
TestClient de FastAPI. Sans session fournie, base_url doit être une URL
absolue (requests ne résout pas les chemins relatifs).
"""

import requests
import logging
from typing import Optional
from urllib.parse import urlparse

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 30
DEFAULT_BASE_URL = "http://localhost:8000/api"


class ApiError(Exception):
    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")


class ApiService:
    def __init__(self, base_url: str = DEFAULT_BASE_URL, session=None):
        if session is None and not urlparse(base_url).scheme:
            raise ValueError(f"base_url must be absolute without a session: {base_url}")
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()

    def request(self, method: str, endpoint: str, params: Optional[dict] = None, json: Optional[dict] = None):
        url = f"{self.base_url}{endpoint}"
        kwargs = {}
        if params:
            kwargs["params"] = params
        if json is not None:
            kwargs["json"] = json
        if isinstance(self.session, requests.Session):
            kwargs["timeout"] = REQUEST_TIMEOUT

        response = self.session.request(method, url, **kwargs)
        try:
            data = response.json()
        except ValueError:
            data = None

        if response.status_code >= 400:
            message = data.get("error") if isinstance(data, dict) else None
            logger.error(f"API Error: {method} {url} -> {response.status_code}")
            raise ApiError(response.status_code, message or "Request failed")

        return data

    def get(self, endpoint: str, params: Optional[dict] = None):
        # les filtres vides ne sont pas envoyés
        clean = {k: v for k, v in (params or {}).items() if v not in (None, "")}
        return self.request("GET", endpoint, params=clean)

    def post(self, endpoint: str, data: dict):
        return self.request("POST", endpoint, json=data)

    def put(self, endpoint: str, data: dict):
        return self.request("PUT", endpoint, json=data)

    def delete(self, endpoint: str):
        return self.request("DELETE", endpoint)

    # Tasks
    def get_tasks(self, filters: Optional[dict] = None):
        return self.get("/tasks", filters)

    def get_task(self, task_id: str):
        return self.get(f"/tasks/{task_id}")

    def create_task(self, data: dict):
        return self.post("/tasks", data)

    def update_task(self, task_id: str, data: dict):
        return self.put(f"/tasks/{task_id}", data)

    def delete_task(self, task_id: str):
        return self.delete(f"/tasks/{task_id}")

    # Categories
    def get_categories(self):
        return self.get("/categories")

    def get_category(self, category_id: str):
        return self.get(f"/categories/{category_id}")

    def create_category(self, data: dict):
        return self.post("/categories", data)

    def update_category(self, category_id: str, data: dict):
        return self.put(f"/categories/{category_id}", data)

    def delete_category(self, category_id: str):
        return self.delete(f"/categories/{category_id}")

    # Notes
    def get_notes(self, filters: Optional[dict] = None):
        return self.get("/notes", filters)

    def get_note(self, note_id: str):
        return self.get(f"/notes/{note_id}")

    def create_note(self, data: dict):
        return self.post("/notes", data)

    def update_note(self, note_id: str, data: dict):
        return self.put(f"/notes/{note_id}", data)

    def delete_note(self, note_id: str):
        return self.delete(f"/notes/{note_id}")

    # Users
    def get_users(self):
        return self.get("/users")

    def get_user(self, user_id: str):
        return self.get(f"/users/{user_id}")

    def create_user(self, data: dict):
        return self.post("/users", data)

    def update_user(self, user_id: str, data: dict):
        return self.put(f"/users/{user_id}", data)

    def delete_user(self, user_id: str):
        return self.delete(f"/users/{user_id}")

    def get_stats(self):
        return self.get("/stats")
