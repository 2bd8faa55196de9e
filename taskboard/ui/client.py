# taskboard/ui/client.py

"""
Typed HTTP client for the task store.

Implements both UI ports that talk to the network: TaskTable (the user's rows)
and AuthProvider (who is signed in). Every transport failure, non-2xx answer
or malformed body surfaces as StoreError; callers never see requests'
exception types.
"""

from __future__ import annotations

import logging
from typing import Any

import requests
from pydantic_core import to_jsonable_python

from .models import Task, User

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """A remote store call failed."""


class AuthError(StoreError):
    """No signed-in user where one is required."""


class TaskStoreClient:
    def __init__(
        self,
        base_url: str,
        access_token: str | None = None,
        *,
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()
        self.access_token = access_token

    # ---- low-level helpers ----

    def _headers(self) -> dict[str, str]:
        if not self.access_token:
            return {}
        return {"Authorization": f"Bearer {self.access_token}"}

    def _send(self, method: str, path: str, *, json: Any = None) -> requests.Response:
        url = f"{self._base_url}{path}"
        try:
            return self._session.request(
                method,
                url,
                json=None if json is None else to_jsonable_python(json),
                headers=self._headers(),
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            raise StoreError(f"{method} {path} failed: {e}") from e

    @staticmethod
    def _check(r: requests.Response, method: str, path: str) -> requests.Response:
        try:
            r.raise_for_status()
        except requests.HTTPError as e:
            if r.status_code == 401:
                raise AuthError(f"{method} {path} rejected: not authenticated") from e
            raise StoreError(f"{method} {path} failed: HTTP {r.status_code}") from e
        return r

    def _request(self, method: str, path: str, *, json: Any = None) -> requests.Response:
        r = self._send(method, path, json=json)
        logger.debug("%s %s -> %s", method, path, r.status_code)
        return self._check(r, method, path)

    @staticmethod
    def _task(body: Any) -> Task:
        try:
            return Task.model_validate(body)
        except ValueError as e:
            raise StoreError(f"Malformed task record: {e}") from e

    def _json(self, r: requests.Response) -> Any:
        try:
            return r.json()
        except ValueError as e:
            raise StoreError(f"Malformed response body from {r.url}") from e

    # ---- TaskTable ----

    def select_all(self) -> list[Task]:
        body = self._json(self._request("GET", "/tasks"))
        if not isinstance(body, list):
            raise StoreError("Expected a list of tasks")
        return [self._task(item) for item in body]

    def insert(self, values: dict[str, Any]) -> Task:
        return self._task(self._json(self._request("POST", "/tasks", json=values)))

    def update(self, task_id: str, values: dict[str, Any]) -> Task:
        return self._task(self._json(self._request("PATCH", f"/tasks/{task_id}", json=values)))

    def delete(self, task_id: str) -> None:
        self._request("DELETE", f"/tasks/{task_id}")

    # ---- AuthProvider ----

    def get_user(self) -> User | None:
        if not self.access_token:
            return None
        r = self._send("GET", "/auth/user")
        if r.status_code == 401:
            return None
        self._check(r, "GET", "/auth/user")
        try:
            return User.model_validate(self._json(r))
        except ValueError as e:
            raise StoreError(f"Malformed user record: {e}") from e

    def sign_in(self, email: str) -> User:
        body = self._json(self._request("POST", "/auth/sign-in", json={"email": email}))
        try:
            token = str(body["access_token"])
            user = User.model_validate(body["user"])
        except (KeyError, TypeError, ValueError) as e:
            raise StoreError("Malformed sign-in response") from e
        self.access_token = token
        logger.info("Signed in user_id=%s", user.id)
        return user

    def sign_out(self) -> None:
        """Drop the local token even when the store call fails.

        A 401 means the store no longer knows the token: already signed out.
        """
        try:
            if self.access_token:
                r = self._send("POST", "/auth/sign-out")
                if r.status_code != 401:
                    self._check(r, "POST", "/auth/sign-out")
        finally:
            self.access_token = None

    def health(self) -> bool:
        try:
            self._request("GET", "/health")
        except StoreError:
            return False
        return True
