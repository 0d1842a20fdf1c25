"""View state of the client application.

Mirrors the single page of the web client: a counter, a synthetic
expensive value, a loading flag and the list of users loaded from the
API.  Adding a user only touches local state; nothing is sent back to
the service.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Dict, List, Optional

import numpy as np

from client.api_client import ApiError


logger = logging.getLogger(__name__)


def expensive_calculation(iterations: int = 1_000_000, random_state: Optional[int] = None) -> float:
    """Sum of ``iterations`` uniform draws from [0, 1)."""
    rng = np.random.RandomState(random_state)
    return float(rng.random_sample(iterations).sum())


class AppState:
    def __init__(
        self,
        api,
        *,
        initial_user_id: int = 1,
        iterations: int = 1_000_000,
        calculate: Callable[[int], float] = expensive_calculation,
    ) -> None:
        self.api = api
        self.initial_user_id = initial_user_id
        self.iterations = iterations
        self._calculate = calculate

        self.count = 0
        self.users: List[Dict[str, Any]] = []
        self.loading = False

        # значение пересчитывается только при смене count
        self._computed_for: Optional[int] = None
        self._computed_value = 0.0

    def mount(self) -> None:
        self.fetch_users(self.initial_user_id)

    def _load(self, fetch: Callable[[], List[Dict[str, Any]]]) -> None:
        self.loading = True
        try:
            self.users = fetch()
        except (ApiError, ValueError) as exc:
            logger.warning("Failed to load users: %s", exc)
        finally:
            self.loading = False

    def fetch_users(self, user_id: int) -> None:
        self._load(lambda: [self.api.get_user(user_id)])

    def fetch_all_users(self) -> None:
        self._load(self.api.list_users)

    def increment(self) -> None:
        self.count += 1

    def add_user(self, user: Optional[Dict[str, Any]] = None) -> None:
        if user is None:
            user = {"id": int(time.time() * 1000), "name": "New User"}
        # новый список, старый не трогаем
        self.users = [*self.users, user]

    @property
    def computed_value(self) -> float:
        if self._computed_for != self.count:
            self._computed_value = self._calculate(self.iterations)
            self._computed_for = self.count
        return self._computed_value

    def render(self) -> List[str]:
        lines = [
            f"count is {self.count}",
            f"Computed: {self.computed_value}",
        ]
        if self.loading:
            lines.append("Loading...")
        lines.extend(str(user.get("name", "")) for user in self.users)
        return lines
