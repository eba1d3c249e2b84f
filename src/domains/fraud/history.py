"""User-history collaborators feeding the behavioural features."""

import threading
from collections import defaultdict, deque
from datetime import datetime
from typing import Protocol, runtime_checkable

import structlog

from .models import HistoricalTransaction, UserHistory

logger = structlog.get_logger()


@runtime_checkable
class UserHistoryProvider(Protocol):
    def history_for(self, user_id: str, before: datetime) -> UserHistory:
        """Return the user's transactions strictly before ``before``, oldest first."""
        ...


@runtime_checkable
class HistoryRecorder(Protocol):
    def add(self, user_id: str, entry: HistoricalTransaction) -> None: ...


class NullUserHistory:
    """Provider used when no history collaborator is wired in: every user is new."""

    def history_for(self, user_id: str, before: datetime) -> UserHistory:
        return UserHistory(user_id=user_id)


class InMemoryHistoryStore:
    """Bounded per-user transaction log, safe for concurrent writers and readers."""

    def __init__(self, max_per_user: int = 500) -> None:
        self._max_per_user = max_per_user
        self._lock = threading.Lock()
        self._by_user: dict[str, deque[HistoricalTransaction]] = defaultdict(
            lambda: deque(maxlen=self._max_per_user)
        )

    def add(self, user_id: str, entry: HistoricalTransaction) -> None:
        with self._lock:
            self._by_user[user_id].append(entry)

    def history_for(self, user_id: str, before: datetime) -> UserHistory:
        with self._lock:
            entries = list(self._by_user.get(user_id, ()))
        prior = sorted((e for e in entries if e.timestamp < before), key=lambda e: e.timestamp)
        return UserHistory(user_id=user_id, transactions=prior)

    def user_count(self) -> int:
        with self._lock:
            return len(self._by_user)

    def clear(self, user_id: str | None = None) -> None:
        with self._lock:
            if user_id is None:
                self._by_user.clear()
            else:
                self._by_user.pop(user_id, None)
        logger.info("history_cleared", user_id=user_id)
