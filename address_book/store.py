"""Holds the most recently fetched batch of users."""
from .models import UserBatch


class UserStore:
    # One writer (the page controller, once per load) and readers that only run after
    # the write returns, all on the same thread, so there is nothing to lock.

    def __init__(self) -> None:
        self._batch: UserBatch = ()

    def replace(self, batch: UserBatch) -> None:
        # Overwrite the whole batch; batches are never merged or appended.
        self._batch = tuple(batch)

    def all(self) -> UserBatch:
        return self._batch

    def __len__(self) -> int:
        return len(self._batch)
