"""Shared classifier instance guarded by a single lock."""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager

from ..models import LogisticRegression


class ModelStore:
    """
    Owner of the one classifier the service exposes.

    Every read or write of the model goes through ``access()``, which holds
    one exclusive lock for the whole operation, so a prediction never sees a
    weight vector halfway through a training sweep.
    """

    def __init__(self, model: LogisticRegression) -> None:
        self._model = model
        self._lock = threading.Lock()

    @contextmanager
    def access(self) -> Iterator[ModelStore]:
        with self._lock:
            yield self

    @property
    def model(self) -> LogisticRegression:
        return self._model

    @model.setter
    def model(self, model: LogisticRegression) -> None:
        # Callers hold the lock via access()
        self._model = model
