"""Binary logistic regression trained by per-sample gradient descent sweeps."""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

import numpy as np


class FeatureCountMismatch(ValueError):
    """Raised when a feature vector length differs from the model's weight count."""

    def __init__(self, expected: int, received: int, index: int | None = None) -> None:
        self.expected = expected
        self.received = received
        self.index = index
        if index is None:
            message = f'Feature count mismatch: expected {expected}, received {received}'
        else:
            message = (
                f'Feature count mismatch at sample {index}: '
                f'expected {expected}, received {received}'
            )
        super().__init__(message)


def sigmoid(z: float) -> float:
    """Logistic activation 1 / (1 + exp(-z))."""
    # exp overflow resolves to inf, so very negative z yields 0.0
    with np.errstate(over='ignore'):
        return float(1.0 / (1.0 + np.exp(-z)))


class LogisticRegression:
    """
    Binary classifier holding a weight vector, a bias and a learning rate.

    The weight count is fixed at construction. Every feature vector passed to
    ``train`` or ``predict*`` must have that length, otherwise
    ``FeatureCountMismatch`` is raised. The instance is not thread-safe;
    callers sharing one must serialize access.
    """

    def __init__(self, num_features: int, learning_rate: float) -> None:
        self._weights = np.zeros(num_features, dtype=np.float64)
        self.bias = 0.0
        self.learning_rate = float(learning_rate)
        self.initialized = False

    def __repr__(self) -> str:
        return (
            f'LogisticRegression(num_features={self.num_features}, '
            f'learning_rate={self.learning_rate}, initialized={self.initialized})'
        )

    @property
    def num_features(self) -> int:
        return int(self._weights.shape[0])

    @property
    def weights(self) -> np.ndarray:
        view = self._weights.view()
        view.flags.writeable = False
        return view

    @weights.setter
    def weights(self, values: Sequence[float] | np.ndarray) -> None:
        self._weights = self._as_vector(values)

    def _as_vector(self, features: Sequence[float] | np.ndarray, index: int | None = None) -> np.ndarray:
        vector = np.array(features, dtype=np.float64)
        if vector.ndim != 1:
            where = '' if index is None else f' at sample {index}'
            raise ValueError(f'Feature vector{where} must be one-dimensional, got {vector.ndim} dimensions')
        if vector.shape[0] != self.num_features:
            raise FeatureCountMismatch(self.num_features, int(vector.shape[0]), index)
        return vector

    def weighted_sum(self, features: Sequence[float] | np.ndarray) -> float:
        """Return dot(weights, features) + bias."""
        vector = self._as_vector(features)
        return self._linear(vector)

    def _linear(self, vector: np.ndarray) -> float:
        # Accumulate in feature order; numpy reductions sum pairwise from 8 terms up
        total = 0.0
        for w, x in zip(self._weights.tolist(), vector.tolist()):
            total += w * x
        return total + self.bias

    def train(
        self,
        features: Sequence[Sequence[float]],
        targets: Sequence[float],
        epochs: int,
    ) -> None:
        """
        Fit the model in place.

        Each epoch sweeps the samples in their given order and applies the
        gradient step immediately after each sample, so later samples in an
        epoch see the weights already updated by earlier ones.

        Args:
            features: Feature vectors, each of length ``num_features``.
            targets: Labels in {0.0, 1.0}, one per feature vector.
            epochs: Number of full passes. Zero performs no updates.

        Raises:
            ValueError: If features and targets differ in length, or a sample
                is not a flat vector.
            FeatureCountMismatch: If any vector has the wrong length. Raised
                before any update is applied.
        """
        if len(features) != len(targets):
            raise ValueError(
                f'Sample count mismatch: {len(features)} feature vectors vs {len(targets)} targets'
            )
        if epochs < 0:
            raise ValueError(f'epochs must be non-negative, got {epochs}')

        samples = [self._as_vector(x, index=i) for i, x in enumerate(features)]
        labels = [float(y) for y in targets]

        for _ in range(epochs):
            for x, y in zip(samples, labels):
                error = sigmoid(self._linear(x)) - y
                self._weights -= self.learning_rate * error * x
                self.bias -= self.learning_rate * error

        self.initialized = True

    def predict_raw(self, features: Sequence[float] | np.ndarray) -> float:
        """Return P(y=1 | features). Does not check ``initialized``."""
        return sigmoid(self.weighted_sum(features))

    def predict(self, features: Sequence[float] | np.ndarray) -> int:
        """Return 1 if ``predict_raw`` is strictly above 0.5, else 0."""
        return 1 if self.predict_raw(features) > 0.5 else 0

    def to_dict(self) -> dict[str, Any]:
        return {
            'weights': self._weights.tolist(),
            'bias': float(self.bias),
            'learning_rate': self.learning_rate,
            'initialized': bool(self.initialized),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LogisticRegression:
        """
        Build a classifier from its serialized state.

        ``bias`` defaults to 0.0 and ``initialized`` to False when absent,
        which covers snapshots written before those fields existed.
        """
        if not isinstance(data, dict):
            raise ValueError(f'Model state must be an object, got {type(data).__name__}')

        missing = [key for key in ('weights', 'learning_rate') if key not in data]
        if missing:
            raise ValueError(f'Model state is missing required field(s): {", ".join(missing)}')

        raw_weights = data['weights']
        if not isinstance(raw_weights, list) or not all(
            isinstance(w, (int, float)) and not isinstance(w, bool) for w in raw_weights
        ):
            raise ValueError('Model state field "weights" must be a flat list of numbers')

        try:
            learning_rate = float(data['learning_rate'])
            bias = float(data.get('bias', 0.0))
        except (TypeError, ValueError) as exc:
            raise ValueError(f'Model state contains a non-numeric value: {exc}') from exc

        if not learning_rate > 0:
            raise ValueError(f'Model state field "learning_rate" must be > 0, got {learning_rate}')

        weights = np.array(raw_weights, dtype=np.float64)

        model = cls(weights.shape[0], learning_rate)
        model._weights = weights
        model.bias = bias
        model.initialized = bool(data.get('initialized', False))
        return model

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, text: str | bytes) -> LogisticRegression:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ValueError(f'Model state is not valid JSON: {exc}') from exc
        return cls.from_dict(data)
