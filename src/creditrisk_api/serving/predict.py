"""Core prediction logic for the serving module."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ..models import LogisticRegression
from .state import ModelStore
from .validation import validate_prediction_request


@dataclass(frozen=True)
class PredictionResult:
    """Result of a single prediction."""

    predicted: int
    confidence: float
    reconfigured: bool = False


def predict(
    store: ModelStore,
    features: Sequence[float],
    learning_rate: float | None = None,
    reconfigure: bool = False,
) -> PredictionResult:
    """
    Predict the class of one feature vector.

    When ``reconfigure`` is set together with ``learning_rate``, the stored
    model is replaced by a fresh zero-weight model at that rate after the
    request is validated and before the prediction is computed. The result
    is then always class 0 with confidence 0.5.

    Raises:
        ModelNotReady: If the stored model is not initialized.
        FeatureCountMismatch: If ``features`` has the wrong length.
    """
    with store.access():
        model = store.model
        validate_prediction_request(model, features)

        reconfigured = False
        if learning_rate is not None and reconfigure:
            model = LogisticRegression(model.num_features, learning_rate)
            store.model = model
            reconfigured = True

        confidence = model.predict_raw(features)
        predicted = model.predict(features)

    return PredictionResult(
        predicted=predicted,
        confidence=confidence,
        reconfigured=reconfigured,
    )
