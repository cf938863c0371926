"""File utilities for reading training datasets."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pandas as pd


@dataclass(frozen=True)
class TrainingData:
    """Feature matrix and targets read from a CSV, in file order."""

    features: list[list[float]]
    targets: list[float]
    feature_columns: tuple[str, ...]


def read_training_csv(csv_path: Path, target_column: str = 'target') -> TrainingData:
    """
    Read a training CSV.

    Every column other than ``target_column`` is a feature, taken in column
    order; rows keep file order since training sweeps samples in sequence.

    Raises:
        ValueError: If the target column is missing, a value is not numeric,
            or the file has no rows.
    """
    df = pd.read_csv(csv_path)
    if target_column not in df.columns:
        raise ValueError(f'Target column {target_column!r} not found in {csv_path}')
    if df.empty:
        raise ValueError(f'No rows found in {csv_path}')

    feature_columns = [col for col in df.columns if col != target_column]
    try:
        feature_frame = df[feature_columns].astype('float64')
        target_series = df[target_column].astype('float64')
    except (TypeError, ValueError) as exc:
        raise ValueError(f'Non-numeric value in {csv_path}: {exc}') from exc

    return TrainingData(
        features=feature_frame.values.tolist(),
        targets=target_series.tolist(),
        feature_columns=tuple(feature_columns),
    )


def parse_feature_vector(raw: str) -> list[float]:
    """Parse a comma-separated feature vector such as '0.5,1.0,-2'."""
    parts = [part.strip() for part in raw.split(',') if part.strip()]
    try:
        return [float(part) for part in parts]
    except ValueError as exc:
        raise ValueError(f'Invalid feature vector {raw!r}: {exc}') from exc
