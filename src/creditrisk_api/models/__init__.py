"""Model implementations for creditrisk_api."""

from .logistic_regression import FeatureCountMismatch, LogisticRegression, sigmoid

__all__ = [
    'FeatureCountMismatch',
    'LogisticRegression',
    'sigmoid',
]
