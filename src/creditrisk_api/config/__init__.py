"""Configuration utilities for creditrisk_api."""

from .serving import (
    LoggingConfig,
    ModelConfig,
    PersistenceConfig,
    ServingConfig,
    TrainingConfig,
    load_serving_config,
)

__all__ = [
    'LoggingConfig',
    'ModelConfig',
    'PersistenceConfig',
    'ServingConfig',
    'TrainingConfig',
    'load_serving_config',
]
