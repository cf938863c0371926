"""Config models and loaders for serving."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

DEFAULT_NUM_FEATURES = 3
DEFAULT_LEARNING_RATE = 0.01


@dataclass(frozen=True)
class ModelConfig:
    num_features: int = DEFAULT_NUM_FEATURES
    learning_rate: float = DEFAULT_LEARNING_RATE
    path: Path | None = None  # snapshot restored at startup


@dataclass(frozen=True)
class TrainingConfig:
    max_samples: int = 10000
    max_epochs: int = 100000


@dataclass(frozen=True)
class PersistenceConfig:
    directory: Path | None = None


@dataclass(frozen=True)
class LoggingConfig:
    mode: str = 'minimal'  # 'minimal' or 'requests'


@dataclass(frozen=True)
class ServingConfig:
    model: ModelConfig = field(default_factory=ModelConfig)
    training: TrainingConfig = field(default_factory=TrainingConfig)
    persistence: PersistenceConfig = field(default_factory=PersistenceConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


_LOGGING_MODES = ('minimal', 'requests')


def load_serving_config(config_path: str | Path) -> ServingConfig:
    """Load a serving config YAML file."""
    cfg_path = Path(config_path).expanduser().resolve()
    if not cfg_path.exists():
        raise FileNotFoundError(f'Config file not found: {cfg_path}')

    with cfg_path.open('r', encoding='utf-8') as fh:
        data = yaml.safe_load(fh) or {}

    base_dir = cfg_path.parent

    model_section = data.get('model') or {}
    training_section = data.get('training') or {}
    persistence_section = data.get('persistence') or {}
    logging_section = data.get('logging') or {}

    model = ModelConfig(
        num_features=int(model_section.get('num_features', DEFAULT_NUM_FEATURES)),
        learning_rate=float(model_section.get('learning_rate', DEFAULT_LEARNING_RATE)),
        path=_resolve_optional_path(base_dir, model_section.get('path')),
    )
    if model.num_features < 0:
        raise ValueError('model.num_features must be >= 0')
    if model.learning_rate <= 0:
        raise ValueError('model.learning_rate must be > 0')

    training = TrainingConfig(
        max_samples=int(training_section.get('max_samples', 10000)),
        max_epochs=int(training_section.get('max_epochs', 100000)),
    )
    if training.max_samples < 1 or training.max_epochs < 0:
        raise ValueError('training.max_samples must be >= 1 and training.max_epochs >= 0')

    persistence = PersistenceConfig(
        directory=_resolve_optional_path(base_dir, persistence_section.get('directory')),
    )

    logging_cfg = LoggingConfig(
        mode=logging_section.get('mode', 'minimal'),
    )
    if logging_cfg.mode not in _LOGGING_MODES:
        raise ValueError(f'logging.mode must be one of {_LOGGING_MODES}, got {logging_cfg.mode!r}')

    return ServingConfig(
        model=model,
        training=training,
        persistence=persistence,
        logging=logging_cfg,
    )


def _resolve_path(base: Path, value: str | Path) -> Path:
    path = Path(value).expanduser()
    if not path.is_absolute():
        path = (base / path).resolve()
    return path


def _resolve_optional_path(base: Path, value: str | Path | None) -> Path | None:
    if value is None:
        return None
    return _resolve_path(base, value)
