"""Unit tests for serving configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from creditrisk_api.config import ServingConfig, load_serving_config


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / 'serving.yaml'
    path.write_text(content, encoding='utf-8')
    return path


def test_defaults_without_sections(tmp_path: Path) -> None:
    cfg = load_serving_config(_write(tmp_path, ''))

    assert cfg == ServingConfig()
    assert cfg.model.num_features == 3
    assert cfg.model.learning_rate == 0.01
    assert cfg.model.path is None
    assert cfg.training.max_samples == 10000
    assert cfg.logging.mode == 'minimal'


def test_full_config_resolves_relative_paths(tmp_path: Path) -> None:
    config_path = _write(
        tmp_path,
        """
model:
  num_features: 5
  learning_rate: 0.2
  path: artifacts/model.json

training:
  max_samples: 50
  max_epochs: 10

persistence:
  directory: snapshots

logging:
  mode: requests
""",
    )

    cfg = load_serving_config(config_path)

    assert cfg.model.num_features == 5
    assert cfg.model.learning_rate == 0.2
    assert cfg.model.path == (tmp_path / 'artifacts' / 'model.json').resolve()
    assert cfg.training.max_samples == 50
    assert cfg.training.max_epochs == 10
    assert cfg.persistence.directory == (tmp_path / 'snapshots').resolve()
    assert cfg.logging.mode == 'requests'


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match='Config file not found'):
        load_serving_config(tmp_path / 'missing.yaml')


@pytest.mark.parametrize(
    ('content', 'message'),
    [
        ('model:\n  learning_rate: 0\n', 'learning_rate must be > 0'),
        ('model:\n  num_features: -1\n', 'num_features must be >= 0'),
        ('training:\n  max_samples: 0\n', 'max_samples must be >= 1'),
        ('logging:\n  mode: verbose\n', 'logging.mode must be one of'),
    ],
)
def test_invalid_values_rejected(tmp_path: Path, content: str, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        load_serving_config(_write(tmp_path, content))
