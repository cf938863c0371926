"""Model snapshot persistence for the serving module."""

from __future__ import annotations

from pathlib import Path

from ..models import LogisticRegression
from ..utils import get_logger, json_log
from .errors import InvalidTrainingRequest

log = get_logger(__name__)


class ModelLoadError(InvalidTrainingRequest):
    """Raised when a model snapshot cannot be read or decoded."""


class ModelSaveError(InvalidTrainingRequest):
    """Raised when a model snapshot cannot be written."""


def resolve_model_path(filepath: str | Path, base_dir: Path | None = None) -> Path:
    """Resolve a snapshot path, anchoring relative paths at ``base_dir`` when given."""
    path = Path(filepath).expanduser()
    if base_dir is not None and not path.is_absolute():
        path = base_dir / path
    return path


def save_model(model: LogisticRegression, filepath: str | Path) -> Path:
    """
    Write ``model`` as a JSON snapshot.

    All four state fields are always written.

    Raises:
        ModelSaveError: If the file cannot be written.
    """
    path = Path(filepath)
    try:
        payload = model.to_json()
    except (TypeError, ValueError) as exc:
        raise ModelSaveError(f'failed to serialize model: {exc}') from exc

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(payload, encoding='utf-8')
    except OSError as exc:
        raise ModelSaveError(f'failed to write model file {path}: {exc}') from exc

    log.info(
        json_log(
            'model.saved',
            component='serving.loader',
            path=str(path),
            num_features=model.num_features,
            initialized=model.initialized,
        )
    )
    return path


def load_model(filepath: str | Path, mark_initialized: bool = True) -> LogisticRegression:
    """
    Read a JSON snapshot into a new classifier.

    Args:
        filepath: Snapshot path.
        mark_initialized: Force ``initialized = True`` on the restored model.
            The service restores with this set; a restored snapshot is
            trusted to be trained.

    Returns:
        A fresh LogisticRegression. Nothing existing is mutated.

    Raises:
        ModelLoadError: If the file is missing, unreadable or malformed.
    """
    path = Path(filepath)
    if not path.exists():
        raise ModelLoadError(f'model file not found: {path}')

    try:
        content = path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as exc:
        raise ModelLoadError(f'failed to read model file {path}: {exc}') from exc

    try:
        model = LogisticRegression.from_json(content)
    except ValueError as exc:
        raise ModelLoadError(f'failed to deserialize model: {exc}') from exc

    if mark_initialized:
        model.initialized = True

    log.info(
        json_log(
            'model.loaded',
            component='serving.loader',
            path=str(path),
            num_features=model.num_features,
            learning_rate=model.learning_rate,
        )
    )
    return model
