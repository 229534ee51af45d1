"""JSON files backed by pydantic models.

Every config file the package reads or writes goes through
``PydanticPersistence``. Reads map parser and validation failures onto the
``ConfigurationError`` tree; writes keep a ``.bak`` copy of the previous file
and land through a temp file rename, so a crash never leaves half a file.
"""

import logging
import shutil
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from huewheel.exceptions import ConfigFileInvalidError, ConfigurationError, wrap_pydantic_error

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def _sibling(path: Path, extra: str) -> Path:
    return path.with_suffix(path.suffix + extra)


class PydanticPersistence:
    """
    Load/save helpers, one static method per operation.

    ```python
    config = PydanticPersistence.load_json(path, PickerConfig)
    PydanticPersistence.save_json(config, path)
    ```
    """

    @staticmethod
    def load_json(path: Path, model_type: type[M]) -> M:
        """
        Read ``path`` and validate it as ``model_type``.

        Raises:
            FileNotFoundError: ``path`` does not exist
            ConfigFileInvalidError: the file is blank, unreadable or not JSON
            ConfigValidationError: the JSON does not fit the model
        """
        if not path.exists():
            raise FileNotFoundError(f"No such config file: {path}")

        try:
            raw = path.read_text(encoding="utf-8")
            if not raw.strip():
                raise ConfigFileInvalidError(str(path), "File is empty")
            model = model_type.model_validate_json(raw)
        except ValidationError as e:
            logger.error(f"{path} does not match {model_type.__name__}: {e}")
            raise wrap_pydantic_error(e, str(path)) from e
        except ConfigurationError:
            raise
        except OSError as e:
            logger.error(f"Reading {path} failed: {e}")
            raise ConfigFileInvalidError(str(path), f"Unreadable file: {e}") from e

        logger.debug(f"{model_type.__name__} read from {path}")
        return model

    @staticmethod
    def save_json(data: BaseModel, path: Path, indent: int = 2, backup: bool = True) -> None:
        """
        Write ``data`` to ``path`` as indented JSON.

        With ``backup`` set, an existing file is first copied to
        ``<name>.bak``. OSError propagates.
        """
        path.parent.mkdir(parents=True, exist_ok=True)

        if backup and path.exists():
            bak = _sibling(path, ".bak")
            shutil.copy2(path, bak)
            logger.debug(f"Previous {path.name} kept as {bak}")

        tmp = _sibling(path, ".tmp")
        try:
            tmp.write_text(data.model_dump_json(indent=indent), encoding="utf-8")
            tmp.replace(path)
        finally:
            # only left behind when the write or rename failed
            if tmp.exists():
                tmp.unlink()
        logger.debug(f"{type(data).__name__} written to {path}")

    @staticmethod
    def load_json_or_default(
        path: Path, model_type: type[M], default_factory: Callable[[], M] | None = None
    ) -> M:
        """
        Like ``load_json``, but a missing file yields defaults.

        A file that exists and is broken still raises.
        """
        try:
            return PydanticPersistence.load_json(path, model_type)
        except FileNotFoundError:
            logger.info(f"{path} does not exist, using default {model_type.__name__}")
            return default_factory() if default_factory else model_type()
