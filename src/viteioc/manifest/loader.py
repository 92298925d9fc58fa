import json
import logging
from pathlib import Path
from typing import Union

import pydantic

from .errors import ManifestUnavailable
from .models import ManifestIndex
from ..utils import expanded_path

logger = logging.getLogger(__name__)


def load_manifest(path: Union[str, Path]) -> ManifestIndex:
    """
    Load a Vite ``manifest.json`` into a :class:`ManifestIndex`.

    :param path: Path to the manifest file. ``~`` and environment variables are expanded.
    :return: The loaded index.
    :raises ManifestUnavailable: If the file cannot be read, is not a JSON object
        or contains invalid entries.
    """
    assert path is not None
    path = expanded_path(path)
    logger.debug("Loading Vite manifest: %s", path)

    try:
        with open(path, "r", encoding="utf-8") as fp:
            data = json.load(fp)
    except OSError as e:
        logger.error("Vite manifest could not be read: %s", path.absolute())
        raise ManifestUnavailable(path, e.strerror or str(e)) from e
    except json.JSONDecodeError as e:
        logger.error("Vite manifest is not valid JSON: %s", path.absolute())
        raise ManifestUnavailable(path, f"invalid JSON ({e.msg})") from e

    if not isinstance(data, dict):
        logger.error("Vite manifest is not a JSON object: %s", path.absolute())
        raise ManifestUnavailable(path, f"expected a JSON object, got {type(data).__name__}")

    try:
        index = ManifestIndex.from_dict(data)
    except pydantic.ValidationError as e:
        logger.error("Vite manifest contains invalid entries: %s", path.absolute())
        raise ManifestUnavailable(path, f"invalid entry ({e.error_count()} errors)") from e

    logger.debug("Loaded %d manifest entries from %s", len(index), path.name)
    return index
