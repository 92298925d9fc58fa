import os

from pathlib import Path
from typing import Union


def expanded_path(path: Union[str, Path]) -> Path:
    """
    Expands environment variables, user tilde, and normalizes path separators
    in a given path.

    :param path: The path to expand.
    :return: The expanded and normalized path as a Path object.
    """
    if isinstance(path, Path):
        path = str(path)

    # Expand environment variables and user (~)
    return Path(os.path.expandvars(os.path.expanduser(path)))


def join_url(base_url: str, path: str) -> str:
    """
    Join a base URL and a relative asset path with exactly one slash.

    :param base_url: The base URL, with or without a trailing slash.
    :param path: The asset path, with or without a leading slash.
    :return: The joined URL.
    """
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"
