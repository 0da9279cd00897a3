"""
Data path resolver for finding the railway data directory.
"""
import os
from pathlib import Path
from typing import Optional

DATA_DIR_ENV = "RAILPATH_DATA_DIR"


def get_data_directory(explicit: Optional[str] = None) -> Path:
    """
    Get the data directory path.

    Checked in order: the explicit argument, the ``RAILPATH_DATA_DIR``
    environment variable, ``data/`` next to the package, then ``data/`` in the
    current working directory.

    Raises:
        FileNotFoundError: if none of the candidates exists
    """
    if explicit:
        return Path(explicit)

    env_dir = os.environ.get(DATA_DIR_ENV)
    if env_dir:
        return Path(env_dir)

    candidates = [
        Path(__file__).parent.parent / "data",
        Path.cwd() / "data",
    ]
    for location in candidates:
        if location.exists() and location.is_dir():
            return location.resolve()

    raise FileNotFoundError(
        "Could not find data directory. Searched in:\n" +
        "\n".join(f"  - {location}" for location in candidates)
    )


def get_railway_file_path(world_id: str, data_directory: Optional[str] = None) -> Path:
    """Path of the station listing for one world: ``<data>/railway/<world_id>.json``."""
    return get_data_directory(data_directory) / "railway" / f"{world_id}.json"
