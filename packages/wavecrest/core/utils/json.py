"""JSON IO for engine results.

Results are pydantic models, typed paths, numpy sample arrays and enums;
``json_default`` turns each into plain JSON so the CLI can print or write
them without converting first.
"""

from __future__ import annotations

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Any

import numpy as np
from pydantic import BaseModel

from wavecrest.core.geometry.path import PathData

logger = logging.getLogger(__name__)


def json_default(obj: Any) -> Any:
    """Convert engine values that ``json`` cannot encode.

    - pydantic models -> their JSON-mode dump
    - PathData -> path text
    - numpy arrays and scalars -> lists and Python numbers
    - enums -> their value
    - pathlib.Path -> str

    Raises:
        TypeError: For any other type, as ``json.dumps`` expects.
    """
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    if isinstance(obj, PathData):
        return obj.serialize()
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    if isinstance(obj, np.generic):
        return obj.item()
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, Path):
        return str(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def write_json(path: str | Path, obj: Any) -> None:
    """Write a result to a JSON file, creating parent directories.

    Args:
        path: Output file path.
        obj: Model, dict or list built from engine values.
    """
    path_obj = Path(path)
    path_obj.parent.mkdir(parents=True, exist_ok=True)
    path_obj.write_text(
        json.dumps(obj, indent=2, ensure_ascii=False, default=json_default),
        encoding="utf-8",
    )
    logger.debug("Wrote JSON to %s", path_obj)


def read_json(path: str | Path) -> dict[str, Any]:
    """Read a JSON object (config files are always objects).

    Raises:
        ValueError: If the top-level value is not an object.
    """
    data: Any = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Expected JSON object, got {type(data).__name__}")
    return data
