"""Reading and writing element and substance files.

The format follows the file suffix: ``.yml``/``.yaml`` for YAML and
``.json`` for JSON.
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import ModuleType
from typing import Optional, Union

from stoichio.elements import Elements
from stoichio.serialization import json_io, yaml_io
from stoichio.substances import Substances

logger = logging.getLogger(__name__)

_FORMATS = {
    ".yml": yaml_io,
    ".yaml": yaml_io,
    ".json": json_io,
}


def codec_for(path: Union[str, Path]) -> ModuleType:
    suffix = Path(path).suffix.lower()
    try:
        return _FORMATS[suffix]
    except KeyError:
        raise ValueError(
            f"Unsupported file type `{suffix}` for {path}; use .yml, .yaml or .json"
        ) from None


def read_elements(path: Union[str, Path]) -> Elements:
    codec = codec_for(path)
    with open(path, "r", encoding="utf-8") as f:
        elements = codec.load_elements(f)
    logger.info("Loaded %d elements from %s", len(elements), path)
    return elements


def read_substances(path: Union[str, Path], elements: Optional[Elements] = None) -> Substances:
    codec = codec_for(path)
    with open(path, "r", encoding="utf-8") as f:
        substances = codec.load_substances(f, elements)
    logger.info("Loaded %d substances from %s", len(substances), path)
    return substances


def write_elements(path: Union[str, Path], elements: Elements) -> None:
    text = codec_for(path).dump_elements(elements)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)


def write_substances(path: Union[str, Path], substances: Substances) -> None:
    text = codec_for(path).dump_substances(substances)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)
