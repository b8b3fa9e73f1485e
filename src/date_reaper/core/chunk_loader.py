"""Read chunk documents from disk."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from date_reaper.exceptions import ChunkLoadError
from date_reaper.models.chunk import Chunk

logger = logging.getLogger(__name__)

# Every scalar stays a string: "3.10" is a cycle, not the float 3.1.
_YamlLoader = yaml.BaseLoader


def load_chunk(path: str | Path) -> Chunk:
    """Parse a chunk YAML file into a Chunk."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ChunkLoadError(str(path), e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise ChunkLoadError(str(path), f"not valid UTF-8: {e}") from e

    try:
        data = yaml.load(text, Loader=_YamlLoader)
    except yaml.YAMLError as e:
        raise ChunkLoadError(str(path), f"invalid YAML: {e}") from e

    if data is not None and not isinstance(data, dict):
        raise ChunkLoadError(str(path), "top level must be a mapping")

    try:
        chunk = Chunk.from_dict(data)
    except ValueError as e:
        raise ChunkLoadError(str(path), str(e)) from e

    logger.debug("Loaded %d variant(s) from %s", len(chunk.variants), path)
    return chunk
