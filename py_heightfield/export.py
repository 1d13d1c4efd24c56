"""
Greyscale image export.

Renders a heightfield as a plain (ASCII) Netpbm greymap: a ``P2`` header
followed by one sample per line in row-major order. The output is for
viewing only; nothing in the package reads it back.
"""

from pathlib import Path
from typing import IO, Union

import numpy as np
import structlog

from .core.heightfield import Heightfield

logger = structlog.get_logger()

PGM_MAX_VALUE = 65535


def _pgm_max_value(field: Heightfield) -> int:
    if not np.issubdtype(field.dtype, np.integer):
        raise ValueError(f"PGM export needs an integer sample type, got {field.dtype.name}")
    maxval = int(np.iinfo(field.dtype).max)
    if maxval > PGM_MAX_VALUE:
        raise ValueError(f"{field.dtype.name} samples exceed the PGM range of {PGM_MAX_VALUE}")
    if field.data.min() < 0:
        raise ValueError("PGM export cannot represent negative samples")
    return maxval


def iter_pgm_lines(field: Heightfield):
    """Yield the lines of the P2 image, header first."""
    maxval = _pgm_max_value(field)
    yield f"P2 {field.size} {field.size} {maxval}"
    for row in field.data:
        for sample in row:
            yield str(int(sample))


def to_pgm(field: Heightfield) -> str:
    return "\n".join(iter_pgm_lines(field)) + "\n"


def write_pgm(field: Heightfield, target: Union[str, Path, IO[str]]) -> None:
    """
    Write the P2 image to a path or an open text stream.

    Args:
        field: Heightfield with an unsigned integer sample type of at most 16 bits
        target: File path, or a writable text stream such as ``sys.stdout``
    """
    _pgm_max_value(field)

    if isinstance(target, (str, Path)):
        path = Path(target)
        with open(path, "w") as f:
            for line in iter_pgm_lines(field):
                f.write(line + "\n")
        logger.info("Wrote PGM", path=str(path), size=field.size)
    else:
        for line in iter_pgm_lines(field):
            target.write(line + "\n")
