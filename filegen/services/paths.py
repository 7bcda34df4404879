"""Random nested directories under the output base."""

import random
import secrets
from pathlib import Path

from .monitor import logger, monitor

SEGMENT_LENGTH = 6


def random_hex(length: int = 8) -> str:
    """Lowercase hex token of exactly ``length`` characters."""
    return secrets.token_hex((length + 1) // 2)[:length]


def make_random_dir(base: Path, max_depth: int) -> Path:
    """Create a chain of 1..max_depth random hex directories under ``base``.

    Existing parents are fine. OSError from the filesystem is not caught.
    """
    depth = random.randint(1, max(1, max_depth))
    directory = Path(base).joinpath(*(random_hex(SEGMENT_LENGTH) for _ in range(depth)))

    existed = directory.exists()
    directory.mkdir(parents=True, exist_ok=True)
    if not existed:
        monitor.directory_created()
    logger.debug(f"Directory ready (depth {depth}): {directory}")
    return directory.absolute()
