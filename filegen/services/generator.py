import os
from pathlib import Path
from typing import List, Optional

from ..config import GeneratorConfig
from .files import make_random_file
from .monitor import logger, monitor
from .paths import make_random_dir


def generate(config: GeneratorConfig) -> List[Path]:
    """Create ``config.count`` random files, strictly one after another.

    The first error stops the run and is re-raised; files already written stay.
    """
    monitor.begin_run(config.count)
    logger.info(
        f"Generating {config.count} files under {config.out_dir} "
        f"(length {config.min_len}-{config.max_len}, depth <= {config.max_depth})"
    )

    created: List[Path] = []
    try:
        config.out_dir.mkdir(parents=True, exist_ok=True)
        for _ in range(config.count):
            directory = make_random_dir(config.out_dir, config.max_depth)
            created.append(make_random_file(directory, config.min_len, config.max_len))
    except Exception as e:
        monitor.fail_run()
        logger.error(f"Generation aborted: {e} ({monitor.summary()})")
        raise

    monitor.finish_run()
    logger.info(f"Run summary: {monitor.summary()}")
    return created


def format_report(created: List[Path], out_dir: Path, cwd: Optional[Path] = None) -> List[str]:
    cwd = cwd or Path.cwd()
    lines = [f"Created {len(created)} files under {out_dir}"]
    lines.extend(f" - {os.path.relpath(path, cwd)}" for path in created)
    return lines
