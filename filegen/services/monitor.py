import logging
import sys
from datetime import datetime
from typing import Any, Dict


class RunMonitor:
    """Collects generation statistics for a run."""

    def __init__(self):
        self.stats: Dict[str, Any] = {}
        self.reset()

    def reset(self):
        self.stats = {
            "status": "Idle",
            "files_requested": 0,
            "files_created": 0,
            "directories_created": 0,
            "bytes_written": 0,
            "extensions": {},
            "current_file": None,
            "run_active": False,
            "last_updated": datetime.now().isoformat(),
        }

    # ── Stats ───────────────────────────────────────────────
    def update_stats(self, **kwargs):
        self.stats.update(kwargs)
        self.stats["last_updated"] = datetime.now().isoformat()

    def get_stats(self) -> Dict[str, Any]:
        stats = dict(self.stats)
        stats["extensions"] = dict(self.stats["extensions"])
        return stats

    def summary(self) -> str:
        """One line describing the run, e.g. for ``--verbose``."""
        stats = self.get_stats()
        by_ext = ", ".join(
            f"{ext}={count}" for ext, count in sorted(stats["extensions"].items())
        ) or "none"
        return (
            f"{stats['status']}: {stats['files_created']}/{stats['files_requested']} files, "
            f"{stats['directories_created']} new directories, "
            f"{stats['bytes_written']} bytes ({by_ext})"
        )

    # ── Convenience helpers for generation progress ─────────
    def begin_run(self, files_requested: int):
        self.update_stats(
            status="Generating",
            files_requested=files_requested,
            files_created=0,
            directories_created=0,
            bytes_written=0,
            extensions={},
            run_active=True,
            current_file=None,
        )

    def directory_created(self):
        self.update_stats(directories_created=self.stats["directories_created"] + 1)

    def file_started(self, filename: str):
        self.update_stats(current_file=filename)

    def file_written(self, ext: str, size: int):
        extensions = dict(self.stats["extensions"])
        extensions[ext] = extensions.get(ext, 0) + 1
        self.update_stats(
            files_created=self.stats["files_created"] + 1,
            bytes_written=self.stats["bytes_written"] + size,
            extensions=extensions,
            current_file=None,
        )

    def finish_run(self):
        self.update_stats(status="Done", run_active=False, current_file=None)

    def fail_run(self):
        self.update_stats(status="Failed", run_active=False)


monitor = RunMonitor()

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# ── Logging integration ─────────────────────────────────────
class ConsoleHandler(logging.StreamHandler):
    """stderr handler attached for --verbose or a non-default log level."""


def setup_logging():
    log = logging.getLogger("filegen")
    log.setLevel(logging.INFO)
    log.addHandler(logging.NullHandler())
    log.propagate = False  # stdout is reserved for the report
    return log


def enable_console_logging(level: str = "INFO") -> logging.Handler:
    """Stream log records to stderr. Calling it again reuses the same handler."""
    for handler in logger.handlers:
        if isinstance(handler, ConsoleHandler):
            handler.setStream(sys.stderr)
            handler.setLevel(level)
            return handler

    handler = ConsoleHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return handler


def disable_console_logging():
    for handler in list(logger.handlers):
        if isinstance(handler, ConsoleHandler):
            logger.removeHandler(handler)


logger = setup_logging()
