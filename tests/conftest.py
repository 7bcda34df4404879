import logging
import os
import re
from pathlib import Path

import pytest

from filegen.services.monitor import disable_console_logging, logger, monitor


@pytest.fixture(autouse=True)
def isolated_run(tmp_path, monkeypatch):
    """Run every test from an empty cwd with no FILEGEN_* overrides."""
    for key in list(os.environ):
        if key.startswith("FILEGEN_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    monitor.reset()
    yield
    logger.setLevel(logging.INFO)
    disable_console_logging()


def depth_under(path: Path, base: Path) -> int:
    """Directory segments between ``base`` and the file at ``path``."""
    return len(Path(path).relative_to(base).parts) - 1


PAYLOAD_PATTERNS = {
    ".html": r"<body>\n([A-Za-z]*)\n</body>",
    ".js": r'const s = "([A-Za-z]*)";',
    ".css": r'content: "([A-Za-z]*)";',
}


def payload_from_text(ext: str, text: str) -> str:
    """Recover the raw random letters from wrapped file text."""
    pattern = PAYLOAD_PATTERNS.get(ext)
    return re.search(pattern, text).group(1) if pattern else text


def extract_payload(path: Path) -> str:
    path = Path(path)
    return payload_from_text(path.suffix, path.read_text(encoding="utf-8"))
