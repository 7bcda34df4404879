"""Random filler files: pick an extension, make a payload, wrap it, write it."""

import random
import string
from pathlib import Path
from typing import Callable, Dict

from .monitor import logger, monitor
from .paths import random_hex

# ── Extensions, in pick order ───────────────────────────────
EXTENSIONS = (".html", ".js", ".css", ".txt")
LETTERS = string.ascii_letters

FILE_PREFIX = "file_"
NAME_TOKEN_LENGTH = 8
TAG_TOKEN_LENGTH = 6
CSS_CONTENT_CHARS = 30


def random_letters(length: int) -> str:
    return "".join(random.choice(LETTERS) for _ in range(length))


# ── Templates ───────────────────────────────────────────────
def _html(payload: str) -> str:
    return (
        "<!doctype html>\n"
        "<html>\n"
        "<head>\n"
        '  <meta charset="utf-8">\n'
        f"  <title>{random_hex(TAG_TOKEN_LENGTH)}</title>\n"
        "</head>\n"
        "<body>\n"
        f"{payload}\n"
        "</body>\n"
        "</html>\n"
    )


def _js(payload: str) -> str:
    return (
        f"// {random_hex(TAG_TOKEN_LENGTH)}\n"
        "(function(){\n"
        f'  const s = "{payload}";\n'
        "  // random content\n"
        "  return s.length;\n"
        "})();\n"
    )


def _css(payload: str) -> str:
    return (
        f"/* {random_hex(TAG_TOKEN_LENGTH)} */\n"
        f'body::after {{ content: "{payload[:CSS_CONTENT_CHARS]}"; }}\n'
    )


TEMPLATES: Dict[str, Callable[[str], str]] = {
    ".html": _html,
    ".js": _js,
    ".css": _css,
}


def wrap_content(ext: str, payload: str) -> str:
    """Embed ``payload`` in the shell for ``ext``; unknown extensions pass through."""
    template = TEMPLATES.get(ext)
    return template(payload) if template else payload


def make_random_file(directory: Path, min_len: int, max_len: int) -> Path:
    """Write one random file into ``directory`` and return its absolute path.

    A name collision overwrites the existing file. Write errors propagate.
    """
    ext = random.choice(EXTENSIONS)
    path = Path(directory) / f"{FILE_PREFIX}{random_hex(NAME_TOKEN_LENGTH)}{ext}"
    monitor.file_started(path.name)

    length = random.randint(min_len, max_len)
    content = wrap_content(ext, random_letters(length))

    path.write_text(content, encoding="utf-8")
    monitor.file_written(ext, len(content.encode("utf-8")))
    logger.debug(f"Wrote {path} ({length} chars of payload)")
    return path.absolute()
