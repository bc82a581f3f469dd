from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass
from pathlib import Path

from mdpane.utils.constants import MD_SUFFIX

_NEWLINE_RE = re.compile(r"\r\n|\r|\n")


@dataclass
class FileReference:
    """The file currently associated with the editor buffer, if any.

    Set by a successful Open or Save-As and never cleared. Plain Save is only
    available while a path is held. `line_endings` holds the newline sequence
    of each line of the last opened file, in order.
    """

    path: Path | None = None
    line_endings: tuple[str, ...] = ()

    @property
    def save_enabled(self) -> bool:
        return self.path is not None

    @property
    def display_name(self) -> str | None:
        return self.path.name if self.path is not None else None

    def track(self, path: Path, line_endings: tuple[str, ...] | None = None) -> None:
        self.path = path
        if line_endings is not None:
            self.line_endings = line_endings


def has_markdown_suffix(path: Path | str) -> bool:
    """Case-insensitive `.md` suffix check; the rest of the path is not validated."""
    return str(path).lower().endswith(MD_SUFFIX)


def split_line_endings(text: str) -> tuple[str, tuple[str, ...]]:
    """Return `text` with every CRLF/CR/LF as LF, plus the original endings in order."""
    return _NEWLINE_RE.sub("\n", text), tuple(_NEWLINE_RE.findall(text))


def join_line_endings(text: str, line_endings: tuple[str, ...]) -> str:
    """
    Inverse of split_line_endings for LF-only `text`.

    The n-th LF becomes the n-th recorded ending; LFs past the recorded ones
    use the file's most common ending.
    """
    if not line_endings or set(line_endings) == {"\n"}:
        return text
    fallback = Counter(line_endings).most_common(1)[0][0]
    parts = text.split("\n")
    out = [parts[0]]
    for i, part in enumerate(parts[1:]):
        out.append(line_endings[i] if i < len(line_endings) else fallback)
        out.append(part)
    return "".join(out)
