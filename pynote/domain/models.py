from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

# Line breaks the editor widget turns into "\n" (U+2029 is Qt's block separator).
_EDITOR_BREAK = re.compile("\r\n|\r|\u2029")
_FIRST_BREAK = re.compile("\r\n|\r|\n")


def detect_newline(text: str) -> str:
    """Return the first line ending found in ``text``, "\\n" if there is none."""
    m = _FIRST_BREAK.search(text)
    return m.group(0) if m else "\n"


@dataclass
class DocumentSession:
    """The single editable document: its text and the file it is bound to.

    ``path`` is None until the text has been loaded from or saved to a file,
    and goes back to None on reset(). ``newline`` is the line ending of the
    loaded file; editor text (always "\\n") is written back with it.
    """

    content: str = ""
    path: Path | None = None
    newline: str = "\n"

    @property
    def is_bound(self) -> bool:
        return self.path is not None

    def reset(self) -> None:
        self.content = ""
        self.path = None
        self.newline = "\n"

    def clear(self) -> None:
        self.content = ""

    def load(self, path: Path, text: str) -> None:
        self.content = text
        self.path = path
        self.newline = detect_newline(text)

    def bind(self, path: Path) -> None:
        self.path = path

    def editor_text(self) -> str:
        """``content`` as the editor shows it, with every line break as "\\n"."""
        return _EDITOR_BREAK.sub("\n", self.content)

    def apply_editor_text(self, text: str) -> None:
        # Unedited text keeps the exact characters that were loaded.
        if text == self.editor_text():
            return
        if self.newline != "\n":
            text = text.replace("\n", self.newline)
        self.content = text


def window_title(app_name: str, path: Path | None) -> str:
    if path is None:
        return app_name
    return f"{app_name} - {path.name}"
