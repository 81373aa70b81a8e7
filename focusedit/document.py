"""Open document state, file loading, and debounced atomic saves.

The session owns exactly one document at a time: created on open, mutated
on edit, flushed on save, replaced wholesale by the next open.
Load/save failures are returned as message strings for the status row.
"""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_AUTOSAVE_DELAY = 0.5
FALLBACK_ENCODING = "latin-1"


@dataclass
class Document:
    path: str
    text: str
    saved_text: str
    encoding: str = "utf-8"

    @property
    def dirty(self) -> bool:
        return self.text != self.saved_text

    @property
    def extension(self) -> str:
        return os.path.splitext(self.path)[1]


def read_text(path: str) -> tuple[str, str]:
    """Read ``path`` as text, returning ``(text, encoding)``.

    Line endings are kept as-is so a save writes back the same bytes. Non-UTF-8
    files fall back to latin-1, which decodes any byte string.
    """
    with open(path, "rb") as handle:
        data = handle.read()
    try:
        return data.decode("utf-8"), "utf-8"
    except UnicodeDecodeError:
        return data.decode(FALLBACK_ENCODING), FALLBACK_ENCODING


def load_document(path: str) -> Document:
    """Load ``path`` into a fresh document. Raises ``OSError`` on failure."""
    absolute = os.path.abspath(path)
    if os.path.isdir(absolute):
        raise IsADirectoryError(f"Is a directory: {absolute!r}")
    text, encoding = read_text(absolute)
    return Document(path=absolute, text=text, saved_text=text, encoding=encoding)


def write_atomic(path: str, text: str, encoding: str = "utf-8") -> None:
    """Replace ``path`` with ``text`` via a same-directory temp file and rename.

    A symlinked ``path`` is written through to its target, whose permission
    bits are carried over to the new file.
    """
    path = os.path.realpath(path)
    directory = os.path.dirname(path)
    try:
        mode: int | None = stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        mode = None

    fd, tmp_path = tempfile.mkstemp(prefix=".focusedit-", suffix=".tmp", dir=directory)
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as handle:
            handle.write(text)
            handle.flush()
            os.fsync(handle.fileno())
        if mode is not None:
            os.chmod(tmp_path, mode)
        os.replace(tmp_path, path)
    except BaseException:
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
        raise


def _describe_error(action: str, path: str, exc: OSError) -> str:
    reason = exc.strerror or str(exc)
    return f"Cannot {action} {path}: {reason}"


class EditorSession:
    """Holds the current document and schedules its autosaves."""

    def __init__(self, autosave_delay: float = DEFAULT_AUTOSAVE_DELAY) -> None:
        self.autosave_delay = max(0.0, float(autosave_delay))
        self.document: Document | None = None
        self.last_edit_at: float | None = None

    @property
    def title(self) -> str:
        return self.document.path if self.document is not None else ""

    def open(self, path: str) -> str | None:
        """Replace the current document with ``path``.

        Pending edits of the previous document are flushed first. When either
        the load or that flush fails, the previous document stays loaded with
        its buffer intact and an error message is returned.
        """
        # Flushed before loading so reopening the same file reads the saved edits.
        flush_error = self.flush()
        if flush_error is not None:
            return flush_error
        try:
            document = load_document(path)
        except OSError as exc:
            message = _describe_error("open", path, exc)
            logger.warning(message)
            return message

        self.document = document
        self.last_edit_at = None
        logger.info("opened %s", document.path)
        return None

    def edit(self, text: str, now: float) -> None:
        if self.document is None:
            return
        if text == self.document.text:
            return
        self.document.text = text
        self.last_edit_at = now

    def pending(self) -> bool:
        return self.document is not None and self.document.dirty

    def flush(self) -> str | None:
        """Write the buffer if dirty. Failures keep the buffer and dirty flag."""
        document = self.document
        if document is None or not document.dirty:
            return None
        text = document.text
        try:
            write_atomic(document.path, text, document.encoding)
        except (OSError, UnicodeEncodeError) as exc:
            if isinstance(exc, OSError):
                message = _describe_error("save", document.path, exc)
            else:
                message = f"Cannot save {document.path}: {exc.reason}"
            logger.warning(message)
            # Not retried on a timer; the next edit or an explicit save tries again.
            self.last_edit_at = None
            return message
        document.saved_text = text
        self.last_edit_at = None
        logger.debug("saved %s (%d chars)", document.path, len(text))
        return None

    def flush_if_due(self, now: float) -> str | None:
        if not self.pending() or self.last_edit_at is None:
            return None
        if now - self.last_edit_at < self.autosave_delay:
            return None
        return self.flush()

    def next_flush_at(self) -> float | None:
        """Return the monotonic time of the next scheduled autosave, if any."""
        if not self.pending() or self.last_edit_at is None:
            return None
        return self.last_edit_at + self.autosave_delay
