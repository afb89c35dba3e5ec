import os

from huffcode.errors import IOReadError, IOWriteError


class CharReader:
    """Forward-only cursor over the bytes of a file, one character per byte."""

    def __init__(self, path):
        self.path = path
        try:
            with open(path, "rb") as f:
                self._data = f.read()
        except OSError as e:
            raise IOReadError(f"cannot read {path}: {e}") from e
        self.i = 0

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False

    def close(self):
        self._data = b""
        self.i = 0

    def has_next_char(self) -> bool:
        return self.i < len(self._data)

    def read_char(self) -> str:
        if self.i >= len(self._data):
            raise EOFError("No more characters")
        c = chr(self._data[self.i])
        self.i += 1
        return c

    def __iter__(self):
        while self.has_next_char():
            yield self.read_char()


def _prepare(path):
    os.makedirs(os.path.dirname(os.fspath(path)) or ".", exist_ok=True)


def write_bytes(path, data: bytes):
    try:
        _prepare(path)
        with open(path, "wb") as f:
            f.write(data)
    except OSError as e:
        raise IOWriteError(f"cannot write {path}: {e}") from e


def write_text(path, text: str):
    # one byte per character, the inverse of CharReader
    write_bytes(path, text.encode("latin-1"))
