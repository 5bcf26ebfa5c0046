"""Generators keep the resource open until iteration finishes."""

from __future__ import annotations

import io
from collections.abc import Iterator

from usingscope import using


class Cursor:
    def __init__(self) -> None:
        self.closed = False

    def close(self) -> None:
        self.closed = True


def main() -> None:
    cursor = Cursor()

    def rows(active: Cursor) -> Iterator[int]:
        yield 1
        yield 2

    iterator = using(cursor, rows)
    print(f"first={next(iterator)} closed={cursor.closed}")  # => first=1 closed=False
    print(f"rest={list(iterator)} closed={cursor.closed}")  # => rest=[2] closed=True

    stream = io.StringIO("x\ny\n")
    lines = [line.strip() for line in using(stream, lambda s: s)]
    print(f"lines={lines} closed={stream.closed}")  # => lines=['x', 'y'] closed=True


if __name__ == "__main__":
    main()
