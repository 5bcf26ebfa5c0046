"""Quickstart: run work against a resource and close it right after."""

from __future__ import annotations

import io

from usingscope import using


class Connection:
    def __init__(self) -> None:
        self.open = True

    def query(self) -> list[str]:
        return ["alice", "bob"]

    def dispose(self) -> None:
        self.open = False


def main() -> None:
    connection = Connection()
    names = using(connection, lambda conn: conn.query())
    print(f"names={names}")  # => names=['alice', 'bob']
    print(f"connection_open={connection.open}")  # => connection_open=False

    buffer = io.StringIO("alpha\nbeta\n")
    first_line = using(buffer, lambda stream: stream.readline().strip())
    print(f"first_line={first_line} closed={buffer.closed}")  # => first_line=alpha closed=True

    nothing = using(None, lambda resource: "ran without a resource")
    print(nothing)  # => ran without a resource


if __name__ == "__main__":
    main()
