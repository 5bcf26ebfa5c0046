"""Errors: cleanup always runs, and a failing cleanup wins."""

from __future__ import annotations

from usingscope import UnsupportedResourceError, using


class Lock:
    def __init__(self) -> None:
        self.released = False

    def dispose(self) -> None:
        self.released = True


class BrokenLock:
    def dispose(self) -> None:
        msg = "release failed"
        raise RuntimeError(msg)


def fail(resource: object) -> None:
    msg = "work failed"
    raise ValueError(msg)


def main() -> None:
    lock = Lock()
    try:
        using(lock, fail)
    except ValueError as error:
        print(f"error={error} released={lock.released}")  # => error=work failed released=True

    try:
        using(BrokenLock(), fail)
    except RuntimeError as error:
        print(f"error={error} masked={error.__context__}")  # => error=release failed masked=work failed

    try:
        using(object(), lambda resource: None)
    except UnsupportedResourceError as error:
        print(f"unsupported={type(error.resource).__name__}")  # => unsupported=object


if __name__ == "__main__":
    main()
