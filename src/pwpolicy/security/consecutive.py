from __future__ import annotations

from pwpolicy.exceptions import InvalidArgumentError


def run_exceeds(password: str, max_run: int) -> bool:
    """Linear pass over code points; True once a run of one character is longer than ``max_run``.

    Accepts any string, blanks included; an empty string never exceeds.
    """
    if max_run < 1:
        raise InvalidArgumentError(f"max_run must be >= 1, got {max_run}")

    run = 0
    previous: str | None = None
    for ch in password:
        if ch == previous:
            run += 1
            if run > max_run:
                return True
        else:
            run = 1
            previous = ch
    return False


def has_excessive_run(password: str | None, max_run: int) -> bool:
    """Return True if ``password`` repeats one character more than ``max_run`` times in a row.

    Rejects absent, empty and whitespace-only passwords.
    """
    if password is None or not password.strip():
        raise InvalidArgumentError("password must not be None, empty or whitespace")
    return run_exceeds(password, max_run)


__all__ = ["has_excessive_run", "run_exceeds"]
