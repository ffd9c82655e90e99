"""Overwrite confirmation."""

from typing import Callable

# Asked once per conflicted file; True means "overwrite".
Confirm = Callable[[str], bool]


def console_confirm(question: str) -> bool:
    """Ask a yes/no question on stdin. Anything but y/yes is a no."""
    try:
        answer = input(f"{question} [y/N]: ")
    except EOFError:
        return False
    return answer.strip().lower() in ("y", "yes")
