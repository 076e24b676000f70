from datetime import datetime

DAY = 86400


def days_remaining(due: datetime, now: datetime) -> int:
    """Whole days left until due, counting a partial day as one.

    Only meaningful when due is not before now.
    """
    seconds = (due - now).total_seconds()
    return int(seconds // DAY) + 1


def fit(text: str, width: int) -> str:
    """Pad text to width, cutting it with a trailing '~' when too long."""
    if len(text) > width:
        return text[: width - 1] + "~"
    return text.ljust(width)


def plural(n: int, word: str) -> str:
    return f"{n} {word}{'s' if n != 1 else ''}"
