"""Formatting helpers for reports and progress messages."""


def time_str(seconds: float) -> str:
    """Format a duration in seconds as "HH:MM:SS.ss"."""
    minutes, secs = divmod(seconds, 60)
    hours, minutes = divmod(int(minutes), 60)
    return f"{hours:02}:{minutes:02}:{secs:05.2f}"


def int_comma(n: int) -> str:
    """Format an integer with commas as thousands separators.

    Args:
        n: The integer to format.

    Returns:
        The formatted string, e.g. "1,234,567".
    """
    return f"{n:,}"
