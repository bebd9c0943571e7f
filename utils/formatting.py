"""Human-readable formatting helpers."""

_UNITS = ['Bytes', 'KB', 'MB', 'GB']


def format_file_size(size_bytes: int) -> str:
    """1024-based size with up to two decimals, e.g. '1.5 KB'."""
    if size_bytes <= 0:
        return '0 Bytes'
    value = float(size_bytes)
    unit = 0
    while value >= 1024 and unit < len(_UNITS) - 1:
        value /= 1024
        unit += 1
    return f"{round(value, 2):g} {_UNITS[unit]}"
