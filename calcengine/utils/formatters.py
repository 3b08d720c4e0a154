"""
Shared formatting helpers used by the page templates (registered as Jinja2 filters).

format_currency       - whole-dollar display            ->  $1,234
format_currency_exact - dollar-and-cents display        ->  $1,234.56
format_compact        - abbreviated large amounts       ->  $1.2M / $45k
format_percent        - percentage from a 0-100 value   ->  7.5%
format_percent_ratio  - percentage from a 0-1 ratio     ->  7.5%  (input 0.075)
"""

from calcengine.utils.rounding import round_half_up


def _usd(value: float, digits: int) -> str:
    rounded = round_half_up(value, digits)
    sign = "-" if rounded < 0 else ""
    return f"{sign}${abs(rounded):,.{digits}f}"


def format_currency(value: float) -> str:
    """Format as USD with no decimal places: $1,234"""
    return _usd(value, 0)


def format_currency_exact(value: float) -> str:
    """Format as USD with exactly 2 decimal places: $1,234.56"""
    return _usd(value, 2)


def format_compact(value: float) -> str:
    """
    Compact currency display for large values.
      >= 1,000,000  ->  $1.2M
      >= 1,000      ->  $45k
      otherwise     ->  $123
    """
    if value >= 1_000_000:
        return f"${round_half_up(value / 1_000_000, 1):.1f}M"
    if value >= 1_000:
        return f"${round_half_up(value / 1_000):.0f}k"
    return f"${round_half_up(value):.0f}"


def format_percent(value: float) -> str:
    """Display a percentage where the input is already in 0-100 scale: 7.5 -> "7.5%"."""
    return f"{round_half_up(value, 1):.1f}%"


def format_percent_ratio(value: float) -> str:
    """Display a percentage where the input is a 0-1 ratio: 0.075 -> "7.5%"."""
    return format_percent(value * 100)


FILTERS = {
    "currency": format_currency,
    "currency_exact": format_currency_exact,
    "compact": format_compact,
    "percent": format_percent,
    "percent_ratio": format_percent_ratio,
}
