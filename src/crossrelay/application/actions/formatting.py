"""Number formatting for action replies."""


def format_usd(value: float) -> str:
    """Format a price in USD, e.g. "$67,123.45" or "$0.0812"."""
    if value >= 1:
        return f"${value:,.2f}"
    return f"${value:.4f}"


def format_compact_usd(value: float | None) -> str:
    """Format a large USD amount, e.g. "$1.32T", "$35.20B"."""
    if value is None:
        return "n/a"
    for threshold, suffix in ((1e12, "T"), (1e9, "B"), (1e6, "M")):
        if abs(value) >= threshold:
            return f"${value / threshold:.2f}{suffix}"
    return f"${value:,.0f}"


def format_percent(value: float | None) -> str:
    """Format a signed percentage, e.g. "+2.31%"."""
    if value is None:
        return "n/a"
    return f"{value:+.2f}%"


def format_flow(value_millions: float) -> str:
    """Format a signed fund flow in millions, e.g. "+$111.7M"."""
    sign = "+" if value_millions >= 0 else "-"
    return f"{sign}${abs(value_millions):,.1f}M"
