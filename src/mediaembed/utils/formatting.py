"""
Number formatting utilities.
"""

# Significant digits kept when a computed dimension is turned into text
NUMBER_PRECISION = 14


def format_number(value: float) -> str:
    """Format a computed dimension without float noise.

    Args:
        value: Number to format

    Returns:
        Shortest text with up to 14 significant digits
        (e.g., "360" for 360.0, "56.25", "42.857142857143")
    """
    text = format(value, f".{NUMBER_PRECISION}g")
    if "e" in text:
        # Very large or very small values: fall back to fixed notation
        text = f"{value:.{NUMBER_PRECISION}f}".rstrip("0").rstrip(".")
    return text


def format_percentage(value: float) -> str:
    """Format a number as a CSS percentage (e.g., "56.25%")."""
    return f"{format_number(value)}%"
