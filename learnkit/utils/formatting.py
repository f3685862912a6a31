"""Number formatting shared by reports and verbose traces."""


def format_decimal(value: float, digits: int = 13) -> str:
    """
    Format a number with at most ``digits`` fractional digits.

    Trailing zeros and a dangling decimal point are removed, so 2.50 prints as
    ``2.5`` and 3.0 prints as ``3``.
    """
    text = f"{float(value):.{digits}f}"
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    if text == '-0':
        text = '0'
    return text
