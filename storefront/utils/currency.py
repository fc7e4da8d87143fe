"""Money formatting"""

CURRENCY = "MAD"


def format_currency(amount_in_centimes: int) -> str:
    """
    Format an amount in centimes for the Moroccan market.

    150000 -> "1 500,00 MAD". Integer arithmetic only.
    """
    sign = "-" if amount_in_centimes < 0 else ""
    units, centimes = divmod(abs(int(amount_in_centimes)), 100)
    grouped = f"{units:,}".replace(",", " ")
    return f"{sign}{grouped},{centimes:02d} {CURRENCY}"
