from .currency import format_currency

__all__ = ["format_currency"]
