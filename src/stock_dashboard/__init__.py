"""Stock portfolio dashboard backed by Alpha Vantage quotes."""

__version__ = "0.1.0"
