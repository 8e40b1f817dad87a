"""Usage-quota history, burn rates, forecasts, sparklines and terminal dashboard pieces."""

__version__ = "0.1.0"