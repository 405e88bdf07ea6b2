"""ESG indicator evaluation and alerting engine."""

__version__ = "0.1.0"
