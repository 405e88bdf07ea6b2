from .base import MetricsProvider
from .esg_api import EsgApiProvider

__all__ = ["MetricsProvider", "EsgApiProvider"]
