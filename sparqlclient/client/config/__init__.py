"""
SPARQL Client Configuration

Configuration loading and validated request settings.
"""

from .client_config_loader import (
    SparqlClientConfig,
    RequestSettings,
    Method,
    Protocol,
    Operation,
    DEFAULT_TIMEOUT,
)

__all__ = [
    'SparqlClientConfig',
    'RequestSettings',
    'Method',
    'Protocol',
    'Operation',
    'DEFAULT_TIMEOUT',
]
