"""
SPARQL Protocol client.

Builds SPARQL Protocol requests, classifies HTTP responses and decodes
result documents into rdflib terms.
"""

from .client.sparql_client import SparqlClient
from .client.client_factory import create_sparql_client
from .client.config.client_config_loader import SparqlClientConfig, Method, Protocol
from .client.utils.client_utils import (
    SparqlClientError,
    ConfigurationError,
    ResponseError,
    ClientError,
    MalformedQuery,
    ServerError,
    DecodingError,
    TransportError,
)
from .results.solutions import Solution, Solutions

__version__ = "0.1.0"

__all__ = [
    'SparqlClient',
    'create_sparql_client',
    'SparqlClientConfig',
    'Method',
    'Protocol',
    'SparqlClientError',
    'ConfigurationError',
    'ResponseError',
    'ClientError',
    'MalformedQuery',
    'ServerError',
    'DecodingError',
    'TransportError',
    'Solution',
    'Solutions',
]
