"""
SPARQL Client Utilities

Error taxonomy shared by every stage of a SPARQL call.
"""

from .client_utils import (
    SparqlClientError,
    ConfigurationError,
    ResponseError,
    ClientError,
    MalformedQuery,
    ServerError,
    DecodingError,
    TransportError,
)

__all__ = [
    'SparqlClientError',
    'ConfigurationError',
    'ResponseError',
    'ClientError',
    'MalformedQuery',
    'ServerError',
    'DecodingError',
    'TransportError',
]
