"""
SPARQL Client Utilities

Exception hierarchy for SPARQL client errors. Protocol-level errors carry the
HTTP status and the response body verbatim so callers can inspect what the
endpoint reported.
"""

from typing import Optional


class SparqlClientError(Exception):
    """Base exception for SPARQL client errors."""
    pass


class ConfigurationError(SparqlClientError):
    """Raised for an invalid method, protocol version or configuration file."""
    pass


class ResponseError(SparqlClientError):
    """
    An HTTP response the SPARQL Protocol treats as a failure.
    
    Attributes:
        status_code: HTTP status returned by the endpoint
        body: Response body decoded as UTF-8 text, undecodable bytes replaced
        raw_body: Response body bytes exactly as received
    """
    
    def __init__(self, body: str = "", status_code: Optional[int] = None, raw_body: bytes = b""):
        super().__init__(body)
        self.body = body
        self.status_code = status_code
        self.raw_body = raw_body
    
    def __str__(self) -> str:
        if self.status_code is None:
            return self.body
        return f"HTTP {self.status_code}: {self.body}"


class ClientError(ResponseError):
    """4xx response, or any status the protocol does not define an outcome for."""
    pass


class MalformedQuery(ClientError):
    """400 Bad Request: the endpoint rejected the query or update text."""
    pass


class ServerError(ResponseError):
    """5xx response."""
    pass


class DecodingError(SparqlClientError):
    """The response body does not match the structure of its content type."""
    pass


class TransportError(SparqlClientError):
    """Connection-level failure: no HTTP response was received at all."""
    pass
