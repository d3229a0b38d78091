"""
SPARQL Response Classifier

Classifies a completed HTTP exchange as success or one of the protocol
error categories. Classification returns the error instead of raising it;
the client decides when to raise.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Union

from ..utils.client_utils import ClientError, MalformedQuery, ServerError


@dataclass(frozen=True)
class HttpResponse:
    """Raw response as returned by the transport."""
    status_code: int
    headers: Dict[str, str] = field(default_factory=dict)
    body: bytes = b""
    
    @property
    def content_type(self) -> Optional[str]:
        """Declared media type without parameters, or None."""
        for name, value in self.headers.items():
            if name.lower() == "content-type":
                return media_type(value)
        return None
    
    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


@dataclass(frozen=True)
class Success:
    """2xx outcome carrying the response onward to decoding."""
    response: HttpResponse


Classification = Union[Success, MalformedQuery, ClientError, ServerError]


def media_type(value: Optional[str]) -> Optional[str]:
    """Strip parameters from a Content-Type value and lower-case it."""
    if not value:
        return None
    return value.split(";", 1)[0].strip().lower() or None


def classify(response: HttpResponse) -> Classification:
    """
    Classify a response by its status code.
    
    400 is a malformed query, other 4xx are client errors, 5xx are server
    errors and 2xx is success. The protocol defines no outcome for 1xx or
    3xx on a completed request, so those are client errors too.
    """
    status = response.status_code
    if 200 <= status < 300:
        return Success(response)
    if status == 400:
        return MalformedQuery(response.text, status_code=status, raw_body=response.body)
    if 500 <= status < 600:
        return ServerError(response.text, status_code=status, raw_body=response.body)
    return ClientError(response.text, status_code=status, raw_body=response.body)
