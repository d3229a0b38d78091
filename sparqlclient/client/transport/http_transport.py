"""
SPARQL HTTP Transport

Wraps a single httpx.Client so connections are reused across the sequential
calls of one SPARQL client. The proxy is chosen once, at construction, from
the ``http_proxy`` or ``https_proxy`` environment variable matching the
endpoint scheme.
"""

import logging
import os
from typing import Dict, Mapping, Optional

import httpx

from ..config.client_config_loader import DEFAULT_TIMEOUT
from ..response.response_classifier import HttpResponse
from ..utils.client_utils import TransportError

logger = logging.getLogger(__name__)

_PROXY_VARIABLES = {
    'http': 'http_proxy',
    'https': 'https_proxy',
}


def resolve_proxy(scheme: str, environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """
    Return the proxy URL for an endpoint scheme, or None for a direct connection.
    
    Args:
        scheme: URL scheme of the endpoint ('http' or 'https')
        environ: Environment to read from (defaults to os.environ)
    """
    environ = os.environ if environ is None else environ
    variable = _PROXY_VARIABLES.get((scheme or '').lower())
    if variable is None:
        return None
    return environ.get(variable) or None


class HttpTransport:
    """
    Blocking HTTP transport with connection reuse.
    
    The send call is the only point at which a SPARQL call waits; it is
    bounded by the configured timeout or a per-call timeout.
    """
    
    def __init__(self, scheme: str, timeout: float = DEFAULT_TIMEOUT,
                 transport: Optional[httpx.BaseTransport] = None,
                 environ: Optional[Mapping[str, str]] = None):
        """
        Initialize the transport.
        
        Args:
            scheme: Endpoint URL scheme, used for proxy selection
            timeout: Default timeout in seconds for connect, read and write
            transport: Optional httpx transport (e.g. httpx.MockTransport)
            environ: Environment used for proxy lookup (defaults to os.environ)
        """
        self.timeout = timeout
        self.proxy_url = resolve_proxy(scheme, environ)
        
        client_args = {
            'timeout': timeout,
            'trust_env': False,
            'follow_redirects': False,
            'headers': {'User-Agent': 'sparqlclient/0.1'},
        }
        if transport is not None:
            # An injected transport does its own routing.
            client_args['transport'] = transport
        elif self.proxy_url:
            client_args['proxy'] = self.proxy_url
            logger.info(f"Using proxy {self.proxy_url} for {scheme} endpoint")
        
        self.session = httpx.Client(**client_args)
    
    def send(self, url: str, method: str, headers: Dict[str, str], body: bytes = b"",
             timeout: Optional[float] = None) -> HttpResponse:
        """
        Perform one HTTP exchange.
        
        Args:
            url: Request URL
            method: HTTP method
            headers: Request headers
            body: Request body
            timeout: Optional per-call timeout in seconds
            
        Returns:
            HttpResponse with status, headers and the full body
            
        Raises:
            TransportError: If no HTTP response was received
        """
        request_args = {'headers': headers, 'content': body or None}
        if timeout is not None:
            request_args['timeout'] = timeout
        
        try:
            response = self.session.request(method, url, **request_args)
        except httpx.TimeoutException as e:
            logger.error(f"Timed out waiting for {url}: {e}")
            raise TransportError(f"Timed out waiting for {url}: {e}") from e
        except httpx.TransportError as e:
            logger.error(f"Transport failure for {url}: {e}")
            raise TransportError(f"Transport failure for {url}: {e}") from e
        
        return HttpResponse(
            status_code=response.status_code,
            headers=dict(response.headers),
            body=response.content,
        )
    
    def close(self) -> None:
        """Release pooled connections."""
        self.session.close()
