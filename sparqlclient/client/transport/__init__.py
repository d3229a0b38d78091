"""
SPARQL HTTP Transport

Persistent httpx transport shared by all calls of one client.
"""

from .http_transport import HttpTransport, resolve_proxy

__all__ = [
    'HttpTransport',
    'resolve_proxy',
]
