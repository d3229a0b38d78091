"""
SPARQL Request Builder

Pure construction of SPARQL Protocol requests: method selection,
protocol-version dependent body encoding, header merging and HTTP Basic
credentials taken from the endpoint URL.

See https://www.w3.org/TR/sparql11-protocol/#query-operation
"""

import base64
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Tuple
from urllib.parse import parse_qsl, unquote, urlencode, urlsplit, urlunsplit

from ..config.client_config_loader import Method, Operation, Protocol, RequestSettings

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

_UPDATE_CONTENT_TYPES = {
    Operation.QUERY: "application/sparql-query",
    Operation.UPDATE: "application/sparql-update",
}


@dataclass(frozen=True)
class HttpRequest:
    """A fully built HTTP request, ready for the transport."""
    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: bytes = b""


def merge_headers(*layers: Optional[Mapping[str, str]]) -> Dict[str, str]:
    """
    Merge header mappings left to right; later layers win.
    
    Header names are compared case-insensitively and the spelling of the
    winning layer is kept.
    """
    merged: Dict[str, Tuple[str, str]] = {}
    for layer in layers:
        for name, value in (layer or {}).items():
            merged[name.lower()] = (name, value)
    return dict(merged.values())


def split_userinfo(url: str) -> Tuple[str, Optional[Tuple[str, str]]]:
    """
    Remove user-info from a URL.
    
    Returns:
        Tuple of (url without user-info, (user, password) or None). Empty
        user names count as no credentials.
    """
    parts = urlsplit(url)
    userinfo, sep, hostport = parts.netloc.rpartition("@")
    if not sep:
        return url, None
    
    bare_url = urlunsplit(parts._replace(netloc=hostport))
    user, _, password = userinfo.partition(":")
    if not user:
        return bare_url, None
    return bare_url, (unquote(user), unquote(password))


def _basic_auth(user: str, password: str) -> str:
    token = base64.b64encode(f"{user}:{password}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


def _with_query_param(url: str, query: str) -> str:
    parts = urlsplit(url)
    # repeated keys such as default-graph-uri must survive
    pairs = [(k, v) for k, v in parse_qsl(parts.query, keep_blank_values=True) if k != "query"]
    pairs.append(("query", query))
    return urlunsplit(parts._replace(query=urlencode(pairs)))


def build_request(
    url: str,
    query: str,
    operation: Operation,
    settings: RequestSettings,
    headers: Optional[Mapping[str, str]] = None,
) -> HttpRequest:
    """
    Build the HTTP request for one SPARQL query or update.
    
    Args:
        url: Endpoint URL, optionally carrying user-info for Basic authentication
        query: Query or update text, sent verbatim
        operation: Operation.QUERY or Operation.UPDATE
        settings: Client request settings (method, protocol, default headers)
        headers: Per-call header overrides, applied over the defaults
        
    Returns:
        HttpRequest
        
    Raises:
        ConfigurationError: If the method or protocol version is not supported
    """
    method = Method.parse(settings.method)
    operation = Operation(operation)
    target, credentials = split_userinfo(url)
    request_headers = merge_headers(settings.headers, headers)
    body = b""
    
    if method is Method.GET:
        target = _with_query_param(target, query)
    else:
        protocol = Protocol.parse(settings.protocol)
        if protocol is Protocol.V1_1:
            content_type = _UPDATE_CONTENT_TYPES[operation]
            body = query.encode("utf-8")
        else:
            content_type = FORM_CONTENT_TYPE
            body = urlencode({"query": query}).encode("ascii")
        request_headers = merge_headers(request_headers, {"Content-Type": content_type})
    
    if credentials is not None:
        request_headers = merge_headers(request_headers, {"Authorization": _basic_auth(*credentials)})
    
    return HttpRequest(method=method.value, url=target, headers=request_headers, body=body)
