"""SPARQL Client

SPARQL 1.0/1.1 Protocol client: builds requests, sends them over a shared
httpx transport, classifies the response and decodes the result.

See https://www.w3.org/TR/sparql11-protocol/
"""

import logging
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlsplit

import httpx

from .config.client_config_loader import Operation, RequestSettings, SparqlClientConfig
from .request.request_builder import build_request, merge_headers, split_userinfo
from .response.response_classifier import HttpResponse, Success, classify
from .transport.http_transport import HttpTransport
from .utils.client_utils import ConfigurationError
from ..query.query_builder import Query
from ..query.update_builder import Clear, DeleteData, InsertData
from ..results.rdf_formats import rdf_content_types
from ..results.response_decoder import RESULT_JSON, RESULT_XML, decode_response
from ..results.value_decoder import BlankNodeTable

logger = logging.getLogger(__name__)


def default_accept() -> str:
    """Accept header value: SPARQL JSON, SPARQL XML, then every RDF type rdflib can parse."""
    return ", ".join([RESULT_JSON, RESULT_XML] + rdf_content_types())


class SparqlClient:
    """
    Client for one SPARQL endpoint.
    
    The endpoint URL and request settings are fixed at construction. The
    client owns a blank node table that lives exactly as long as the client,
    so blank node labels decode to the same nodes across calls. Calls are
    sequential; one client must not be used from several threads at once.
    """
    
    def __init__(self, url: Optional[str] = None, *,
                 method: Optional[str] = None,
                 protocol: Optional[Any] = None,
                 headers: Optional[Mapping[str, str]] = None,
                 timeout: Optional[float] = None,
                 config: Optional[SparqlClientConfig] = None,
                 transport: Optional[httpx.BaseTransport] = None,
                 environ: Optional[Mapping[str, str]] = None):
        """
        Initialize the SPARQL client.
        
        Args:
            url: Endpoint URL; may carry user:password for HTTP Basic authentication.
                Falls back to the configured endpoint URL.
            method: 'GET' or 'POST' (default 'POST')
            protocol: '1.0' or '1.1' (default '1.0')
            headers: Headers merged over the default Accept header
            timeout: Transport timeout in seconds
            config: Loaded configuration; keyword arguments take precedence
            transport: Optional httpx transport, e.g. httpx.MockTransport
            environ: Environment for proxy lookup (defaults to os.environ)
            
        Raises:
            ConfigurationError: If no endpoint URL is given or a setting is invalid
        """
        self.config = config if config is not None else SparqlClientConfig.from_dict({})
        
        url = url if url is not None else self.config.get_endpoint_url()
        if not url:
            raise ConfigurationError("No SPARQL endpoint URL configured")
        self.url = str(url)
        
        configured = self.config.to_request_settings(method=method, protocol=protocol, timeout=timeout)
        self.settings: RequestSettings = configured.model_copy(update={
            'headers': merge_headers({'Accept': default_accept()}, configured.headers, headers)
        })
        self.nodes = BlankNodeTable()
        self.http = HttpTransport(urlsplit(self.url).scheme, self.settings.timeout,
                                  transport=transport, environ=environ)
        
        logger.info(f"SPARQL client for {self}: method={self.settings.method.value}, "
                    f"protocol={self.settings.protocol.value}")
    
    @property
    def headers(self) -> Mapping[str, str]:
        """Default headers sent with every request (read-only)."""
        return MappingProxyType(self.settings.headers)
    
    # Query builders
    
    def ask(self) -> Query:
        """Start an ASK query bound to this client."""
        return Query.ask(client=self)
    
    def select(self, *variables: Any) -> Query:
        """Start a SELECT query bound to this client."""
        return Query.select(*variables, client=self)
    
    def describe(self, *resources: Any) -> Query:
        return Query.describe(*resources, client=self)
    
    def construct(self, *patterns: Any) -> Query:
        return Query.construct(*patterns, client=self)
    
    # Update operations
    
    def insert_data(self, data, graph: Optional[Any] = None, **options: Any) -> "SparqlClient":
        """
        Execute an INSERT DATA operation (SPARQL 1.1 Update).
        
        Args:
            data: rdflib Graph or iterable of triples
            graph: Optional named graph URI
        """
        return self.update(InsertData(data, graph=graph), **options)
    
    def delete_data(self, data, graph: Optional[Any] = None, **options: Any) -> "SparqlClient":
        """Execute a DELETE DATA operation (SPARQL 1.1 Update)."""
        return self.update(DeleteData(data, graph=graph), **options)
    
    def clear_graph(self, graph_uri: Any, silent: bool = False, **options: Any) -> "SparqlClient":
        return self.clear('graph', graph_uri, silent=silent, **options)
    
    def clear(self, what: str, graph_uri: Optional[Any] = None, silent: bool = False,
              **options: Any) -> "SparqlClient":
        """Execute CLEAR GRAPH/DEFAULT/NAMED/ALL."""
        return self.update(Clear(what, graph_uri, silent=silent), **options)
    
    # Protocol operations
    
    def query(self, query: Any, *, content_type: Optional[str] = None,
              headers: Optional[Mapping[str, str]] = None,
              timeout: Optional[float] = None) -> Any:
        """
        Execute a SPARQL query and return the decoded result.
        
        Args:
            query: Query text or a Query builder
            content_type: Media type to request and to decode with, overriding
                the response's Content-Type
            headers: Per-call header overrides
            timeout: Per-call transport timeout in seconds
            
        Returns:
            bool (ASK), Solutions (SELECT), rdflib Graph (CONSTRUCT/DESCRIBE),
            raw bytes for opaque result formats, or None
            
        Raises:
            MalformedQuery, ClientError, ServerError: On protocol-level failure
            TransportError: If no HTTP response was received
            DecodingError: If the body does not match its content type
        """
        response = self.response(query, Operation.QUERY, content_type=content_type,
                                 headers=headers, timeout=timeout)
        return self.parse_response(response, content_type=content_type)
    
    def update(self, query: Any, *, content_type: Optional[str] = None,
               headers: Optional[Mapping[str, str]] = None,
               timeout: Optional[float] = None) -> "SparqlClient":
        """
        Execute a SPARQL update.
        
        The response is classified and decoded like a query, but the decoded
        value is discarded.
        
        Returns:
            This client
        """
        response = self.response(query, Operation.UPDATE, content_type=content_type,
                                 headers=headers, timeout=timeout)
        self.parse_response(response, content_type=content_type)
        return self
    
    def response(self, query: Any, operation: Operation = Operation.QUERY, *,
                 content_type: Optional[str] = None,
                 headers: Optional[Mapping[str, str]] = None,
                 timeout: Optional[float] = None) -> HttpResponse:
        """
        Send a query or update and return the successful raw response.
        
        Raises:
            MalformedQuery: On 400
            ClientError: On other 4xx, or a status the protocol does not define
            ServerError: On 5xx
            TransportError: If no HTTP response was received
        """
        call_headers = dict(headers or {})
        if content_type:
            call_headers = merge_headers(call_headers, {'Accept': content_type})
        
        request = build_request(self.url, str(query), operation, self.settings, call_headers)
        logger.info(f"SPARQL {operation.value}: {request.method} {request.url} ({len(request.body)} bytes)")
        logger.debug(f"SPARQL {operation.value} text: {query}")
        
        response = self.http.send(request.url, request.method, request.headers, request.body,
                                  timeout=timeout)
        
        outcome = classify(response)
        if not isinstance(outcome, Success):
            logger.error(f"SPARQL {operation.value} failed: {outcome}")
            raise outcome
        return outcome.response
    
    def parse_response(self, response: HttpResponse, content_type: Optional[str] = None) -> Any:
        """Decode a successful response, preferring content_type over the declared type."""
        result = decode_response(response, self.nodes, content_type=content_type)
        if isinstance(result, list):
            logger.info(f"SPARQL query returned {len(result)} solutions")
        return result
    
    # Lifecycle
    
    def close(self) -> None:
        """Close the underlying HTTP transport."""
        self.http.close()
    
    def __enter__(self) -> "SparqlClient":
        return self
    
    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
    
    def __str__(self) -> str:
        return split_userinfo(self.url)[0]
    
    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}:{id(self):#x}({self})>"
