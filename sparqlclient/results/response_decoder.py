"""
Response Decoder Dispatch

Selects the decoder for a successful response from its media type. The set
of SPARQL result formats is closed: every member of ResultFormat must have
a branch in decode_response, and anything not in the table goes to the RDF
format registry.
"""

import logging
from enum import Enum
from typing import Any, Optional

from ..client.response.response_classifier import HttpResponse, media_type
from .bindings_parser import parse_json_bindings, parse_xml_bindings
from .rdf_formats import parse_rdf_serialization
from .value_decoder import BlankNodeTable

logger = logging.getLogger(__name__)

RESULT_JSON = "application/sparql-results+json"
RESULT_XML = "application/sparql-results+xml"
RESULT_BOOL = "text/boolean"  # Sesame-specific
RESULT_BRTR = "application/x-binary-rdf-results-table"  # Sesame-specific


class ResultFormat(Enum):
    """SPARQL result formats this client recognizes."""
    BOOLEAN = RESULT_BOOL
    JSON = RESULT_JSON
    XML = RESULT_XML
    BINARY_TABLE = RESULT_BRTR


_FORMATS_BY_TYPE = {fmt.value: fmt for fmt in ResultFormat}


def result_format_for(content_type: Optional[str]) -> Optional[ResultFormat]:
    """Return the result format for a media type, or None for RDF serializations."""
    return _FORMATS_BY_TYPE.get(media_type(content_type))


def decode_response(response: HttpResponse, nodes: BlankNodeTable,
                    content_type: Optional[str] = None) -> Any:
    """
    Decode a successful response.
    
    Args:
        response: The 2xx response
        nodes: Blank node table of the client
        content_type: Call-scoped override of the response's declared type
        
    Returns:
        bool, Solutions, raw bytes (binary results table), rdflib Graph, or None
    """
    content_type = media_type(content_type) or response.content_type
    fmt = result_format_for(content_type)
    
    if fmt is None:
        if not response.body:
            return None
        return parse_rdf_serialization(response.body, content_type)
    if fmt is ResultFormat.BOOLEAN:
        return response.body.strip() == b'true'
    if fmt is ResultFormat.JSON:
        return parse_json_bindings(response.body, nodes)
    if fmt is ResultFormat.XML:
        return parse_xml_bindings(response.body, nodes)
    if fmt is ResultFormat.BINARY_TABLE:
        # Store-specific binary encoding, handed back undecoded.
        return response.body
    raise AssertionError(f"Unhandled result format: {fmt}")
