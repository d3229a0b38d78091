"""
RDF Serialization Formats

Thin adapter over rdflib's plugin registry, which maps media types to RDF
parsers. Used to build the Accept header and to decode responses that are
not SPARQL result documents (CONSTRUCT and DESCRIBE).
"""

import logging
from typing import List, Optional, Type

from rdflib import Graph
from rdflib import plugin
from rdflib.parser import Parser
from rdflib.plugin import PluginException

from ..client.utils.client_utils import DecodingError

logger = logging.getLogger(__name__)


def rdf_content_types() -> List[str]:
    """Media types of every RDF parser registered with rdflib, in registry order."""
    content_types: List[str] = []
    for registered in plugin.plugins(kind=Parser):
        name = registered.name
        if '/' in name and name not in content_types:
            content_types.append(name)
    return content_types


def reader_for(content_type: Optional[str]) -> Optional[Type[Parser]]:
    """Return the rdflib parser class for a media type, or None if none is registered."""
    if not content_type:
        return None
    try:
        return plugin.get(content_type, Parser)
    except PluginException:
        return None


def parse_rdf_serialization(body: bytes, content_type: Optional[str]) -> Optional[Graph]:
    """
    Parse an RDF serialization into a Graph.
    
    Args:
        body: Raw response body
        content_type: Media type selecting the parser
        
    Returns:
        Graph of the parsed statements, or None when no parser handles the type
        
    Raises:
        DecodingError: If the registered parser rejects the body
    """
    if reader_for(content_type) is None:
        logger.warning(f"No RDF reader available for content type {content_type!r}")
        return None
    
    graph = Graph()
    try:
        graph.parse(data=body, format=content_type)
    except Exception as e:
        raise DecodingError(f"Failed to parse {content_type} response: {e}") from e
    
    logger.debug(f"Parsed {len(graph)} statements from {content_type}")
    return graph
