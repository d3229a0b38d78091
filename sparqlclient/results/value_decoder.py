"""
SPARQL Result Value Decoder

Converts single binding values from SPARQL JSON and XML result documents
into rdflib terms. Blank nodes resolve through a BlankNodeTable owned by
one client, so a label always maps to the same node for that client's
lifetime.

See https://www.w3.org/TR/sparql11-results-json/#select-encode-terms
and https://www.w3.org/TR/rdf-sparql-XMLres/#vb-results
"""

import logging
from typing import Any, Dict, Optional
import xml.etree.ElementTree as ET

from rdflib import BNode, Literal, URIRef
from rdflib.term import Identifier

from ..client.utils.client_utils import DecodingError

logger = logging.getLogger(__name__)

XML_LANG = "{http://www.w3.org/XML/1998/namespace}lang"


class BlankNodeTable:
    """
    Maps wire-level blank node labels to stable BNode objects.
    
    Created with its client and never pruned. Each new label gets a freshly
    minted BNode, so two clients never share node identities. Not safe for
    concurrent decoding without external locking.
    """
    
    def __init__(self):
        self._nodes: Dict[str, BNode] = {}
    
    def resolve(self, label: str) -> BNode:
        """Return the node for a label, creating it on first sight."""
        node = self._nodes.get(label)
        if node is None:
            node = self._nodes[label] = BNode()
        return node
    
    def __contains__(self, label: object) -> bool:
        return label in self._nodes
    
    def __len__(self) -> int:
        return len(self._nodes)


def _literal(lexical: str, language: Optional[str], datatype: Optional[str]) -> Literal:
    """
    Build a literal; a language tag wins over a datatype.
    
    rdflib normalises an empty language tag to no tag, so xml:lang="" decodes
    to the same plain literal as an absent tag.
    """
    try:
        if language is not None:
            return Literal(lexical, lang=language)
        if datatype is not None:
            return Literal(lexical, datatype=URIRef(datatype))
        return Literal(lexical)
    except (TypeError, ValueError) as e:
        raise DecodingError(f"Invalid literal {lexical!r}: {e}") from e


def decode_json_value(value: Dict[str, Any], nodes: BlankNodeTable) -> Optional[Identifier]:
    """
    Decode one SPARQL JSON binding value.
    
    Args:
        value: Tagged record such as {"type": "uri", "value": "http://ex/"}
        nodes: Blank node table of the decoding client
        
    Returns:
        URIRef, Literal or BNode; None for an unknown value type
        
    Raises:
        DecodingError: If the record is not an object or lacks a value
    """
    if not isinstance(value, dict):
        raise DecodingError(f"Binding value must be an object, got {type(value).__name__}")
    
    kind = value.get('type')
    if kind not in ('bnode', 'uri', 'literal', 'typed-literal'):
        logger.warning(f"Skipping binding value of unknown type {kind!r}")
        return None
    
    if 'value' not in value:
        raise DecodingError(f"Binding value of type {kind!r} has no 'value'")
    lexical = value['value']
    
    if kind == 'bnode':
        return nodes.resolve(lexical)
    if kind == 'uri':
        return URIRef(lexical)
    if kind == 'typed-literal':
        return _literal(lexical, None, value.get('datatype'))
    # SPARQL 1.1 JSON also uses 'literal' for typed literals.
    return _literal(lexical, value.get('xml:lang'), value.get('datatype'))


def local_name(tag: str) -> str:
    return tag.rpartition('}')[2]


def decode_xml_value(element: ET.Element, nodes: BlankNodeTable) -> Optional[Identifier]:
    """
    Decode the value element inside one XML ``<binding>``.
    
    Args:
        element: A <uri>, <literal> or <bnode> element
        nodes: Blank node table of the decoding client
        
    Returns:
        URIRef, Literal or BNode; None for an unknown element
    """
    kind = local_name(element.tag)
    text = element.text or ""
    
    if kind == 'bnode':
        return nodes.resolve(text)
    if kind == 'uri':
        return URIRef(text)
    if kind == 'literal':
        return _literal(text, element.get(XML_LANG), element.get('datatype'))
    
    logger.warning(f"Skipping binding value of unknown element <{kind}>")
    return None
