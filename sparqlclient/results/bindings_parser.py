"""
SPARQL Binding-Set Decoders

Decode complete SPARQL JSON and XML result documents. A document carrying a
boolean yields that boolean; one carrying results yields Solutions in
document order; one carrying neither yields None.
"""

import json
import logging
from typing import Any, Dict, Optional, Union
import xml.etree.ElementTree as ET

from ..client.utils.client_utils import DecodingError
from .solutions import Solution, Solutions
from .value_decoder import BlankNodeTable, decode_json_value, decode_xml_value, local_name

logger = logging.getLogger(__name__)

BindingResult = Optional[Union[bool, Solutions]]


def parse_json_bindings(document: Union[str, bytes, Dict[str, Any]],
                        nodes: Optional[BlankNodeTable] = None) -> BindingResult:
    """
    Decode a SPARQL JSON result document.
    
    Args:
        document: JSON text or an already parsed document
        nodes: Blank node table; a private one is used when omitted
        
    Returns:
        bool for ASK results, Solutions for SELECT results, or None
        
    Raises:
        DecodingError: If the document is not valid JSON or is misshapen
    """
    nodes = BlankNodeTable() if nodes is None else nodes
    
    if isinstance(document, (str, bytes)):
        try:
            document = json.loads(document)
        except ValueError as e:
            raise DecodingError(f"Invalid SPARQL JSON results: {e}") from e
    
    if not isinstance(document, dict):
        raise DecodingError("SPARQL JSON results must be an object")
    
    if 'boolean' in document:
        boolean = document['boolean']
        if not isinstance(boolean, bool):
            raise DecodingError(f"'boolean' must be true or false, got {boolean!r}")
        return boolean
    
    if 'results' in document:
        try:
            rows = document['results']['bindings']
            variables = (document.get('head') or {}).get('vars') or []
        except (KeyError, TypeError, AttributeError) as e:
            raise DecodingError(f"Misshapen SPARQL JSON results: {e}") from e
        if not isinstance(rows, list):
            raise DecodingError("'results.bindings' must be an array")
        
        solutions = Solutions(variables=variables)
        for row in rows:
            if not isinstance(row, dict):
                raise DecodingError("Each binding row must be an object")
            bindings = {}
            for name, value in row.items():
                term = decode_json_value(value, nodes)
                if term is not None:
                    bindings[name] = term
            solutions.append(Solution(bindings))
        
        logger.debug(f"Decoded {len(solutions)} JSON solutions")
        return solutions
    
    logger.warning("SPARQL JSON document has neither 'boolean' nor 'results'")
    return None


def _child(element: ET.Element, name: str) -> Optional[ET.Element]:
    for child in element:
        if local_name(child.tag) == name:
            return child
    return None


def _children(element: ET.Element, name: str):
    return [child for child in element if local_name(child.tag) == name]


def parse_xml_bindings(document: Union[str, bytes, ET.Element],
                       nodes: Optional[BlankNodeTable] = None) -> BindingResult:
    """
    Decode a SPARQL XML result document.
    
    Elements are matched by local name, so documents with or without the
    SPARQL results namespace are accepted.
    
    Raises:
        DecodingError: If the document is not well-formed XML or is misshapen
    """
    nodes = BlankNodeTable() if nodes is None else nodes
    
    if isinstance(document, (str, bytes)):
        try:
            root = ET.fromstring(document)
        except ET.ParseError as e:
            raise DecodingError(f"Invalid SPARQL XML results: {e}") from e
    else:
        root = document
    
    boolean = _child(root, 'boolean')
    if boolean is not None:
        return (boolean.text or "").strip() == 'true'
    
    results = _child(root, 'results')
    if results is not None:
        head = _child(root, 'head')
        variables = []
        if head is not None:
            variables = [v.get('name') for v in _children(head, 'variable') if v.get('name')]
        
        solutions = Solutions(variables=variables)
        for result in _children(results, 'result'):
            bindings = {}
            for binding in _children(result, 'binding'):
                name = binding.get('name')
                if not name:
                    raise DecodingError("<binding> without a name attribute")
                value = next(iter(binding), None)
                if value is None:
                    raise DecodingError(f"<binding name='{name}'> has no value element")
                term = decode_xml_value(value, nodes)
                if term is not None:
                    bindings[name] = term
            solutions.append(Solution(bindings))
        
        logger.debug(f"Decoded {len(solutions)} XML solutions")
        return solutions
    
    logger.warning("SPARQL XML document has neither <boolean> nor <results>")
    return None
