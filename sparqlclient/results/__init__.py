"""
SPARQL Result Decoding

Value and binding-set decoders for SPARQL result documents, and the
content-type dispatch that picks one.
"""

from .solutions import Solution, Solutions
from .value_decoder import BlankNodeTable, decode_json_value, decode_xml_value
from .bindings_parser import parse_json_bindings, parse_xml_bindings
from .rdf_formats import rdf_content_types, reader_for, parse_rdf_serialization
from .response_decoder import (
    RESULT_JSON,
    RESULT_XML,
    RESULT_BOOL,
    RESULT_BRTR,
    ResultFormat,
    result_format_for,
    decode_response,
)

__all__ = [
    'Solution',
    'Solutions',
    'BlankNodeTable',
    'decode_json_value',
    'decode_xml_value',
    'parse_json_bindings',
    'parse_xml_bindings',
    'rdf_content_types',
    'reader_for',
    'parse_rdf_serialization',
    'RESULT_JSON',
    'RESULT_XML',
    'RESULT_BOOL',
    'RESULT_BRTR',
    'ResultFormat',
    'result_format_for',
    'decode_response',
]
