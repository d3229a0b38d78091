"""
SPARQL term serialization.

Variables render as ``?name``; every other term uses its N-Triples form,
which SPARQL accepts verbatim.
"""

from typing import Any, Tuple

from rdflib import Literal, URIRef
from rdflib.term import Identifier, Variable


def serialize_uri(uri: Any) -> str:
    """Serialize a URI string or URIRef as ``<...>``."""
    if isinstance(uri, URIRef):
        return uri.n3()
    if isinstance(uri, str) and not isinstance(uri, Identifier):
        return URIRef(uri).n3()
    raise TypeError(f"expected the graph URI to be a str or URIRef, but got {uri!r}")


def serialize_value(value: Any) -> str:
    """
    Serialize a term for use in a query pattern.
    
    Strings starting with ``?`` or ``$`` are variables; other plain Python
    values become literals.
    """
    if isinstance(value, Variable):
        return f"?{value}"
    if isinstance(value, Identifier):
        return value.n3()
    if isinstance(value, str) and value[:1] in ('?', '$'):
        return f"?{value[1:]}"
    return Literal(value).n3()


def serialize_triple(triple: Tuple[Any, Any, Any]) -> str:
    return " ".join(serialize_value(term) for term in triple) + " ."
