"""Tests for single-value decoding and the blank node table."""

import sys
import os
import xml.etree.ElementTree as ET

import pytest
from rdflib import BNode, Literal, URIRef, XSD

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sparqlclient.client.utils.client_utils import DecodingError
from sparqlclient.results.value_decoder import BlankNodeTable, decode_json_value, decode_xml_value


def test_blank_node_table_is_stable_per_label():
    nodes = BlankNodeTable()
    first = nodes.resolve("b0")
    
    assert isinstance(first, BNode)
    assert nodes.resolve("b0") is first
    assert nodes.resolve("b1") != first
    assert len(nodes) == 2
    assert "b0" in nodes


def test_blank_node_tables_are_independent():
    assert BlankNodeTable().resolve("b0") != BlankNodeTable().resolve("b0")


def test_json_uri_is_verbatim():
    value = decode_json_value({"type": "uri", "value": "HTTP://Example.org/a/../b"}, BlankNodeTable())
    assert value == URIRef("HTTP://Example.org/a/../b")


def test_json_plain_and_tagged_literals():
    nodes = BlankNodeTable()
    plain = decode_json_value({"type": "literal", "value": "chat"}, nodes)
    tagged = decode_json_value({"type": "literal", "value": "chat", "xml:lang": "fr"}, nodes)
    
    assert plain == Literal("chat")
    assert plain.language is None
    assert tagged == Literal("chat", lang="fr")
    assert tagged != plain


def test_json_typed_literal():
    value = decode_json_value(
        {"type": "typed-literal", "value": "42", "datatype": str(XSD.integer)}, BlankNodeTable())
    
    assert value == Literal("42", datatype=XSD.integer)
    assert value.toPython() == 42


def test_json_sparql11_literal_with_datatype():
    value = decode_json_value(
        {"type": "literal", "value": "true", "datatype": str(XSD.boolean)}, BlankNodeTable())
    assert value.datatype == XSD.boolean


def test_json_bnode_uses_table():
    nodes = BlankNodeTable()
    value = decode_json_value({"type": "bnode", "value": "n7"}, nodes)
    assert value is nodes.resolve("n7")


def test_json_unknown_type_decodes_to_none():
    assert decode_json_value({"type": "triple", "value": {}}, BlankNodeTable()) is None


def test_json_value_missing_is_decoding_error():
    with pytest.raises(DecodingError):
        decode_json_value({"type": "uri"}, BlankNodeTable())


def test_xml_values():
    nodes = BlankNodeTable()
    uri = ET.fromstring("<uri>http://example.org/</uri>")
    literal = ET.fromstring('<literal xml:lang="de">Hund</literal>')
    typed = ET.fromstring(f'<literal datatype="{XSD.decimal}">1.5</literal>')
    bnode = ET.fromstring("<bnode>b0</bnode>")
    
    assert decode_xml_value(uri, nodes) == URIRef("http://example.org/")
    assert decode_xml_value(literal, nodes) == Literal("Hund", lang="de")
    assert decode_xml_value(typed, nodes) == Literal("1.5", datatype=XSD.decimal)
    assert decode_xml_value(bnode, nodes) is nodes.resolve("b0")


def test_xml_empty_literal():
    assert decode_xml_value(ET.fromstring("<literal/>"), BlankNodeTable()) == Literal("")


def test_empty_language_tag_decodes_as_plain_literal():
    nodes = BlankNodeTable()
    from_json = decode_json_value({"type": "literal", "value": "v", "xml:lang": ""}, nodes)
    from_xml = decode_xml_value(ET.fromstring('<literal xml:lang="">v</literal>'), nodes)

    assert from_json == Literal("v")
    assert from_json.language is None
    assert from_xml == Literal("v")
    assert from_xml.language is None


def test_xml_unknown_element_decodes_to_none():
    assert decode_xml_value(ET.fromstring("<triple/>"), BlankNodeTable()) is None
