"""Sample SPARQL Result Documents

SPARQL JSON and XML documents used across the decoder and client tests.
The JSON and XML SELECT samples encode the same logical result set.
"""

import json


def create_single_uri_json():
    """One row binding ?x to a URI, without a head section."""
    return {"results": {"bindings": [{"x": {"type": "uri", "value": "http://ex/"}}]}}


def create_ask_json(value=True):
    return {"head": {}, "boolean": value}


def create_select_json():
    """Three rows mixing a blank node, language-tagged, typed and unbound values."""
    return {
        "head": {"vars": ["x", "name", "age"]},
        "results": {
            "bindings": [
                {
                    "x": {"type": "bnode", "value": "r1"},
                    "name": {"type": "literal", "value": "Alice", "xml:lang": "en"},
                    "age": {"type": "typed-literal", "value": "42",
                            "datatype": "http://www.w3.org/2001/XMLSchema#integer"},
                },
                {
                    "x": {"type": "uri", "value": "http://example.org/bob"},
                    "name": {"type": "literal", "value": "Bob"},
                },
                {
                    "x": {"type": "bnode", "value": "r1"},
                    "name": {"type": "literal", "value": "Alicia", "xml:lang": "es"},
                },
            ]
        },
    }


def create_select_xml():
    """XML encoding of create_select_json()."""
    return """<?xml version="1.0"?>
<sparql xmlns="http://www.w3.org/2005/sparql-results#">
  <head>
    <variable name="x"/>
    <variable name="name"/>
    <variable name="age"/>
  </head>
  <results>
    <result>
      <binding name="x"><bnode>r1</bnode></binding>
      <binding name="name"><literal xml:lang="en">Alice</literal></binding>
      <binding name="age"><literal datatype="http://www.w3.org/2001/XMLSchema#integer">42</literal></binding>
    </result>
    <result>
      <binding name="x"><uri>http://example.org/bob</uri></binding>
      <binding name="name"><literal>Bob</literal></binding>
    </result>
    <result>
      <binding name="x"><bnode>r1</bnode></binding>
      <binding name="name"><literal xml:lang="es">Alicia</literal></binding>
    </result>
  </results>
</sparql>
"""


def create_ask_xml(value=True):
    return f"""<?xml version="1.0"?>
<sparql xmlns="http://www.w3.org/2005/sparql-results#">
  <head/>
  <boolean>{'true' if value else 'false'}</boolean>
</sparql>
"""


def create_bnode_json(label):
    """One row binding ?b to the blank node with the given label."""
    return {
        "head": {"vars": ["b"]},
        "results": {"bindings": [{"b": {"type": "bnode", "value": label}}]},
    }


def create_turtle_graph():
    return (
        "@prefix ex: <http://example.org/> .\n"
        "ex:alice ex:knows ex:bob .\n"
        "ex:bob ex:name \"Bob\" .\n"
    )


def to_bytes(document):
    """Encode a document the way an endpoint would send it."""
    if isinstance(document, dict):
        return json.dumps(document).encode("utf-8")
    return document.encode("utf-8")
