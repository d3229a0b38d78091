"""
SPARQL Query and Update Builders

Builders that render SPARQL text and execute through the client that
created them.
"""

from .serialization import serialize_uri, serialize_value, serialize_triple
from .query_builder import Query
from .update_builder import Update, InsertData, DeleteData, Clear

__all__ = [
    'serialize_uri',
    'serialize_value',
    'serialize_triple',
    'Query',
    'Update',
    'InsertData',
    'DeleteData',
    'Clear',
]
