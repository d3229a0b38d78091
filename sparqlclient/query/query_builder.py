"""
SPARQL Query Builder

Builds ASK, SELECT, DESCRIBE and CONSTRUCT queries. A Query created by a
client keeps a reference to that client, and ``execute()`` sends the
rendered text through it.
"""

import logging
from typing import Any, List, Optional, Tuple

from rdflib.term import Identifier

from ..client.utils.client_utils import SparqlClientError
from .serialization import serialize_triple, serialize_uri, serialize_value

logger = logging.getLogger(__name__)

Pattern = Tuple[Any, Any, Any]


def _order_key(key: Any) -> str:
    """Variables and terms are serialized; other strings are expressions such as DESC(?x)."""
    if isinstance(key, Identifier) or (isinstance(key, str) and key[:1] in ('?', '$')):
        return serialize_value(key)
    return str(key)


def _projection(name: Any) -> str:
    """Projected names are variables whether or not they carry a ? or $ sigil."""
    if isinstance(name, str) and not isinstance(name, Identifier):
        return f"?{name.lstrip('?$')}"
    return serialize_value(name)


class Query:
    """A SPARQL query under construction."""
    
    FORMS = ('ask', 'select', 'describe', 'construct')
    
    def __init__(self, form: str, *values: Any, client=None):
        """
        Initialize a query.
        
        Args:
            form: One of 'ask', 'select', 'describe', 'construct'
            *values: Projected variables (SELECT), described resources
                (DESCRIBE) or template patterns (CONSTRUCT)
            client: SparqlClient used by execute(); not owned by the query
        """
        if form not in self.FORMS:
            raise ValueError(f"unknown query form: {form!r}")
        self.form = form
        self.values = list(values)
        self.client = client
        self.prefixes: List[str] = []
        self.datasets: List[str] = []
        self.patterns: List[Pattern] = []
        self.filters: List[str] = []
        self.modifier: Optional[str] = None
        self.ordering: List[str] = []
        self.limit_value: Optional[int] = None
        self.offset_value: Optional[int] = None
    
    @classmethod
    def ask(cls, client=None) -> "Query":
        return cls('ask', client=client)
    
    @classmethod
    def select(cls, *variables: Any, client=None) -> "Query":
        return cls('select', *variables, client=client)
    
    @classmethod
    def describe(cls, *resources: Any, client=None) -> "Query":
        return cls('describe', *resources, client=client)
    
    @classmethod
    def construct(cls, *patterns: Pattern, client=None) -> "Query":
        return cls('construct', *patterns, client=client)
    
    def prefix(self, declaration: str) -> "Query":
        """Add a prefix declaration such as ``"foaf: <http://xmlns.com/foaf/0.1/>"``."""
        self.prefixes.append(declaration)
        return self
    
    def from_graph(self, uri: Any) -> "Query":
        self.datasets.append(serialize_uri(uri))
        return self
    
    def where(self, *patterns: Pattern) -> "Query":
        self.patterns.extend(patterns)
        return self
    
    def filter(self, expression: str) -> "Query":
        self.filters.append(expression)
        return self
    
    def distinct(self) -> "Query":
        self.modifier = 'DISTINCT'
        return self
    
    def reduced(self) -> "Query":
        self.modifier = 'REDUCED'
        return self
    
    def order_by(self, *keys: Any) -> "Query":
        self.ordering.extend(_order_key(key) for key in keys)
        return self
    
    def limit(self, count: int) -> "Query":
        self.limit_value = int(count)
        return self
    
    def offset(self, count: int) -> "Query":
        self.offset_value = int(count)
        return self
    
    def _where_clause(self) -> str:
        body = [serialize_triple(pattern) for pattern in self.patterns]
        body.extend(f"FILTER({expression})" for expression in self.filters)
        return "WHERE { " + " ".join(body) + " }"
    
    def to_sparql(self) -> str:
        """Render the query text."""
        parts = [f"PREFIX {declaration}" for declaration in self.prefixes]
        
        if self.form == 'ask':
            parts.append("ASK")
        elif self.form == 'select':
            head = ["SELECT"]
            if self.modifier:
                head.append(self.modifier)
            head.append(" ".join(_projection(v) for v in self.values) or "*")
            parts.append(" ".join(head))
        elif self.form == 'describe':
            parts.append("DESCRIBE " + (" ".join(serialize_value(v) for v in self.values) or "*"))
        else:
            template = " ".join(serialize_triple(pattern) for pattern in self.values)
            parts.append("CONSTRUCT { " + template + " }")
        
        parts.extend(f"FROM {uri}" for uri in self.datasets)
        if self.patterns or self.filters or self.form != 'describe':
            parts.append(self._where_clause())
        if self.ordering:
            parts.append("ORDER BY " + " ".join(self.ordering))
        if self.limit_value is not None:
            parts.append(f"LIMIT {self.limit_value}")
        if self.offset_value is not None:
            parts.append(f"OFFSET {self.offset_value}")
        return " ".join(parts)
    
    def execute(self, **options: Any) -> Any:
        """
        Run the query through the client that created it.
        
        Args:
            **options: content_type, headers or timeout, passed to SparqlClient.query
            
        Raises:
            SparqlClientError: If the query is not attached to a client
        """
        if self.client is None:
            raise SparqlClientError("Query is not attached to a client")
        logger.debug(f"Executing {self.form.upper()} query built by {self.client!r}")
        return self.client.query(self, **options)
    
    def __str__(self) -> str:
        return self.to_sparql()
    
    def __repr__(self) -> str:
        return f"Query({self.to_sparql()!r})"
