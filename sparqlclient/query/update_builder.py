"""
SPARQL Update Builders

INSERT DATA, DELETE DATA and CLEAR operations.
See https://www.w3.org/TR/sparql11-update/
"""

from typing import Any, Iterable, Optional, Tuple

from ..client.utils.client_utils import SparqlClientError
from .serialization import serialize_triple, serialize_uri


class Update:
    """Base class for update operations."""
    
    def __init__(self, client=None):
        self.client = client
    
    def to_sparql(self) -> str:
        raise NotImplementedError
    
    def execute(self, **options: Any):
        """Run the update through the client that created it and return the client."""
        if self.client is None:
            raise SparqlClientError("Update is not attached to a client")
        return self.client.update(self, **options)
    
    def __str__(self) -> str:
        return self.to_sparql()


class _DataUpdate(Update):
    keyword = ""
    
    def __init__(self, data: Iterable[Tuple[Any, Any, Any]], graph: Optional[Any] = None, client=None):
        """
        Args:
            data: rdflib Graph or any iterable of (subject, predicate, object) triples
            graph: Optional named graph URI
        """
        super().__init__(client)
        self.data = data
        self.graph = graph
    
    def to_sparql(self) -> str:
        triples = " ".join(serialize_triple(triple) for triple in self.data)
        if self.graph is not None:
            triples = f"GRAPH {serialize_uri(self.graph)} {{ {triples} }}"
        return f"{self.keyword} {{ {triples} }}"


class InsertData(_DataUpdate):
    keyword = "INSERT DATA"


class DeleteData(_DataUpdate):
    keyword = "DELETE DATA"


class Clear(Update):
    """CLEAR GRAPH <uri>, CLEAR DEFAULT, CLEAR NAMED or CLEAR ALL."""
    
    TARGETS = ('graph', 'default', 'named', 'all')
    
    def __init__(self, what: str, graph_uri: Optional[Any] = None, silent: bool = False, client=None):
        super().__init__(client)
        what = str(what).lower()
        if what not in self.TARGETS:
            raise ValueError(f"unknown CLEAR target: {what!r}")
        if what == 'graph' and graph_uri is None:
            raise ValueError("CLEAR GRAPH requires a graph URI")
        self.what = what
        self.graph_uri = graph_uri
        self.silent = silent
    
    def to_sparql(self) -> str:
        parts = ["CLEAR"]
        if self.silent:
            parts.append("SILENT")
        if self.what == 'graph':
            parts.append(f"GRAPH {serialize_uri(self.graph_uri)}")
        else:
            parts.append(self.what.upper())
        return " ".join(parts)
