"""
Solution types for SELECT results.
"""

from collections.abc import Mapping
from typing import Dict, Iterable, Iterator, List, Optional, Union

from rdflib.term import Identifier, Variable

VariableName = Union[Variable, str]


def to_variable(name: VariableName) -> Variable:
    """Normalize ``"x"``, ``"?x"`` or ``Variable("x")`` to a Variable."""
    if isinstance(name, Variable):
        return name
    return Variable(str(name))


class Solution(Mapping):
    """
    One binding row: an immutable mapping of Variable to RDF term.
    
    Unbound variables are absent. Lookups accept Variables or plain names,
    and bound values are also reachable as attributes (``row.x``).
    """
    
    __slots__ = ('_bindings',)
    
    def __init__(self, bindings: Optional[Dict[VariableName, Identifier]] = None):
        object.__setattr__(self, '_bindings', {
            to_variable(name): value for name, value in (bindings or {}).items()
        })
    
    def __getitem__(self, name: VariableName) -> Identifier:
        return self._bindings[to_variable(name)]
    
    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        return to_variable(name) in self._bindings
    
    def __iter__(self) -> Iterator[Variable]:
        return iter(self._bindings)
    
    def __len__(self) -> int:
        return len(self._bindings)
    
    def __getattr__(self, name: str) -> Identifier:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._bindings[Variable(name)]
        except KeyError:
            raise AttributeError(name) from None
    
    def __setattr__(self, name, value):
        raise AttributeError("Solution is immutable")
    
    def __repr__(self) -> str:
        inner = ", ".join(f"?{name}={value.n3()}" for name, value in self._bindings.items())
        return f"Solution({inner})"


class Solutions(list):
    """
    Ordered SELECT results, in the row order the endpoint returned.
    
    ``variables`` holds the variables declared in the result head, which may
    include variables no row binds.
    """
    
    def __init__(self, solutions: Iterable[Solution] = (), variables: Iterable[VariableName] = ()):
        super().__init__(solutions)
        self.variables: List[Variable] = [to_variable(v) for v in variables]
    
    def bindings(self, name: VariableName) -> List[Optional[Identifier]]:
        """Values of one variable across all rows, None where unbound."""
        return [row.get(name) for row in self]
