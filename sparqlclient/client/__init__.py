"""
SPARQL Client

Request building, transport, response classification and orchestration.
"""
