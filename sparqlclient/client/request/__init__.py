"""
SPARQL Request Builder

Turns query text into a concrete SPARQL Protocol HTTP request.
"""

from .request_builder import HttpRequest, build_request, merge_headers, split_userinfo

__all__ = [
    'HttpRequest',
    'build_request',
    'merge_headers',
    'split_userinfo',
]
