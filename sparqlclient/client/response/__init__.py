"""
SPARQL Response Classification

Maps HTTP status codes onto the SPARQL client error taxonomy.
"""

from .response_classifier import HttpResponse, Success, classify, media_type

__all__ = [
    'HttpResponse',
    'Success',
    'classify',
    'media_type',
]
