"""Core business logic services."""

from .canonicalizer import canonicalize
from .query_compiler import compile_query
from .correspondence_matcher import CorrespondenceMatcher
from .comparison_service import ComparisonOptions, ComparisonRecord, ComparisonService

__all__ = [
    "canonicalize",
    "compile_query",
    "CorrespondenceMatcher",
    "ComparisonOptions",
    "ComparisonRecord",
    "ComparisonService",
]
