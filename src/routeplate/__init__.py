"""Compile URI path templates and match request paths against them."""

__version__ = "0.1.0"

from routeplate.models import MatchResult, RouteDescriptor
from routeplate.normalize import normalize_path
from routeplate.routing import compile, match

__all__ = [
    "MatchResult",
    "RouteDescriptor",
    "compile",
    "match",
    "normalize_path",
]
