"""Routing — template compilation, matching, and reverse path building.

Routes are compiled once when the table is built and matched in
declaration order for every request.
"""

from routebook.routing.compiler import compile_route, compile_template
from routebook.routing.matcher import attempt
from routebook.routing.route import Literal, Parameter, Route, RouteMatch, Segment
from routebook.routing.router import Router

__all__ = [
    "Literal",
    "Parameter",
    "Route",
    "RouteMatch",
    "Router",
    "Segment",
    "attempt",
    "compile_route",
    "compile_template",
]
