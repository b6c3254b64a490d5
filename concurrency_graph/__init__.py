"""Concurrency Graph: an in-memory model of a program's nodes and channels."""

__version__ = "0.1.0"

from concurrency_graph.core.exceptions import DecodeError
from concurrency_graph.core.models import Channel, Node
from concurrency_graph.core.graph import Graph
from concurrency_graph.core.serialization import DecodeOptions, load_graph, load_json

__all__ = [
    "Channel",
    "DecodeError",
    "DecodeOptions",
    "Graph",
    "Node",
    "__version__",
    "load_graph",
    "load_json",
]
