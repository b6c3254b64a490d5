from concurrency_graph.core.exceptions import DecodeError
from concurrency_graph.core.graph import Graph
from concurrency_graph.core.models import Channel, Node
from concurrency_graph.core.serialization import DecodeOptions, load_graph, load_json

__all__ = [
    "Channel",
    "DecodeError",
    "DecodeOptions",
    "Graph",
    "Node",
    "load_graph",
    "load_json",
]
