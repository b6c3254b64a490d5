"""The Graph aggregate: identity metadata plus the node and channel maps."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from concurrency_graph.core.models import Channel, Node


@dataclass
class Graph:
    """A package / program: a collection of nodes and the channels between them.

    Example::

        from concurrency_graph import Channel, Graph, Node

        graph = Graph.new("pipeline.json", "example.com/demo/pipeline")
        graph.nodes["producer"] = Node(name="producer")
        graph.channels["jobs"] = Channel(name="jobs")
        graph.package_name()  # "pipeline"

    Attributes:
        source_path: Where the graph came from. Supplied by the caller,
            never part of the serialized payload.
        name: Display label.
        package_path: Fully-qualified path of the analyzed package.
        is_command: True if the package is an executable entry point
            rather than a library.
        nodes: Node name -> node.
        channels: Channel name -> channel.
    """

    source_path: str = ""
    name: str = ""
    package_path: str = ""
    is_command: bool = False
    nodes: Dict[str, Node] = field(default_factory=dict)
    channels: Dict[str, Channel] = field(default_factory=dict)

    @classmethod
    def new(cls, source_path: str = "", package_path: str = "") -> "Graph":
        """Return a new empty graph associated with a source path."""
        return cls(source_path=source_path, package_path=package_path)

    def package_name(self) -> str:
        """Return the last ``/``-separated segment of ``package_path``.

        ``"a/b/c"`` gives ``"c"``. A path with no ``/`` is returned as is,
        and a trailing ``/`` gives ``""``.
        """
        return self.package_path.rpartition("/")[2]
