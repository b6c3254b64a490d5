"""Node and Channel data models for Concurrency Graph."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


def _split_payload(data: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    # "name" is never trusted from the payload; the owning map key wins.
    return {k: v for k, v in (data or {}).items() if k != "name"}


@dataclass
class Node:
    """A unit of execution (e.g. a goroutine or task) in the graph.

    Attributes:
        name: Identity of the node. Always equal to its key in
            ``Graph.nodes`` once the graph has been loaded.
        attrs: Every other field of the node payload, kept as decoded.
            Their meaning belongs to whoever produced the payload.
    """

    name: str = ""
    attrs: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]], name: str = "") -> "Node":
        return cls(name=name, attrs=_split_payload(data))

    def get(self, key: str, default: Any = None) -> Any:
        return self.attrs.get(key, default)


@dataclass
class Channel:
    """A communication primitive connecting nodes in the graph.

    Attributes:
        name: Identity of the channel. Always equal to its key in
            ``Graph.channels`` once the graph has been loaded.
        attrs: Every other field of the channel payload, kept as decoded.
    """

    name: str = ""
    attrs: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]], name: str = "") -> "Channel":
        return cls(name=name, attrs=_split_payload(data))

    def get(self, key: str, default: Any = None) -> Any:
        return self.attrs.get(key, default)
