"""JSON deserialization for loading full graphs.

Usage::

    from concurrency_graph.core.serialization import load_graph, load_json

    # From a file on disk; the path becomes the graph's source_path
    graph = load_graph("pipeline.json")

    # From any stream or in-memory payload
    with open("pipeline.json", "rb") as f:
        graph = load_json(f, source_path="pipeline.json")
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Any, Dict, Optional, Type, TypeVar, Union

from concurrency_graph.core.exceptions import DecodeError
from concurrency_graph.core.graph import Graph
from concurrency_graph.core.models import Channel, Node

logger = logging.getLogger(__name__)

_Entity = TypeVar("_Entity", Node, Channel)

# payload key -> (Graph attribute, expected type)
_SCALAR_FIELDS = {
    "name": ("name", str),
    "package_path": ("package_path", str),
    "is_command": ("is_command", bool),
}


@dataclass
class DecodeOptions:
    """Tuneable knobs for ``load_json``.

    Attributes:
        require_collections: Reject payloads that omit ``nodes`` or
            ``channels``. By default a missing collection decodes to an
            empty dict.
        warn_on_name_mismatch: Log a warning when a node or channel
            payload embeds a ``name`` that disagrees with its key. The key
            is used either way.
    """

    require_collections: bool = False
    warn_on_name_mismatch: bool = True


def _type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "object"


def _read_payload(stream: Union[IO[Any], str, bytes], source_path: str) -> Any:
    try:
        raw = stream if isinstance(stream, (str, bytes, bytearray)) else stream.read()
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise DecodeError(f"malformed JSON: {e}", source_path) from e
    except UnicodeDecodeError as e:
        raise DecodeError(f"payload is not valid UTF-8: {e}", source_path) from e
    except RecursionError as e:
        raise DecodeError("payload is nested too deeply", source_path) from e
    except ValueError as e:
        # e.g. integer literals over the interpreter's digit limit
        raise DecodeError(f"invalid JSON value: {e}", source_path) from e


def _decode_entities(
    raw: Any,
    field_name: str,
    entity_cls: Type[_Entity],
    source_path: str,
    options: DecodeOptions,
) -> Dict[str, _Entity]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise DecodeError(
            f"'{field_name}' must be an object, got {_type_name(raw)}", source_path
        )

    entities: Dict[str, _Entity] = {}
    for key, data in raw.items():
        if data is not None and not isinstance(data, dict):
            raise DecodeError(
                f"'{field_name}.{key}' must be an object, got {_type_name(data)}",
                source_path,
            )
        embedded = (data or {}).get("name")
        if options.warn_on_name_mismatch and embedded is not None and embedded != key:
            logger.warning(
                "%s: %s entry %r carries name %r, using key",
                source_path or "<stream>",
                field_name,
                key,
                embedded,
            )
        # The map key is authoritative over any embedded identity.
        entities[key] = entity_cls.from_dict(data, name=key)
    return entities


def load_json(
    stream: Union[IO[Any], str, bytes],
    source_path: str = "",
    options: Optional[DecodeOptions] = None,
) -> Graph:
    """Load a JSON-encoded Graph.

    Args:
        stream: A text or binary file-like object, or the payload itself.
            File-like objects are read to the end.
        source_path: Provenance recorded on the graph. Never read from the
            payload.
        options: Decoding knobs. Uses defaults if None.

    Returns:
        A new ``Graph`` whose node and channel names match their keys.

    Raises:
        DecodeError: If the payload is not well-formed JSON or a field has
            the wrong type.
    """
    options = options or DecodeOptions()
    raw = _read_payload(stream, source_path)
    if not isinstance(raw, dict):
        raise DecodeError(
            f"graph payload must be an object, got {_type_name(raw)}", source_path
        )

    graph = Graph(source_path=source_path)
    for key, (attr, expected) in _SCALAR_FIELDS.items():
        value = raw.get(key)
        if value is None:
            continue
        if not isinstance(value, expected):
            raise DecodeError(
                f"'{key}' must be a {_type_name(expected())}, got {_type_name(value)}",
                source_path,
            )
        setattr(graph, attr, value)

    if options.require_collections:
        for key in ("nodes", "channels"):
            if key not in raw:
                raise DecodeError(f"missing required field '{key}'", source_path)

    graph.nodes = _decode_entities(
        raw.get("nodes"), "nodes", Node, source_path, options
    )
    graph.channels = _decode_entities(
        raw.get("channels"), "channels", Channel, source_path, options
    )

    logger.debug(
        "Loaded graph %r from %s: %d nodes, %d channels",
        graph.name,
        source_path or "<stream>",
        len(graph.nodes),
        len(graph.channels),
    )
    return graph


def load_graph(
    path: Union[str, Path],
    options: Optional[DecodeOptions] = None,
) -> Graph:
    """Load a Graph from a JSON file.

    Args:
        path: JSON file to read. Recorded as the graph's ``source_path``.
        options: Decoding knobs. Uses defaults if None.

    Returns:
        A new ``Graph`` instance populated with the loaded data.
    """
    with open(path, "rb") as f:
        return load_json(f, source_path=str(path), options=options)
