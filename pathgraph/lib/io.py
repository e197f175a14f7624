"""Graph persistence and ingestion.

Two formats are supported:

Binary pair
    A vertex stream and an edge stream of little-endian 32-bit signed
    integers. The vertex stream starts with the header record ``-7`` followed
    by one id per vertex in ascending order. The edge stream starts with the
    header record ``(-8, 0)`` followed, for each vertex in id order, by its
    ``(target, weight)`` records and a ``(-1, 0)`` terminator.

Tabular grid
    Text whose rows are separated by ``config.row_delimiter`` and fields by
    ``config.field_delimiter``. The grid is read as a weight matrix: the cell
    in row ``r`` and column ``c`` (both 1-based) becomes edge ``r -> c``.

Loaders never raise for a missing or malformed source; they log the reason
and return None so the caller can pick a fallback.
"""

from __future__ import annotations

import re
import struct
from dataclasses import replace
from pathlib import Path
from typing import BinaryIO, List, Optional, Union

from pathgraph.config import DEFAULT_CONFIG, GraphConfig
from pathgraph.lib.graph import Graph
from pathgraph.lib.result import Status
from pathgraph.logging import get_logger

logger = get_logger(__name__)

PathLike = Union[str, Path]

#: Header record of a vertex stream.
VERTEX_HEADER = -7
#: Header record id of an edge stream.
EDGE_HEADER = -8
#: Record id closing one vertex's run of edges.
END_OF_RUN = -1

_VERTEX_RECORD = struct.Struct("<i")
_EDGE_RECORD = struct.Struct("<ii")

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class _TruncatedStream(Exception):
    pass


def _read_record(stream: BinaryIO, record: struct.Struct) -> Optional[tuple]:
    """Read one record; None at a clean end of stream."""
    data = stream.read(record.size)
    if not data:
        return None
    if len(data) != record.size:
        raise _TruncatedStream()
    return record.unpack(data)


#
# Binary writers
#
def write_vertices(graph: Graph, stream: BinaryIO) -> int:
    """
    Write the vertex stream of ``graph``.

    Returns:
        Number of vertex records written (header excluded).
    """
    stream.write(_VERTEX_RECORD.pack(VERTEX_HEADER))
    count = 0
    for vertex_id in graph.vertex_ids():
        stream.write(_VERTEX_RECORD.pack(vertex_id))
        count += 1
    return count


def write_edges(graph: Graph, stream: BinaryIO) -> int:
    """
    Write the edge stream of ``graph``.

    Parallel edges and edges that are not real connections are written as
    they are, so a round trip preserves the exact edge multiset.

    Returns:
        Number of edge records written (header and terminators excluded).
    """
    stream.write(_EDGE_RECORD.pack(EDGE_HEADER, 0))
    count = 0
    for vertex in graph:
        for edge in vertex.adjacency:
            stream.write(_EDGE_RECORD.pack(edge.target, edge.weight))
            count += 1
        stream.write(_EDGE_RECORD.pack(END_OF_RUN, 0))
    return count


def save_graph(graph: Graph, vertices_path: PathLike, edges_path: PathLike) -> None:
    """Save ``graph`` as a binary vertex/edge file pair."""
    with Path(vertices_path).open("wb") as fh:
        n_vertices = write_vertices(graph, fh)
    with Path(edges_path).open("wb") as fh:
        n_edges = write_edges(graph, fh)
    logger.info(
        "Saved graph with %d vertices and %d edges to %s, %s",
        n_vertices,
        n_edges,
        vertices_path,
        edges_path,
    )


#
# Binary readers
#
def read_vertices(
    stream: BinaryIO, config: Optional[GraphConfig] = None
) -> Optional[Graph]:
    """
    Build a graph holding the vertices of a vertex stream.

    Returns:
        The new graph, or None if the header is wrong, the stream is
        truncated, or an id does not fit the configured capacity.
    """
    graph = Graph(config)
    try:
        header = _read_record(stream, _VERTEX_RECORD)
        if header is None or header[0] != VERTEX_HEADER:
            logger.warning("Vertex stream has no valid header")
            return None

        while (record := _read_record(stream, _VERTEX_RECORD)) is not None:
            result = graph.insert_vertex(record[0])
            if result.status == Status.CAPACITY_EXCEEDED:
                logger.warning("Vertex stream rejected: %s", result.message)
                return None
    except _TruncatedStream:
        logger.warning("Vertex stream ends in a partial record")
        return None

    return graph


def read_edges(graph: Graph, stream: BinaryIO) -> Optional[Graph]:
    """
    Add the edges of an edge stream to ``graph`` in place.

    Runs are assigned to the vertices of ``graph`` in ascending id order.
    Records pointing at unknown vertices are skipped with a warning.

    Returns:
        ``graph`` itself, or None if the header is wrong or the stream is
        truncated. On None the graph may hold the edges read so far.
    """
    try:
        header = _read_record(stream, _EDGE_RECORD)
        if header is None or header[0] != EDGE_HEADER:
            logger.warning("Edge stream has no valid header")
            return None

        for vertex_id in graph.vertex_ids():
            while (record := _read_record(stream, _EDGE_RECORD)) is not None:
                target, weight = record
                if target == END_OF_RUN:
                    break
                result = graph.insert_edge(vertex_id, target, weight)
                if not result:
                    logger.warning("Skipped edge record: %s", result.message)
            else:
                # Stream exhausted before every vertex got its run
                break
    except _TruncatedStream:
        logger.warning("Edge stream ends in a partial record")
        return None

    return graph


def load_graph(
    vertices_path: PathLike,
    edges_path: PathLike,
    config: Optional[GraphConfig] = None,
) -> Optional[Graph]:
    """
    Load a graph from a binary vertex/edge file pair.

    Returns:
        The graph, or None if either file is missing or invalid.
    """
    vertices_path, edges_path = Path(vertices_path), Path(edges_path)
    for path in (vertices_path, edges_path):
        if not path.is_file():
            logger.info("Binary graph file not found: %s", path)
            return None

    with vertices_path.open("rb") as fh:
        graph = read_vertices(fh, config)
    if graph is None:
        return None
    with edges_path.open("rb") as fh:
        return read_edges(graph, fh)


#
# Tabular ingestion
#
def _parse_int(text: str) -> int:
    """Parse the leading integer of a cell; 0 if there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _with_delimiters(
    config: Optional[GraphConfig],
    row_delimiter: Optional[str],
    field_delimiter: Optional[str],
) -> GraphConfig:
    config = config if config is not None else DEFAULT_CONFIG
    overrides = {}
    if row_delimiter is not None:
        overrides["row_delimiter"] = row_delimiter
    if field_delimiter is not None:
        overrides["field_delimiter"] = field_delimiter
    return replace(config, **overrides) if overrides else config


def _split_table(text: str, config: GraphConfig) -> List[List[str]]:
    rows: List[List[str]] = []
    for line in text.split(config.row_delimiter):
        if not line.strip():
            continue
        fields = [f for f in line.split(config.field_delimiter) if f]
        if fields:
            rows.append(fields)
    return rows


def graph_from_table(
    text: str,
    row_delimiter: Optional[str] = None,
    field_delimiter: Optional[str] = None,
    config: Optional[GraphConfig] = None,
) -> Graph:
    """
    Build a graph from a delimited weight grid.

    The number of vertices is the larger of the row count and the widest
    row; vertices ``1..N`` are created. Every cell then yields an edge
    ``(row, column, value)`` with 1-based row and column, including cells
    whose value is 0. Empty rows and empty fields are skipped; a cell without
    a leading integer counts as 0.

    Vertices or edges the graph rejects (capacity, weight out of range) are
    skipped with a warning.

    Args:
        text: The grid text.
        row_delimiter: Row separator; ``config.row_delimiter`` if None.
        field_delimiter: Field separator; ``config.field_delimiter`` if None.
        config: Config of the new graph.
    """
    config = _with_delimiters(config, row_delimiter, field_delimiter)
    graph = Graph(config)
    rows = _split_table(text, config)

    n_rows = len(rows)
    n_cols = max((len(row) for row in rows), default=0)
    for vertex_id in range(1, max(n_rows, n_cols) + 1):
        result = graph.insert_vertex(vertex_id)
        if not result:
            logger.warning("Skipped vertex from table: %s", result.message)

    for row_idx, row in enumerate(rows, start=1):
        for col_idx, cell in enumerate(row, start=1):
            result = graph.insert_edge(row_idx, col_idx, _parse_int(cell))
            if not result:
                logger.warning(
                    "Skipped cell (%d, %d): %s", row_idx, col_idx, result.message
                )

    logger.debug(
        "Parsed table: %d rows, %d columns, %d vertices, %d edges",
        n_rows,
        n_cols,
        len(graph),
        graph.edge_count(),
    )
    return graph


def load_table(
    path: PathLike,
    row_delimiter: Optional[str] = None,
    field_delimiter: Optional[str] = None,
    config: Optional[GraphConfig] = None,
) -> Optional[Graph]:
    """Load a graph from a tabular text file; None if the file is missing."""
    path = Path(path)
    if not path.is_file():
        logger.warning("Table file not found: %s", path)
        return None
    text = path.read_text(encoding="utf-8")
    return graph_from_table(text, row_delimiter, field_delimiter, config)


def load_data(
    table_path: PathLike,
    vertices_path: PathLike,
    edges_path: PathLike,
    config: Optional[GraphConfig] = None,
) -> Optional[Graph]:
    """
    Load from the binary pair, falling back once to the tabular source.

    Returns:
        The loaded graph, or None if both sources fail.
    """
    graph = load_graph(vertices_path, edges_path, config)
    if graph is not None:
        logger.info("Loaded graph from binary files")
        return graph
    logger.info("Falling back to table %s", table_path)
    return load_table(table_path, config=config)
