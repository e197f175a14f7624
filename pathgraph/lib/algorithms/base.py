from __future__ import annotations

from typing import List

#: Vertex identifiers are plain integers.
VertexID = int

#: Represents the accumulated weight of a path.
Cost = int

#: Largest 32-bit signed integer. As an edge weight it means "unset";
#: as a distance it means "not reached".
UNSET_WEIGHT: int = 2**31 - 1

#: Tentative distance of a vertex that has not been reached.
INFINITY: Cost = UNSET_WEIGHT

#: Predecessor of the source and of unreached vertices.
NO_PREDECESSOR: VertexID = -1

#: Distance table indexed by vertex id.
DistanceTable = List[Cost]

#: Predecessor table indexed by vertex id.
PredecessorTable = List[VertexID]


def is_connection(weight: int) -> bool:
    """Return True if an edge with this weight counts as a real connection.

    Edge records with a zero or unset weight are kept in the graph but are
    ignored by path finding and display.
    """
    return 0 < weight != UNSET_WEIGHT
