"""Rest-conflict network between candidate pairings."""

from datetime import datetime, timedelta
from typing import Iterable, List, Sequence, Set, Union
import networkx as nx

from models.pairing import Pairing, ScoredPairing


def rest_buffered_overlap(
    start1: datetime,
    end1: datetime,
    start2: datetime,
    end2: datetime,
    min_rest: timedelta
) -> bool:
    """
    Check whether two trips clash once each is followed by a rest period.

    Both intervals are extended forward by min_rest before the
    symmetric overlap test.
    """
    return start1 < end2 + min_rest and end1 + min_rest > start2


class ConflictNetwork:
    """
    Undirected conflict graph over a list of candidate pairings.

    Node i is the pairing at position i of the candidate list, so repeated
    pairing numbers stay distinct. An edge joins two pairings that cannot
    both be flown because their rest-buffered intervals overlap.
    """

    def __init__(
        self,
        pairings: Sequence[Union[ScoredPairing, Pairing]],
        min_rest: timedelta
    ):
        self.pairings = list(pairings)
        self.min_rest = min_rest

        self.graph = nx.Graph()
        self._build_network()

    def _build_network(self) -> None:
        """Add every candidate as a node and connect rest conflicts."""
        for index, pairing in enumerate(self.pairings):
            self.graph.add_node(
                index,
                pairing_number=pairing.pairing_number,
                departure=pairing.departure_time,
                arrival=pairing.arrival_time,
            )

        # Sweep in departure order; once a later trip departs after this
        # one's rest ends, no later trip can clash with it.
        order = sorted(
            range(len(self.pairings)),
            key=lambda i: self.pairings[i].departure_time
        )
        for pos, i in enumerate(order):
            first = self.pairings[i]
            rest_end = first.arrival_time + self.min_rest
            for j in order[pos + 1:]:
                second = self.pairings[j]
                if second.departure_time >= rest_end:
                    break
                if rest_buffered_overlap(
                    first.departure_time, first.arrival_time,
                    second.departure_time, second.arrival_time,
                    self.min_rest
                ):
                    self.graph.add_edge(i, j)

    def conflicts(self, node: int) -> List[int]:
        """Candidates that clash with the given one."""
        return list(self.graph.neighbors(node))

    def has_conflict(self, node: int, selected: Iterable[int]) -> bool:
        """Check whether a candidate clashes with any selected candidate."""
        chosen: Set[int] = set(selected)
        return any(other in chosen for other in self.graph.neighbors(node))

    def is_conflict_free(self, nodes: Iterable[int]) -> bool:
        """Check that no two of the given candidates clash."""
        return self.graph.subgraph(list(nodes)).number_of_edges() == 0

    @property
    def num_nodes(self) -> int:
        """Number of candidates in the network."""
        return self.graph.number_of_nodes()

    @property
    def num_edges(self) -> int:
        """Number of conflicting candidate pairs."""
        return self.graph.number_of_edges()

    def __repr__(self) -> str:
        return (
            f"ConflictNetwork(nodes={self.num_nodes}, "
            f"conflicts={self.num_edges}, "
            f"rest={self.min_rest.total_seconds() / 3600:.1f}h)"
        )
