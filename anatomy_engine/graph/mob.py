"""
Anatomical graph: body parts as nodes of a directed multigraph whose edges
are labelled with a ``BodyPartConnection``. The same parent → child pair may
carry several edges, one per relation (a limb is both held and fed by its
parent).

This uses networkx's ``MultiDiGraph``; node handles are plain ints handed out
in insertion order and every node carries a ``state`` attribute that is
either ``Alive(part)`` or ``Removed(part, cause)``.
"""
from __future__ import annotations

import copy
import logging
from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator, List, NamedTuple, Optional, Tuple, Union

import networkx as nx

from .. import AnatomyInvariantError, RemovedBodyPartError, UnknownBodyPartError
from ..body_part import BodyPart
from ..damage import DamageInstance, DamageResult, Severed
from .connection import DISPLAY_CONNECTIONS, BodyPartConnection

__all__ = ["NodeHandle", "Alive", "Removed", "NodeState", "PartRecord", "Mob"]

logger = logging.getLogger(__name__)

NodeHandle = int


@dataclass(slots=True)
class Alive:
    part: BodyPart


@dataclass(slots=True)
class Removed:
    """Node detached from the body; the part is kept for reporting."""

    part: BodyPart
    cause: Optional[DamageResult] = None


NodeState = Union[Alive, Removed]


class PartRecord(NamedTuple):
    """One visited node of ``Mob.walk``."""

    depth: int
    connection: Optional[BodyPartConnection]  # None for the root
    description: str
    handle: NodeHandle


class Mob:
    """A creature: a name plus the graph of its body parts."""

    def __init__(self, name: str, root: BodyPart) -> None:
        self.name = name
        self.graph: nx.MultiDiGraph = nx.MultiDiGraph()
        self._next_handle: NodeHandle = 0
        self.root: NodeHandle = self._add_node(root)

    def __len__(self) -> int:
        return self.graph.number_of_nodes()

    def __repr__(self) -> str:
        return (
            f"Mob({self.name!r}, {self.graph.number_of_nodes()} parts, "
            f"{self.graph.number_of_edges()} connections)"
        )

    # ── construction ─────────────────────────────────────────────────────

    def _add_node(self, part: BodyPart) -> NodeHandle:
        handle = self._next_handle
        self._next_handle += 1
        # the graph owns its own copy; one template may be inserted many times
        self.graph.add_node(handle, state=Alive(part.copy()))
        return handle

    def _require(self, handle: NodeHandle) -> None:
        if handle not in self.graph:
            raise UnknownBodyPartError(handle)

    def add_body_part(
        self,
        part: BodyPart,
        parent: NodeHandle,
        connections: Iterable[BodyPartConnection],
    ) -> NodeHandle:
        """Insert a copy of ``part`` with one ``parent → part`` edge per connection."""
        self._require(parent)
        handle = self._add_node(part)
        for connection in connections:
            self.graph.add_edge(parent, handle, connection=BodyPartConnection(connection))
        logger.debug("%s: attached %s under node %d", self.name, part.name, parent)
        return handle

    def add_body_part_sym(
        self,
        part: BodyPart,
        parent: NodeHandle,
        connections: Iterable[BodyPartConnection],
    ) -> Tuple[NodeHandle, NodeHandle]:
        """Insert ``{name}_l`` and ``{name}_r`` copies under the same parent."""
        return self.add_body_part_sym_both(part, (parent, parent), connections)

    def add_body_part_sym_both(
        self,
        part: BodyPart,
        parents: Tuple[NodeHandle, NodeHandle],
        connections: Iterable[BodyPartConnection],
    ) -> Tuple[NodeHandle, NodeHandle]:
        """Continue two bilateral chains: left copy under ``parents[0]``,
        right copy under ``parents[1]``."""
        parent_left, parent_right = parents
        connections = list(connections)
        left = self.add_body_part(part.copy(f"{part.name}_l"), parent_left, connections)
        right = self.add_body_part(part.copy(f"{part.name}_r"), parent_right, connections)
        return left, right

    # ── queries ──────────────────────────────────────────────────────────

    def state(self, handle: NodeHandle) -> NodeState:
        self._require(handle)
        state = self.graph.nodes[handle].get("state")
        if not isinstance(state, (Alive, Removed)):
            raise AnatomyInvariantError(f"node {handle} of {self.name!r} has no body part state")
        return state

    def body_part(self, handle: NodeHandle) -> BodyPart:
        state = self.state(handle)
        if isinstance(state, Removed):
            raise RemovedBodyPartError(f"{state.part.name} has been removed from {self.name!r}")
        return state.part

    def is_alive(self, handle: NodeHandle) -> bool:
        return isinstance(self.state(handle), Alive)

    def find(self, name: str) -> Optional[NodeHandle]:
        """Handle of the first node whose part is called ``name``."""
        for handle, state in self.graph.nodes(data="state"):
            if state is not None and state.part.name == name:
                return handle
        return None

    def parts(self) -> Iterator[Tuple[NodeHandle, BodyPart]]:
        """``(handle, part)`` for every part still attached."""
        for handle, state in self.graph.nodes(data="state"):
            if isinstance(state, Alive):
                yield handle, state.part

    def children(
        self,
        handle: NodeHandle,
        connections: Optional[Iterable[BodyPartConnection]] = None,
    ) -> List[Tuple[NodeHandle, BodyPartConnection]]:
        """Outgoing ``(child, connection)`` pairs in edge insertion order."""
        self._require(handle)
        wanted = None if connections is None else frozenset(connections)
        return [
            (child, conn)
            for _, child, conn in self.graph.out_edges(handle, data="connection")
            if wanted is None or conn in wanted
        ]

    def connections_between(
        self, parent: NodeHandle, child: NodeHandle
    ) -> List[BodyPartConnection]:
        self._require(parent)
        self._require(child)
        edges = self.graph.get_edge_data(parent, child) or {}
        return [data["connection"] for data in edges.values()]

    # ── traversal ────────────────────────────────────────────────────────

    def walk(
        self, connections: Iterable[BodyPartConnection] = DISPLAY_CONNECTIONS
    ) -> Iterator[PartRecord]:
        """Depth-first walk from the root along edges of the given types.

        Blood supply edges are left out by default. Removed nodes end their
        branch and are not reported.
        """
        yield from self._walk(self.root, None, 0, frozenset(connections))

    def _walk(
        self,
        node: NodeHandle,
        connection: Optional[BodyPartConnection],
        depth: int,
        follow: frozenset,
    ) -> Iterator[PartRecord]:
        state = self.state(node)
        if isinstance(state, Removed):
            return
        yield PartRecord(depth, connection, str(state.part), node)
        for child, conn in self.children(node, follow):
            yield from self._walk(child, conn, depth + 1, follow)

    # ── damage ───────────────────────────────────────────────────────────

    def take_damage(self, handle: NodeHandle, damage: DamageInstance) -> DamageResult:
        """Resolve ``damage`` on one part; a severed part leaves the body."""
        part = self.body_part(handle)
        result = part.take_damage(damage)
        if isinstance(result, Severed):
            self.sever(handle, result)
        return result

    def sever(self, handle: NodeHandle, cause: Optional[DamageResult] = None) -> List[NodeHandle]:
        """Mark ``handle`` and everything it holds or contains as removed.

        Returns the handles that changed state, ``handle`` first.
        """
        if handle == self.root:
            raise AnatomyInvariantError(f"cannot sever the root of {self.name!r}")
        removed: List[NodeHandle] = []
        queue = deque([handle])
        while queue:
            node = queue.popleft()
            state = self.state(node)
            if isinstance(state, Removed):
                continue
            self.graph.nodes[node]["state"] = Removed(state.part, cause)
            removed.append(node)
            queue.extend(child for child, _ in self.children(node, DISPLAY_CONNECTIONS))
        logger.info(
            "%s: severed %s (%d parts lost)",
            self.name, self.graph.nodes[handle]["state"].part.name, len(removed),
        )
        return removed

    def copy(self) -> Mob:
        """Deep copy; parts of the copy take damage independently."""
        return copy.deepcopy(self)
