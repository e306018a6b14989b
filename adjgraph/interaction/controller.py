"""
Interaction Controller - single source of truth for the UI mode.

The mode is one tagged variant rather than a set of independent flags:

    Viewing
    Editing       -> SelectingVertex | Linking
    QueryingPath  -> AwaitingStart | AwaitingGoal | PathShown

Each variant is a frozen dataclass carrying only the data valid in that
mode, so editing and path-querying can never be active at the same time.
Vertex clicks and button actions are translated into GraphStore mutations
or PathFinder calls, and the controller moves to the next state.

Every accepted action notifies the on_state_change callback. Ignored
actions (a click on the start vertex while waiting for the goal, linking
without an active vertex, ...) leave the state untouched and notify nobody.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, FrozenSet, Optional, Tuple, Union

from adjgraph.graph_store import GraphStore
from adjgraph.path_finder import EdgeKey, path_edge_keys, shortest_path

logger = logging.getLogger(__name__)


class Mode(Enum):
    VIEWING = 'viewing'
    EDITING = 'editing'
    QUERYING_PATH = 'querying_path'


@dataclass(frozen=True)
class Viewing:
    """Default mode. A click only marks the vertex shown in the info box."""
    inspected: Optional[int] = None

    @property
    def mode(self) -> Mode:
        return Mode.VIEWING


@dataclass(frozen=True)
class SelectingVertex:
    """Edit mode, waiting for (or holding) the vertex to link from."""
    active: Optional[int] = None

    @property
    def mode(self) -> Mode:
        return Mode.EDITING


@dataclass(frozen=True)
class Linking:
    """Edit mode, clicks toggle edges between `active` and the clicked vertex."""
    active: int
    linked: FrozenSet[int] = frozenset()

    @property
    def mode(self) -> Mode:
        return Mode.EDITING


@dataclass(frozen=True)
class AwaitingStart:

    @property
    def mode(self) -> Mode:
        return Mode.QUERYING_PATH


@dataclass(frozen=True)
class AwaitingGoal:
    start: int

    @property
    def mode(self) -> Mode:
        return Mode.QUERYING_PATH


@dataclass(frozen=True)
class PathShown:
    """
    Result of a path query.

    An empty `path` means the goal is unreachable from the start; the UI
    must show that explicitly.
    """
    start: int
    goal: int
    path: Tuple[int, ...] = ()
    edge_keys: FrozenSet[EdgeKey] = frozenset()

    @property
    def mode(self) -> Mode:
        return Mode.QUERYING_PATH

    @property
    def found(self) -> bool:
        return len(self.path) > 0


InteractionState = Union[Viewing, SelectingVertex, Linking, AwaitingStart, AwaitingGoal, PathShown]


class InteractionController:
    """Routes vertex clicks and sidebar actions according to the current mode."""

    def __init__(self, store: GraphStore):
        self.store = store
        self._state: InteractionState = Viewing()
        self._on_state_change: Optional[Callable[[InteractionState], None]] = None

    @property
    def state(self) -> InteractionState:
        return self._state

    @property
    def mode(self) -> Mode:
        return self._state.mode

    @property
    def is_editing(self) -> bool:
        return self._state.mode is Mode.EDITING

    @property
    def is_querying_path(self) -> bool:
        return self._state.mode is Mode.QUERYING_PATH

    @property
    def active_vertex(self) -> Optional[int]:
        if isinstance(self._state, (SelectingVertex, Linking)):
            return self._state.active
        return None

    @property
    def linked(self) -> FrozenSet[int]:
        if isinstance(self._state, Linking):
            return self._state.linked
        return frozenset()

    @property
    def highlighted_edges(self) -> FrozenSet[EdgeKey]:
        if isinstance(self._state, PathShown):
            return self._state.edge_keys
        return frozenset()

    def set_on_state_change(self, callback: Callable[[InteractionState], None]):
        self._on_state_change = callback

    def _commit(self, new_state: InteractionState) -> InteractionState:
        if new_state != self._state:
            logger.debug(f"State {self._state} -> {new_state}")
        self._state = new_state
        if self._on_state_change:
            self._on_state_change(self._state)
        return self._state

    # =========================================================================
    # Mode toggles
    # =========================================================================

    def toggle_edit_mode(self) -> InteractionState:
        """Enter edit mode (leaving any path query) or go back to viewing."""
        if self.is_editing:
            return self._commit(Viewing())
        return self._commit(SelectingVertex())

    def toggle_path_query(self) -> InteractionState:
        """Start a path query (leaving edit mode first) or cancel the current one."""
        if self.is_querying_path:
            return self.cancel_path_query()
        return self._commit(AwaitingStart())

    def cancel_path_query(self) -> InteractionState:
        if not self.is_querying_path:
            return self._state
        return self._commit(Viewing())

    def toggle_link_mode(self) -> InteractionState:
        """
        Start or finish linking from the active vertex.

        Starting pre-populates the linked set with the active vertex's
        current neighbors. Ignored without an active vertex.
        """
        state = self._state
        if isinstance(state, Linking):
            return self._commit(SelectingVertex(active=state.active))
        if isinstance(state, SelectingVertex) and state.active is not None:
            linked = frozenset(self.store.neighbors(state.active))
            return self._commit(Linking(active=state.active, linked=linked))
        logger.debug("Ignoring link toggle without an active vertex")
        return state

    # =========================================================================
    # Graph-level actions
    # =========================================================================

    def set_vertex_count(self, n: int) -> InteractionState:
        """
        Resize the graph. All selection, link and path state is cleared.

        A path query is abandoned (back to viewing); edit mode stays in
        edit mode with nothing selected. Non-positive counts are ignored.
        """
        if not self.store.resize(n):
            return self._state
        if self.is_editing:
            return self._commit(SelectingVertex())
        return self._commit(Viewing())

    def make_complete(self) -> InteractionState:
        """Connect every pair of vertices. Only available in edit mode."""
        state = self._state
        if not self.is_editing:
            logger.debug("Ignoring make-complete outside edit mode")
            return state
        self.store.make_complete()
        if isinstance(state, Linking):
            state = Linking(active=state.active, linked=frozenset(self.store.neighbors(state.active)))
        return self._commit(state)

    # =========================================================================
    # Vertex clicks
    # =========================================================================

    def on_vertex_click(self, vertex: int) -> InteractionState:
        if not 0 <= vertex < self.store.vertex_count:
            logger.debug(f"Ignoring click on unknown vertex {vertex}")
            return self._state

        state = self._state
        if isinstance(state, Viewing):
            return self._commit(Viewing(inspected=vertex))
        if isinstance(state, SelectingVertex):
            return self._commit(SelectingVertex(active=vertex))
        if isinstance(state, Linking):
            return self._click_while_linking(state, vertex)
        if isinstance(state, AwaitingStart):
            return self._commit(AwaitingGoal(start=vertex))
        if isinstance(state, AwaitingGoal):
            return self._click_while_awaiting_goal(state, vertex)

        logger.debug(f"Ignoring click on vertex {vertex} in {type(state).__name__}")
        return state

    def _click_while_linking(self, state: Linking, vertex: int) -> InteractionState:
        if vertex == state.active:
            logger.debug(f"Ignoring click on active vertex {vertex} while linking")
            return state
        if vertex in state.linked:
            self.store.set_edge(state.active, vertex, False)
            return self._commit(Linking(active=state.active, linked=state.linked - {vertex}))
        self.store.set_edge(state.active, vertex, True)
        return self._commit(Linking(active=state.active, linked=state.linked | {vertex}))

    def _click_while_awaiting_goal(self, state: AwaitingGoal, vertex: int) -> InteractionState:
        if vertex == state.start:
            logger.debug(f"Ignoring goal click on start vertex {vertex}")
            return state
        path = shortest_path(self.store.matrix, state.start, vertex)
        if path:
            logger.info(f"Shortest path {state.start} -> {vertex}: {path} ({len(path) - 1} hops)")
        else:
            logger.info(f"No path from {state.start} to {vertex}")
        return self._commit(PathShown(
            start=state.start,
            goal=vertex,
            path=tuple(path),
            edge_keys=path_edge_keys(path),
        ))
