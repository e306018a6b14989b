"""
ECharts options builder for the adjacency graph.

This module is the boundary between the core (GraphStore + controller
state) and the renderer. It handles:
- the plain {nodes, links} graph data the renderer draws
- per-vertex and per-link styling derived from the current mode
- the ECharts option dict for NiceGUI's ui.echart
- normalization of click payloads into plain vertex indices
"""

import random
from typing import Any, Dict, List, Mapping, Optional, Tuple

from adjgraph.graph_store import GraphStore
from adjgraph.interaction.constants import (
    ACTIVE_VERTEX_COLOR,
    ACTIVE_VERTEX_SIZE,
    LABEL_COLOR,
    LINK_COLOR,
    LINK_WIDTH,
    LINKED_VERTEX_COLOR,
    PATH_ENDPOINT_BORDER_WIDTH,
    PATH_ENDPOINT_COLOR,
    PATH_LINK_COLOR,
    PATH_LINK_WIDTH,
    PATH_VERTEX_COLOR,
    SHUFFLE_SPREAD,
    VERTEX_COLOR,
    VERTEX_SIZE,
)
from adjgraph.interaction.controller import (
    AwaitingGoal,
    AwaitingStart,
    InteractionState,
    Linking,
    PathShown,
    SelectingVertex,
)
from adjgraph.path_finder import EdgeKey, edge_key


# Event keys we request from ECharts click events
REQUESTED_EVENT_KEYS = ['componentType', 'dataType', 'name', 'value']


def graph_data(store: GraphStore) -> Dict[str, List[Dict[str, int]]]:
    """Renderer input: every vertex, and one link per connected pair i < j."""
    G = store.to_networkx()
    return {
        'nodes': [{'id': v} for v in sorted(G.nodes)],
        'links': [
            {'source': s, 'target': t}
            for s, t in sorted(edge_key(a, b) for a, b in G.edges)
        ],
    }


def vertex_style(vertex: int, state: InteractionState) -> Dict[str, Any]:
    """
    Fill color, symbol size and outline for a vertex in the given state.

    Returns a dict with 'color', 'size', 'border_color' and 'border_width'.
    """
    color = VERTEX_COLOR
    size = VERTEX_SIZE
    border_color = None
    border_width = 0

    if isinstance(state, (SelectingVertex, Linking)):
        if vertex == state.active:
            color = ACTIVE_VERTEX_COLOR
            size = ACTIVE_VERTEX_SIZE
        elif isinstance(state, Linking) and vertex in state.linked:
            color = LINKED_VERTEX_COLOR
    elif isinstance(state, AwaitingGoal):
        if vertex == state.start:
            color = PATH_ENDPOINT_COLOR
            border_color = PATH_ENDPOINT_COLOR
            border_width = PATH_ENDPOINT_BORDER_WIDTH
    elif isinstance(state, PathShown):
        is_endpoint = vertex in (state.start, state.goal)
        if not state.found:
            if is_endpoint:
                color = PATH_ENDPOINT_COLOR
        elif vertex in state.path:
            color = PATH_VERTEX_COLOR
        if is_endpoint:
            border_color = PATH_ENDPOINT_COLOR
            border_width = PATH_ENDPOINT_BORDER_WIDTH

    return {
        'color': color,
        'size': size,
        'border_color': border_color,
        'border_width': border_width,
    }


def link_style(key: EdgeKey, state: InteractionState) -> Dict[str, Any]:
    """Color and width of a link. Path highlighting never applies in edit mode."""
    if isinstance(state, PathShown) and key in state.edge_keys:
        return {'color': PATH_LINK_COLOR, 'width': PATH_LINK_WIDTH}
    return {'color': LINK_COLOR, 'width': LINK_WIDTH}


def build_echart_options(
    store: GraphStore,
    state: InteractionState,
    positions: Optional[Mapping[int, Tuple[float, float]]] = None,
) -> Dict[str, Any]:
    """
    Build ECharts options for the current graph and interaction state.

    Args:
        store: Graph to draw
        state: Controller state used for styling
        positions: Optional vertex -> (x, y) positions (from shuffle); when given,
            the layout is 'none' and vertices stay where they were placed

    Returns:
        ECharts options dict ready for ui.echart()
    """
    data = graph_data(store)

    e_nodes = []
    for node in data['nodes']:
        vid = node['id']
        style = vertex_style(vid, state)
        item_style = {'color': style['color']}
        if style['border_color']:
            item_style['borderColor'] = style['border_color']
            item_style['borderWidth'] = style['border_width']

        e_node = {
            'id': str(vid),
            'name': str(vid),
            'value': vid,
            'symbol': 'circle',
            'symbolSize': style['size'],
            'itemStyle': item_style,
            'label': {
                'show': True,
                'formatter': str(vid),
                'position': 'top',
                'color': LABEL_COLOR,
                'fontSize': 12,
            },
            'draggable': True,
        }
        if positions and vid in positions:
            e_node['x'], e_node['y'] = positions[vid]
        e_nodes.append(e_node)

    e_links = []
    for link in data['links']:
        style = link_style((link['source'], link['target']), state)
        e_links.append({
            'source': str(link['source']),
            'target': str(link['target']),
            'lineStyle': {
                'color': style['color'],
                'width': style['width'],
                'curveness': 0,
                'opacity': 1.0,
            },
        })

    return {
        'animationDurationUpdate': 0,  # keep the layout from jumping on restyle
        'series': [{
            'type': 'graph',
            'layout': 'none' if positions else 'force',
            'roam': True,
            'force': {
                'repulsion': 200,
                'gravity': 0.1,
                'edgeLength': 80,
                'friction': 0.3,
                'layoutAnimation': True,
            },
            'data': e_nodes,
            'links': e_links,
        }]
    }


def shuffle_positions(n: int, spread: float = SHUFFLE_SPREAD, rng: Optional[random.Random] = None) -> Dict[int, Tuple[float, float]]:
    """Random initial positions in [-spread/2, spread/2) on both axes."""
    rng = rng or random.Random()
    return {
        v: ((rng.random() - 0.5) * spread, (rng.random() - 0.5) * spread)
        for v in range(n)
    }


def matrix_rows(store: GraphStore) -> List[List[int]]:
    """Rows of the adjacency matrix for the overlay table."""
    return store.matrix


def graph_summary(store: GraphStore) -> Dict[str, Any]:
    return {
        'vertices': store.vertex_count,
        'edges': store.edge_count(),
        'complete': store.is_complete(),
    }


def path_status_text(state: InteractionState) -> str:
    """One-line description of the path query for the info box ('' outside a query)."""
    if isinstance(state, AwaitingStart):
        return 'Path: click the start vertex'
    if isinstance(state, AwaitingGoal):
        return f'Path: from {state.start}, click the goal vertex'
    if isinstance(state, PathShown):
        if not state.found:
            return f'Path: no path from {state.start} to {state.goal}'
        return f"Path: {' → '.join(str(v) for v in state.path)} ({len(state.path) - 1} edges)"
    return ''


# =============================================================================
# Click payloads
# =============================================================================

def normalize_click_payload(raw_payload: Any) -> Dict[str, Any]:
    """Normalize NiceGUI chart click payloads into a dictionary for easier parsing."""
    if isinstance(raw_payload, dict):
        return raw_payload
    if isinstance(raw_payload, (list, tuple)):
        return {
            REQUESTED_EVENT_KEYS[i]: raw_payload[i]
            for i in range(min(len(raw_payload), len(REQUESTED_EVENT_KEYS)))
        }
    if isinstance(raw_payload, (str, int)) and not isinstance(raw_payload, bool):
        return {'name': raw_payload}
    return {}


def _as_vertex(value: Any) -> Optional[int]:
    # Link endpoints and node data arrive either as a raw index or as an
    # object carrying an 'id'.
    if isinstance(value, dict):
        value = value.get('id')
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().lstrip('-').isdigit():
        return int(value)
    return None


def resolve_vertex_from_payload(payload: Dict[str, Any], vertex_count: int) -> Optional[int]:
    """
    Return the clicked vertex index from a normalized payload.

    Clicks on links, the background or anything outside 0..vertex_count-1
    resolve to None.
    """
    if not isinstance(payload, dict):
        return None
    component = payload.get('componentType')
    if component is not None and component != 'series':
        return None
    if payload.get('dataType', 'node') != 'node':
        return None

    vertex = _as_vertex(payload.get('name'))
    if vertex is None:
        vertex = _as_vertex(payload.get('value'))
    if vertex is None or not 0 <= vertex < vertex_count:
        return None
    return vertex
