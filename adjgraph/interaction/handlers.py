"""
Interaction Handlers - Event handlers for the graph page in app.py

This module keeps the widget and chart event handling out of app.py so
the main application file stays focused on layout.
"""

import logging
from typing import Any, Callable, Dict

from nicegui import ui

from adjgraph.chart_builder import normalize_click_payload, resolve_vertex_from_payload, shuffle_positions
from adjgraph.interaction.controller import AwaitingGoal, InteractionController, PathShown

logger = logging.getLogger(__name__)


def setup_interaction_handlers(
    state: Dict[str, Any],
    controller: InteractionController,
    refresh_chart_ui: Callable,
    refresh_panels: Callable,
):
    """
    Set up all interaction event handlers.

    Args:
        state: Page state dictionary (holds 'positions' for the layout)
        controller: InteractionController for this page
        refresh_chart_ui: Function to push new options to the chart
        refresh_panels: Function to rebuild the sidebar, info box and matrix

    Returns:
        Dict with handler functions for binding to UI events
    """

    def on_state_change(_new_state):
        refresh_chart_ui()
        refresh_panels()

    controller.set_on_state_change(on_state_change)

    def handle_chart_click(event):
        raw_payload = event.args if hasattr(event, 'args') else event
        payload = normalize_click_payload(raw_payload)
        vertex = resolve_vertex_from_payload(payload, controller.store.vertex_count)
        if vertex is None:
            # Background or link click
            return

        before = controller.state
        after = controller.on_vertex_click(vertex)

        if isinstance(before, AwaitingGoal) and after is before:
            ui.notify('Pick a goal different from the start vertex', type='warning', position='bottom', timeout=1500)
        elif isinstance(after, PathShown) and after is not before and not after.found:
            ui.notify(f'No path from {after.start} to {after.goal}', type='negative', position='bottom')

    def handle_toggle_edit():
        controller.toggle_edit_mode()

    def handle_toggle_link():
        controller.toggle_link_mode()

    def handle_toggle_path_query():
        controller.toggle_path_query()
        if controller.is_querying_path:
            ui.notify('Click the start vertex', position='bottom', timeout=1500)

    def handle_vertex_count_change(value):
        # value is the slider's 'change' event payload, not the throttled widget value
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            logger.debug(f"Ignoring vertex count {value!r}")
            return
        if isinstance(value, float) and not value.is_integer():
            logger.debug(f"Ignoring vertex count {value!r}")
            return
        n = int(value)
        if n == controller.store.vertex_count:
            return
        state['positions'] = None
        controller.set_vertex_count(n)

    def handle_make_complete():
        controller.make_complete()

    def handle_shuffle():
        state['positions'] = shuffle_positions(controller.store.vertex_count)
        refresh_chart_ui()

    return {
        'handle_chart_click': handle_chart_click,
        'handle_toggle_edit': handle_toggle_edit,
        'handle_toggle_link': handle_toggle_link,
        'handle_toggle_path_query': handle_toggle_path_query,
        'handle_vertex_count_change': handle_vertex_count_change,
        'handle_make_complete': handle_make_complete,
        'handle_shuffle': handle_shuffle,
    }
