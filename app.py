"""
Main NiceGUI application for the adjacency graph explorer.

Builds one GraphStore and InteractionController per page, renders the graph
with ui.echart (force layout) and provides the sidebar controls, info box
and adjacency-matrix overlay.
"""

import logging
import sys

from dotenv import load_dotenv
from nicegui import app, ui

from adjgraph.paths import get_env_path

load_dotenv(get_env_path())

from adjgraph.chart_builder import (
    REQUESTED_EVENT_KEYS,
    build_echart_options,
    graph_summary,
    matrix_rows,
    path_status_text,
)
from adjgraph.config import load_settings
from adjgraph.graph_store import GraphStore
from adjgraph.interaction import InteractionController, Linking, PathShown, Viewing
from adjgraph.interaction.constants import MIN_VERTICES
from adjgraph.interaction.handlers import setup_interaction_handlers

settings = load_settings()

logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s %(levelname)s %(name)s: %(message)s',
)
logger = logging.getLogger(__name__)


# UI Construction - encapsulated in page function so every tab gets its own graph
@ui.page('/')
def main_page():
    ui.query('body').style('margin: 0; padding: 0; overflow: hidden; background: #f0f2f5;')

    store = GraphStore(settings.default_vertices)
    store.make_complete()
    controller = InteractionController(store)
    logger.info(f"New page session with {store.vertex_count} vertices")

    # We use a container for mutable state to be accessible in closures
    state = {
        'chart': None,
        'positions': None,
        'sidebar': None,
        'info_box': None,
        'matrix_overlay': None,
        'matrix_visible': app.storage.user.get('matrix_visible', False),
        'info_visible': app.storage.user.get('info_visible', True),
    }

    def get_current_options():
        return build_echart_options(store, controller.state, positions=state['positions'])

    def refresh_chart_ui():
        chart = state['chart']
        if chart:
            chart.options.clear()
            chart.options.update(get_current_options())
            chart.update()

    def refresh_panels():
        render_sidebar()
        render_info_box()
        render_matrix_overlay()

    handlers = setup_interaction_handlers(
        state=state,
        controller=controller,
        refresh_chart_ui=refresh_chart_ui,
        refresh_panels=refresh_panels,
    )

    def toggle_matrix():
        state['matrix_visible'] = not state['matrix_visible']
        app.storage.user['matrix_visible'] = state['matrix_visible']
        refresh_panels()

    def toggle_info():
        state['info_visible'] = not state['info_visible']
        app.storage.user['info_visible'] = state['info_visible']
        render_info_box()

    # --- Panels ---

    def render_sidebar():
        container = state['sidebar']
        if not container:
            return
        container.clear()
        with container:
            ui.label('Configuration').classes('text-lg font-bold text-gray-800')
            ui.button(
                'Leave Edit Mode' if controller.is_editing else 'Enter Edit Mode',
                on_click=handlers['handle_toggle_edit'],
            ).classes('w-full')

            if controller.is_editing:
                ui.label(f'Vertices: {store.vertex_count}').classes('text-sm text-gray-600')
                ui.slider(
                    min=MIN_VERTICES,
                    max=settings.max_vertices,
                    step=1,
                    value=store.vertex_count,
                ).props('label').on(
                    'change',
                    lambda e: handlers['handle_vertex_count_change'](e.args),
                ).classes('w-full')

                active = controller.active_vertex
                if active is not None:
                    with ui.column().classes('w-full gap-1'):
                        ui.label(f'Selected: {active}').classes('font-bold')
                        ui.button(
                            'Finish Linking' if isinstance(controller.state, Linking) else 'Link',
                            on_click=handlers['handle_toggle_link'],
                        ).props('color=grey').classes('w-full')

                if not store.is_complete():
                    ui.button('Make Complete', on_click=handlers['handle_make_complete']).classes('w-full')
            else:
                ui.button(
                    'Hide Matrix' if state['matrix_visible'] else 'Show Matrix',
                    on_click=toggle_matrix,
                ).classes('w-full')
                ui.button(
                    'Cancel Shortest Path' if controller.is_querying_path else 'Shortest Path',
                    on_click=handlers['handle_toggle_path_query'],
                ).classes('w-full')

    def render_info_box():
        container = state['info_box']
        if not container:
            return
        container.clear()
        container.set_visibility(state['info_visible'])
        if not state['info_visible']:
            return
        summary = graph_summary(store)
        with container:
            ui.label(f"Vertices: {summary['vertices']}")
            ui.label(f"Edges: {summary['edges']}")
            ui.label(f"Complete: {'Yes' if summary['complete'] else 'No'}")
            current = controller.state
            if isinstance(current, Viewing) and current.inspected is not None:
                neighbors = store.neighbors(current.inspected)
                ui.label(
                    f"Vertex {current.inspected}: {', '.join(map(str, neighbors)) or 'no neighbors'}"
                ).classes('text-sm')
            status = path_status_text(current)
            if status:
                label = ui.label(status).classes('text-sm font-bold')
                if isinstance(current, PathShown) and not current.found:
                    label.classes('text-red-600')

    def render_matrix_overlay():
        container = state['matrix_overlay']
        if not container:
            return
        container.clear()
        visible = state['matrix_visible']
        container.set_visibility(visible)
        if not visible:
            return
        with container:
            with ui.element('table').classes('w-full border-collapse'):
                for row in matrix_rows(store):
                    with ui.element('tr'):
                        for cell in row:
                            with ui.element('td').classes('border border-gray-300 text-center text-xs p-0.5'):
                                ui.label(str(cell))

    # --- Layout Construction ---

    with ui.row().classes('w-full h-screen no-wrap gap-0'):
        state['sidebar'] = ui.column().classes(
            'w-72 h-full p-4 gap-2 bg-white border-r border-gray-300 shadow-md shrink-0'
        )

        with ui.element('div').classes('relative grow h-full overflow-hidden'):
            state['chart'] = ui.echart(get_current_options())
            state['chart'].style('width: 100%; height: 100%;')
            state['chart'].on('chart:click', handlers['handle_chart_click'], REQUESTED_EVENT_KEYS)

            ui.button('🎲', on_click=handlers['handle_shuffle']).props('round size=lg').classes(
                'absolute bottom-3 left-3'
            ).tooltip('Shuffle layout')
            ui.button(icon='info', on_click=toggle_info).props('dense color=grey').classes(
                'absolute top-3 right-3'
            ).tooltip('Show/Hide Info')

            state['info_box'] = ui.card().classes('absolute top-14 right-3 w-52 p-2 gap-1')
            state['matrix_overlay'] = ui.card().classes(
                'absolute bottom-3 right-3 w-[25vw] h-[25vw] max-w-[200px] max-h-[200px] overflow-auto p-1'
            )

    refresh_panels()


if __name__ in {"__main__", "__mp_main__"}:
    ui.run(
        title=settings.title,
        port=settings.port,
        reload=not getattr(sys, 'frozen', False),
        storage_secret=settings.storage_secret,
    )
