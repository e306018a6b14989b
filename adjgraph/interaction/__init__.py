"""
Interaction system for the graph page.

This package turns vertex clicks and sidebar actions into graph edits and
path queries:
- InteractionController: mode state machine (view / edit / path query)
- interaction states: Viewing, SelectingVertex, Linking, AwaitingStart,
  AwaitingGoal, PathShown
- setup_interaction_handlers: event handlers for app.py integration

Usage:
    from adjgraph.interaction import InteractionController
    from adjgraph.interaction.handlers import setup_interaction_handlers
"""

from adjgraph.interaction.controller import (
    AwaitingGoal,
    AwaitingStart,
    InteractionController,
    InteractionState,
    Linking,
    Mode,
    PathShown,
    SelectingVertex,
    Viewing,
)

__all__ = [
    'InteractionController',
    'InteractionState',
    'Mode',
    'Viewing',
    'SelectingVertex',
    'Linking',
    'AwaitingStart',
    'AwaitingGoal',
    'PathShown',
]
