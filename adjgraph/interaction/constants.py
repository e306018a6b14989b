"""
Shared constants for vertex/link styling and the interaction widgets.

The chart builder and the sidebar both read these. Keep colors in sync
with the legend in the info box.
"""

# Vertex fill colors
VERTEX_COLOR = '#e74c3c'
ACTIVE_VERTEX_COLOR = '#3498db'
LINKED_VERTEX_COLOR = '#2ecc71'
PATH_ENDPOINT_COLOR = '#8e44ad'
PATH_VERTEX_COLOR = '#f1c40f'
LABEL_COLOR = '#2c3e50'

# Vertex symbol sizes in pixels
VERTEX_SIZE = 24
ACTIVE_VERTEX_SIZE = 26
PATH_ENDPOINT_BORDER_WIDTH = 3

# Link styles
LINK_COLOR = '#999999'
LINK_WIDTH = 1
PATH_LINK_COLOR = '#f39c12'
PATH_LINK_WIDTH = 3

# Shuffle spreads vertices over a square of this side, centred on the origin
SHUFFLE_SPREAD = 400

# Smallest vertex count the slider offers
MIN_VERTICES = 1
