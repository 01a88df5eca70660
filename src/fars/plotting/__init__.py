"""
FARS Plotting Package (Functional Core)

Pure plotting functions only – no file I/O.  Every public function
accepts DataFrames and returns a ``plotly.graph_objects.Figure``; an
existing Figure may be passed in as the render target.

Modules:
    state_map: Accident locations over a state-outline geo map.
"""

from .state_map import plot_state_accidents

__all__ = [
    'plot_state_accidents',
]
