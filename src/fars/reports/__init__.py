"""
FARS Reports Package (Imperative Shell)

Orchestrates data loading, plot generation, and CSV/HTML output.
No analysis logic lives here; this package calls the functional core
(src/fars/analysis/) and plotting (src/fars/plotting/) via the data
reader (src/fars/data/reader.py).

Modules:
    maps:       fars_map_state() – load, validate, clean and plot one state.
    generators: ReportGenerator class for writing summary CSV and map HTML.
"""

from .maps import fars_map_state
from .generators import ReportGenerator

__all__ = [
    'fars_map_state',
    'ReportGenerator',
]
