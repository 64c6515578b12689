"""
FARS Reports Package (Imperative Shell)

Orchestrates file loading, summarising, map building and file output.
No analysis logic lives here — this package calls the functional core
(src/fars/analysis/) and plotting (src/fars/plotting/) via the data
package (src/fars/data/).

Modules:
    generators: fars_summarize_years / fars_map_state and the
                ReportGenerator class for writing CSV and HTML output.
"""

from .generators import (
    fars_summarize_years,
    fars_map_state,
    ReportGenerator,
)

__all__ = [
    'fars_summarize_years',
    'fars_map_state',
    'ReportGenerator',
]
