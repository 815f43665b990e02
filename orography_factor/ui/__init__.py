"""User interface helpers for the orography playground.

- validators.py: Form input parsing with Optional[Message] returns
- formatting.py: Coordinate lines, factor/elevation strings, sample table rows

The Streamlit page itself lives in orography_factor/app.py.
"""

from orography_factor.ui.formatting import (
    format_elevation,
    format_factor,
    format_geographic_line,
    format_projected_line,
    sample_rows,
)
from orography_factor.ui.validators import (
    AUTO_SYSTEM,
    parse_location_input,
    parse_number,
    parse_system_choice,
    validate_easting_northing,
    validate_lon_lat,
    validate_reference_height,
)

__all__ = [
    "format_elevation",
    "format_factor",
    "format_geographic_line",
    "format_projected_line",
    "sample_rows",
    "AUTO_SYSTEM",
    "parse_location_input",
    "parse_number",
    "parse_system_choice",
    "validate_easting_northing",
    "validate_lon_lat",
    "validate_reference_height",
]
