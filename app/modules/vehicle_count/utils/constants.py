"""
constants.py - Project constants
-------------------------------
Single responsibility: Hold vehicle count constants
"""

# Query parameter value sent as `type` to the read endpoint
DEFAULT_SOURCE_TYPE = "camera"

# Bar colors, one per direction series (cycled)
CHART_COLORS = (
    "#4bc0c0",
    "#ff6384",
    "#36a2eb",
    "#ffce56",
    "#9966ff",
    "#ff9f40",
)

# User-visible notices
NO_DATA_NOTICE = "No data found for the selected date range."
FAILURE_NOTICE = "Something went wrong while fetching the data."

# Shown in place of a missing vehicle type or direction
PLACEHOLDER = "Unspecified"
