# src/gdocs_markdown/observability/names.py

"""Standard metric names for gdocs-markdown observability.

Use these constants instead of hardcoded strings.

Note: All duration metrics are in milliseconds.
"""

# ============================================================================
# Conversion Metrics
# ============================================================================

# Duration
CONVERSION_DURATION = "docs_conversion_duration"

# Counters
CONVERSIONS_TOTAL = "docs_conversions_total"
TABS_CONVERTED_TOTAL = "docs_tabs_converted_total"

# Gauges
MARKDOWN_OUTPUT_CHARS = "docs_markdown_output_chars"


# ============================================================================
# Fetch Metrics (Docs API)
# ============================================================================

# Duration
FETCH_DURATION = "docs_fetch_duration"

# Counters
FETCH_REQUESTS_TOTAL = "docs_fetch_requests_total"
FETCH_ERRORS_TOTAL = "docs_fetch_errors_total"
