# src/lmp_kit/observability/names.py

"""Standard metric names for lmp-kit observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Serialization Metrics
# ============================================================================

# Duration
LMP_DUMP_DURATION = "lmp_dump_duration"

# Counters
LMP_FILES_SERIALIZED_TOTAL = "lmp_files_serialized_total"
LMP_FILES_SKIPPED_TOTAL = "lmp_files_skipped_total"

# Gauges (characters in the produced document)
LMP_DOCUMENT_SIZE = "lmp_document_size"


# ============================================================================
# Extraction Metrics
# ============================================================================

# Duration
LMP_EXTRACT_DURATION = "lmp_extract_duration"

# Counters
LMP_FILES_EXTRACTED_TOTAL = "lmp_files_extracted_total"


# ============================================================================
# Shared
# ============================================================================

# Counters (labelled with operation="dump" | "extract")
LMP_ERRORS_TOTAL = "lmp_errors_total"
