"""Constants and defaults.

Note: Keep constants here to avoid magic values spread across code.
"""

DEFAULT_CLASS_NAME = "Section 001"
PERCENT_PLACEHOLDER = "—"
CSV_HEADER = ("date", "studentName", "studentEmail", "status")
CSV_SUFFIX = ".csv"
EXPORT_FILENAME_SUFFIX = "_attendance.csv"
EXPORT_FALLBACK_NAME = "class"
