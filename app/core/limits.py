"""
Hard size limits shared by the pipeline, the API layer and settings.
"""

# Extracted JSON longer than this is rejected before any parse attempt.
MAX_EXTRACTED_JSON_CHARS = 12000

# Conversational replies longer than this are truncated.
RESPONSE_CHAR_LIMIT = 20000
