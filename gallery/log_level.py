from enum import Enum

class LogLevel(str, Enum):
    """Log level settings for application"""
    NONE = "none"               # No logging
    ERRORS_ONLY = "errors"      # Only log errors
    COLLECTION = "collection"   # Load/save summaries
    EXHIBITION = "exhibition"   # Exhibition events + load/save summaries
    DEBUG = "debug"             # All logging including debug
