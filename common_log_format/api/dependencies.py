"""
FastAPI dependencies for dependency injection.
"""

from functools import lru_cache

from common_log_format.batch import CommonLogParser


@lru_cache()
def get_batch_parser() -> CommonLogParser:
    """Get cached batch parser instance."""
    return CommonLogParser()
