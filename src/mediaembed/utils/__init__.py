"""
Utility functions for mediaembed.
"""

from mediaembed.utils.formatting import format_number, format_percentage
from mediaembed.utils.logging import logger, report_issue

__all__ = [
    "format_number",
    "format_percentage",
    "logger",
    "report_issue",
]
