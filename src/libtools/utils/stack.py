"""
Call stack capture.
"""

import sys
import traceback


def get_stack() -> traceback.StackSummary:
    """
    Capture the caller's stack, oldest frame first.

    The frame of ``get_stack`` itself is left out, so the last entry is
    the function that called it.
    """
    return traceback.extract_stack(sys._getframe(1))
