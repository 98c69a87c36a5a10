"""
Share component - OS share facility invocation.
"""

from .component import run, run_share, to_file_ref
from .models import DEFAULT_CAPTION, SharedFileRef, ShareFilesInput
from .ports import SharePort

__all__ = [
    # Entry points
    "run",
    "run_share",
    "to_file_ref",
    # Models
    "DEFAULT_CAPTION",
    "SharedFileRef",
    "ShareFilesInput",
    # Ports
    "SharePort",
]
