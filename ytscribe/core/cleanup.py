"""
Cleanup: per-attempt scratch workspaces for caption downloads.
"""

import shutil
import logging
import tempfile
import time
from contextlib import contextmanager
from pathlib import Path

from ytscribe.core.constants import DEFAULT_WORKSPACE_ROOT

logger = logging.getLogger(__name__)


def remove_workspace(workspace: Path):
    """Delete a workspace directory and everything in it."""
    if not workspace.exists():
        return
    try:
        shutil.rmtree(workspace)
        logger.debug("Deleted workspace: %s", workspace)
    except OSError as e:
        logger.warning("Failed to delete %s: %s", workspace, e)


@contextmanager
def scoped_workspace(video_id: str, root: Path | None = None):
    """
    Create a uniquely named directory for one download attempt and remove
    it when the block exits, whatever the outcome (including timeouts and
    KeyboardInterrupt).

    The name is <video_id>_<ns tick>_<random>, so concurrent requests for
    the same video never share a directory.
    """
    root = Path(root or DEFAULT_WORKSPACE_ROOT)
    root.mkdir(parents=True, exist_ok=True)
    workspace = Path(tempfile.mkdtemp(prefix=f"{video_id}_{time.time_ns()}_", dir=root))
    logger.debug("Created workspace: %s", workspace)
    try:
        yield workspace
    finally:
        remove_workspace(workspace)
