"""Git branch resolver that reads .git directly instead of spawning git."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

SHORT_HASH_LENGTH = 8


def resolve_git_branch(project_path: str) -> str:
    """Read the current git branch for a project directory.

    Handles both regular repos and worktrees (.git as a file holding a
    gitdir pointer). A detached HEAD yields the short commit hash.
    """
    if not project_path:
        return ""
    head_path = _find_head(Path(project_path))
    if head_path is None:
        return ""

    try:
        head = head_path.read_text().strip()
    except (OSError, ValueError):
        logger.debug("Failed to read %s", head_path, exc_info=True)
        return ""

    if head.startswith("ref: refs/heads/"):
        return head[len("ref: refs/heads/"):]
    if head.startswith("ref: "):
        return head[len("ref: "):]
    return head[:SHORT_HASH_LENGTH]


def _find_head(project_path: Path) -> Path | None:
    """Locate HEAD for the repository containing project_path."""
    for directory in (project_path, *project_path.parents):
        git_path = directory / ".git"
        try:
            if git_path.is_dir():
                head_path = git_path / "HEAD"
            elif git_path.is_file():
                content = git_path.read_text().strip()
                if not content.startswith("gitdir:"):
                    return None
                gitdir = Path(content[len("gitdir:"):].strip())
                if not gitdir.is_absolute():
                    gitdir = directory / gitdir
                head_path = gitdir / "HEAD"
            else:
                continue
        except OSError:
            logger.debug("Failed to inspect %s", git_path, exc_info=True)
            return None
        return head_path if head_path.is_file() else None
    return None
