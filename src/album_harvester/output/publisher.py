"""Commit and push the updated data files with git."""

import logging
import subprocess
from datetime import date
from pathlib import Path
from typing import Callable, Iterable, List, Optional

logger = logging.getLogger(__name__)


class PublishError(Exception):
    """Raised when a git command fails."""

    pass


class GitPublisher:
    """
    Publish changed output files to the repository's remote.

    The push is a force push: whatever the remote branch holds is replaced by
    the local history.
    """

    def __init__(
        self,
        repo_dir: Path,
        user_name: str = "",
        user_email: str = "",
        runner: Callable[..., subprocess.CompletedProcess] = subprocess.run,
    ):
        self.repo_dir = Path(repo_dir)
        self.user_name = user_name
        self.user_email = user_email
        self._runner = runner

    def _git(self, *args: str) -> str:
        """Run a git command in the repository and return its stdout."""
        command = ["git", *args]
        logger.debug(f"Running: {' '.join(command)}")
        try:
            result = self._runner(
                command,
                cwd=self.repo_dir,
                capture_output=True,
                text=True,
                check=True,
            )
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or "").strip()
            raise PublishError(f"{' '.join(command)} failed: {stderr or e}") from e
        except OSError as e:
            raise PublishError(f"Could not run git: {e}") from e
        return result.stdout or ""

    def publish(self, changed_files: Iterable[Path], today: Optional[date] = None) -> bool:
        """
        Commit and push the given files if git reports changes to them.

        Returns True when there was nothing to publish or the push succeeded,
        False when any git step failed.
        """
        today = today or date.today()
        paths = [str(Path(p)) for p in changed_files]
        try:
            return self._publish(paths, today)
        except PublishError as e:
            logger.error(f"Git commit/push failed: {e}")
            return False

    def _publish(self, paths: List[str], today: date) -> bool:
        if self.user_name:
            self._git("config", "user.name", self.user_name)
        if self.user_email:
            self._git("config", "user.email", self.user_email)

        status = self._git("status", "--porcelain", "--", *paths).strip()
        if not status:
            logger.info("No changes to commit or push.")
            return True

        label = Path(paths[0]).name if paths else "data"
        self._git("add", "--", *paths)
        self._git("commit", "-m", f"Update {label} - {today.isoformat()}")
        self._git("push", "--force")
        logger.info(f"Committed and pushed: {', '.join(Path(p).name for p in paths)}")
        return True
