"""grep-backed recursive search over strings files."""

import logging
import subprocess
import threading
from typing import List, Optional

from ..config import config
from ..errors import SearchCancelledError, SearchError

logger = logging.getLogger(__name__)


class GrepSearcher:
    """Runs `grep -r` restricted to strings files and returns its stdout."""

    # grep exits with 1 when nothing matched
    NO_MATCH_EXIT = 1
    # GNU grep 3.5+ reports binary matches on stderr as "grep: PATH: binary file matches"
    STDERR_BINARY_SUFFIX = ": binary file matches"

    def __init__(
        self,
        grep_path: Optional[str] = None,
        timeout: Optional[float] = None,
        ignore_case: bool = False,
        extension: Optional[str] = None,
    ):
        """
        Initialize the searcher.

        Args:
            grep_path: grep executable (uses LOCALIZABLE_GREP_PATH if not provided)
            timeout: Seconds before a running search is killed
            ignore_case: Match the needle case-insensitively
            extension: File extension the search is restricted to
        """
        self.grep_path = grep_path or config.grep_path
        self.timeout = timeout if timeout is not None else config.search_timeout
        self.ignore_case = ignore_case
        self.extension = extension or config.strings_extension
        self._lock = threading.Lock()
        self._process: Optional[subprocess.Popen] = None
        self._cancelled = False

    def build_command(self, root_dir: str, needle: str) -> List[str]:
        cmd = [self.grep_path, "-r", "-F"]
        if self.ignore_case:
            cmd.append("-i")
        cmd.extend([f"--include=*{self.extension}", "-e", needle, root_dir])
        return cmd

    def search(self, root_dir: str, needle: str) -> str:
        """
        Run the search and return raw output.

        Raises:
            SearchError: If grep cannot be launched, times out or fails
            SearchCancelledError: If cancel() was called while running
        """
        cmd = self.build_command(root_dir, needle)
        logger.debug("Running search: %s", cmd)

        with self._lock:
            self._cancelled = False
            try:
                process = subprocess.Popen(
                    cmd,
                    stdout=subprocess.PIPE,
                    stderr=subprocess.PIPE,
                    text=True,
                    encoding="utf-8",
                    errors="replace",
                )
            except OSError as e:
                raise SearchError(f"Failed to start {self.grep_path}: {e}") from e
            self._process = process

        try:
            stdout, stderr = process.communicate(timeout=self.timeout)
        except subprocess.TimeoutExpired as e:
            process.kill()
            process.communicate()
            raise SearchError(f"Search timed out after {self.timeout:g}s") from e
        finally:
            with self._lock:
                self._process = None

        if self._cancelled:
            raise SearchCancelledError("Search cancelled")

        if process.returncode == self.NO_MATCH_EXIT:
            return ""
        if process.returncode != 0:
            message = stderr.strip() or f"exit code {process.returncode}"
            raise SearchError(f"Search failed: {message}")

        binary = self.binary_matches(stderr, root_dir)
        if binary:
            logger.debug("Collected %d binary matches from stderr", len(binary))
            stdout += "".join(f"Binary file {path} matches\n" for path in binary)
        return stdout

    def binary_matches(self, stderr: str, root_dir: str) -> List[str]:
        """Paths of binary files that grep reported as matching on stderr."""
        paths = []
        for line in stderr.splitlines():
            line = line.strip()
            if not line.endswith(self.STDERR_BINARY_SUFFIX):
                continue
            start = line.find(root_dir)
            if start == -1:
                continue
            paths.append(line[start:-len(self.STDERR_BINARY_SUFFIX)])
        return paths

    def cancel(self) -> None:
        """Terminate the running grep process, if any."""
        with self._lock:
            if self._process is None or self._process.poll() is not None:
                return
            self._cancelled = True
            logger.info("Cancelling search (pid %d)", self._process.pid)
            self._process.terminate()
