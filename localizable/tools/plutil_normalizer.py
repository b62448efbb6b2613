"""plutil-backed conversion of binary property lists to XML."""

import logging
import subprocess
from typing import Optional

from ..config import config
from ..errors import ProcessError

logger = logging.getLogger(__name__)


class PlutilNormalizer:
    """Runs `plutil -convert xml1` on a file in place."""

    def __init__(self, plutil_path: Optional[str] = None, timeout: Optional[float] = None):
        self.plutil_path = plutil_path or config.plutil_path
        self.timeout = timeout if timeout is not None else config.convert_timeout

    def normalize(self, file_path: str) -> None:
        """
        Convert the property list at file_path to XML, overwriting it.

        Raises:
            ProcessError: If plutil cannot be launched, times out or exits non-zero
        """
        cmd = [self.plutil_path, "-convert", "xml1", str(file_path)]
        logger.debug("Running property list conversion: %s", cmd)

        try:
            completed = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except OSError as e:
            raise ProcessError(f"Failed to start {self.plutil_path}: {e}") from e
        except subprocess.TimeoutExpired as e:
            raise ProcessError(f"plutil timed out after {self.timeout:g}s") from e

        if completed.returncode != 0:
            stderr = (completed.stderr or completed.stdout or "").strip()
            logger.warning("plutil exited with %d: %s", completed.returncode, stderr)
            raise ProcessError(
                "plutil conversion failed.",
                returncode=completed.returncode,
                stderr=stderr,
            )

        logger.info("Normalised %s to XML", file_path)
