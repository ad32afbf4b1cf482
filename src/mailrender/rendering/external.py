# =============================================================================
# External Text-Browser Rendering
# =============================================================================
# Pipes HTML through w3m's dump mode. w3m understands nested layout tables
# far better than any HTML→markdown library, which is exactly what
# marketing email is made of, so it is the preferred strategy.
#
# Process:
#   1. Start `w3m -dump -T text/html -cols N`
#   2. Write the HTML to its stdin
#   3. Read the laid-out text from stdout
#
# Requires: the w3m binary on $PATH (or configured explicitly).
# The call blocks until w3m exits. No timeout unless one is configured.
# =============================================================================

import logging
import shutil
import subprocess
from dataclasses import dataclass

from mailrender.rendering.converter import OutputKind
from mailrender.rendering.errors import ConversionError

logger = logging.getLogger(__name__)


@dataclass
class W3mRenderOptions:
    """
    Options for the w3m renderer.

    Attributes:
        command: w3m executable name or path.
        columns: Column width w3m lays the page out for.
        timeout: Seconds to wait for w3m (None = wait forever).
    """
    command: str = "w3m"
    columns: int = 120
    timeout: float | None = None


class W3mRenderer:
    """
    Renders HTML to text with the w3m text browser.

    Usage:
        >>> renderer = W3mRenderer(W3mRenderOptions(columns=100))
        >>> text = renderer.convert(html_content)
    """

    name = "w3m"
    output_kind = OutputKind.TEXT

    def __init__(self, options: W3mRenderOptions | None = None) -> None:
        """
        Initialize the w3m renderer.

        Args:
            options: Rendering options.
        """
        self.options = options or W3mRenderOptions()

    def command_line(self) -> list[str]:
        """The full argument vector used to invoke w3m."""
        return [
            self.options.command,
            "-dump",
            "-T", "text/html",
            "-cols", str(self.options.columns),
        ]

    def convert(self, html: str) -> str:
        """
        Render HTML with w3m.

        Args:
            html: HTML document.

        Returns:
            w3m's text dump.

        Raises:
            ConversionError: If w3m can't be started, times out or exits
                with a non-zero status.
        """
        cmd = self.command_line()
        logger.debug(f"Running {' '.join(cmd)}")

        try:
            proc = subprocess.run(
                cmd,
                input=html.encode("utf-8"),
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                timeout=self.options.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            raise ConversionError(
                self.name, f"timed out after {self.options.timeout}s"
            ) from e
        except OSError as e:
            raise ConversionError(self.name, f"could not run {self.options.command}: {e}") from e

        if proc.returncode != 0:
            raise ConversionError(self.name, f"exited with status {proc.returncode}")

        return proc.stdout.decode("utf-8", errors="replace")


def is_w3m_available(command: str = "w3m") -> bool:
    """
    Check if the w3m executable can be found.

    Returns:
        True if w3m rendering is available.
    """
    return shutil.which(command) is not None
