"""Request diagnostics on stderr.

The request pipeline and the client facade report failures, short-circuits
and completed exchanges through :func:`get_output`. Nothing is written to
stdout, and nothing is written at all unless a verbose
:class:`OutputManager` has been installed with :func:`set_output`::

    from synclient.output import OutputManager, set_output

    set_output(OutputManager(verbose=True))

Colour is disabled when ``NO_COLOR`` is set or ``TERM=dumb``.
"""

from __future__ import annotations

import os
import sys
from typing import Optional

from rich.console import Console
from rich.markup import escape


class OutputManager:
    """Writes ``[debug]`` request traces to stderr.

    Args:
        no_color: Disable Rich markup and write plain lines.
        verbose: Emit debug messages. When ``False`` every call is a no-op.
    """

    def __init__(self, no_color: bool = False, verbose: bool = False) -> None:
        self._no_color = no_color or _should_disable_color()
        self._verbose = verbose
        self._stderr = Console(file=sys.stderr, no_color=self._no_color, stderr=True)

    @property
    def is_verbose(self) -> bool:
        """Whether debug messages are emitted."""
        return self._verbose

    def debug(self, message: str) -> None:
        """Print a debug message to stderr when verbose.

        Args:
            message: The debug text (prefixed with ``[debug]`` on output).
        """
        if not self._verbose:
            return
        if self._no_color:
            print(f"[debug] {message}", file=sys.stderr, flush=True)
        else:
            self._stderr.print(f"[dim]\\[debug] {escape(message)}[/dim]", highlight=False)


def _should_disable_color() -> bool:
    """Return True when NO_COLOR is set (any value) or TERM=dumb."""
    return os.environ.get("NO_COLOR") is not None or os.environ.get("TERM") == "dumb"


# ------------------------------------------------------------------ #
# Global instance
# ------------------------------------------------------------------ #

_output: Optional[OutputManager] = None


def get_output() -> OutputManager:
    """Return the installed :class:`OutputManager`, creating a silent one if none is set."""
    global _output
    if _output is None:
        _output = OutputManager()
    return _output


def set_output(output: OutputManager) -> None:
    """Install *output* as the global :class:`OutputManager`."""
    global _output
    _output = output


def reset_output() -> None:
    """Drop the global :class:`OutputManager`. Used by the test suite."""
    global _output
    _output = None
