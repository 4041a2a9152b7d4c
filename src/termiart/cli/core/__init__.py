"""Terminal I/O for the command line tools."""

from termiart.cli.core.terminal import Terminal, TerminalSession

__all__ = ["Terminal", "TerminalSession"]
