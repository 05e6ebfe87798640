"""agent-browser CLI package.

This package provides a fast command-line interface for browser automation.
Every invocation talks to a per-session daemon over a Unix socket; the daemon
is started on demand and keeps the browser alive between commands.

Usage:
    agent-browser open example.com
    agent-browser snapshot -i
    agent-browser click @e2
    agent-browser fill @e3 "test@example.com"
    agent-browser close
"""

__all__ = ['main']


def __getattr__(name: str):
	"""Lazy import to avoid runpy warnings when running as module."""
	if name == 'main':
		from agent_browser.main import main

		return main
	raise AttributeError(f'module {__name__!r} has no attribute {name!r}')
