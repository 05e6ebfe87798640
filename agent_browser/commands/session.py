"""Session management commands."""

from typing import Any

from agent_browser.config import Flags

COMMANDS = {'close', 'quit', 'exit'}


def translate(verb: str, rest: list[str], flags: Flags) -> dict[str, Any] | None:
	"""Close the browser; the daemon decides whether to exit afterwards."""
	return {'action': 'close'}
