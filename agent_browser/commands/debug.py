"""Tracing, console/error logs and element highlighting."""

from typing import Any

from agent_browser.commands.args import get, has_flag, need
from agent_browser.config import Flags

COMMANDS = {'trace', 'console', 'errors', 'highlight'}


def translate(verb: str, rest: list[str], flags: Flags) -> dict[str, Any] | None:
	if verb == 'trace':
		op = get(rest, 0)
		if op in ('start', 'stop'):
			return {'action': f'trace_{op}', 'path': get(rest, 1)}
		return None

	elif verb in ('console', 'errors'):
		return {'action': verb, 'clear': has_flag(rest, '--clear')}

	elif verb == 'highlight':
		return {'action': 'highlight', 'selector': need(rest, 0)}

	return None
