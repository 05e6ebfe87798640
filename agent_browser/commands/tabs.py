"""Tab, window, frame and dialog commands."""

from typing import Any

from agent_browser.commands.args import get, need, parse_int
from agent_browser.config import Flags

COMMANDS = {'tab', 'window', 'frame', 'dialog'}


def translate(verb: str, rest: list[str], flags: Flags) -> dict[str, Any] | None:
	sub = get(rest, 0)

	if verb == 'tab':
		if sub == 'new':
			return {'action': 'tab_new', 'url': get(rest, 1)}
		elif sub == 'close':
			return {'action': 'tab_close', 'index': parse_int(get(rest, 1))}
		index = parse_int(sub)
		if index is not None:
			return {'action': 'tab_switch', 'index': index}
		# "tab", "tab list" and anything unrecognised list the tabs
		return {'action': 'tab_list'}

	elif verb == 'window':
		if sub == 'new':
			return {'action': 'window_new'}
		return None

	elif verb == 'frame':
		if sub == 'main':
			return {'action': 'frame_main'}
		return {'action': 'frame', 'selector': need(rest, 0)}

	elif verb == 'dialog':
		if sub == 'accept':
			return {'action': 'dialog', 'response': 'accept', 'promptText': get(rest, 1)}
		elif sub == 'dismiss':
			return {'action': 'dialog', 'response': 'dismiss'}
		return None

	return None
