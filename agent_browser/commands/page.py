"""Waiting, capture, snapshot and script evaluation."""

from typing import Any

from agent_browser.commands.args import get, join_from, need, parse_int, parse_uint
from agent_browser.config import Flags

COMMANDS = {'wait', 'screenshot', 'pdf', 'snapshot', 'eval'}


def translate(verb: str, rest: list[str], flags: Flags) -> dict[str, Any] | None:
	if verb == 'wait':
		# A token made only of digits is a duration in ms, anything else a
		# selector. A selector that is a bare number is read as a duration.
		target = need(rest, 0)
		timeout = parse_uint(target)
		if timeout is not None:
			return {'action': 'wait', 'timeout': timeout}
		return {'action': 'wait', 'selector': target}

	elif verb == 'screenshot':
		return {'action': 'screenshot', 'path': get(rest, 0), 'fullPage': flags.full}

	elif verb == 'pdf':
		return {'action': 'pdf', 'path': need(rest, 0)}

	elif verb == 'snapshot':
		return _snapshot(rest)

	elif verb == 'eval':
		return {'action': 'evaluate', 'script': join_from(rest, 0)}

	return None


def _snapshot(rest: list[str]) -> dict[str, Any]:
	"""Options may come in any order; unknown tokens are ignored."""
	request: dict[str, Any] = {'action': 'snapshot'}
	i = 0
	while i < len(rest):
		token = rest[i]
		if token in ('-i', '--interactive'):
			request['interactive'] = True
		elif token in ('-c', '--compact'):
			request['compact'] = True
		elif token in ('-d', '--depth'):
			depth = parse_int(get(rest, i + 1))
			if depth is not None:
				request['maxDepth'] = depth
				i += 1
		elif token in ('-s', '--selector'):
			selector = get(rest, i + 1)
			if selector is not None:
				request['selector'] = selector
				i += 1
		i += 1
	return request
