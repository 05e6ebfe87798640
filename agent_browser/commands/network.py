"""Network interception, web storage, cookies and saved browser state."""

from typing import Any

from agent_browser.commands.args import flag_value, get, has_flag, need, strip_options
from agent_browser.config import Flags

COMMANDS = {'network', 'storage', 'cookies', 'state'}

STORAGE_TYPES = ('local', 'session')


def translate(verb: str, rest: list[str], flags: Flags) -> dict[str, Any] | None:
	if verb == 'network':
		return _network(rest)

	elif verb == 'storage':
		storage_type = get(rest, 0)
		if storage_type not in STORAGE_TYPES:
			return None
		return {
			'action': 'storage',
			'storageType': storage_type,
			'operation': get(rest, 1) or 'get',
			'key': get(rest, 2),
			'value': get(rest, 3),
		}

	elif verb == 'cookies':
		return _cookies(rest)

	elif verb == 'state':
		op = get(rest, 0)
		if op in ('save', 'load'):
			return {'action': f'state_{op}', 'path': need(rest, 1)}
		return None

	return None


def _network(rest: list[str]) -> dict[str, Any] | None:
	sub = get(rest, 0)

	if sub == 'route':
		args = strip_options(rest, switches=('--abort',), valued=('--body',))
		return {
			'action': 'route',
			'url': need(args, 1),
			'abort': has_flag(rest, '--abort'),
			'body': flag_value(rest, '--body'),
		}

	elif sub == 'unroute':
		return {'action': 'unroute', 'url': get(rest, 1)}

	elif sub == 'requests':
		return {
			'action': 'requests',
			'clear': has_flag(rest, '--clear'),
			'filter': flag_value(rest, '--filter'),
		}

	return None


def _cookies(rest: list[str]) -> dict[str, Any]:
	op = get(rest, 0) or 'get'

	if op == 'get':
		return {'action': 'cookies', 'operation': 'get', 'name': get(rest, 1)}
	elif op == 'set':
		return {'action': 'cookies', 'operation': 'set', 'name': need(rest, 1), 'value': need(rest, 2)}
	elif op == 'clear':
		return {'action': 'cookies', 'operation': 'clear'}

	# Anything else lists all cookies
	return {'action': 'cookies', 'operation': 'get'}
