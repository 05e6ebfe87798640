"""Element, keyboard, scroll and mouse commands."""

from typing import Any

from agent_browser.commands.args import get, join_from, need, need_int, parse_int
from agent_browser.config import Flags

# Commands that take just a selector and send it under the same action name
SELECTOR_ACTIONS = {'click', 'dblclick', 'hover', 'focus', 'check', 'uncheck'}
KEY_ACTIONS = {'press': 'press', 'key': 'press', 'keydown': 'keydown', 'keyup': 'keyup'}

COMMANDS = SELECTOR_ACTIONS | set(KEY_ACTIONS) | {
	'fill',
	'type',
	'select',
	'drag',
	'upload',
	'scroll',
	'scrollintoview',
	'scrollinto',
	'mouse',
}

DEFAULT_SCROLL_AMOUNT = 300
DEFAULT_WHEEL_DELTA_Y = 100


def translate(verb: str, rest: list[str], flags: Flags) -> dict[str, Any] | None:
	if verb in SELECTOR_ACTIONS:
		return {'action': verb, 'selector': need(rest, 0)}

	elif verb == 'fill':
		return {'action': 'fill', 'selector': need(rest, 0), 'value': join_from(rest, 1)}

	elif verb == 'type':
		return {'action': 'type', 'selector': need(rest, 0), 'text': join_from(rest, 1)}

	elif verb == 'select':
		return {'action': 'select', 'selector': need(rest, 0), 'value': need(rest, 1)}

	elif verb == 'drag':
		return {'action': 'drag', 'source': need(rest, 0), 'target': need(rest, 1)}

	elif verb == 'upload':
		return {'action': 'upload', 'selector': need(rest, 0), 'files': rest[1:]}

	elif verb in KEY_ACTIONS:
		return {'action': KEY_ACTIONS[verb], 'key': need(rest, 0)}

	elif verb == 'scroll':
		amount = parse_int(get(rest, 1))
		return {
			'action': 'scroll',
			'direction': get(rest, 0) or 'down',
			'amount': DEFAULT_SCROLL_AMOUNT if amount is None else amount,
		}

	elif verb in ('scrollintoview', 'scrollinto'):
		return {'action': 'scrollintoview', 'selector': need(rest, 0)}

	elif verb == 'mouse':
		return _mouse(rest)

	return None


def _mouse(rest: list[str]) -> dict[str, Any] | None:
	sub = get(rest, 0)

	if sub == 'move':
		return {'action': 'mousemove', 'x': need_int(rest, 1), 'y': need_int(rest, 2)}

	elif sub in ('down', 'up'):
		return {'action': f'mouse{sub}', 'button': get(rest, 1) or 'left'}

	elif sub == 'wheel':
		dy = parse_int(get(rest, 1))
		dx = parse_int(get(rest, 2))
		return {
			'action': 'mousewheel',
			'deltaX': 0 if dx is None else dx,
			'deltaY': DEFAULT_WHEEL_DELTA_Y if dy is None else dy,
		}

	return None
