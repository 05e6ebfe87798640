"""Introspection (get, is) and semantic locator (find) commands."""

from typing import Any

from agent_browser.commands.args import flag_value, get, has_flag, join_from, need, parse_int, strip_options
from agent_browser.config import Flags

COMMANDS = {'get', 'is', 'find'}

# get <what> <selector>
GET_SELECTOR_ACTIONS = {
	'text': 'gettext',
	'html': 'innerhtml',
	'value': 'inputvalue',
	'count': 'count',
	'box': 'boundingbox',
}
# get <what>
GET_PAGE_ACTIONS = {'url': 'url', 'title': 'title'}

IS_ACTIONS = {'visible': 'isvisible', 'enabled': 'isenabled', 'checked': 'ischecked'}

DEFAULT_SUBACTION = 'click'


def translate(verb: str, rest: list[str], flags: Flags) -> dict[str, Any] | None:
	if verb == 'get':
		return _get(rest)
	elif verb == 'is':
		what = get(rest, 0)
		if what in IS_ACTIONS:
			return {'action': IS_ACTIONS[what], 'selector': need(rest, 1)}
		return None
	elif verb == 'find':
		return _find(rest)
	return None


def _get(rest: list[str]) -> dict[str, Any] | None:
	what = get(rest, 0)
	if what in GET_SELECTOR_ACTIONS:
		return {'action': GET_SELECTOR_ACTIONS[what], 'selector': need(rest, 1)}
	elif what in GET_PAGE_ACTIONS:
		return {'action': GET_PAGE_ACTIONS[what]}
	elif what == 'attr':
		return {'action': 'getattribute', 'selector': need(rest, 1), 'attribute': need(rest, 2)}
	return None


def _find(rest: list[str]) -> dict[str, Any] | None:
	"""find <locator> <value> [subaction] [text...] [--name <name>] [--exact]

	``--name`` and ``--exact`` may appear anywhere; they are pulled out before
	the positional arguments are read. ``nth`` takes an index before the
	selector, which shifts the remaining positions by one.
	"""
	name = flag_value(rest, '--name')
	exact = has_flag(rest, '--exact')
	args = strip_options(rest, switches=('--exact',), valued=('--name',))

	locator = need(args, 0)

	if locator == 'nth':
		index = parse_int(need(args, 1))
		if index is None:
			return None
		return {
			'action': 'nth',
			'selector': need(args, 2),
			'index': index,
			'subaction': get(args, 3) or DEFAULT_SUBACTION,
			'value': _trailing_text(args, 4),
		}

	value = need(args, 1)
	subaction = get(args, 2) or DEFAULT_SUBACTION
	fill_value = _trailing_text(args, 3)

	if locator == 'role':
		return {
			'action': 'getbyrole',
			'role': value,
			'subaction': subaction,
			'value': fill_value,
			'name': name,
			'exact': exact,
		}
	elif locator == 'text':
		return {'action': 'getbytext', 'text': value, 'subaction': subaction, 'exact': exact}
	elif locator == 'label':
		return {'action': 'getbylabel', 'label': value, 'subaction': subaction, 'value': fill_value, 'exact': exact}
	elif locator == 'placeholder':
		return {
			'action': 'getbyplaceholder',
			'placeholder': value,
			'subaction': subaction,
			'value': fill_value,
			'exact': exact,
		}
	elif locator == 'alt':
		return {'action': 'getbyalttext', 'text': value, 'subaction': subaction, 'exact': exact}
	elif locator == 'title':
		return {'action': 'getbytitle', 'text': value, 'subaction': subaction, 'exact': exact}
	elif locator == 'testid':
		return {'action': 'getbytestid', 'testId': value, 'subaction': subaction, 'value': fill_value}
	elif locator in ('first', 'last'):
		return {
			'action': 'nth',
			'selector': value,
			'index': 0 if locator == 'first' else -1,
			'subaction': subaction,
			'value': fill_value,
		}

	return None


def _trailing_text(args: list[str], index: int) -> str | None:
	return join_from(args, index) if len(args) > index else None
