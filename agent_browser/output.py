"""Human and JSON rendering of daemon responses and CLI errors.

A successful payload is matched against RENDERERS in order and only the first
matching entry prints. Fields are matched by presence and JSON type, so a
``url`` holding a number does not count as a URL.
"""

import json
from collections.abc import Callable
from typing import Any

from rich.console import Console
from rich.text import Text

from agent_browser.protocol import Response

# Rich consoles for status markers and errors. Payload values bypass rich and
# go through print() so tabs, carriage returns and other control characters
# reach the terminal unchanged.
console = Console(highlight=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)

LOG_LEVEL_STYLES = {'error': 'red', 'warning': 'yellow', 'info': 'cyan'}

Payload = dict[str, Any]


def _is_str(key: str) -> Callable[[Payload], bool]:
	return lambda data: isinstance(data.get(key), str)


def _is_int(key: str) -> Callable[[Payload], bool]:
	return lambda data: isinstance(data.get(key), int) and not isinstance(data.get(key), bool)


def _is_bool(key: str) -> Callable[[Payload], bool]:
	return lambda data: isinstance(data.get(key), bool)


def _is_list(key: str) -> Callable[[Payload], bool]:
	return lambda data: isinstance(data.get(key), list)


def _present(key: str) -> Callable[[Payload], bool]:
	return lambda data: key in data


def _line(key: str) -> Callable[[Payload], None]:
	return lambda data: print(data[key])


def _json_line(key: str) -> Callable[[Payload], None]:
	"""Booleans print as true/false, like the JSON they came from."""
	return lambda data: print(json.dumps(data[key]))


def _pretty(key: str) -> Callable[[Payload], None]:
	return lambda data: print(json.dumps(data[key], indent=2, ensure_ascii=False))


def _marked(marker: str, style: str, text: str) -> None:
	"""Styled marker from rich, then the text itself exactly as received."""
	console.print(Text(marker, style=style), end=' ')
	print(text)


def _print_navigation(data: Payload) -> None:
	_marked('✓', 'green', data['title'])
	print(f'  {data["url"]}')


def _print_tabs(data: Payload) -> None:
	for i, tab in enumerate(data['tabs']):
		tab = tab if isinstance(tab, dict) else {}
		title = tab.get('title') if isinstance(tab.get('title'), str) else 'Untitled'
		url = tab.get('url') if isinstance(tab.get('url'), str) else ''
		marker = '→' if tab.get('active') is True else ' '
		print(f'{marker} [{i}] {title} - {url}')


def _print_logs(data: Payload) -> None:
	for entry in data['logs']:
		entry = entry if isinstance(entry, dict) else {}
		level = entry.get('type') if isinstance(entry.get('type'), str) else 'log'
		text = entry.get('text') if isinstance(entry.get('text'), str) else ''
		_marked(f'[{level}]', LOG_LEVEL_STYLES.get(level, ''), text)


def _print_page_errors(data: Payload) -> None:
	for entry in data['errors']:
		entry = entry if isinstance(entry, dict) else {}
		message = entry.get('message') if isinstance(entry.get('message'), str) else ''
		_marked('✗', 'red', message)


def _print_cookies(data: Payload) -> None:
	for cookie in data['cookies']:
		cookie = cookie if isinstance(cookie, dict) else {}
		name = cookie.get('name') if isinstance(cookie.get('name'), str) else ''
		value = cookie.get('value') if isinstance(cookie.get('value'), str) else ''
		print(f'{name}={value}')


def _print_ok(message: str) -> None:
	_marked('✓', 'green', message)


RENDERERS: list[tuple[str, Callable[[Payload], bool], Callable[[Payload], None]]] = [
	('navigation', lambda data: _is_str('url')(data) and _is_str('title')(data), _print_navigation),
	('url', _is_str('url'), _line('url')),
	('snapshot', _is_str('snapshot'), _line('snapshot')),
	('title', _is_str('title'), _line('title')),
	('text', _is_str('text'), _line('text')),
	('html', _is_str('html'), _line('html')),
	('value', _is_str('value'), _line('value')),
	('count', _is_int('count'), _line('count')),
	('visible', _is_bool('visible'), _json_line('visible')),
	('enabled', _is_bool('enabled'), _json_line('enabled')),
	('checked', _is_bool('checked'), _json_line('checked')),
	('result', _present('result'), _pretty('result')),
	('tabs', _is_list('tabs'), _print_tabs),
	('logs', _is_list('logs'), _print_logs),
	('errors', _is_list('errors'), _print_page_errors),
	('cookies', _is_list('cookies'), _print_cookies),
	('box', _present('box'), _pretty('box')),
	('closed', _present('closed'), lambda data: _print_ok('Browser closed')),
	('path', _is_str('path'), lambda data: _print_ok(f'Saved to {data["path"]}')),
]


def render_payload(data: Any) -> str:
	"""Print a successful payload and return the name of the renderer used."""
	if isinstance(data, dict):
		for name, matches, render in RENDERERS:
			if matches(data):
				render(data)
				return name
	_print_ok('Done')
	return 'done'


def print_response(response: Response, json_mode: bool) -> None:
	if json_mode:
		print(response.to_json())
		return

	if not response.success:
		print_error(response.error or 'Unknown error')
		return

	render_payload(response.data)


def print_error(message: str, json_mode: bool = False) -> None:
	"""Report a failure: a JSON record on stdout, or a red line on stderr."""
	if json_mode:
		print(json.dumps({'success': False, 'error': message}))
	else:
		err_console.print(Text.assemble(('✗ Error:', 'red'), ' ', message))


def print_warning(message: str) -> None:
	err_console.print(Text.assemble(('⚠', 'yellow'), ' ', message))


def print_unknown_command(verb: str) -> None:
	err_console.print(Text.assemble(('Unknown command:', 'red'), ' ', verb))
	err_console.print(Text('Run: agent-browser --help', style='dim'))
