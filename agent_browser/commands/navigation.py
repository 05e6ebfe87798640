"""Page navigation commands."""

from typing import Any

from agent_browser.commands.args import need
from agent_browser.config import Flags

COMMANDS = {'open', 'goto', 'navigate', 'back', 'forward', 'reload'}

URL_SCHEMES = ('http://', 'https://', 'file://')


def normalize_url(url: str) -> str:
	"""Ensure URL has scheme."""
	if not url.startswith(URL_SCHEMES):
		return 'https://' + url
	return url


def translate(verb: str, rest: list[str], flags: Flags) -> dict[str, Any] | None:
	if verb in ('open', 'goto', 'navigate'):
		return {'action': 'navigate', 'url': normalize_url(need(rest, 0))}

	# back, forward, reload
	return {'action': verb}
