"""Browser configuration commands (set ...)."""

from typing import Any

from agent_browser.commands.args import get, has_flag, need, need_float, need_int
from agent_browser.config import Flags

COMMANDS = {'set'}


def translate(verb: str, rest: list[str], flags: Flags) -> dict[str, Any] | None:
	setting = get(rest, 0)

	if setting == 'viewport':
		return {'action': 'viewport', 'width': need_int(rest, 1), 'height': need_int(rest, 2)}

	elif setting == 'device':
		return {'action': 'device', 'device': need(rest, 1)}

	elif setting in ('geo', 'geolocation'):
		return {'action': 'geolocation', 'latitude': need_float(rest, 1), 'longitude': need_float(rest, 2)}

	elif setting == 'offline':
		mode = get(rest, 1)
		return {'action': 'offline', 'offline': mode not in ('off', 'false')}

	elif setting == 'headers':
		# Forwarded as the raw JSON string; the daemon parses it
		return {'action': 'headers', 'headers': need(rest, 1)}

	elif setting in ('credentials', 'auth'):
		return {'action': 'credentials', 'username': need(rest, 1), 'password': need(rest, 2)}

	elif setting == 'media':
		if has_flag(rest, 'dark'):
			color_scheme = 'dark'
		elif has_flag(rest, 'light'):
			color_scheme = 'light'
		else:
			color_scheme = 'no-preference'
		return {'action': 'media', 'colorScheme': color_scheme, 'reducedMotion': has_flag(rest, 'reduced-motion')}

	return None
