"""Translate command-line tokens into daemon requests.

Dispatch is two-level: the verb selects a module below, and compound verbs
(``get``, ``set``, ``mouse``, ``network`` ...) pick a sub-verb from the next
token. An unknown verb, an unknown sub-verb and missing or malformed required
arguments all give the same result: no request.
"""

import logging

from agent_browser.commands import debug, interaction, navigation, network, page, query, session, settings, tabs
from agent_browser.commands.args import MissingArgument
from agent_browser.config import Flags
from agent_browser.errors import UnknownCommandError
from agent_browser.protocol import Request, gen_id

__all__ = ['debug', 'interaction', 'navigation', 'network', 'page', 'query', 'session', 'settings', 'tabs', 'parse_command', 'require_command']

logger = logging.getLogger(__name__)

HANDLERS = {
	verb: module.translate
	for module in (navigation, interaction, page, query, settings, network, tabs, debug, session)
	for verb in module.COMMANDS
}


def parse_command(args: list[str], flags: Flags) -> Request | None:
	"""Map ``[verb, *rest]`` to one request, or None when there is no mapping."""
	if not args:
		return None

	verb, rest = args[0], list(args[1:])
	translate = HANDLERS.get(verb)
	if translate is None:
		return None

	try:
		params = translate(verb, rest, flags)
	except MissingArgument as e:
		logger.debug(f'{verb}: missing or invalid argument at position {e.args[0]}')
		return None

	if params is None:
		return None
	return Request(id=gen_id(), **params)


def require_command(args: list[str], flags: Flags) -> Request:
	"""Like parse_command, but raise UnknownCommandError when there is no mapping."""
	request = parse_command(args, flags)
	if request is None:
		raise UnknownCommandError(args[0] if args else '')
	return request
