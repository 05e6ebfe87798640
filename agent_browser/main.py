#!/usr/bin/env python3
"""Command-line entry point for agent-browser.

Each invocation parses flags, translates the remaining tokens into one
request, makes sure the session daemon is running, performs a single
request/response exchange over the session socket and prints the result.
The daemon keeps running after the CLI exits.
"""

import logging
import sys

from agent_browser.client import send_command
from agent_browser.commands import require_command
from agent_browser.config import Flags, clean_args, load_environment, parse_flags, wants_help
from agent_browser.errors import AgentBrowserError, UnknownCommandError
from agent_browser.logging_config import setup_logging
from agent_browser.output import print_error, print_response, print_unknown_command, print_warning
from agent_browser.protocol import Request, gen_id
from agent_browser.supervisor import ensure_daemon

logger = logging.getLogger(__name__)

HELP = """
agent-browser - fast browser automation CLI for AI agents

Usage: agent-browser <command> [args] [options]

Core Commands:
  open <url>                 Navigate to URL
  click <sel>                Click element (or @ref)
  dblclick <sel>             Double-click element
  type <sel> <text>          Type into element
  fill <sel> <text>          Clear and fill
  press <key>                Press key (Enter, Tab, Control+a)
  keydown <key>              Hold key down
  keyup <key>                Release key
  hover <sel>                Hover element
  focus <sel>                Focus element
  check <sel>                Check checkbox
  uncheck <sel>              Uncheck checkbox
  select <sel> <val>         Select dropdown option
  drag <src> <dst>           Drag and drop
  upload <sel> <files...>    Upload files
  scroll <dir> [px]          Scroll (up/down/left/right)
  scrollintoview <sel>       Scroll element into view
  wait <sel|ms>              Wait for element or time
  screenshot [path]          Take screenshot
  pdf <path>                 Save as PDF
  snapshot                   Accessibility tree with refs (for AI)
  eval <js>                  Run JavaScript
  close                      Close browser

Navigation:
  back                       Go back
  forward                    Go forward
  reload                     Reload page

Get Info:  agent-browser get <what> [selector]
  text, html, value, attr <name>, title, url, count, box

Check State:  agent-browser is <what> <selector>
  visible, enabled, checked

Find Elements:  agent-browser find <locator> <value> <action> [text]
  role, text, label, placeholder, alt, title, testid, first, last, nth
  --name <name>              Accessible name (role locator)
  --exact                    Exact text match

Mouse:  agent-browser mouse <action> [args]
  move <x> <y>, down [btn], up [btn], wheel <dy> [dx]

Browser Settings:  agent-browser set <setting> [value]
  viewport <w> <h>, device <name>, geo <lat> <lng>
  offline [on|off], headers <json>, credentials <user> <pass>
  media [dark|light] [reduced-motion]

Network:  agent-browser network <action>
  route <url> [--abort|--body <json>]
  unroute [url]
  requests [--clear] [--filter <pattern>]

Storage:
  cookies [get|set|clear]    Manage cookies
  storage <local|session>    Manage web storage
  state save|load <path>     Save or restore browser state

Tabs:
  tab [new|list|close|<n>]   Manage tabs
  window new                 Open a new window
  frame <sel>|main           Switch frame
  dialog accept [text]|dismiss

Debug:
  trace start|stop [path]    Record trace
  console [--clear]          View console logs
  errors [--clear]           View page errors
  highlight <sel>            Highlight element

Snapshot Options:
  -i, --interactive          Only interactive elements
  -c, --compact              Remove empty structural elements
  -d, --depth <n>            Limit tree depth
  -s, --selector <sel>       Scope to CSS selector

Options:
  --session <name>           Isolated session (or AGENT_BROWSER_SESSION env)
  --json                     JSON output
  --full, -f                 Full page screenshot
  --headed                   Show browser window (not headless)
  --debug                    Debug output

Examples:
  agent-browser open example.com
  agent-browser snapshot -i              # Interactive elements only
  agent-browser click @e2                # Click by ref from snapshot
  agent-browser fill @e3 "test@example.com"
  agent-browser find role button click --name Submit
  agent-browser get text @e1
  agent-browser screenshot --full
"""


def switch_to_headed(flags: Flags) -> None:
	"""Ask an already running daemon to relaunch its browser with a visible window."""
	launch = Request(id=gen_id(), action='launch', headless=False)
	try:
		send_command(launch, flags.session)
	except AgentBrowserError as e:
		if not flags.json:
			print_warning(f'Could not switch to headed mode: {e}')


def main(argv: list[str] | None = None) -> int:
	"""Main entry point."""
	args = sys.argv[1:] if argv is None else argv

	load_environment()
	flags = parse_flags(args)
	setup_logging(flags.debug)
	logger.debug(f'Flags: {flags}')

	tokens = clean_args(args)
	if not tokens or wants_help(args):
		print(HELP)
		return 0

	# Translate before touching the daemon so a typo never spawns one
	try:
		request = require_command(tokens, flags)
	except UnknownCommandError as e:
		print_unknown_command(e.verb)
		return 1

	try:
		ensure_daemon(flags.session, flags.headed)
	except AgentBrowserError as e:
		print_error(str(e), flags.json)
		return 1

	if flags.headed:
		switch_to_headed(flags)

	try:
		response = send_command(request, flags.session)
	except AgentBrowserError as e:
		print_error(str(e), flags.json)
		return 1

	print_response(response, flags.json)
	return 0 if response.success else 1


if __name__ == '__main__':
	sys.exit(main())
