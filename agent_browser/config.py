"""Global flags and environment configuration."""

import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

SESSION_ENV = 'AGENT_BROWSER_SESSION'
DAEMON_ENV = 'AGENT_BROWSER_DAEMON'
HEADED_ENV = 'AGENT_BROWSER_HEADED'

DEFAULT_SESSION = 'default'
ENV_FILE = '.env'

# Boolean global flags and the Flags field each one sets
BOOL_FLAGS = {
	'--json': 'json',
	'--full': 'full',
	'-f': 'full',
	'--headed': 'headed',
	'--debug': 'debug',
}
SESSION_FLAG = '--session'
HELP_FLAGS = ('--help', '-h')


@dataclass(frozen=True)
class Flags:
	"""Per-invocation options, fixed once parsed."""

	json: bool = False
	full: bool = False
	headed: bool = False
	debug: bool = False
	session: str = DEFAULT_SESSION


def load_environment() -> None:
	"""Load .env from the working directory (not its parents) without overriding real env vars."""
	load_dotenv(Path.cwd() / ENV_FILE, override=False)


def parse_flags(args: Sequence[str], env: Mapping[str, str] | None = None) -> Flags:
	"""Collect global flags from anywhere in argv.

	``--session`` takes the next token as its value; a trailing ``--session``
	with nothing after it is ignored. The session defaults to
	``AGENT_BROWSER_SESSION`` when set.
	"""
	env = os.environ if env is None else env
	values: dict[str, bool | str] = {'session': env.get(SESSION_ENV) or DEFAULT_SESSION}

	i = 0
	while i < len(args):
		arg = args[i]
		if arg in BOOL_FLAGS:
			values[BOOL_FLAGS[arg]] = True
		elif arg == SESSION_FLAG and i + 1 < len(args):
			values['session'] = args[i + 1]
			i += 1
		i += 1

	return Flags(**values)  # type: ignore[arg-type]


def clean_args(args: Sequence[str]) -> list[str]:
	"""Strip global flags (and the --session value) so only command tokens remain.

	Verb-specific options such as ``--name`` or ``-i`` are kept in place for
	the command translator.
	"""
	result: list[str] = []
	skip_next = False
	for arg in args:
		if skip_next:
			skip_next = False
			continue
		if arg == SESSION_FLAG:
			skip_next = True
			continue
		if arg in BOOL_FLAGS:
			continue
		result.append(arg)
	return result


def wants_help(args: Sequence[str]) -> bool:
	return any(arg in HELP_FLAGS for arg in args)
