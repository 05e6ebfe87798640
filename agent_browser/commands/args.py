"""Token helpers shared by the command translators."""

import re
from collections.abc import Sequence

_INT = re.compile(r'[+-]?[0-9]+')
_UINT = re.compile(r'[0-9]+')

# Values outside these ranges are treated as unparsable
INT_MIN, INT_MAX = -(2**31), 2**31 - 1
UINT_MAX = 2**64 - 1


class MissingArgument(Exception):
	"""A required token is absent or malformed; the command has no mapping."""

	pass


def get(rest: Sequence[str], index: int) -> str | None:
	return rest[index] if index < len(rest) else None


def need(rest: Sequence[str], index: int) -> str:
	"""Required positional token."""
	if index >= len(rest):
		raise MissingArgument(index)
	return rest[index]


def join_from(rest: Sequence[str], index: int) -> str:
	"""Join every token from index on with single spaces, so unquoted multi-word text works."""
	return ' '.join(rest[index:])


def parse_int(token: str | None) -> int | None:
	"""Signed 32-bit integer made only of ASCII digits, or None."""
	if token is None or not _INT.fullmatch(token):
		return None
	value = int(token)
	return value if INT_MIN <= value <= INT_MAX else None


def parse_uint(token: str | None) -> int | None:
	"""Unsigned 64-bit integer made only of ASCII digits, or None."""
	if token is None or not _UINT.fullmatch(token):
		return None
	value = int(token)
	return value if value <= UINT_MAX else None


def parse_float(token: str | None) -> float | None:
	if token is None:
		return None
	try:
		return float(token)
	except ValueError:
		return None


def need_int(rest: Sequence[str], index: int) -> int:
	value = parse_int(need(rest, index))
	if value is None:
		raise MissingArgument(index)
	return value


def need_float(rest: Sequence[str], index: int) -> float:
	value = parse_float(need(rest, index))
	if value is None:
		raise MissingArgument(index)
	return value


def has_flag(rest: Sequence[str], *names: str) -> bool:
	return any(token in names for token in rest)


def flag_value(rest: Sequence[str], *names: str) -> str | None:
	"""Token following the first occurrence of any of names."""
	for i, token in enumerate(rest):
		if token in names:
			return get(rest, i + 1)
	return None


def strip_options(rest: Sequence[str], switches: Sequence[str] = (), valued: Sequence[str] = ()) -> list[str]:
	"""Remove option tokens, wherever they appear, leaving the positionals in order.

	``switches`` take no value; each name in ``valued`` also consumes the
	token after it.
	"""
	positionals: list[str] = []
	i = 0
	while i < len(rest):
		token = rest[i]
		if token in valued:
			i += 2
			continue
		if token not in switches:
			positionals.append(token)
		i += 1
	return positionals
