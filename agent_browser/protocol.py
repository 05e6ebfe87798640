"""Wire protocol for CLI↔daemon communication.

Each message is one JSON object on a single line terminated by ``\\n``. The
newline is the only frame delimiter; JSON string escaping guarantees that
payload values never contain a raw newline.

Request ids are best-effort correlation tokens for humans reading logs. A
connection carries exactly one request and one response, so nothing relies
on ids being unique.
"""

import json
import time
from typing import Any

from pydantic import BaseModel, ConfigDict, PrivateAttr, StrictBool, ValidationError

from agent_browser.errors import InvalidResponseError


def gen_id() -> str:
	"""Low-cardinality, time-derived request id."""
	return f'r{int(time.time() * 1000000) % 1000000}'


class Request(BaseModel):
	"""Command request from CLI to daemon.

	Only ``id`` and ``action`` are fixed. Everything else is an action-specific
	parameter carried as a top-level field next to them, e.g.::

	    {"id": "r123", "action": "fill", "selector": "@e3", "value": "hello"}
	"""

	model_config = ConfigDict(extra='allow')

	id: str
	action: str

	def to_json(self) -> str:
		return self.model_dump_json()


class Response(BaseModel):
	"""Response from daemon to CLI.

	On failure ``data`` is absent and ``error`` usually holds a message. Extra
	fields sent by the daemon (such as an echoed ``id``) are kept so the
	response can be printed back exactly as received.
	"""

	model_config = ConfigDict(extra='allow')

	success: StrictBool
	data: Any = None
	error: str | None = None

	# Key order of the decoded line, so it can be echoed back unchanged
	_sent_keys: list[str] | None = PrivateAttr(default=None)

	def as_sent(self) -> dict[str, Any]:
		"""The fields the daemon actually sent, in the order it sent them, without defaults filled in."""
		dump = self.model_dump()
		if self._sent_keys is not None:
			return {key: dump[key] for key in self._sent_keys}
		extra = self.model_extra or {}
		return {key: value for key, value in dump.items() if key in self.model_fields_set or key in extra}

	def to_json(self) -> str:
		return json.dumps(self.as_sent(), separators=(',', ':'), ensure_ascii=False)

	@classmethod
	def from_json(cls, data: str | bytes) -> 'Response':
		response = cls.model_validate_json(data)
		response._sent_keys = list(json.loads(data))
		return response


def encode_request(request: Request) -> bytes:
	"""Serialize a request as one newline-terminated line."""
	return (request.to_json() + '\n').encode()


def decode_response(line: bytes | str) -> Response:
	"""Parse one response line.

	Raises InvalidResponseError when the line is not JSON or does not have the
	response shape.
	"""
	try:
		return Response.from_json(line)
	except ValidationError as e:
		raise InvalidResponseError(f'Invalid response: {_describe(e)}') from e


def _describe(error: ValidationError) -> str:
	parts = []
	for err in error.errors():
		loc = '.'.join(str(part) for part in err['loc'])
		parts.append(f'{loc}: {err["msg"]}' if loc else err['msg'])
	return '; '.join(parts)
