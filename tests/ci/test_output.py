"""Tests for rendering daemon responses."""

import json

import pytest

from agent_browser.output import print_error, print_response, print_unknown_command, render_payload
from agent_browser.protocol import Response, decode_response


class TestFailures:
	def test_failure_goes_to_stderr_only(self, capsys):
		print_response(Response(success=False, error='boom'), json_mode=False)
		out, err = capsys.readouterr()
		assert out == ''
		assert 'boom' in err
		assert 'Error' in err

	def test_failure_without_message(self, capsys):
		print_response(Response(success=False), json_mode=False)
		assert 'Unknown error' in capsys.readouterr().err

	def test_cli_error_as_json(self, capsys):
		print_error('Daemon failed to start', json_mode=True)
		out, err = capsys.readouterr()
		assert json.loads(out) == {'success': False, 'error': 'Daemon failed to start'}
		assert err == ''

	def test_unknown_command_hint(self, capsys):
		print_unknown_command('frobnicate')
		err = capsys.readouterr().err
		assert 'Unknown command: frobnicate' in err
		assert 'agent-browser --help' in err


class TestJsonMode:
	def test_prints_record_as_received(self, capsys):
		line = '{"id":"r12","success":true,"data":{"url":"https://a.test","title":"A","extra":[1,2]}}'
		print_response(decode_response(line), json_mode=True)
		out = capsys.readouterr().out
		assert out.count('\n') == 1
		assert json.loads(out) == json.loads(line)

	def test_failure_record_goes_to_stdout(self, capsys):
		print_response(decode_response('{"success":false,"error":"boom"}'), json_mode=True)
		out, err = capsys.readouterr()
		assert json.loads(out) == {'success': False, 'error': 'boom'}
		assert err == ''

	def test_key_order_is_kept(self, capsys):
		print_response(decode_response('{"id":"r5","success":false,"error":"boom"}'), json_mode=True)
		assert capsys.readouterr().out == '{"id":"r5","success":false,"error":"boom"}\n'

	def test_nested_data_order_is_kept(self, capsys):
		line = '{"success":true,"data":{"title":"T","url":"https://a.test"},"id":"r9"}'
		print_response(decode_response(line), json_mode=True)
		assert capsys.readouterr().out == line + '\n'


class TestPayloads:
	def test_navigation_prints_title_then_url(self, capsys):
		name = render_payload({'url': 'https://a.test', 'title': 'A', 'text': 'ignored', 'count': 3})
		out = capsys.readouterr().out
		assert name == 'navigation'
		assert out.index('A') < out.index('https://a.test')
		assert '✓' in out
		assert 'ignored' not in out
		assert '3' not in out

	def test_url_alone(self, capsys):
		assert render_payload({'url': 'https://a.test'}) == 'url'
		assert capsys.readouterr().out.strip() == 'https://a.test'

	@pytest.mark.parametrize('key', ['html', 'text', 'value', 'snapshot'])
	def test_values_print_unmodified(self, key, capsys):
		raw = 'col1\tcol2\r\nline2  \x0c'
		render_payload({key: raw})
		assert capsys.readouterr().out == raw + '\n'

	def test_navigation_title_is_not_rewritten(self, capsys):
		render_payload({'url': 'https://a.test', 'title': 'Tab\there [b]bold[/b]'})
		assert capsys.readouterr().out == '✓ Tab\there [b]bold[/b]\n  https://a.test\n'

	def test_snapshot_beats_title(self, capsys):
		assert render_payload({'snapshot': '- button "Go" [ref=e1]', 'title': 'T'}) == 'snapshot'
		assert capsys.readouterr().out.strip() == '- button "Go" [ref=e1]'

	@pytest.mark.parametrize(
		'data,expected',
		[
			({'title': 'T', 'text': 'x'}, 'title'),
			({'text': 'x', 'html': '<b>'}, 'text'),
			({'html': '<b>', 'value': 'v'}, 'html'),
			({'value': 'v', 'count': 1}, 'value'),
			({'count': 2, 'visible': True}, 'count'),
			({'visible': False, 'enabled': True}, 'visible'),
			({'enabled': True, 'checked': True}, 'enabled'),
			({'checked': False, 'result': 1}, 'checked'),
			({'result': None, 'tabs': []}, 'result'),
			({'tabs': [], 'logs': []}, 'tabs'),
			({'logs': [], 'errors': []}, 'logs'),
			({'errors': [], 'cookies': []}, 'errors'),
			({'cookies': [], 'box': {}}, 'cookies'),
			({'box': None, 'closed': True}, 'box'),
			({'closed': True, 'path': 'x.png'}, 'closed'),
			({'path': 'x.png'}, 'path'),
		],
	)
	def test_first_matching_renderer_wins(self, data, expected):
		assert render_payload(data) == expected

	def test_fields_match_by_type(self, capsys):
		# A numeric url is not a URL, and a boolean is not a count
		assert render_payload({'url': 5, 'count': True, 'text': 'fallback'}) == 'text'
		assert capsys.readouterr().out.strip() == 'fallback'

	def test_booleans_print_lowercase(self, capsys):
		render_payload({'visible': True})
		assert capsys.readouterr().out.strip() == 'true'
		render_payload({'checked': False})
		assert capsys.readouterr().out.strip() == 'false'

	def test_result_is_pretty_json(self, capsys):
		render_payload({'result': {'a': [1, 2]}})
		out = capsys.readouterr().out
		assert json.loads(out) == {'a': [1, 2]}
		assert '\n  ' in out

	def test_tabs_mark_active(self, capsys):
		render_payload(
			{
				'tabs': [
					{'title': 'One', 'url': 'https://one.test', 'active': False},
					{'title': 'Two', 'url': 'https://two.test', 'active': True},
					{'url': 'https://three.test'},
				]
			}
		)
		lines = capsys.readouterr().out.splitlines()
		assert lines[0] == '  [0] One - https://one.test'
		assert lines[1] == '→ [1] Two - https://two.test'
		assert lines[2] == '  [2] Untitled - https://three.test'

	def test_logs(self, capsys):
		render_payload({'logs': [{'type': 'error', 'text': 'bad thing'}, {'type': 'info', 'text': 'hello'}]})
		lines = capsys.readouterr().out.splitlines()
		assert lines == ['[error] bad thing', '[info] hello']

	def test_page_errors(self, capsys):
		render_payload({'errors': [{'message': 'ReferenceError: x is not defined'}]})
		assert capsys.readouterr().out.strip() == '✗ ReferenceError: x is not defined'

	def test_cookies(self, capsys):
		render_payload({'cookies': [{'name': 'sid', 'value': 'abc'}, {'name': 'theme', 'value': 'dark'}]})
		assert capsys.readouterr().out.splitlines() == ['sid=abc', 'theme=dark']

	def test_closed_and_path(self, capsys):
		render_payload({'closed': True})
		assert 'Browser closed' in capsys.readouterr().out
		render_payload({'path': '/tmp/shot.png'})
		assert 'Saved to /tmp/shot.png' in capsys.readouterr().out

	@pytest.mark.parametrize('data', [None, {}, {'unrelated': 1}, 'plain', [1, 2]])
	def test_done_fallback(self, data, capsys):
		assert render_payload(data) == 'done'
		assert capsys.readouterr().out.strip() == '✓ Done'
