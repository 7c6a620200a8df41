"""Integration tests for the cairo-abi CLI."""

import json

import pytest
from typer.testing import CliRunner

from cairo_abi.cli import app


@pytest.fixture
def abi_file(tmp_path, erc20_payload):
    path = tmp_path / 'abi.json'
    path.write_text(erc20_payload)
    return path


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ['CAIRO_ABI_LOG_LEVEL', 'CAIRO_ABI_STRICT', 'CAIRO_ABI_OUTPUT']:
        monkeypatch.delenv(name, raising=False)


@pytest.mark.integration
class TestDecodeCommand:
    """Integration tests for `cairo-abi decode`."""

    def test_decode_file(self, abi_file, erc20_lines):
        runner = CliRunner()

        result = runner.invoke(app, ['decode', str(abi_file)])

        assert result.exit_code == 0
        assert result.stdout.splitlines() == erc20_lines

    def test_decode_stdin(self, erc20_payload, erc20_lines):
        runner = CliRunner()

        result = runner.invoke(app, ['decode'], input=json.dumps(erc20_payload))

        assert result.exit_code == 0
        assert result.stdout.splitlines() == erc20_lines

    def test_decode_json_output(self, abi_file):
        runner = CliRunner()

        result = runner.invoke(app, ['decode', str(abi_file), '--json'])

        assert result.exit_code == 0
        signatures = json.loads(result.stdout)
        assert [s['kind'] for s in signatures] == ['function', 'function', 'event']
        assert signatures[2]['name'] == 'Transfer'

    def test_output_format_from_env(self, abi_file, monkeypatch):
        monkeypatch.setenv('CAIRO_ABI_OUTPUT', 'json')
        runner = CliRunner()

        result = runner.invoke(app, ['decode', str(abi_file)])

        assert result.exit_code == 0
        assert len(json.loads(result.stdout)) == 3

    def test_malformed_payload_exits_with_error(self, tmp_path):
        path = tmp_path / 'bad.json'
        path.write_text('{"type": "event"}')
        runner = CliRunner()

        result = runner.invoke(app, ['decode', str(path)])

        assert result.exit_code == 1
        assert 'Error' in result.output

    def test_missing_file_exits_with_error(self, tmp_path):
        runner = CliRunner()

        result = runner.invoke(app, ['decode', str(tmp_path / 'missing.json')])

        assert result.exit_code == 1
        assert 'Failed to read ABI' in result.output

    def test_malformed_item_is_skipped(self, tmp_path):
        path = tmp_path / 'abi.json'
        path.write_text(json.dumps([{'type': 'event', 'members': []}, {'type': 'event', 'name': 'a::Ok'}]))
        runner = CliRunner()

        result = runner.invoke(app, ['decode', str(path)])

        assert result.exit_code == 0
        assert 'Event: Ok()' in result.stdout

    def test_strict_fails_on_malformed_item(self, tmp_path):
        path = tmp_path / 'abi.json'
        path.write_text(json.dumps([{'type': 'event', 'members': []}, {'type': 'event', 'name': 'a::Ok'}]))
        runner = CliRunner()

        result = runner.invoke(app, ['decode', str(path), '--strict'])

        assert result.exit_code == 1
        assert 'Event: Ok()' in result.output
        assert 'malformed' in result.output

    def test_invalid_log_level_flag_exits_with_error(self):
        runner = CliRunner()

        result = runner.invoke(app, ['decode', '--log-level', 'loud'], input='[]')

        assert result.exit_code == 1
        assert "Invalid log level 'LOUD'" in result.output

    def test_invalid_log_level_env_exits_with_error(self, monkeypatch):
        monkeypatch.setenv('CAIRO_ABI_LOG_LEVEL', 'loud')
        runner = CliRunner()

        result = runner.invoke(app, ['decode'], input='[]')

        assert result.exit_code == 1
        assert 'Invalid log level' in result.output

    def test_log_level_flag_overrides_env(self, monkeypatch, erc20_payload, erc20_lines):
        monkeypatch.setenv('CAIRO_ABI_LOG_LEVEL', 'debug')
        runner = CliRunner()

        result = runner.invoke(app, ['decode', '--log-level', 'error'], input=erc20_payload)

        assert result.exit_code == 0
        assert result.stdout.splitlines() == erc20_lines

    def test_log_level_flag_replaces_invalid_env(self, monkeypatch):
        monkeypatch.setenv('CAIRO_ABI_LOG_LEVEL', 'loud')
        runner = CliRunner()

        result = runner.invoke(app, ['decode', '--log-level', 'info'], input='[]')

        assert result.exit_code == 0
