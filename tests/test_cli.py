"""Tests for the varengine command line interface."""

import json
import logging

import pytest

from varengine.cli.main import create_parser, main


@pytest.fixture(autouse=True)
def reset_logging():
    """basicConfig only applies once per process; start each test clean."""
    yield
    logging.getLogger('varengine').setLevel(logging.NOTSET)


class TestResolveCommand:
    """Test `varengine resolve`."""

    def test_resolve_with_vars(self, capsys):
        exit_code = main(['resolve', 'Hello {{name}}', '--var', 'name=World'])

        assert exit_code == 0
        assert capsys.readouterr().out == 'Hello World\n'

    def test_resolve_with_env_file(self, capsys, env_file, sample_environments):
        path = env_file(sample_environments)

        exit_code = main(['resolve', '{{base_url}}/users', '--env-file', str(path)])

        assert exit_code == 0
        assert capsys.readouterr().out.strip() == 'https://api.dev.example.com/users'

    def test_select_environment(self, capsys, env_file, sample_environments):
        path = env_file(sample_environments)

        exit_code = main(['resolve', '{{api_key}}', '--env-file', str(path), '-e', 'prod'])

        assert exit_code == 0
        assert capsys.readouterr().out.strip() == 'prod-key'

    def test_unknown_environment(self, env_file, sample_environments):
        path = env_file(sample_environments)

        assert main(['resolve', 'x', '--env-file', str(path), '-e', 'staging']) == 2

    def test_environment_requires_file(self):
        assert main(['resolve', 'x', '-e', 'dev']) == 2

    def test_overrides_win(self, capsys, tmp_path, env_file, sample_environments):
        path = env_file(sample_environments)
        var_file = tmp_path / 'vars.json'
        var_file.write_text(json.dumps({'api_key': 'from-file', 'extra': 1}))

        exit_code = main([
            'resolve', '{{api_key}} {{extra}} {{host}}',
            '--env-file', str(path),
            '--var-file', str(var_file),
            '--var', 'host=cli-host',
        ])

        assert exit_code == 0
        assert capsys.readouterr().out.strip() == 'from-file 1 cli-host'

    def test_file_in_and_out(self, tmp_path):
        template = tmp_path / 'request.txt'
        template.write_text('GET {{url}}\n')
        output = tmp_path / 'out' / 'resolved.txt'

        exit_code = main(['resolve', '--in', str(template), '--out', str(output), '--var', 'url=http://x'])

        assert exit_code == 0
        assert output.read_text() == 'GET http://x\n'

    def test_missing_template_file(self, tmp_path):
        assert main(['resolve', '--in', str(tmp_path / 'missing.txt')]) == 1

    def test_text_and_in_conflict(self, tmp_path):
        template = tmp_path / 't.txt'
        template.write_text('x')

        assert main(['resolve', 'x', '--in', str(template)]) == 2

    def test_undefined_variable_exit_code(self, caplog):
        with caplog.at_level(logging.ERROR):
            exit_code = main(['resolve', '{{missing}}'])

        assert exit_code == 2
        assert 'Variable {{missing}} is not defined in current environment' in caplog.text

    def test_circular_reference_exit_code(self, capsys, caplog):
        with caplog.at_level(logging.ERROR):
            exit_code = main(['resolve', '{{a}}', '--var', 'a={{b}}', '--var', 'b={{a}}'])

        assert exit_code == 2
        assert 'a → b → a' in caplog.text
        assert capsys.readouterr().out == ''

    def test_invalid_var_format(self):
        assert main(['resolve', 'x', '--var', 'no_equals']) == 2

    def test_invalid_var_name(self):
        assert main(['resolve', 'x', '--var', '1bad=value']) == 2

    def test_invalid_env_file(self, env_file):
        path = env_file({'version': '1', 'environments': {'dev': {'bad-name': 'x'}}})

        assert main(['resolve', 'x', '--env-file', str(path)]) == 2

    def test_env_file_is_directory(self, tmp_path, caplog):
        with caplog.at_level(logging.ERROR):
            exit_code = main(['resolve', '{{a}}', '--env-file', str(tmp_path)])

        assert exit_code == 2
        assert 'Failed to read environment file' in caplog.text

    def test_stdin_input(self, capsys, monkeypatch):
        import io
        monkeypatch.setattr('sys.stdin', io.StringIO('{{a}}'))

        exit_code = main(['resolve', '--var', 'a=from-stdin'])

        assert exit_code == 0
        assert capsys.readouterr().out == 'from-stdin'


class TestExtractCommand:
    """Test `varengine extract`."""

    def test_extract(self, capsys):
        exit_code = main(['extract', '{{x}} and {{y}} and {{x}}'])

        assert exit_code == 0
        assert capsys.readouterr().out.split() == ['x', 'y', 'x']

    def test_extract_unique(self, capsys):
        main(['extract', '{{x}} and {{y}} and {{x}}', '--unique'])

        assert capsys.readouterr().out.split() == ['x', 'y']

    def test_extract_none(self, capsys):
        assert main(['extract', '{ not a variable }']) == 0
        assert capsys.readouterr().out == ''


class TestParser:
    """Test argument parsing."""

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 1
        assert 'usage' in capsys.readouterr().out

    def test_log_level_choices(self):
        args = create_parser().parse_args(['resolve', 'x', '--log-level', 'debug'])

        assert args.log_level == 'debug'
        assert args.var is None
