import json

from click.testing import CliRunner

from cmdscore.cli import cli
from cmdscore.version import __version__


def test_cli_version():
    runner = CliRunner()
    result = runner.invoke(cli, ['--version'])
    assert result.exit_code == 0
    assert 'command-score' in result.output.lower()
    assert __version__ in result.output


def test_cli_help_lists_commands():
    result = CliRunner().invoke(cli, ['--help'])
    assert result.exit_code == 0
    assert 'score' in result.output
    assert 'config' in result.output


def test_score_plain(test_config):
    result = CliRunner().invoke(cli, ['score', 'hello', 'hello'], obj=test_config)
    assert result.exit_code == 0, result.output
    assert result.output.strip() == '1.0000'


def test_score_json(test_config):
    result = CliRunner().invoke(cli, ['score', 'Auto-Advance', 'Auto Advance', '--json', '-p', '3'], obj=test_config)
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data['item'] == 'Auto-Advance'
    assert data['score'] == 1.0


def test_score_no_match(test_config):
    result = CliRunner().invoke(cli, ['score', 'talent', 'tadlent', '--precision', '2'], obj=test_config)
    assert result.exit_code == 0
    assert result.output.strip() == '0.00'


def test_score_uses_configured_weights(test_config):
    test_config['scoring']['score_space_word_jump'] = 0.5
    result = CliRunner().invoke(cli, ['score', 'hello world', 'hewo', '--json'], obj=test_config)
    assert json.loads(result.output)['score'] == 0.495


def test_score_from_environment(monkeypatch):
    monkeypatch.setenv('CMDSCORE__SCORING__PENALTY_NOT_COMPLETE', '0.5')
    result = CliRunner().invoke(cli, ['score', 'hello', 'he', '--json'])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output)['score'] == 0.5


def test_invalid_environment_config_exits(monkeypatch):
    monkeypatch.setenv('CMDSCORE__SCORING__PENALTY_SKIPPED', '7')
    result = CliRunner().invoke(cli, ['score', 'hello', 'he'])
    assert result.exit_code == 1
    assert 'Invalid configuration' in result.output


def test_invalid_pool_size_reported_as_config_error(monkeypatch):
    monkeypatch.setenv('CMDSCORE__POOL__MAX_IDLE', '-1')
    result = CliRunner().invoke(cli, ['score', 'hello', 'he'])
    assert result.exit_code == 1
    assert 'Invalid configuration' in result.output
    assert 'max_idle' in result.output


def test_config_section(test_config):
    result = CliRunner().invoke(cli, ['config', '--section', 'pool'], obj=test_config)
    assert result.exit_code == 0
    assert json.loads(result.output) == {'pool': {'enabled': True, 'max_idle': 4}}


def test_config_unknown_section(test_config):
    result = CliRunner().invoke(cli, ['config', '-s', 'nope'], obj=test_config)
    assert result.exit_code != 0
    assert "Unknown section" in result.output
