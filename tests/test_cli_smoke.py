"""Smoke tests for CLI commands.

Uses Click's CliRunner to run commands in-process.
"""

import json

import pytest
from click.testing import CliRunner

from huewheel.cli.main import cli
from huewheel.models import PickerConfig


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.mark.integration
class TestCLIHelp:
    """Test that all commands have working help text."""

    def test_main_help(self, runner):
        result = runner.invoke(cli, ['--help'])
        assert result.exit_code == 0
        assert 'hue wheel' in result.output

    def test_version_flag(self, runner):
        result = runner.invoke(cli, ['--version'])
        assert result.exit_code == 0
        assert '0.1.0' in result.output

    @pytest.mark.parametrize("command", ["color", "angle", "bar", "wheel", "config"])
    def test_command_help(self, runner, command):
        result = runner.invoke(cli, [command, '--help'])
        assert result.exit_code == 0


@pytest.mark.integration
class TestColorCommands:
    """Test angle/color conversion commands."""

    def test_color_in_degrees(self, runner):
        result = runner.invoke(cli, ['color', '30', '--degrees'])
        assert result.exit_code == 0
        assert result.output.strip() == '#FFFF0080'

    def test_color_in_radians(self, runner):
        result = runner.invoke(cli, ['color', '0'])
        assert result.exit_code == 0
        assert result.output.strip() == '#FFFF0000'

    @pytest.mark.parametrize("value", ['nan', 'inf', '-inf'])
    def test_color_of_non_finite_angle(self, runner, value):
        result = runner.invoke(cli, ['color', '--', value])
        assert result.exit_code == 0
        assert result.output.strip() == '#FFFF0000'

    def test_angle_of_blue(self, runner):
        result = runner.invoke(cli, ['angle', '#0000FF'])
        assert result.exit_code == 0
        assert '2.094395 rad' in result.output
        assert '120.00°' in result.output

    def test_angle_of_grey(self, runner):
        result = runner.invoke(cli, ['angle', '#808080'])
        assert result.exit_code == 0
        assert '0.000000 rad' in result.output

    def test_angle_rejects_bad_color(self, runner):
        result = runner.invoke(cli, ['angle', 'blue'])
        assert result.exit_code == 2
        assert 'Expected #RRGGBB' in result.output

    def test_wheel_samples(self, runner):
        result = runner.invoke(cli, ['wheel', '--steps', '6'])
        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert len(lines) == 6
        assert lines[0].endswith('#FFFF0000')
        assert lines[2].endswith('#FF0000FF')

    def test_wheel_rejects_zero_steps(self, runner):
        result = runner.invoke(cli, ['wheel', '--steps', '0'])
        assert result.exit_code == 2


@pytest.mark.integration
class TestBarCommand:
    """Test the bar command."""

    def test_opacity_half_way(self, runner):
        result = runner.invoke(cli, ['bar', 'opacity', '120'])
        assert result.exit_code == 0
        assert 'opacity: 128' in result.output
        assert 'color: #80FF0000' in result.output

    def test_saturation_with_base(self, runner):
        result = runner.invoke(cli, ['bar', 'saturation', '50', '--length', '100', '--base', '#0000FF'])
        assert result.exit_code == 0
        assert 'saturation: 0.5000' in result.output
        assert 'color: #FF8080FF' in result.output

    def test_position_past_end_pins(self, runner):
        result = runner.invoke(cli, ['bar', 'value', '500', '--length', '100'])
        assert result.exit_code == 0
        assert 'value: 1.0000' in result.output

    def test_custom_range(self, runner):
        result = runner.invoke(cli, ['bar', 'opacity', '0', '--min', '40', '--max', '200'])
        assert result.exit_code == 0
        assert 'opacity: 40' in result.output

    def test_unknown_channel(self, runner):
        result = runner.invoke(cli, ['bar', 'hue', '10'])
        assert result.exit_code == 2


@pytest.mark.integration
class TestConfigCommands:
    """Test the config command group."""

    def test_path(self, runner, temp_dir):
        path = temp_dir / "config.json"
        result = runner.invoke(cli, ['config', '--config', str(path), 'path'])
        assert result.exit_code == 0
        assert result.output.strip() == str(path)

    def test_show_defaults(self, runner, temp_dir):
        path = temp_dir / "config.json"
        result = runner.invoke(cli, ['config', '--config', str(path), 'show'])
        assert result.exit_code == 0
        assert 'opacity_range' in result.output
        assert not path.exists()

    def test_show_field(self, runner, temp_dir):
        path = temp_dir / "config.json"
        PickerConfig(bar={"length": 321}).save(path)
        result = runner.invoke(cli, ['config', '--config', str(path), 'show', '--field', 'bar'])
        assert result.exit_code == 0
        assert '321' in result.output

    def test_show_unknown_field(self, runner, temp_dir):
        path = temp_dir / "config.json"
        result = runner.invoke(cli, ['config', '--config', str(path), 'show', '--field', 'colour'])
        assert result.exit_code == 1

    def test_reset_writes_defaults(self, runner, temp_dir):
        path = temp_dir / "config.json"
        path.write_text(json.dumps({"bar": {"length": 999}}))

        result = runner.invoke(cli, ['config', '--config', str(path), 'reset', '--yes'])
        assert result.exit_code == 0
        assert PickerConfig.load_or_default(path) == PickerConfig()
        assert path.with_suffix(".json.bak").exists()

    def test_validate_broken_file(self, runner, temp_dir):
        path = temp_dir / "config.json"
        path.write_text('{"bar": ')

        result = runner.invoke(cli, ['config', '--config', str(path), 'validate'])
        assert result.exit_code == 1
        assert 'Error: Configuration file has invalid syntax' in result.output

    def test_validate_good_file(self, runner, temp_dir):
        path = temp_dir / "config.json"
        PickerConfig().save(path)
        result = runner.invoke(cli, ['config', '--config', str(path), 'validate'])
        assert result.exit_code == 0
        assert 'is valid' in result.output


@pytest.mark.integration
class TestLogging:
    """Test logging options."""

    def test_log_file(self, runner, temp_dir):
        log_path = temp_dir / "logs" / "huewheel.log"
        result = runner.invoke(cli, ['-v', '--log-file', str(log_path), 'color', '1'])
        assert result.exit_code == 0
        assert log_path.exists()
        assert 'Logging configured' in log_path.read_text()
