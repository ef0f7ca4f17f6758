"""Tests for the chroma-tool command line and command registry."""

import json
from pathlib import Path

import pytest
from chroma_tool import registry
from chroma_tool.__main__ import main
from chroma_tool.core.types import Command
from PIL import Image

SETTINGS = ['CHROMA_TOOL_THRESHOLD', 'CHROMA_TOOL_RESULTS', 'CHROMA_TOOL_SWATCH_SIZE']


@pytest.fixture(autouse=True)
def isolated(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from an empty repo root so no stray .env or settings leak in."""
    (tmp_path / '.git').mkdir()
    monkeypatch.chdir(tmp_path)
    for name in SETTINGS:
        monkeypatch.setenv(name, 'placeholder')
        monkeypatch.delenv(name)
    return tmp_path


class TestRegistry:
    def test_discovers_all_commands(self):
        assert set(registry.all_commands()) == {
            'alpha',
            'analogous',
            'contrast',
            'hex-to-rgb',
            'rgb-to-hex',
            'swatch',
        }

    def test_entries_are_commands(self):
        assert all(isinstance(cmd, Command) for cmd in registry.all_commands().values())

    def test_unknown_command(self):
        with pytest.raises(KeyError, match='Unknown command: nope'):
            registry.get('nope')

    def test_module_docstring_available(self):
        assert registry.module_for('contrast').__doc__.startswith('Pick a readable foreground')


class TestCommand:
    def test_execute_without_run_fn(self):
        from chroma_tool.core.types import Report

        with pytest.raises(RuntimeError):
            Command(name='empty').execute(None, Report())


class TestContrast:
    def test_text(self, capsys: pytest.CaptureFixture[str]):
        main(['contrast', '#000000', '#ffffff'])
        assert capsys.readouterr().out.splitlines() == ['#000000 → #FFF', '#ffffff → #000']

    def test_threshold_flag(self, capsys: pytest.CaptureFixture[str]):
        main(['contrast', '#808080', '-t', '100'])
        assert capsys.readouterr().out.strip() == '#808080 → #000'

    def test_threshold_from_env(self, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv('CHROMA_TOOL_THRESHOLD', '100')
        main(['contrast', '#808080'])
        assert capsys.readouterr().out.strip() == '#808080 → #000'

    def test_threshold_from_env_file(self, isolated: Path, capsys: pytest.CaptureFixture[str]):
        env_file = isolated / 'custom.env'
        env_file.write_text('CHROMA_TOOL_THRESHOLD=100\n')
        main(['--env-file', str(env_file), 'contrast', '#808080'])
        captured = capsys.readouterr()
        assert captured.out.strip() == '#808080 → #000'
        assert f'loaded {env_file}' in captured.err

    def test_invalid_color_exits_1(self, capsys: pytest.CaptureFixture[str]):
        with pytest.raises(SystemExit) as exc:
            main(['contrast', 'not-a-color'])
        assert exc.value.code == 1
        assert 'Invalid color: not-a-color' in capsys.readouterr().err


class TestAnalogous:
    def test_json(self, capsys: pytest.CaptureFixture[str]):
        main(['analogous', '#ff0000', '#00ff00', '-n', '3', '--json'])
        obj = json.loads(capsys.readouterr().out)
        assert obj['command'] == 'analogous'
        assert obj['results'][0]['input'] == ['#ff0000', '#00ff00']
        assert obj['results'][0]['palette'] == ['#ff0000', '#00ff00', '#ff3300', '#00ff33', '#ff6600', '#00ff66']

    def test_results_from_env(self, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv('CHROMA_TOOL_RESULTS', '2')
        main(['analogous', '#2563eb', '--json'])
        obj = json.loads(capsys.readouterr().out)
        assert len(obj['results'][0]['palette']) == 2

    def test_bad_setting_exits_1(self, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv('CHROMA_TOOL_RESULTS', 'many')
        with pytest.raises(SystemExit):
            main(['analogous', '#2563eb'])
        assert 'CHROMA_TOOL_RESULTS' in capsys.readouterr().err


class TestConversions:
    def test_alpha(self, capsys: pytest.CaptureFixture[str]):
        main(['alpha', '#123456', '0.5'])
        assert capsys.readouterr().out.strip() == '#123456 → #12345680'

    def test_alpha_out_of_range(self, capsys: pytest.CaptureFixture[str]):
        with pytest.raises(SystemExit) as exc:
            main(['alpha', '#123456', '1.5'])
        assert exc.value.code == 1
        assert 'opacity' in capsys.readouterr().err

    def test_hex_to_rgb(self, capsys: pytest.CaptureFixture[str]):
        main(['hex-to-rgb', '#abc', '#2563eb'])
        assert capsys.readouterr().out.splitlines() == [
            '#abc → rgb(170, 187, 204)',
            '#2563eb → rgb(37, 99, 235)',
        ]

    def test_rgb_to_hex(self, capsys: pytest.CaptureFixture[str]):
        main(['rgb-to-hex', '37', '99', '235'])
        assert capsys.readouterr().out.strip() == '37, 99, 235 → #2563eb'


class TestSwatch:
    def test_writes_expanded_palette(self, isolated: Path, capsys: pytest.CaptureFixture[str]):
        out = isolated / 'palette.png'
        main(['swatch', str(out), '#ff0000', '#00ff00', '-n', '2', '-s', '16'])
        with Image.open(out) as image:
            assert image.size == (16 * 4, 16)
        assert f'wrote {out}' in capsys.readouterr().out

    def test_plain_colours_with_env_size(self, isolated: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv('CHROMA_TOOL_SWATCH_SIZE', '8')
        out = isolated / 'plain.png'
        main(['swatch', str(out), '#ff0000', '#0000ff'])
        with Image.open(out) as image:
            assert image.size == (16, 8)


    def test_out_of_range_rgb_seed(self, isolated: Path):
        out = isolated / 'clamped.png'
        main(['swatch', str(out), 'rgb(300, 0, 0)', '-n', '2', '-s', '8'])
        with Image.open(out) as image:
            assert image.size == (16, 8)


class TestHelp:
    def test_no_command_exits_1(self):
        with pytest.raises(SystemExit) as exc:
            main([])
        assert exc.value.code == 1

    def test_help_lists_commands(self, capsys: pytest.CaptureFixture[str]):
        main(['help'])
        out = capsys.readouterr().out
        for name in ('alpha', 'analogous', 'contrast', 'hex-to-rgb', 'rgb-to-hex', 'swatch'):
            assert name in out

    def test_help_for_command(self, capsys: pytest.CaptureFixture[str]):
        main(['help', 'swatch'])
        assert capsys.readouterr().out.startswith('Write a PNG swatch strip')

    def test_help_unknown(self, capsys: pytest.CaptureFixture[str]):
        with pytest.raises(SystemExit) as exc:
            main(['help', 'nope'])
        assert exc.value.code == 1
        assert 'Unknown command: nope' in capsys.readouterr().err
