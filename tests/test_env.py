"""Tests for style_checker.core.env — .env loading and Settings."""

import os
from pathlib import Path

import pytest
from style_checker.core.env import Settings, find_dotenv, load_env, parse_dotenv


class TestParseDotenv:
    def test_simple_key_value(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('FOO=bar\n')
        assert parse_dotenv(f) == {'FOO': 'bar'}

    def test_quoted_values(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('KEY="hello world"\nKEY2=\'single # not a comment\'\n')
        assert parse_dotenv(f) == {'KEY': 'hello world', 'KEY2': 'single # not a comment'}

    def test_export_prefix(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('export STYLE_CHECKER_DEBUG=1\n')
        assert parse_dotenv(f) == {'STYLE_CHECKER_DEBUG': '1'}

    def test_trailing_comment(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('STYLE_CHECKER_SETTLE_MS=300  # slow laptop\n')
        assert parse_dotenv(f) == {'STYLE_CHECKER_SETTLE_MS': '300'}

    def test_comments_and_blank_lines_ignored(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('# comment\n\nNOEQUALS\nFOO=bar\n')
        assert parse_dotenv(f) == {'FOO': 'bar'}


class TestFindDotenv:
    def test_finds_in_start_dir(self, tmp_path: Path) -> None:
        dotenv = tmp_path / '.env'
        dotenv.write_text('X=1\n')
        assert find_dotenv(tmp_path) == dotenv

    def test_finds_in_parent(self, tmp_path: Path) -> None:
        subdir = tmp_path / '02-tailwind'
        subdir.mkdir()
        dotenv = tmp_path / '.env'
        dotenv.write_text('X=1\n')
        assert find_dotenv(subdir) == dotenv

    def test_stops_at_git_dir(self, tmp_path: Path) -> None:
        repo = tmp_path / 'repo'
        (repo / '.git').mkdir(parents=True)
        exercise = repo / 'lab' / '03-sass'
        exercise.mkdir(parents=True)
        (tmp_path / '.env').write_text('X=1\n')
        assert find_dotenv(exercise) is None

    def test_git_root_itself_is_searched(self, tmp_path: Path) -> None:
        (tmp_path / '.git').write_text('gitdir: ../somewhere\n')
        dotenv = tmp_path / '.env'
        dotenv.write_text('X=1\n')
        assert find_dotenv(tmp_path) == dotenv


class TestLoadEnv:
    @pytest.fixture(autouse=True)
    def _isolated_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(os, 'environ', {})

    def test_sets_missing_vars(self, tmp_path: Path) -> None:
        (tmp_path / '.git').mkdir()
        (tmp_path / '.env').write_text('STYLE_CHECKER_TEST_KEY=secret\n')
        assert load_env(tmp_path) == tmp_path / '.env'
        assert os.environ.get('STYLE_CHECKER_TEST_KEY') == 'secret'

    def test_does_not_overwrite_existing(self, tmp_path: Path) -> None:
        os.environ['STYLE_CHECKER_TEST_KEY2'] = 'original'
        (tmp_path / '.git').mkdir()
        (tmp_path / '.env').write_text('STYLE_CHECKER_TEST_KEY2=fromfile\n')
        load_env(tmp_path)
        assert os.environ.get('STYLE_CHECKER_TEST_KEY2') == 'original'

    def test_returns_none_when_no_file(self, tmp_path: Path) -> None:
        (tmp_path / '.git').mkdir()
        assert load_env(tmp_path) is None

    def test_settings_pick_up_loaded_values(self, tmp_path: Path) -> None:
        (tmp_path / '.git').mkdir()
        (tmp_path / '.env').write_text('STYLE_CHECKER_SETTLE_MS=450\n')
        load_env(tmp_path)
        assert Settings.from_env().settle_ms == 450


class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings.from_env({})
        assert settings == Settings()
        assert settings.settle_ms == 200
        assert settings.browser == 'chromium'
        assert settings.headless is True

    def test_overrides(self) -> None:
        settings = Settings.from_env(
            {
                'STYLE_CHECKER_BROWSER': 'Firefox',
                'STYLE_CHECKER_HEADLESS': 'false',
                'STYLE_CHECKER_SETTLE_MS': '350',
                'STYLE_CHECKER_TIMEOUT_MS': '5000',
                'STYLE_CHECKER_VIEWPORT': '1024x768',
                'STYLE_CHECKER_DEBUG': 'yes',
            }
        )
        assert settings.browser == 'firefox'
        assert settings.headless is False
        assert settings.settle_ms == 350
        assert settings.timeout_ms == 5000
        assert settings.viewport == (1024, 768)
        assert settings.debug is True

    @pytest.mark.parametrize(
        ('key', 'value'),
        [
            ('STYLE_CHECKER_BROWSER', 'netscape'),
            ('STYLE_CHECKER_HEADLESS', 'maybe'),
            ('STYLE_CHECKER_SETTLE_MS', 'fast'),
            ('STYLE_CHECKER_SETTLE_MS', '-5'),
            ('STYLE_CHECKER_VIEWPORT', 'wide'),
        ],
    )
    def test_invalid_values_raise(self, key: str, value: str) -> None:
        with pytest.raises(ValueError, match=key):
            Settings.from_env({key: value})
