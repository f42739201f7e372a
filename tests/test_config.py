"""Tests for contrast_checker.core.config — SnapConfig loading from env and .env files."""

import os
from pathlib import Path

import pytest
from contrast_checker.core.config import DEFAULT_CONFIG, SnapConfig, find_dotenv, load_config, read_dotenv
from contrast_checker.core.errors import ConfigError


@pytest.fixture
def repo(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A fake repo root (has .git) used as cwd, so no stray .env above it is picked up."""
    (tmp_path / '.git').mkdir()
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestReadDotenv:
    def test_simple_key_value(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('CONTRAST_TIE_ZONE=0.25\n')
        assert read_dotenv(f) == {'CONTRAST_TIE_ZONE': '0.25'}

    def test_quoted_values(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('A="1.5"\nB=\'2\'\n')
        assert read_dotenv(f) == {'A': '1.5', 'B': '2'}

    def test_comments_blanks_and_junk_ignored(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('# comment\n\nNOEQUALS\n=nokey\nA=1\n')
        assert read_dotenv(f) == {'A': '1'}


class TestFindDotenv:
    def test_finds_in_start_dir(self, tmp_path: Path) -> None:
        dotenv = tmp_path / '.env'
        dotenv.write_text('X=1\n')
        assert find_dotenv(tmp_path) == dotenv

    def test_finds_in_parent(self, tmp_path: Path) -> None:
        sub = tmp_path / 'sub'
        sub.mkdir()
        dotenv = tmp_path / '.env'
        dotenv.write_text('X=1\n')
        assert find_dotenv(sub) == dotenv

    def test_stops_at_git_dir(self, tmp_path: Path) -> None:
        repo = tmp_path / 'repo'
        (repo / '.git').mkdir(parents=True)
        (repo / 'src').mkdir()
        (tmp_path / '.env').write_text('X=1\n')
        assert find_dotenv(repo / 'src') is None

    def test_stops_at_git_file(self, tmp_path: Path) -> None:
        repo = tmp_path / 'repo'
        (repo / 'src').mkdir(parents=True)
        (repo / '.git').write_text('gitdir: ../elsewhere\n')
        (tmp_path / '.env').write_text('X=1\n')
        assert find_dotenv(repo / 'src') is None

    def test_env_beside_git_is_found(self, tmp_path: Path) -> None:
        (tmp_path / '.git').mkdir()
        dotenv = tmp_path / '.env'
        dotenv.write_text('X=1\n')
        assert find_dotenv(tmp_path) == dotenv


class TestLoadConfig:
    def test_defaults(self, repo: Path) -> None:
        assert load_config(environ={}) == SnapConfig() == DEFAULT_CONFIG

    def test_default_values(self) -> None:
        assert DEFAULT_CONFIG.tie_zone == 0.5
        assert DEFAULT_CONFIG.max_iterations == 7
        assert DEFAULT_CONFIG.min_interval == 0.1

    def test_from_dotenv(self, repo: Path) -> None:
        (repo / '.env').write_text('CONTRAST_TIE_ZONE=1.5\nCONTRAST_MAX_ITERATIONS=10\n')
        config = load_config(environ={})
        assert config.tie_zone == 1.5
        assert config.max_iterations == 10
        assert config.min_interval == 0.1

    def test_environment_wins_over_dotenv(self, repo: Path) -> None:
        (repo / '.env').write_text('CONTRAST_TIE_ZONE=1.5\n')
        config = load_config(environ={'CONTRAST_TIE_ZONE': '0.2'})
        assert config.tie_zone == 0.2

    def test_unrelated_keys_ignored(self, repo: Path) -> None:
        config = load_config(environ={'TIE_ZONE': '9', 'OTHER': 'x'})
        assert config == DEFAULT_CONFIG

    def test_explicit_env_file(self, repo: Path) -> None:
        custom = repo / 'custom.env'
        custom.write_text('CONTRAST_MIN_INTERVAL=0.5\n')
        assert load_config(env_file=str(custom), environ={}).min_interval == 0.5

    def test_missing_explicit_env_file(self, repo: Path) -> None:
        with pytest.raises(ConfigError, match='not found'):
            load_config(env_file=str(repo / 'nope.env'), environ={})

    def test_empty_value_uses_default(self, repo: Path) -> None:
        assert load_config(environ={'CONTRAST_TIE_ZONE': ''}).tie_zone == 0.5

    @pytest.mark.parametrize(
        'key,value',
        [
            ('CONTRAST_TIE_ZONE', 'wide'),
            ('CONTRAST_MAX_ITERATIONS', '2.5'),
            ('CONTRAST_MIN_INTERVAL', '0.1x'),
        ],
    )
    def test_unparseable_values(self, repo: Path, key: str, value: str) -> None:
        with pytest.raises(ConfigError, match=key):
            load_config(environ={key: value})

    @pytest.mark.parametrize(
        'key,value,field',
        [
            ('CONTRAST_TIE_ZONE', '-1', 'tie_zone'),
            ('CONTRAST_TIE_ZONE', 'nan', 'tie_zone'),
            ('CONTRAST_TIE_ZONE', 'inf', 'tie_zone'),
            ('CONTRAST_MAX_ITERATIONS', '0', 'max_iterations'),
            ('CONTRAST_MIN_INTERVAL', '-0.1', 'min_interval'),
            ('CONTRAST_MIN_INTERVAL', 'NaN', 'min_interval'),
        ],
    )
    def test_out_of_range_values(self, repo: Path, key: str, value: str, field: str) -> None:
        with pytest.raises(ConfigError, match=field):
            load_config(environ={key: value})

    def test_reads_process_environment(self, repo: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('CONTRAST_MAX_ITERATIONS', '4')
        assert load_config().max_iterations == 4

    def test_does_not_modify_os_environ(self, repo: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv('CONTRAST_TIE_ZONE', raising=False)
        (repo / '.env').write_text('CONTRAST_TIE_ZONE=1.0\n')
        assert load_config().tie_zone == 1.0
        assert 'CONTRAST_TIE_ZONE' not in os.environ


class TestSnapConfig:
    def test_zero_and_minimum_values_accepted(self) -> None:
        assert SnapConfig(tie_zone=0.0, max_iterations=1, min_interval=0.0).max_iterations == 1

    @pytest.mark.parametrize(
        'kwargs,field',
        [
            ({'tie_zone': -1}, 'tie_zone'),
            ({'tie_zone': float('nan')}, 'tie_zone'),
            ({'tie_zone': float('inf')}, 'tie_zone'),
            ({'min_interval': -0.1}, 'min_interval'),
            ({'min_interval': float('nan')}, 'min_interval'),
            ({'max_iterations': 0}, 'max_iterations'),
        ],
    )
    def test_invalid_fields_raise(self, kwargs: dict, field: str) -> None:
        with pytest.raises(ConfigError, match=field):
            SnapConfig(**kwargs)
