"""Tests for CLI parsing and run configuration precedence."""

import pytest

from args import parse_args
from cli_config import RunConfig, build_config, load_config_file
from constants import Constants
from errors import ConfigError


class TestArgParsing:
    """spring-version flags."""

    def test_defaults_are_unset(self):
        ns = parse_args([])
        assert ns.BOOT_VERSION is None
        assert ns.INSECURE is None
        assert ns.VERBOSE is None
        assert ns.DEPENDENCIES == []

    def test_flags(self):
        ns = parse_args([
            "-b", ">=2.0.0, <4.0.0",
            "-d", "cloud-starter,devtools",
            "-d", "native",
            "-k", "-v",
            "-o", "github",
            "--type-id", "gradle-build",
            "--starter-url", "https://mystarter.com:8080",
            "--timeout", "5",
            "--loglevel", "debug",
        ])
        assert ns.BOOT_VERSION == ">=2.0.0, <4.0.0"
        assert ns.DEPENDENCIES == ["cloud-starter,devtools", "native"]
        assert ns.INSECURE is True
        assert ns.VERBOSE is True
        assert ns.OUTPUT == "github"
        assert ns.TYPE_ID == "gradle-build"
        assert ns.STARTER_URL == "https://mystarter.com:8080"
        assert ns.TIMEOUT == 5.0
        assert ns.LOG_LEVEL == "DEBUG"

    def test_rejects_unknown_output(self):
        with pytest.raises(SystemExit):
            parse_args(["-o", "file"])

    def test_rejects_non_positive_timeout(self):
        with pytest.raises(SystemExit):
            parse_args(["--timeout", "0"])


class TestBuildConfig:
    """Defaults < config file < CLI flags."""

    def test_defaults(self):
        config = build_config(parse_args([]))
        assert config == RunConfig()
        assert config.starter_url == Constants.STARTER_URL
        assert config.boot_url == Constants.BOOT_URL
        assert config.type_id == "maven-build"
        assert config.output == "stdout"
        assert config.dependencies == ()

    def test_cli_values(self):
        config = build_config(parse_args(["-b", "~3.x", "-d", "web", "-d", "native,devtools", "-k"]))
        assert config.boot_version == "~3.x"
        assert config.dependencies == ("web", "native,devtools")
        assert config.insecure is True
        assert config.verbose is False

    def test_config_file(self, tmp_path):
        path = tmp_path / "spring-version.yml"
        path.write_text(
            "boot_version: 3.1\n"
            "dependencies: [web, devtools]\n"
            "insecure: true\n"
            "timeout: 10\n"
            "output: github\n",
            encoding="utf-8",
        )
        config = build_config(parse_args(["-c", str(path)]))
        assert config.boot_version == "3.1"
        assert config.dependencies == ("web", "devtools")
        assert config.insecure is True
        assert config.timeout == 10.0
        assert config.output == "github"

    def test_cli_overrides_config_file(self, tmp_path):
        path = tmp_path / "spring-version.yml"
        path.write_text("boot_version: '2.7.x'\ndependencies: web\nverbose: false\n", encoding="utf-8")
        config = build_config(parse_args(["-c", str(path), "-b", "3.1.5", "-d", "native", "-v"]))
        assert config.boot_version == "3.1.5"
        assert config.dependencies == ("native",)
        assert config.verbose is True

    def test_empty_config_file(self, tmp_path):
        path = tmp_path / "empty.yml"
        path.write_text("", encoding="utf-8")
        assert load_config_file(str(path)) == {}


class TestConfigErrors:
    """Malformed configuration files are reported, not ignored."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            load_config_file(str(tmp_path / "nope.yml"))

    @pytest.mark.parametrize("body", [
        "- just\n- a list\n",
        "colour: blue\n",
        "insecure: maybe\n",
        "timeout: 0\n",
        "dependencies: {web: 1}\n",
        "boot_version: [1, 2]\n",
        "boot_version: [unclosed\n",
    ])
    def test_invalid_content(self, tmp_path, body):
        path = tmp_path / "bad.yml"
        path.write_text(body, encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config_file(str(path))
