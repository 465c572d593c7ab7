import pytest

from costscope.cli import parse_args
from costscope.config import Config
from costscope.fetcher.http import APPLICATIONS_URL, RAW_URL, RESOURCES_URL

ENV_VARS = (
    "COSTSCOPE_RAW_URL",
    "COSTSCOPE_APPLICATIONS_URL",
    "COSTSCOPE_RESOURCES_URL",
    "COSTSCOPE_METRICS_TEXTFILE",
)


@pytest.fixture()
def clean_env(monkeypatch: "pytest.MonkeyPatch") -> "pytest.MonkeyPatch":
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestConfigFromEnv:
    def test_defaults(self, clean_env: "pytest.MonkeyPatch") -> "None":
        config = Config.from_env()
        assert config.raw_url == RAW_URL
        assert config.applications_url == APPLICATIONS_URL
        assert config.resources_url == RESOURCES_URL
        assert config.metrics_textfile == ""

    def test_reads_env_vars(self, clean_env: "pytest.MonkeyPatch") -> "None":
        clean_env.setenv("COSTSCOPE_RAW_URL", "http://localhost/raw")
        clean_env.setenv("COSTSCOPE_APPLICATIONS_URL", "http://localhost/apps")
        clean_env.setenv("COSTSCOPE_RESOURCES_URL", "http://localhost/res")
        clean_env.setenv("COSTSCOPE_METRICS_TEXTFILE", "/tmp/costscope.prom")
        config = Config.from_env()
        assert config.raw_url == "http://localhost/raw"
        assert config.applications_url == "http://localhost/apps"
        assert config.resources_url == "http://localhost/res"
        assert config.metrics_textfile == "/tmp/costscope.prom"

    def test_empty_url_falls_back_to_default(
        self, clean_env: "pytest.MonkeyPatch"
    ) -> "None":
        clean_env.setenv("COSTSCOPE_RAW_URL", "")
        assert Config.from_env().raw_url == RAW_URL


class TestMetricsEnabled:
    def test_enabled_when_path_set(self) -> "None":
        assert Config(metrics_textfile="/tmp/m.prom").metrics_enabled is True

    def test_disabled_when_path_empty(self) -> "None":
        assert Config().metrics_enabled is False


class TestParseArgs:
    def test_defaults(self, clean_env: "pytest.MonkeyPatch") -> "None":
        config = parse_args([])
        assert config.request_timeout == 10.0
        assert config.top_n == 10
        assert config.log_level == "warning"
        assert config.metrics_textfile == ""

    def test_flags_override(self, clean_env: "pytest.MonkeyPatch") -> "None":
        clean_env.setenv("COSTSCOPE_METRICS_TEXTFILE", "/tmp/env.prom")
        config = parse_args(
            [
                "--http.timeout",
                "2.5",
                "--query.top-n",
                "3",
                "--log.level",
                "debug",
                "--metrics.textfile",
                "/tmp/flag.prom",
            ]
        )
        assert config.request_timeout == 2.5
        assert config.top_n == 3
        assert config.log_level == "debug"
        assert config.metrics_textfile == "/tmp/flag.prom"

    def test_env_textfile_kept_without_flag(
        self, clean_env: "pytest.MonkeyPatch"
    ) -> "None":
        clean_env.setenv("COSTSCOPE_METRICS_TEXTFILE", "/tmp/env.prom")
        assert parse_args([]).metrics_textfile == "/tmp/env.prom"

    def test_rejects_negative_top_n(self, clean_env: "pytest.MonkeyPatch") -> "None":
        with pytest.raises(SystemExit):
            parse_args(["--query.top-n", "-1"])
