from pathlib import Path

from prometheus_client import CollectorRegistry

from costscope.metrics import LoadMetrics


class TestLoadMetrics:
    def test_metrics_are_created(self, registry: "CollectorRegistry") -> "None":
        LoadMetrics(registry=registry)
        # prometheus_client strips _total suffix from Counter family names
        metric_names = [m.name for m in registry.collect()]
        assert "costscope_fetch_duration_seconds" in metric_names
        assert "costscope_load_errors" in metric_names
        assert "costscope_records_loaded" in metric_names
        assert "costscope_commands" in metric_names

    def test_metrics_update(
        self,
        metrics: "LoadMetrics",
        registry: "CollectorRegistry",
    ) -> "None":
        metrics.observe_fetch_duration("raw", 0.5)
        metrics.inc_load_error("raw", "fetch")
        metrics.set_records_loaded("applications", 12)

        assert (
            registry.get_sample_value(
                "costscope_fetch_duration_seconds_sum", {"endpoint": "raw"}
            )
            == 0.5
        )
        assert (
            registry.get_sample_value(
                "costscope_load_errors_total", {"endpoint": "raw", "stage": "fetch"}
            )
            == 1.0
        )
        assert (
            registry.get_sample_value(
                "costscope_records_loaded", {"endpoint": "applications"}
            )
            == 12.0
        )

    def test_unknown_commands_share_a_label(
        self,
        metrics: "LoadMetrics",
        registry: "CollectorRegistry",
    ) -> "None":
        metrics.inc_command("consumed quantity")
        metrics.inc_command("foo")
        metrics.inc_command("Cost")

        assert (
            registry.get_sample_value(
                "costscope_commands_total", {"command": "consumed quantity"}
            )
            == 1.0
        )
        assert (
            registry.get_sample_value(
                "costscope_commands_total", {"command": "unknown"}
            )
            == 2.0
        )

    def test_write_textfile(self, metrics: "LoadMetrics", tmp_path: "Path") -> "None":
        metrics.set_records_loaded("raw", 3)
        path = tmp_path / "costscope.prom"

        metrics.write(str(path))

        assert 'costscope_records_loaded{endpoint="raw"} 3.0' in path.read_text()
