from prometheus_client import (
    CollectorRegistry,
    Counter,
    Gauge,
    Histogram,
    write_to_textfile,
)

# commands counted under their own label, anything else is "unknown"
KNOWN_COMMANDS = ("cost", "consumed quantity", "applications", "resources", "exit")


class LoadMetrics:
    """
    records load and query statistics in a private registry.

    costscope is a short-lived interactive process, so instead of
    serving the registry over HTTP it can be dumped to a file for
    the node_exporter textfile collector on exit.
    """

    def __init__(self, registry: "CollectorRegistry | None" = None) -> "None":
        self.registry: "CollectorRegistry" = registry or CollectorRegistry()
        self._fetch_duration: "Histogram" = Histogram(
            "costscope_fetch_duration_seconds",
            "Duration of endpoint fetches",
            ["endpoint"],
            registry=self.registry,
        )
        self._load_errors: "Counter" = Counter(
            "costscope_load_errors_total",
            "Total number of load errors by endpoint and stage",
            ["endpoint", "stage"],
            registry=self.registry,
        )
        self._records_loaded: "Gauge" = Gauge(
            "costscope_records_loaded",
            "Number of entries decoded per endpoint",
            ["endpoint"],
            registry=self.registry,
        )
        self._commands: "Counter" = Counter(
            "costscope_commands_total",
            "Total number of commands entered at the prompt",
            ["command"],
            registry=self.registry,
        )

    def observe_fetch_duration(
        self, endpoint: "str", duration_seconds: "float"
    ) -> "None":
        self._fetch_duration.labels(endpoint=endpoint).observe(duration_seconds)

    def inc_load_error(self, endpoint: "str", stage: "str") -> "None":
        self._load_errors.labels(endpoint=endpoint, stage=stage).inc()

    def set_records_loaded(self, endpoint: "str", count: "int") -> "None":
        self._records_loaded.labels(endpoint=endpoint).set(count)

    def inc_command(self, command: "str") -> "None":
        label = command if command in KNOWN_COMMANDS else "unknown"
        self._commands.labels(command=label).inc()

    def write(self, path: "str") -> "None":
        """
        writes the registry in the Prometheus text format to path.
        """
        write_to_textfile(path, self.registry)
