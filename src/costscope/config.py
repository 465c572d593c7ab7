import os
from dataclasses import dataclass

from costscope.fetcher.http import APPLICATIONS_URL, RAW_URL, RESOURCES_URL


@dataclass
class Config:
    raw_url: "str" = RAW_URL
    applications_url: "str" = APPLICATIONS_URL
    resources_url: "str" = RESOURCES_URL
    # per-request timeout in seconds
    request_timeout: "float" = 10.0
    # number of entries shown by the ranking commands
    top_n: "int" = 10
    log_level: "str" = "warning"
    # path for the Prometheus textfile, empty disables it
    metrics_textfile: "str" = ""

    @classmethod
    def from_env(cls) -> "Config":
        return cls(
            raw_url=os.environ.get("COSTSCOPE_RAW_URL") or RAW_URL,
            applications_url=(
                os.environ.get("COSTSCOPE_APPLICATIONS_URL") or APPLICATIONS_URL
            ),
            resources_url=os.environ.get("COSTSCOPE_RESOURCES_URL") or RESOURCES_URL,
            metrics_textfile=os.environ.get("COSTSCOPE_METRICS_TEXTFILE", ""),
        )

    @property
    def metrics_enabled(self) -> "bool":
        return bool(self.metrics_textfile)
