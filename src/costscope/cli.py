import argparse

from costscope.config import Config


def _non_negative_int(value: "str") -> "int":
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def parse_args(argv: "list[str] | None" = None) -> "Config":
    parser = argparse.ArgumentParser(
        prog="costscope",
        description="Interactive explorer for cloud cost and usage data",
    )
    parser.add_argument(
        "--http.timeout",
        dest="request_timeout",
        type=float,
        default=10.0,
        help="Per-request timeout in seconds (default: 10)",
    )
    parser.add_argument(
        "--query.top-n",
        dest="top_n",
        type=_non_negative_int,
        default=10,
        help="Entries shown by the cost and consumed quantity commands (default: 10)",
    )
    parser.add_argument(
        "--log.level",
        dest="log_level",
        default="warning",
        choices=["debug", "info", "warning", "error"],
        help="Log level (default: warning)",
    )
    parser.add_argument(
        "--metrics.textfile",
        dest="metrics_textfile",
        default=None,
        help="Write Prometheus metrics to this file on exit",
    )

    args = parser.parse_args(argv)
    config = Config.from_env()
    config.request_timeout = args.request_timeout
    config.top_n = args.top_n
    config.log_level = args.log_level
    # the flag overrides COSTSCOPE_METRICS_TEXTFILE only when given
    if args.metrics_textfile is not None:
        config.metrics_textfile = args.metrics_textfile
    return config
