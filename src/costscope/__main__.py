import asyncio

import structlog

from costscope import repl
from costscope.cli import parse_args
from costscope.config import Config
from costscope.dataset import Dataset
from costscope.errors import CostscopeError
from costscope.fetcher.http import HttpFetcher
from costscope.loader import DataLoader
from costscope.logging import setup_logging
from costscope.metrics import LoadMetrics

logger = structlog.get_logger()


async def load_dataset(config: "Config", metrics: "LoadMetrics") -> "Dataset":
    """
    fetches and decodes all endpoints, closing the HTTP client
    whether or not the load succeeds.
    """
    fetcher = HttpFetcher(timeout=config.request_timeout)
    loader = DataLoader(
        fetcher,
        raw_url=config.raw_url,
        applications_url=config.applications_url,
        resources_url=config.resources_url,
        metrics=metrics,
    )
    try:
        return await loader.load()
    finally:
        await fetcher.close()


def main(argv: "list[str] | None" = None) -> "None":
    config = parse_args(argv)
    setup_logging(config.log_level)
    metrics = LoadMetrics()

    print("Loading...")
    try:
        try:
            dataset = asyncio.run(load_dataset(config, metrics))
        except CostscopeError as exc:
            logger.error("load_failed", error=str(exc))
            raise SystemExit(f"failed to load data: {exc}") from exc

        repl.run(dataset, read_line=input, top_n=config.top_n, metrics=metrics)
    finally:
        if config.metrics_enabled:
            _write_metrics(metrics, config.metrics_textfile)


def _write_metrics(metrics: "LoadMetrics", path: "str") -> "None":
    """
    writes the metrics textfile; a failure is logged and must not
    replace the error or exit status already in flight.
    """
    try:
        metrics.write(path)
    except OSError as exc:
        logger.error("metrics_write_failed", path=path, error=str(exc))
        return
    logger.info("metrics_written", path=path)


if __name__ == "__main__":
    main()
