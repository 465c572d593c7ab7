import asyncio
import time
from typing import Callable, TypeVar

import structlog

from costscope.dataset import Dataset
from costscope.decoder import decode_name_list, decode_usage_records
from costscope.errors import MalformedDataError, NetworkError
from costscope.fetcher.base import Fetcher
from costscope.metrics import LoadMetrics

logger = structlog.get_logger()

T = TypeVar("T")


class DataLoader:
    """
    DataLoader is responsible for fetching the raw usage,
    applications and resources endpoints and decoding them into
    a Dataset. Loading is all-or-nothing: any fetch or decode
    failure propagates and no partial Dataset is produced.
    """

    def __init__(
        self,
        fetcher: "Fetcher",
        raw_url: "str",
        applications_url: "str",
        resources_url: "str",
        metrics: "LoadMetrics | None" = None,
    ) -> "None":
        self._fetcher = fetcher
        self._urls: "dict[str, str]" = {
            "raw": raw_url,
            "applications": applications_url,
            "resources": resources_url,
        }
        self._metrics = metrics or LoadMetrics()

    async def load(self) -> "Dataset":
        """
        fetches all three endpoints concurrently, then decodes them.
        The first fetch failure cancels the remaining fetches and waits
        for them before it propagates.
        """
        tasks = [
            asyncio.create_task(self._fetch(name, url))
            for name, url in self._urls.items()
        ]
        try:
            raw_text, apps_text, res_text = await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            # collect the cancelled and late-failing fetches
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

        records = self._decode("raw", decode_usage_records, raw_text)
        applications = self._decode("applications", decode_name_list, apps_text)
        resources = self._decode("resources", decode_name_list, res_text)

        dataset = Dataset.build(records, applications, resources)
        logger.info(
            "dataset_loaded",
            records=len(dataset.records),
            applications=len(dataset.applications),
            resources=len(dataset.resources),
        )
        return dataset

    async def _fetch(self, endpoint: "str", url: "str") -> "str":
        started = time.monotonic()
        try:
            return await self._fetcher.fetch(url)
        except NetworkError as exc:
            logger.error("fetch_failed", endpoint=endpoint, error=str(exc))
            self._metrics.inc_load_error(endpoint, "fetch")
            raise
        finally:
            self._metrics.observe_fetch_duration(endpoint, time.monotonic() - started)

    def _decode(
        self,
        endpoint: "str",
        decode: "Callable[[str], list[T]]",
        text: "str",
    ) -> "list[T]":
        try:
            items = decode(text)
        except MalformedDataError as exc:
            logger.error("decode_failed", endpoint=endpoint, error=exc.reason)
            self._metrics.inc_load_error(endpoint, "decode")
            # tag the error with the endpoint it came from
            raise MalformedDataError(exc.reason, source=endpoint) from exc

        logger.debug("decode_done", endpoint=endpoint, count=len(items))
        self._metrics.set_records_loaded(endpoint, len(items))
        return items
