"""
Table Order Service — Load-testing client

Each worker picks a random table (1–100) and menu (1–10), then walks one
order through its whole life against a running server:
  create → list → detail → delete
"""
import asyncio
import logging
import random
from dataclasses import dataclass, field

import httpx
from pydantic_settings import BaseSettings, SettingsConfigDict

from table_order.core.logging import configure_logging
from table_order.services.validation import MENU_ID_MAX, MENU_ID_MIN, TABLE_NUMBER_MAX, TABLE_NUMBER_MIN

logger = logging.getLogger(__name__)


class LoadTestSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    SERVER_BASE_URL: str = "http://localhost:8080"
    CLIENT_THREAD_COUNT: int = 10
    HTTP_TIMEOUT_SECONDS: float = 10.0
    LOG_LEVEL: str = "INFO"


@dataclass
class LoadTestReport:
    completed: int = 0
    failed: int = 0
    status_counts: dict[str, int] = field(default_factory=dict)

    def record(self, step: str, status_code: int) -> None:
        key = f"{step} {status_code}"
        self.status_counts[key] = self.status_counts.get(key, 0) + 1


def order_url(base_url: str, table_number: int, order_id: int | None = None) -> str:
    url = f"{base_url.rstrip('/')}/table/{table_number}/order"
    if order_id is not None:
        url = f"{url}/{order_id}"
    return url


async def walk_order(
    client: httpx.AsyncClient,
    base_url: str,
    table_number: int,
    menu_id: int,
    report: LoadTestReport,
) -> None:
    r = await client.post(order_url(base_url, table_number), json={"menu_id": menu_id})
    report.record("create", r.status_code)
    r.raise_for_status()
    order_id = r.json()["order"]["order_id"]
    logger.info("create order, status %s, order ID = %s", r.status_code, order_id)

    r = await client.get(order_url(base_url, table_number))
    report.record("list", r.status_code)
    logger.info("list orders by table %s, status %s, response %s", table_number, r.status_code, r.text)

    r = await client.get(order_url(base_url, table_number, order_id))
    report.record("detail", r.status_code)
    logger.info("get order detail by ID %s, status %s, response %s", order_id, r.status_code, r.text)

    r = await client.delete(order_url(base_url, table_number, order_id))
    report.record("delete", r.status_code)
    logger.info("delete order ID %s, status %s", order_id, r.status_code)


async def run_load_test(
    settings: LoadTestSettings,
    transport: httpx.AsyncBaseTransport | None = None,
    rng: random.Random | None = None,
) -> LoadTestReport:
    rng = rng or random.Random()
    report = LoadTestReport()

    async def worker(client: httpx.AsyncClient) -> None:
        table_number = rng.randint(TABLE_NUMBER_MIN, TABLE_NUMBER_MAX)
        menu_id = rng.randint(MENU_ID_MIN, MENU_ID_MAX)
        try:
            await walk_order(client, settings.SERVER_BASE_URL, table_number, menu_id, report)
        except (httpx.HTTPError, KeyError, ValueError) as exc:
            report.failed += 1
            logger.error("table %s, menu %s: %r", table_number, menu_id, exc)
        else:
            report.completed += 1

    async with httpx.AsyncClient(timeout=settings.HTTP_TIMEOUT_SECONDS, transport=transport) as client:
        await asyncio.gather(*(worker(client) for _ in range(settings.CLIENT_THREAD_COUNT)))

    return report


def main() -> None:
    settings = LoadTestSettings()
    configure_logging(settings.LOG_LEVEL)
    report = asyncio.run(run_load_test(settings))
    logger.info(
        "Load test finished: %d completed, %d failed, %s",
        report.completed, report.failed, report.status_counts,
    )


if __name__ == "__main__":
    main()
