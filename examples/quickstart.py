"""Quickstart: list, filter and update records.

Usage:
    AIRQUERY_KEY=pat... AIRQUERY_BASE=app... python examples/quickstart.py Tasks
"""

import asyncio
import logging
import os
import sys

from airquery import API_URL, AirTable

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


async def main(table_name: str) -> None:
    options = {
        "url": API_URL,
        "key": os.environ.get("AIRQUERY_KEY"),
        "base": os.environ.get("AIRQUERY_BASE"),
    }

    async with AirTable(options) as airtable:
        table = airtable.table(table_name)

        count = await table.count()
        logger.info("Table %s has %d records", table_name, count)

        latest = await (
            airtable.table(table_name).order_by("Name", "desc").take(10).delay(0.25).first()
        )
        if latest is None:
            logger.info("No records")
            return
        logger.info("First record by name: %s", latest)

        # Touch every record in chunks of 10
        records = await airtable.table(table_name).get()
        updated = await airtable.table(table_name).typecast(True).patch(
            {record["id"]: {} for record in records}
        )
        logger.info("Patched %d records", len(updated))


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else "Tasks"))
