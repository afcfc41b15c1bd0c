"""Print completion stats for one batch using the local progress cache."""
import sys
import asyncio

from smarterz.aggregator import AggregationError, aggregate_batch
from smarterz.config import load_settings
from smarterz.progress import JsonFileProgressStore
from smarterz.report import build_report
from smarterz.upstream import EduverseClient


async def report(batch_id):
    settings = load_settings()
    client = EduverseClient(settings.api_base)
    try:
        result = await aggregate_batch(client, batch_id)
    except AggregationError as e:
        print(f"❌ {e}")
        sys.exit(1)
    finally:
        await client.aclose()

    if result.failures:
        print(f"⚠️ {len(result.failures)} content lists could not be fetched and are left out.\n")

    completed = JsonFileProgressStore(settings.cache_file).read()
    print(build_report(batch_id, result.items, completed))


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python scripts/progress_report.py <batch_id>")
        sys.exit(1)
    asyncio.run(report(sys.argv[1]))
