"""RSS feed fetcher."""

import asyncio
import logging
from datetime import datetime
from typing import List, Optional

import httpx
import pendulum
from rich.console import Console

from ..config import FetchConfig, SourceConfig
from ..exceptions import FeedFetchError
from .models import FeedResult
from .rss_parser import parse_feed

logger = logging.getLogger(__name__)
console = Console()


class RSSFetcher:
    """Fetch and parse RSS feeds, isolating failures per feed."""

    def __init__(
        self,
        config: Optional[FetchConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Initialize RSS fetcher.

        Args:
            config: Fetch settings (timeout, concurrency, item cap)
            transport: Optional httpx transport, used to stub the network
        """
        self.config = config or FetchConfig()
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.config.timeout,
            follow_redirects=True,
            headers={"User-Agent": self.config.user_agent},
            transport=self.transport,
        )

    async def download(self, client: httpx.AsyncClient, url: str) -> str:
        """Fetch a feed body, raising FeedFetchError on any transport problem."""
        try:
            response = await client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise FeedFetchError(f"HTTP {e.response.status_code} for {url}") from e
        except httpx.TimeoutException as e:
            raise FeedFetchError(f"Request timed out: {url}") from e
        except httpx.HTTPError as e:
            raise FeedFetchError(f"HTTP error for {url}: {e}") from e
        return response.text

    async def fetch_feed(
        self,
        source: SourceConfig,
        client: Optional[httpx.AsyncClient] = None,
        now: Optional[datetime] = None,
    ) -> FeedResult:
        """Fetch and parse a single RSS feed. Never raises."""
        now = now or pendulum.now("UTC")
        try:
            if client is None:
                async with self._client() as own_client:
                    body = await self.download(own_client, source.url)
            else:
                body = await self.download(client, source.url)

            items = parse_feed(
                body,
                source.url,
                now=now,
                max_items=self.config.max_items_per_feed,
            )
        except FeedFetchError as e:
            logger.warning("Error fetching %s: %s", source.url, e)
            return FeedResult(
                source_name=source.name,
                source_url=source.url,
                success=False,
                error=str(e),
            )
        except Exception as e:
            logger.warning("Error processing %s: %s", source.url, e)
            return FeedResult(
                source_name=source.name,
                source_url=source.url,
                success=False,
                error=f"Unexpected error: {e}",
            )

        logger.debug("Parsed %d items from %s", len(items), source.url)
        return FeedResult(
            source_name=source.name,
            source_url=source.url,
            success=True,
            items=items,
            item_count=len(items),
        )

    async def fetch_all_feeds(
        self,
        sources: List[SourceConfig],
        now: Optional[datetime] = None,
    ) -> List[FeedResult]:
        """
        Fetch all feeds, at most ``max_concurrent`` at a time.

        Results come back in the order of ``sources``.
        """
        enabled_sources = [s for s in sources if s.enabled]

        if not enabled_sources:
            return []

        now = now or pendulum.now("UTC")
        semaphore = asyncio.Semaphore(self.config.max_concurrent)

        async with self._client() as client:

            async def fetch_with_semaphore(source: SourceConfig) -> FeedResult:
                async with semaphore:
                    return await self.fetch_feed(source, client=client, now=now)

            if self.config.max_concurrent == 1:
                return [await fetch_with_semaphore(source) for source in enabled_sources]

            tasks = [fetch_with_semaphore(source) for source in enabled_sources]
            return list(await asyncio.gather(*tasks))

    def fetch_feeds_sync(self, sources: List[SourceConfig]) -> List[FeedResult]:
        """Synchronous wrapper for fetch_all_feeds."""
        return asyncio.run(self.fetch_all_feeds(sources))


def print_feed_summary(results: List[FeedResult]) -> None:
    """Print summary of feed fetch results."""
    total_items = sum(r.item_count for r in results)
    successful = sum(1 for r in results if r.success)
    failed = len(results) - successful

    console.print("\n[bold]RSS Feed Summary:[/bold]")
    console.print(f"  Sources fetched: {len(results)}")
    console.print(f"  Successful: [green]{successful}[/green]")
    console.print(f"  Failed: [red]{failed}[/red]")
    console.print(f"  Total items: {total_items}")

    if failed > 0:
        console.print("\n[bold red]Failed feeds:[/bold red]")
        for result in results:
            if not result.success:
                console.print(f"  - {result.source_name}: {result.error}")
