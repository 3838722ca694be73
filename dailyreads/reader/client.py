"""Article reader: clean-reader proxy or local extraction."""

import asyncio
import logging
from typing import Optional, Tuple

import httpx
import trafilatura
from pydantic import BaseModel, Field

from ..config import ReaderConfig
from ..exceptions import ReaderError
from .markdown import markdown_to_html, split_reader_document

logger = logging.getLogger(__name__)


class ReaderDocument(BaseModel):
    """Readable version of an article."""

    url: str = Field(..., description="Article URL")
    title: str = Field("", description="Article title")
    markdown: str = Field(..., description="Markdown body")
    content: str = Field(..., description="HTML fragment rendered from the markdown")


class ReaderClient:
    """Turn an article URL into a reader document."""

    def __init__(
        self,
        config: Optional[ReaderConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize reader client."""
        self.config = config or ReaderConfig()
        self.transport = transport

    def build_proxy_url(self, target_url: str) -> str:
        """Proxy URL that returns ``target_url`` as markdown."""
        return f"{self.config.proxy_base_url.rstrip('/')}/{target_url}"

    async def _get(self, client: httpx.AsyncClient, url: str) -> str:
        try:
            response = await client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ReaderError(f"HTTP {e.response.status_code} for {url}") from e
        except httpx.TimeoutException as e:
            raise ReaderError(f"Request timed out: {url}") from e
        except httpx.HTTPError as e:
            raise ReaderError(f"HTTP error for {url}: {e}") from e
        return response.text

    async def _via_proxy(self, client: httpx.AsyncClient, url: str) -> Tuple[str, str]:
        text = await self._get(client, self.build_proxy_url(url))
        return split_reader_document(text)

    async def _extract_locally(self, client: httpx.AsyncClient, url: str) -> Tuple[str, str]:
        html = await self._get(client, url)

        def extract() -> Tuple[str, Optional[str]]:
            markdown = trafilatura.extract(
                html,
                output_format="markdown",
                include_comments=False,
                include_tables=False,
                favor_precision=True,
                url=url,
            )
            metadata = trafilatura.extract_metadata(html)
            title = metadata.title if metadata and metadata.title else ""
            return title, markdown

        title, markdown = await asyncio.to_thread(extract)
        if not markdown:
            raise ReaderError(f"Failed to extract article content: {url}")
        return title, markdown

    async def read(self, url: str) -> ReaderDocument:
        """Fetch ``url`` through the configured backend and render it."""
        headers = {"User-Agent": self.config.user_agent}
        async with httpx.AsyncClient(
            timeout=self.config.timeout,
            follow_redirects=True,
            headers=headers,
            transport=self.transport,
        ) as client:
            if self.config.backend == "local":
                title, markdown = await self._extract_locally(client, url)
            else:
                title, markdown = await self._via_proxy(client, url)

        logger.debug("Read %s (%d chars)", url, len(markdown))
        return ReaderDocument(
            url=url,
            title=title,
            markdown=markdown,
            content=markdown_to_html(markdown),
        )

    def read_sync(self, url: str) -> ReaderDocument:
        """Synchronous wrapper for read."""
        return asyncio.run(self.read(url))
