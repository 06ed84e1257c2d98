import asyncio
import dataclasses
import warnings
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, Optional, Union

from bs4 import BeautifulSoup, ParserRejectedMarkup

from linkpreview.common.http_utils import get_request
from linkpreview.common.text import clean_text
from linkpreview.config import PreviewConfig
from linkpreview.logging import get_logger
from linkpreview.model.preview_state import PreviewData, PreviewState

logger = get_logger(__name__)


def parse_document(body: Union[bytes, str]) -> BeautifulSoup:
    """
    Parse a response body into a traversable tree.

    Uses the forgiving ``html.parser`` backend; broken markup gives a best-effort
    tree, parser warnings are silenced and rejected markup gives an empty tree.
    """
    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        try:
            return BeautifulSoup(body, "html.parser")
        except ParserRejectedMarkup as e:
            logger.debug(f"Markup rejected by parser, using empty document: {e}")
            return BeautifulSoup("", "html.parser")


def collect_meta_tags(document: BeautifulSoup) -> Dict[str, str]:
    """
    Map every <meta> identifier to its content, in document order.

    The identifier is the ``name`` attribute, or ``property`` when ``name`` is
    missing or empty. Later tags overwrite earlier ones with the same identifier.
    """
    meta: Dict[str, str] = {}
    for tag in document.find_all("meta"):
        name = tag.get("name") or tag.get("property")
        if name:
            meta[name] = tag.get("content") or ""
    return meta


def _node_text(document: BeautifulSoup, tag_name: str) -> str:
    node = document.find(tag_name)
    if node is None:
        return ""
    return node.get_text()


class LinkPreview:
    """
    Fetches a page and reads its link preview facts.

    Title, description, canonical URL and image come from Open Graph tags first,
    falling back to plain meta tags and the document structure. Accessors never
    raise; before the first successful fetch they return empty values.
    """

    def __init__(self, url: Optional[str] = None, config: Optional[PreviewConfig] = None):
        """
        Args:
            url: Page to preview. When given, it is fetched right away.
            config: Fetch settings, defaults to ``PreviewConfig()``
        """
        self.config = config or PreviewConfig()
        self.logger = get_logger(self.__class__.__name__)
        self._state = PreviewState(url=url)

        if url:
            self.fetch()

    @property
    def state(self) -> PreviewState:
        return self._state

    def fetch(self, url: Optional[str] = None) -> bool:
        """
        Fetch and parse the document, blocking until done.

        Inside a running event loop the request runs on a worker thread with its
        own loop, so the call still blocks and returns a bool.

        Args:
            url: URL to fetch; replaces the stored URL

        Returns:
            True on transport success, False otherwise
        """
        if url:
            self._state.url = url
        if not self._state.url:
            return False

        try:
            asyncio.get_running_loop()
        except RuntimeError:
            return asyncio.run(self.afetch())

        with ThreadPoolExecutor(max_workers=1) as executor:
            return executor.submit(asyncio.run, self.afetch()).result()

    async def afetch(self, url: Optional[str] = None) -> bool:
        """Coroutine version of `fetch` for callers already running an event loop."""
        if url:
            self._state.url = url
        if not self._state.url:
            return False

        target = self._state.url
        self.logger.debug(f"Fetching {target} (timeout {self.config.timeout}s)")

        body = await get_request(
            target,
            timeout=self.config.timeout,
            headers=self.config.headers(),
            max_redirects=self.config.max_redirects,
            allow_private_hosts=self.config.allow_private_hosts,
        )
        if body is None:
            self.logger.warning(f"Fetch failed for {target}, keeping previous preview data")
            return False

        document = parse_document(body)
        meta = collect_meta_tags(document)
        self._state = dataclasses.replace(self._state, document=document, meta=meta)

        self.logger.debug(f"Parsed {target}: {len(meta)} meta tags")
        return True

    def title(self) -> str:
        """
        Get the document title.

        Returns the first value found:
        1) og:title meta tag
        2) <title> text
        3) text of the first <h1>

        Empty string if nothing is found or nothing has been fetched yet.
        """
        state = self._state
        if not state.is_fetched:
            return ""

        title = state.get_meta("og:title")
        if not title:
            title = _node_text(state.document, "title")
        if not title:
            title = _node_text(state.document, "h1")

        return clean_text(title)

    def description(self) -> str:
        """Get og:description, falling back to the description meta tag."""
        state = self._state
        if not state.is_fetched:
            return ""

        description = state.get_meta("og:description") or state.get_meta("description")
        return clean_text(description)

    def url(self) -> str:
        """Get og:url, falling back to the URL used for the request."""
        return self._state.get_meta("og:url") or self._state.url or ""

    def has_image(self) -> bool:
        return bool(self._state.get_meta("og:image"))

    def image_src(self) -> str:
        return self._state.get_meta("og:image")

    def preview(self) -> PreviewData:
        return PreviewData(
            title=self.title(),
            description=self.description(),
            url=self.url(),
            image=self.image_src(),
        )

    def __repr__(self) -> str:
        return f"LinkPreview(url={self._state.url}, fetched={self._state.is_fetched})"
