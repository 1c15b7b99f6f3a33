"""
Resolving a stock symbol to page text with optional chaining.

Each step can come up empty: the symbol may be unknown, the page may be
missing, the bytes may not decode. Any empty step ends the chain with None.
Pages are served from an in-memory mapping rather than fetched over the
network.
"""

from html.parser import HTMLParser
from typing import Callable, Dict, Mapping, Optional
from urllib.parse import urlparse

from function_composition.config import DEFAULT_COMPANIES, DEFAULT_PAGES
from function_composition.core import pipe_optional, tap
from function_composition.utils import printer


def url_for_company(symbol: str, companies: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Return the absolute http(s) URL for `symbol`, or None."""
    companies = DEFAULT_COMPANIES if companies is None else companies
    path = companies.get(symbol)
    if path is None:
        return None
    parsed = urlparse(path)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        return None
    return path


def make_page_fetcher(pages: Mapping[str, str]) -> Callable[[str], Optional[bytes]]:
    """Build a fetch step returning the UTF-8 bytes stored for a URL, or None."""

    def data_from_url(url: str) -> Optional[bytes]:
        page = pages.get(url)
        if page is None:
            return None
        return page.encode("utf-8")

    return data_from_url


class _TextExtractor(HTMLParser):
    _SKIP = {"script", "style"}

    def __init__(self):
        super().__init__()
        self.chunks = []
        self._skipping = 0

    def handle_starttag(self, tag, attrs):
        if tag in self._SKIP:
            self._skipping += 1

    def handle_endtag(self, tag):
        if tag in self._SKIP and self._skipping:
            self._skipping -= 1

    def handle_data(self, data):
        if not self._skipping:
            self.chunks.append(data)


def text_from_html(data: bytes) -> Optional[str]:
    """
    Extract the visible text of an HTML document.

    Returns None if `data` is not valid UTF-8 or holds no text.
    """
    try:
        markup = data.decode("utf-8")
    except UnicodeDecodeError:
        return None
    extractor = _TextExtractor()
    extractor.feed(markup)
    extractor.close()
    text = " ".join(" ".join(extractor.chunks).split())
    return text or None


def make_company_resolver(
    companies: Optional[Mapping[str, str]] = None,
    pages: Optional[Dict[str, str]] = None,
    fetch: Optional[Callable[[str], Optional[bytes]]] = None,
    verbose: bool = False,
) -> Callable[[str], Optional[str]]:
    """
    Build the symbol -> page text chain.

    Parameters:
    -----------
    companies : mapping, optional
        Symbol -> URL map, defaults to AAPL, GOOGL and MSFT
    pages : dict, optional
        URL -> HTML map used when `fetch` is not given
    fetch : callable, optional
        URL -> bytes or None; replaces the in-memory page store
    verbose : bool
        Print the result of every step that runs

    Returns:
    --------
    callable
        symbol -> text or None
    """
    if fetch is None:
        fetch = make_page_fetcher(DEFAULT_PAGES if pages is None else pages)

    def lookup(symbol: str) -> Optional[str]:
        return url_for_company(symbol, companies)

    steps = [("url", lookup), ("data", fetch), ("text", text_from_html)]
    if verbose:
        return pipe_optional(*(tap(step, printer(label)) for label, step in steps))
    return pipe_optional(*(step for _, step in steps))
