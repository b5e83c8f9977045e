"""Unicode emoji registry download over HTTP."""
import logging
from contextlib import contextmanager
from typing import Iterator, Optional

import requests

from alfred_emoji.utils import FetchError

logger = logging.getLogger(__name__)


class RegistryFetcher:
    """Streams emoji-test.txt from unicode.org, one line at a time."""

    def __init__(self, timeout: Optional[float] = None, session: Optional[requests.Session] = None):
        self.timeout = timeout
        self.session = session or requests.Session()
        self.headers = {
            'Accept': 'text/plain',
            'User-Agent': 'AlfredEmojiPack/1.0 Python/requests'
        }

    @contextmanager
    def open_lines(self, url: str) -> Iterator[Iterator[str]]:
        """
        Open the registry and yield an iterator over its decoded lines.

        A single GET is issued, with no retry. The response is closed when
        the block exits, whether normally or through an exception.

        Raises:
            FetchError: If the request fails, the server answers with a
                non-success status, or the body cannot be read
        """
        logger.info(f"Downloading emoji registry from {url}")
        try:
            response = self.session.get(url, headers=self.headers, stream=True, timeout=self.timeout)
        except requests.RequestException as e:
            raise FetchError(f"cannot download {url}: {e}") from e

        try:
            try:
                response.raise_for_status()
            except requests.HTTPError as e:
                raise FetchError(f"cannot download {url}: {e}") from e

            # unicode.org does not always declare a charset; the file is UTF-8
            response.encoding = 'utf-8'
            yield self._iter_lines(response)
        finally:
            response.close()

    @staticmethod
    def _iter_lines(response: requests.Response) -> Iterator[str]:
        """Iterate over response lines, turning read failures into FetchError."""
        try:
            for line in response.iter_lines(decode_unicode=True):
                yield line
        except requests.RequestException as e:
            raise FetchError(f"cannot read emoji registry: {e}") from e
