"""Emoji snippet pack pipeline: fetch, parse, build, store."""
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from alfred_emoji.transforms.parser import parse_lines
from alfred_emoji.transforms.snippets import build_snippet
from alfred_emoji.utils import SnippetStoreError
from alfred_emoji.version import UNICODE_VERSION, get_archive_name, get_registry_url

from .archive import SnippetArchive
from .fetcher import RegistryFetcher

logger = logging.getLogger(__name__)


def process_records(lines: Iterable[str], archive: SnippetArchive, strip_emoji_version: bool = False) -> None:
    """
    Turn registry lines into archive entries, one at a time and in order.

    A snippet that cannot be stored is logged and skipped. Errors raised
    by the line source propagate to the caller.
    """
    for record in parse_lines(lines, strip_version=strip_emoji_version):
        snippet = build_snippet(record)
        try:
            archive.store(snippet)
        except SnippetStoreError as e:
            logger.error(f"cannot store in zip file ({snippet.name}): {e}")


def run_pipeline(config: Dict[str, Any], fetcher: Optional[RegistryFetcher] = None) -> Path:
    """
    Build the snippet pack for the configured Unicode version.

    The archive is created before the download starts, and both are
    released on every exit path.

    Returns:
        Path of the written archive

    Raises:
        OSError: If the archive file cannot be created
        FetchError: If the registry cannot be downloaded or read
    """
    version = config.get('unicode_version', UNICODE_VERSION)
    archive_path = Path(config.get('output_dir', '.')) / get_archive_name(version)
    fetcher = fetcher or RegistryFetcher(timeout=config.get('http_timeout'))

    with SnippetArchive(archive_path) as archive:
        with fetcher.open_lines(get_registry_url(version)) as lines:
            process_records(lines, archive, strip_emoji_version=config.get('strip_emoji_version', False))

    logger.info(f"Snippet pack written to {archive_path}")
    return archive_path
