"""Alfred snippet pack (zip archive) writer."""
import json
import logging
import zipfile
from pathlib import Path
from typing import Optional, Set, Union

from alfred_emoji.transforms.snippets import Snippet
from alfred_emoji.utils import SnippetStoreError

logger = logging.getLogger(__name__)


class SnippetArchive:
    """
    Writes snippets as individual JSON files into a single zip archive.

    The archive moves through three states: unopened, open, and finalized.
    Entries can only be stored while it is open. Closing writes the central
    directory and releases the output file; it is safe to call twice.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._fp = None
        self._zip: Optional[zipfile.ZipFile] = None
        self._names: Set[str] = set()
        self.finalized = False

    @property
    def is_open(self) -> bool:
        return self._zip is not None

    def open(self) -> 'SnippetArchive':
        """
        Create the output file, replacing any existing one.

        Raises:
            OSError: If the file cannot be created
        """
        if self.is_open or self.finalized:
            raise SnippetStoreError(f"archive {self.path} was already opened")
        self._fp = open(self.path, 'wb')
        try:
            self._zip = zipfile.ZipFile(self._fp, mode='w', compression=zipfile.ZIP_DEFLATED)
        except Exception:
            self._fp.close()
            self._fp = None
            raise
        logger.info(f"Writing snippets to {self.path}")
        return self

    def store(self, snippet: Snippet) -> None:
        """
        Add one snippet as "<name> [<uid>].json".

        The output file is flushed after the entry so a later failure does
        not affect bytes already committed.

        Raises:
            SnippetStoreError: If the entry cannot be created, encoded or written
        """
        if not self.is_open:
            raise SnippetStoreError("cannot create file in zip: archive is not open")

        name = snippet.entry_name
        if name in self._names:
            raise SnippetStoreError(f"cannot create file in zip: duplicate entry {name}")

        try:
            payload = (json.dumps(snippet.to_document(), ensure_ascii=False) + '\n').encode('utf-8')
        except (TypeError, ValueError, UnicodeEncodeError) as e:
            raise SnippetStoreError(f"cannot write file in zip: {e}") from e

        try:
            self._zip.writestr(name, payload)
        except (OSError, ValueError, zipfile.LargeZipFile) as e:
            raise SnippetStoreError(f"cannot write file in zip: {e}") from e
        self._names.add(name)

        try:
            self._fp.flush()
        except OSError as e:
            raise SnippetStoreError(f"cannot flush after file creation in zip: {e}") from e

    def close(self) -> None:
        """Write the archive index and close the output file."""
        if self.finalized:
            return
        try:
            if self._zip is not None:
                self._zip.close()
        finally:
            self._zip = None
            if self._fp is not None:
                self._fp.close()
                self._fp = None
            self.finalized = True

    def __enter__(self) -> 'SnippetArchive':
        if not self.is_open:
            self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
