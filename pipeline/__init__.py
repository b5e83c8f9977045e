"""Emoji snippet pack pipeline package."""
from .fetcher import RegistryFetcher
from .archive import SnippetArchive
from .processing import process_records, run_pipeline

__all__ = ['RegistryFetcher', 'SnippetArchive', 'process_records', 'run_pipeline']
