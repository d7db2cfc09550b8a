"""Search results, search tab state, option-list editing and widget logic for a media downloader."""

__version__ = "0.1.0"