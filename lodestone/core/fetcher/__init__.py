"""Fetcher exports."""

from lodestone.core.fetcher.base import PageFetcher
from lodestone.core.fetcher.simple import SimpleFetcher

__all__ = ['PageFetcher', 'SimpleFetcher']
