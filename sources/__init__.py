# -*- coding: utf-8 -*-
"""
Sources Package - image search services
"""

from .base import BaseImageSource, ImageResult
from .contextual_queries import CONTEXTUAL_QUERIES, contextual_query
from .unsplash import UnsplashSource

__all__ = [
    "BaseImageSource",
    "ImageResult",
    "CONTEXTUAL_QUERIES",
    "contextual_query",
    "UnsplashSource",
]
