# -*- coding: utf-8 -*-
"""
Base Source Protocol - the image source interface

Defines what every image source provides:
1. Data structure: ImageResult (outcome of one download)
2. Interface: BaseImageSource (abstract base class)
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional
from abc import ABC, abstractmethod


@dataclass
class ImageResult:
    """Outcome of downloading one image

    Attributes:
        success: whether the image was written
        file_path: path of the written file (on success)
        error: error description (on failure)
        logs: step log lines, for diagnosis
    """
    success: bool
    file_path: Optional[Path] = None
    error: Optional[str] = None
    logs: List[str] = field(default_factory=list)

    def __post_init__(self):
        if self.success and not self.file_path:
            raise ValueError("success=True requires file_path")
        if not self.success and not self.error:
            self.error = "Unknown error"

    @classmethod
    def ok(cls, file_path: Path, logs: List[str] = None) -> "ImageResult":
        return cls(success=True, file_path=file_path, logs=logs or [])

    @classmethod
    def fail(cls, error: str, logs: List[str] = None) -> "ImageResult":
        return cls(success=False, error=error, logs=logs or [])


class BaseImageSource(ABC):
    """Base class for image search services

    Conventions:
    1. Every network call has a timeout
    2. Service failures are reported through return values, not exceptions
    """

    source_id: str = None
    source_name: str = None

    @abstractmethod
    def search(self, query: str) -> Optional[List[str]]:
        """Search images

        Args:
            query: free-text search phrase

        Returns:
            image URLs of the first result page ([] when nothing matched),
            or None when the service call failed
        """
        pass

    @abstractmethod
    def download(self, url: str, target: Path) -> ImageResult:
        """Download one image

        Args:
            url: image URL returned by search()
            target: file to write

        Returns:
            ImageResult; network and file errors are captured in it
        """
        pass

    def __repr__(self):
        return f"{self.__class__.__name__}({self.source_id})"
