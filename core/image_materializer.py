# -*- coding: utf-8 -*-
"""
Image Materializer - turn the catalog into local image files

Responsibilities:
1. Placeholder mode: write one deterministic placeholder URL per code to a JSON file
2. Live mode: resolve and download one image per code, in catalog order
3. Skip codes whose image file already exists, so a re-run resumes the batch
4. Keep going after any single failure and report the counts at the end

Usage:

```python
config = FetchConfig.from_env()
summary = ImageMaterializer(config).run()
print(summary.format())
```
"""
import json
import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Optional

import requests

from core.catalog import StatusCatalog, get_catalog
from core.error_handling import StorageError, from_requests_error, log_error, log_warning
from core.fetch_config import FetchConfig, FetchMode
from core.image_resolver import ImageResolver, ResolveStatus
from core.models import StatusRecord
from sources.base import BaseImageSource

logger = logging.getLogger(__name__)

PLACEHOLDER_URL = "https://picsum.photos/seed/{code}/{width}/{height}"


def placeholder_url(code: int, width: int = 800, height: int = 600) -> str:
    return PLACEHOLDER_URL.format(code=code, width=width, height=height)


def build_placeholder_mapping(catalog: StatusCatalog) -> Dict[str, str]:
    """One placeholder URL per catalog code, keyed by the code as a string"""
    return {str(record.code): placeholder_url(record.code) for record in catalog}


@dataclass
class MaterializeSummary:
    """Batch result

    Attributes:
        mode: the mode the batch ran in
        output: image directory (live) or mapping file (placeholder)
        success: codes that have an image, skipped ones included
        failed: codes that ended without an image
        skipped: codes that already had a file
        failed_codes: the failed codes, in catalog order
    """
    mode: FetchMode
    output: Path
    success: int = 0
    failed: int = 0
    skipped: int = 0
    failed_codes: List[int] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.success + self.failed

    def format(self) -> str:
        if self.mode == FetchMode.PLACEHOLDER:
            return (
                f"✅ Created placeholder image mappings ({self.success} codes)\n"
                f"   📁 Written to: {self.output}"
            )
        return (
            "📊 Results:\n"
            f"   ✅ Success: {self.success}\n"
            f"   ❌ Failed: {self.failed}\n"
            f"   📁 Images saved to: {self.output}"
        )


class ImageMaterializer:
    """Drive the resolver over the catalog and persist the results

    Progress lines go to log_cb (one per code); diagnostics go to logging.
    """

    def __init__(
        self,
        config: FetchConfig,
        catalog: Optional[StatusCatalog] = None,
        resolver: Optional[ImageResolver] = None,
        source: Optional[BaseImageSource] = None,
        sleep: Callable[[float], None] = time.sleep,
        log_cb: Callable[[str], None] = print,
    ):
        self.config = config
        self.mode = config.mode
        self.catalog = catalog or get_catalog()
        self.sleep = sleep
        self.log_cb = log_cb

        if self.mode == FetchMode.LIVE:
            if source is None and resolver is not None:
                source = resolver.source
            if source is None:
                from sources.unsplash import UnsplashSource
                source = UnsplashSource(
                    config.access_key,
                    base_url=config.api_base_url,
                    per_page=config.per_page,
                    orientation=config.orientation,
                )
            self.source = source
            self.resolver = resolver or ImageResolver(source)
        else:
            # placeholder mode never builds a network client
            self.source = None
            self.resolver = None

    @property
    def images_dir(self) -> Path:
        return Path(self.config.images_dir)

    @property
    def placeholder_file(self) -> Path:
        return Path(self.config.placeholder_file)

    def image_path(self, record: StatusRecord) -> Path:
        return self.images_dir / record.image_filename()

    def run(self) -> MaterializeSummary:
        if self.mode == FetchMode.PLACEHOLDER:
            return self.write_placeholders()
        return self.fetch_all()

    def write_placeholders(self) -> MaterializeSummary:
        """Write the full placeholder mapping, replacing any previous file"""
        mapping = build_placeholder_mapping(self.catalog)
        path = self.placeholder_file
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(mapping, indent=2) + "\n", encoding="utf-8")
        logger.info("wrote %d placeholder mappings to %s", len(mapping), path)
        return MaterializeSummary(FetchMode.PLACEHOLDER, path, success=len(mapping))

    def fetch_all(self) -> MaterializeSummary:
        """Resolve and download every code that has no local image yet"""
        self.images_dir.mkdir(parents=True, exist_ok=True)
        summary = MaterializeSummary(FetchMode.LIVE, self.images_dir)
        self.log_cb(f"Processing {len(self.catalog)} status codes...")

        for record in self.catalog:
            target = self.image_path(record)
            if target.exists():
                self.log_cb(f"⏭️  {record.code} - Already exists")
                summary.success += 1
                summary.skipped += 1
                continue

            self.log_cb(f"🔍 {record.code} - {record.message}")
            if self._materialize_one(record, target):
                summary.success += 1
            else:
                summary.failed += 1
                summary.failed_codes.append(record.code)

            # rate limit: only entries that went to the network wait
            self.sleep(self.config.request_delay)

        logger.info("batch done: success=%d failed=%d skipped=%d", summary.success, summary.failed, summary.skipped)
        return summary

    def _materialize_one(self, record: StatusRecord, target: Path) -> bool:
        code = record.code
        try:
            resolved = self.resolver.resolve(code, record.message)
            if resolved.status != ResolveStatus.FOUND:
                logger.warning(log_warning("UNSPLASH", "resolve", "no image", code=code,
                                           queries=len(resolved.attempts), errors=resolved.errors))
                self.log_cb(f"⚠️  {code} - No image found")
                return False

            self.log_cb(f"   📸 Query: \"{resolved.query}\"")
            result = self.source.download(resolved.url, target)
            if result.success:
                self.log_cb(f"✅ {code} - Downloaded")
                return True

            for line in result.logs:
                logger.debug(line)
            self.log_cb(f"❌ {code} - Failed to download: {result.error}")
            return False

        except requests.RequestException as e:
            err = from_requests_error(e, "UNSPLASH", "fetch")
            self.log_cb(f"❌ {code} - {log_error(err, 'UNSPLASH', 'fetch')}")
            return False
        except OSError as e:
            err = StorageError(target, f"{type(e).__name__}: {e}")
            self.log_cb(f"❌ {code} - {log_error(err, 'FS', 'write')}")
            return False
