# -*- coding: utf-8 -*-
"""
Unsplash Source - photo search API (api.unsplash.com)
"""
import logging
import os
import requests
from pathlib import Path
from typing import List, Optional

from core.error_handling import StorageError, from_requests_error, log_error, log_success
from core.timeout_config import get_timeout
from .base import BaseImageSource, ImageResult
from .http_search import call_api, find_results, photo_url

logger = logging.getLogger(__name__)

API_URL_DEFAULT = "https://api.unsplash.com"


class UnsplashSource(BaseImageSource):
    """Unsplash photo search"""

    source_id = "UNSPLASH"
    source_name = "Unsplash"

    def __init__(self, access_key: str, session: Optional[requests.Session] = None,
                 base_url: str = API_URL_DEFAULT, per_page: int = 3, orientation: str = "landscape",
                 download_session: Optional[requests.Session] = None):
        if not access_key:
            raise ValueError("UnsplashSource requires an access key")
        self.base_url = base_url.rstrip("/")
        self.per_page = per_page
        self.orientation = orientation
        self.session = session or requests.Session()
        self.session.headers.update({
            "Authorization": f"Client-ID {access_key}",
            "Accept-Version": "v1",
        })
        # image URLs point at arbitrary hosts, the key stays on the API session
        self.download_session = download_session or requests.Session()

    def search(self, query: str) -> Optional[List[str]]:
        """Search photos, returning image URLs in result order"""
        params = {
            "query": query,
            "per_page": self.per_page,
            "orientation": self.orientation,
        }
        j = call_api(self.session, f"{self.base_url}/search/photos", params=params,
                     timeout=get_timeout(self.source_id, "search"))
        if j is None:
            return None
        results = find_results(j)
        urls = [u for u in (photo_url(r) for r in results) if u]
        logger.debug("unsplash query=%r results=%d", query, len(urls))
        return urls

    def download(self, url: str, target: Path) -> ImageResult:
        """Stream the image into <target>.part, then move it onto target.

        target only ever holds a complete image; a failed download leaves
        neither file behind.
        """
        target = Path(target)
        part = target.with_name(target.name + ".part")
        timeout = get_timeout(self.source_id, "download")
        logs = [f"GET {url}"]
        size = 0
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            with self.download_session.get(url, stream=True, timeout=timeout) as resp:
                resp.raise_for_status()
                with open(part, "wb") as f:
                    for chunk in resp.iter_content(chunk_size=8192):
                        if chunk:
                            f.write(chunk)
                            size += len(chunk)
            os.replace(part, target)
        except requests.RequestException as e:
            _discard(part)
            err = from_requests_error(e, self.source_id, "download", timeout=timeout)
            logs.append(log_error(err, self.source_id, "download"))
            return ImageResult.fail(str(err), logs)
        except OSError as e:
            _discard(part)
            err = StorageError(target, f"{type(e).__name__}: {e}")
            logs.append(log_error(err, "FS", "write"))
            return ImageResult.fail(str(err), logs)

        logs.append(log_success(self.source_id, "download", f"wrote {size} bytes", path=target))
        return ImageResult.ok(target, logs)


def _discard(path: Path) -> None:
    if path.exists():
        path.unlink()
