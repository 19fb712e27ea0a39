from typing import Any, Dict, Optional, List
import requests
import logging

_LOGGER = logging.getLogger(__name__)


def call_api(session: Optional[requests.Session], url: str, *, params: Optional[Dict[str, Any]] = None,
             headers: Optional[Dict[str, str]] = None, timeout: int = 10) -> Optional[Any]:
    """GET a JSON API and return the parsed body, or None on failure.

    A non-200 status, a transport error or an undecodable body all count as a
    failure. There is no retry; the caller decides what a failure means.
    """
    sess = session or requests.Session()

    # Build kwargs only for provided arguments to remain compatible with
    # test doubles that may not accept unexpected keyword args.
    kwargs: Dict[str, Any] = {'timeout': timeout}
    if params is not None:
        kwargs['params'] = params
    if headers is not None:
        kwargs['headers'] = headers

    _LOGGER.debug('http_search GET %s kwargs_keys=%s', url, list(kwargs.keys()))
    try:
        resp = sess.get(url, **kwargs)
    except requests.RequestException as exc:
        _LOGGER.error('http_search GET %s failed: %s', url, exc)
        return None

    status = getattr(resp, 'status_code', 0)
    if status != 200:
        _LOGGER.warning('http_search non-200 status %s for GET %s', status, url)
        return None

    try:
        return resp.json()
    except ValueError as exc:
        _LOGGER.error('http_search undecodable body from %s: %s', url, exc)
        return None


def find_results(obj: Any) -> List[Dict[str, Any]]:
    """Return the list of photo results in a search response.

    Shapes seen:
    - {"total": 10, "total_pages": 4, "results": [...]}
    - [...] (top-level list, e.g. /photos)
    """
    if obj is None:
        return []
    if isinstance(obj, list):
        return obj
    if not isinstance(obj, dict):
        return []

    results = obj.get('results')
    if isinstance(results, list):
        return results
    return []


def photo_url(result: Any) -> Optional[str]:
    """Pick the display URL of one search result"""
    if not isinstance(result, dict):
        return None
    urls = result.get('urls')
    if isinstance(urls, dict):
        for size in ('regular', 'full', 'small'):
            if urls.get(size):
                return urls[size]
    return result.get('url') or None
