import io
import json

import requests

from core.catalog import StatusCatalog, get_catalog
from core.fetch_config import FetchConfig, FetchMode
from core.image_materializer import ImageMaterializer, build_placeholder_mapping, placeholder_url
from core.models import Category, StatusRecord
from sources.base import BaseImageSource, ImageResult
from sources.unsplash import UnsplashSource


SMALL = StatusCatalog([
    StatusRecord(200, "OK", Category.SUCCESS),
    StatusRecord(404, "Not Found", Category.CLIENT_ERROR),
    StatusRecord(451, "Unavailable For Legal Reasons", Category.CLIENT_ERROR),
    StatusRecord(500, "Internal Server Error", Category.SERVER_ERROR),
])


class FakeSource(BaseImageSource):
    source_id = "FAKE"

    def __init__(self, fail_download=(), raise_on=(), empty=()):
        self.fail_download = set(fail_download)
        self.raise_on = set(raise_on)
        self.empty = set(empty)
        self.queries = []
        self.downloads = []

    def search(self, query):
        self.queries.append(query)
        if query in self.empty:
            return []
        return [f"https://img/{query.replace(' ', '-')}"]

    def download(self, url, target):
        self.downloads.append(target.name)
        code = int(target.stem)
        if code in self.raise_on:
            raise requests.exceptions.ConnectionError("reset")
        if code in self.fail_download:
            return ImageResult.fail("HTTP error: 503")
        target.write_bytes(b"jpeg")
        return ImageResult.ok(target)


def _config(tmp_path, key="key"):
    config = FetchConfig(access_key=key)
    config.images_dir = str(tmp_path / "public" / "rabbits")
    config.placeholder_file = str(tmp_path / "data" / "image_placeholders.json")
    return config


def _materializer(config, source=None, catalog=SMALL):
    sleeps = []
    lines = []
    m = ImageMaterializer(config, catalog=catalog, source=source, sleep=sleeps.append, log_cb=lines.append)
    return m, sleeps, lines


def test_placeholder_url_is_deterministic():
    assert placeholder_url(404) == "https://picsum.photos/seed/404/800/600"
    assert placeholder_url(404) == placeholder_url(404)


def test_placeholder_mapping_covers_catalog():
    mapping = build_placeholder_mapping(get_catalog())
    assert list(mapping.keys()) == [str(c) for c in get_catalog().codes()]


def test_placeholder_mode_writes_full_mapping(tmp_path):
    config = _config(tmp_path, key=None)
    m, sleeps, _ = _materializer(config, catalog=get_catalog())
    assert m.source is None and m.resolver is None

    summary = m.run()
    path = tmp_path / "data" / "image_placeholders.json"
    data = json.loads(path.read_text(encoding="utf-8"))
    assert summary.mode == FetchMode.PLACEHOLDER
    assert summary.success == len(get_catalog())
    assert set(data) == {str(c) for c in get_catalog().codes()}
    assert data["418"] == "https://picsum.photos/seed/418/800/600"
    assert sleeps == []
    assert not (tmp_path / "public").exists()


def test_placeholder_mode_is_idempotent(tmp_path):
    config = _config(tmp_path, key="")
    path = tmp_path / "data" / "image_placeholders.json"
    path.parent.mkdir(parents=True)
    path.write_text('{"1": "stale"}', encoding="utf-8")

    _materializer(config, catalog=get_catalog())[0].run()
    first = path.read_text(encoding="utf-8")
    _materializer(config, catalog=get_catalog())[0].run()
    second = path.read_text(encoding="utf-8")
    assert first == second
    assert "stale" not in second
    assert len(json.loads(second)) == len(get_catalog())


def test_placeholder_mode_never_builds_a_client(tmp_path, monkeypatch):
    def no_network(*args, **kwargs):
        raise AssertionError("network used in placeholder mode")

    monkeypatch.setattr(requests.Session, "request", no_network)
    summary = _materializer(_config(tmp_path, key=None))[0].run()
    assert summary.success == len(SMALL)


def test_live_mode_downloads_in_catalog_order(tmp_path):
    source = FakeSource()
    m, sleeps, lines = _materializer(_config(tmp_path), source=source)
    summary = m.run()

    assert summary.mode == FetchMode.LIVE
    assert summary.success == 4 and summary.failed == 0
    assert source.downloads == ["200.jpg", "404.jpg", "451.jpg", "500.jpg"]
    assert (tmp_path / "public" / "rabbits" / "451.jpg").read_bytes() == b"jpeg"
    assert sleeps == [1.0] * 4
    assert "✅ 404 - Downloaded" in lines


def test_live_mode_skips_existing_file(tmp_path):
    config = _config(tmp_path)
    images = tmp_path / "public" / "rabbits"
    images.mkdir(parents=True)
    (images / "404.jpg").write_bytes(b"old")

    source = FakeSource()
    m, sleeps, lines = _materializer(config, source=source)
    summary = m.run()

    assert "rabbit lost hiding missing" not in source.queries
    assert "rabbit not found" not in source.queries
    assert "404.jpg" not in source.downloads
    assert (images / "404.jpg").read_bytes() == b"old"
    assert summary.skipped == 1
    assert summary.success == 4
    assert len(sleeps) == 3
    assert "⏭️  404 - Already exists" in lines


def test_one_download_failure_does_not_abort(tmp_path):
    source = FakeSource(fail_download={404})
    m, sleeps, _ = _materializer(_config(tmp_path), source=source)
    summary = m.run()

    assert source.downloads == ["200.jpg", "404.jpg", "451.jpg", "500.jpg"]
    assert summary.failed == 1
    assert summary.success == len(SMALL) - 1
    assert summary.failed_codes == [404]
    assert len(sleeps) == 4


def test_transport_exception_is_contained(tmp_path):
    source = FakeSource(raise_on={200})
    summary = _materializer(_config(tmp_path), source=source)[0].run()
    assert summary.failed_codes == [200]
    assert summary.success == 3


def test_no_image_counts_as_failure(tmp_path):
    source = FakeSource(empty={"rabbit ok", "rabbit happy successful", "rabbit"})
    summary = _materializer(_config(tmp_path), source=source)[0].run()
    assert summary.failed_codes == [200]
    assert "200.jpg" not in source.downloads


def test_rerun_only_attempts_missing_codes(tmp_path):
    config = _config(tmp_path)
    _materializer(config, source=FakeSource(fail_download={500}))[0].run()

    source = FakeSource()
    summary = _materializer(config, source=source)[0].run()
    assert source.downloads == ["500.jpg"]
    assert summary.skipped == 3
    assert summary.failed == 0


def test_custom_delay(tmp_path):
    config = _config(tmp_path)
    config.request_delay = 0.25
    m, sleeps, _ = _materializer(config, source=FakeSource())
    m.run()
    assert sleeps == [0.25] * 4


def test_summary_format(tmp_path):
    summary = _materializer(_config(tmp_path), source=FakeSource(fail_download={200}))[0].run()
    text = summary.format()
    assert "✅ Success: 3" in text
    assert "❌ Failed: 1" in text
    assert str(tmp_path / "public" / "rabbits") in text
    assert summary.total == 4


class _SearchSession:
    def __init__(self):
        self.headers = {}

    def get(self, url, **kwargs):
        class Resp:
            status_code = 200

            def json(self):
                return {'results': [{'urls': {'regular': 'https://images.example/' + kwargs['params']['query']}}]}

        return Resp()


class _ImageSession:
    def __init__(self, fail_first):
        self.fail_first = fail_first

    def get(self, url, **kwargs):
        class HalfRaw(io.RawIOBase):
            sent = False

            def readable(self):
                return True

            def read(self, size=-1):
                if not self.sent:
                    self.sent = True
                    return b'jp'
                raise OSError(28, 'No space left on device')

        resp = requests.Response()
        resp.status_code = 200
        resp.url = url
        if self.fail_first:
            self.fail_first = False
            resp.raw = HalfRaw()
        else:
            resp.raw = io.BytesIO(b'jpeg')
        return resp


def test_interrupted_write_is_retried_on_next_run(tmp_path):
    config = _config(tmp_path)
    one = StatusCatalog([StatusRecord(404, "Not Found", Category.CLIENT_ERROR)])
    images = _ImageSession(fail_first=True)

    def run():
        source = UnsplashSource('key', session=_SearchSession(), download_session=images)
        return _materializer(config, source=source, catalog=one)[0].run()

    first = run()
    assert first.failed == 1
    assert not (tmp_path / "public" / "rabbits" / "404.jpg").exists()

    second = run()
    assert second.skipped == 0
    assert second.success == 1
    assert (tmp_path / "public" / "rabbits" / "404.jpg").read_bytes() == b'jpeg'
