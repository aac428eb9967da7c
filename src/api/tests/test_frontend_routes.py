"""Tests for static frontend hosting."""

import tempfile
import unittest
from pathlib import Path

from fastapi.testclient import TestClient

from api.main import create_app

INDEX_HTML = '<!doctype html><html><body><div id="app">{{ not templated }}</div></body></html>'


class TestFrontendRoutes(unittest.TestCase):
    """Test cases for /, /vite.svg and /assets/* with a built frontend."""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        dist = Path(self._tmp.name)
        (dist / "assets").mkdir()
        (dist / "index.html").write_text(INDEX_HTML, encoding="utf-8")
        (dist / "vite.svg").write_text("<svg></svg>", encoding="utf-8")
        (dist / "assets" / "index-abc123.js").write_text("console.log('app')", encoding="utf-8")
        self.client = TestClient(create_app(frontend_dist=dist))

    def tearDown(self):
        self._tmp.cleanup()

    def test_root_serves_index_verbatim(self):
        response = self.client.get("/")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.text, INDEX_HTML)
        self.assertTrue(response.headers['content-type'].startswith('text/html'))

    def test_vite_svg(self):
        response = self.client.get("/vite.svg")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.text, "<svg></svg>")

    def test_assets(self):
        response = self.client.get("/assets/index-abc123.js")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.text, "console.log('app')")

    def test_missing_asset(self):
        self.assertEqual(self.client.get("/assets/missing.js").status_code, 404)

    def test_unmatched_path_uses_default_not_found(self):
        response = self.client.get("/users")

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"detail": "Not Found"})


class TestFrontendMissing(unittest.TestCase):
    """The API still works when no frontend build exists."""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.client = TestClient(create_app(frontend_dist=Path(self._tmp.name) / "dist"))

    def tearDown(self):
        self._tmp.cleanup()

    def test_root_not_found(self):
        response = self.client.get("/")

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"detail": "Not Found"})

    def test_assets_not_found(self):
        self.assertEqual(self.client.get("/assets/app.js").status_code, 404)
        self.assertEqual(self.client.get("/vite.svg").status_code, 404)

    def test_api_still_served(self):
        self.assertEqual(self.client.get("/api/health").status_code, 200)


if __name__ == '__main__':
    unittest.main()
