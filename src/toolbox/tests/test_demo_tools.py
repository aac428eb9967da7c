"""Tests for the demo-tools command line."""

import io
import json
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

import httpx
from fastapi.testclient import TestClient

from api.main import create_app
from toolbox.demo_tools import (
    SAMPLE_NAMES,
    generate_users,
    health_url,
    main,
    users_url,
)

API_URL = "http://testserver"


def _run(argv, client=None):
    out, err = io.StringIO(), io.StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        code = main(argv, client=client)
    return code, out.getvalue(), err.getvalue()


def _unreachable_client() -> httpx.Client:
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)
    return httpx.Client(transport=httpx.MockTransport(handler))


class TestGenerateUsers(unittest.TestCase):

    def test_generate_users_shape(self):
        users = generate_users(3)

        self.assertEqual([u['id'] for u in users], [1, 2, 3])
        self.assertEqual(users[0]['name'], 'Zhang San1')
        self.assertEqual(users[2]['email'], 'user3@example.com')
        self.assertTrue(users[0]['created_at'].endswith('Z'))
        self.assertNotEqual(users[0]['uuid'], users[1]['uuid'])

    def test_names_cycle(self):
        users = generate_users(len(SAMPLE_NAMES) + 1)

        self.assertEqual(users[-1]['name'], f"{SAMPLE_NAMES[0]}{len(SAMPLE_NAMES) + 1}")


class TestDataCommands(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def test_generate_then_validate(self):
        output = self.dir / "users.json"

        code, out, _ = _run(["data", "generate-users", "-c", "5", "-o", str(output)])
        self.assertEqual(code, 0)
        self.assertEqual(len(json.loads(output.read_text(encoding="utf-8"))), 5)

        code, out, _ = _run(["data", "validate-json", "-f", str(output)])
        self.assertEqual(code, 0)
        self.assertIn("5 records", out)
        self.assertIn("Zhang San1 (user1@example.com)", out)
        self.assertIn("... 2 more", out)

    def test_validate_generic_object(self):
        path = self.dir / "config.json"
        path.write_text('{"alpha": 1, "beta": 2}', encoding="utf-8")

        code, out, _ = _run(["data", "validate-json", "-f", str(path)])

        self.assertEqual(code, 0)
        self.assertIn("- alpha", out)
        self.assertIn("- beta", out)

    def test_validate_invalid_json(self):
        path = self.dir / "broken.json"
        path.write_text('{"alpha": ', encoding="utf-8")

        code, _, err = _run(["data", "validate-json", "-f", str(path)])

        self.assertEqual(code, 1)
        self.assertIn("Invalid JSON", err)

    def test_validate_missing_file(self):
        code, _, err = _run(["data", "validate-json", "-f", str(self.dir / "nope.json")])

        self.assertEqual(code, 1)
        self.assertIn("Failed to read", err)


class TestApiCommands(unittest.TestCase):

    def setUp(self):
        self.app = create_app()
        self.client = TestClient(self.app)

    def test_url_helpers(self):
        self.assertEqual(health_url("http://localhost:8080"), "http://localhost:8080/api/health")
        self.assertEqual(health_url("http://host/api/health"), "http://host/api/health")
        self.assertEqual(users_url("http://localhost:8080/"), "http://localhost:8080/api/users")
        self.assertEqual(users_url("http://host/api/users"), "http://host/api/users")

    def test_health(self):
        code, out, _ = _run(["api", "health", "-u", API_URL], client=self.client)

        self.assertEqual(code, 0)
        self.assertIn("HTTP status: 200", out)
        self.assertIn("service healthy", out)

    def test_test_users_lists_and_creates(self):
        code, out, _ = _run(["api", "test-users", "-u", API_URL], client=self.client)

        self.assertEqual(code, 0)
        self.assertIn("3 users", out)
        self.assertIn("Created user 4: Test User (test@example.com)", out)
        self.assertEqual(len(self.app.state.user_repo), 4)

    def test_health_unreachable(self):
        code, _, err = _run(["api", "health", "-u", API_URL], client=_unreachable_client())

        self.assertEqual(code, 1)
        self.assertIn("Could not reach the API", err)

    def test_test_users_non_object_body(self):
        """A list body instead of the envelope is reported, not raised."""
        client = httpx.Client(transport=httpx.MockTransport(
            lambda request: httpx.Response(200, json=[1, 2, 3])
        ))

        code, _, err = _run(["api", "test-users", "-u", API_URL], client=client)

        self.assertEqual(code, 1)
        self.assertIn("Unexpected response body", err)

    def test_test_users_unreachable(self):
        code, _, err = _run(["api", "test-users"], client=_unreachable_client())

        self.assertEqual(code, 1)
        self.assertIn("http://localhost:8080", err)


if __name__ == '__main__':
    unittest.main()
