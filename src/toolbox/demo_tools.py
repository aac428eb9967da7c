"""Companion command-line tools for the user demo API.

Commands:
    demo-tools data generate-users --count 10 --output users.json
    demo-tools data validate-json --file users.json
    demo-tools api health --url http://localhost:8080
    demo-tools api test-users --url http://localhost:8080

Every command returns a process exit code (0 on success, 1 on failure).
"""

import argparse
import json
import sys
import uuid
from datetime import datetime, timezone
from pathlib import Path

import httpx

DEFAULT_API_URL = "http://localhost:8080"
API_TIMEOUT_SECONDS = 5.0
PREVIEW_COUNT = 3

SAMPLE_NAMES = [
    "Zhang San", "Li Si", "Wang Wu", "Zhao Liu", "Qian Qi", "Sun Ba", "Zhou Jiu", "Wu Shi",
    "Zheng Shiyi", "Wang Shier", "Feng Shisan", "Chen Shisi", "Chu Shiwu", "Wei Shiliu",
    "Jiang Shiqi", "Shen Shiba",
]


# ── data commands ────────────────────────────────────────────


def generate_users(count: int) -> list[dict]:
    """Build `count` sample users; names cycle through SAMPLE_NAMES with the index appended."""
    users = []
    for i in range(1, count + 1):
        users.append({
            "id": i,
            "name": f"{SAMPLE_NAMES[(i - 1) % len(SAMPLE_NAMES)]}{i}",
            "email": f"user{i}@example.com",
            "created_at": datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
            "uuid": str(uuid.uuid4()),
        })
    return users


def write_users(count: int, output: str) -> int:
    print(f"🔧 Generating {count} test users...")
    users = generate_users(count)
    try:
        Path(output).write_text(json.dumps(users, indent=2, ensure_ascii=False), encoding="utf-8")
    except OSError as e:
        print(f"❌ Failed to write {output}: {e}", file=sys.stderr)
        return 1

    print(f"✅ Wrote user data to {output}")
    print(f"📊 Users generated: {count}")
    return 0


def _is_user_list(value) -> bool:
    return isinstance(value, list) and all(
        isinstance(item, dict) and "name" in item and "email" in item
        for item in value
    )


def _print_user_preview(users: list[dict]) -> None:
    for index, user in enumerate(users[:PREVIEW_COUNT], start=1):
        print(f"  {index}. {user.get('name')} ({user.get('email')})")
    if len(users) > PREVIEW_COUNT:
        print(f"  ... {len(users) - PREVIEW_COUNT} more")


def validate_json_file(file_path: str) -> int:
    print(f"🔍 Validating JSON file: {file_path}")
    try:
        content = Path(file_path).read_text(encoding="utf-8")
    except OSError as e:
        print(f"❌ Failed to read {file_path}: {e}", file=sys.stderr)
        return 1

    try:
        value = json.loads(content)
    except json.JSONDecodeError as e:
        print(f"❌ Invalid JSON: {e}", file=sys.stderr)
        return 1

    print("✅ valid JSON")
    if _is_user_list(value):
        print(f"📊 User data detected, {len(value)} records")
        _print_user_preview(value)
    elif isinstance(value, dict):
        print("📄 Generic JSON object, top-level keys:")
        for key in list(value)[:5]:
            print(f"  - {key}")
    return 0


# ── api commands ─────────────────────────────────────────────


def health_url(api_url: str) -> str:
    api_url = api_url.rstrip("/")
    return api_url if api_url.endswith("/health") else f"{api_url}/api/health"


def users_url(api_url: str) -> str:
    api_url = api_url.rstrip("/")
    return api_url if "/api/users" in api_url else f"{api_url}/api/users"


def check_health(client: httpx.Client, api_url: str) -> int:
    url = health_url(api_url)
    print(f"🏥 Checking API health: {url}")
    try:
        response = client.get(url)
    except httpx.HTTPError as e:
        print(f"❌ Could not reach the API: {e}", file=sys.stderr)
        print(f"💡 Make sure the backend is running at {api_url}", file=sys.stderr)
        return 1

    print(f"📡 HTTP status: {response.status_code}")
    if not response.is_success:
        print(f"❌ API unhealthy, status {response.status_code}")
        return 1

    print("✅ API is healthy")
    print(f"📄 Response: {response.text}")
    return 0


def check_users(client: httpx.Client, api_url: str) -> int:
    url = users_url(api_url)
    print(f"👥 Testing user API: {url}")
    try:
        print("🔍 Listing users...")
        response = client.get(url)
        print(f"📡 HTTP status: {response.status_code}")
        if not response.is_success:
            print(f"❌ User list failed, status {response.status_code}")
            return 1

        users = response.json().get("data") or []
        print(f"✅ User list OK, {len(users)} users")
        _print_user_preview(users)

        print("\n📝 Creating a test user...")
        response = client.post(url, json={"name": "Test User", "email": "test@example.com"})
        print(f"📡 HTTP status: {response.status_code}")
        if response.status_code != 201:
            print(f"❌ User creation failed: {response.text}")
            return 1

        created = response.json()["data"]
        print(f"✅ Created user {created['id']}: {created['name']} ({created['email']})")
    except httpx.HTTPError as e:
        print(f"❌ Could not reach the user API: {e}", file=sys.stderr)
        print(f"💡 Make sure the backend is running at {api_url}", file=sys.stderr)
        return 1
    except (ValueError, KeyError, TypeError, AttributeError) as e:
        print(f"❌ Unexpected response body: {e}", file=sys.stderr)
        return 1

    return 0


# ── entry point ──────────────────────────────────────────────


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="demo-tools", description="Data and API tools for the user demo service")
    groups = parser.add_subparsers(dest="group", required=True)

    data = groups.add_parser("data", help="Data processing tools")
    data_actions = data.add_subparsers(dest="action", required=True)
    generate = data_actions.add_parser("generate-users", help="Generate test user data")
    generate.add_argument("-c", "--count", type=int, default=10, help="Number of users")
    generate.add_argument("-o", "--output", default="users.json", help="Output file path")
    validate = data_actions.add_parser("validate-json", help="Validate a JSON file")
    validate.add_argument("-f", "--file", required=True, help="JSON file path")

    api = groups.add_parser("api", help="API smoke tests")
    api_actions = api.add_subparsers(dest="action", required=True)
    for name, help_text in (("health", "Check API health"), ("test-users", "Exercise the user API")):
        action = api_actions.add_parser(name, help=help_text)
        action.add_argument("-u", "--url", default=DEFAULT_API_URL, help="API server address")

    return parser


def main(argv: list[str] | None = None, client: httpx.Client | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    if args.group == "data":
        if args.action == "generate-users":
            return write_users(args.count, args.output)
        return validate_json_file(args.file)

    command = check_health if args.action == "health" else check_users
    if client is not None:
        return command(client, args.url)
    with httpx.Client(timeout=API_TIMEOUT_SECONDS) as http_client:
        return command(http_client, args.url)


if __name__ == "__main__":
    sys.exit(main())
