"""
Service Health Check Utility

Quick health check for the forms backend.
"""

import sys
import os
import httpx

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

BACKEND_URL = os.getenv("BACKEND_URL", f"http://localhost:{os.getenv('BACKEND_PORT', '10821')}")

# Service endpoints
SERVICES = {
    "Backend": f"{BACKEND_URL}/health",
}


def check_service(name: str, url: str) -> bool:
    """Check if a service is healthy."""
    try:
        response = httpx.get(url, timeout=5.0)
        if response.status_code == 200:
            print(f"  [OK] {name}: healthy ({url})")
            return True
        else:
            print(f"  [!!] {name}: status {response.status_code} ({url})")
            return False
    except httpx.ConnectError:
        print(f"  [--] {name}: not running ({url})")
        return False
    except httpx.HTTPError as e:
        print(f"  [!!] {name}: error - {e}")
        return False


def main():
    print("\n=== Service Health Check ===\n")

    healthy = 0
    total = len(SERVICES)

    for name, url in SERVICES.items():
        if check_service(name, url):
            healthy += 1

    print(f"\n  {healthy}/{total} services healthy\n")

    # List the forms the backend serves
    try:
        response = httpx.get(f"{BACKEND_URL}/forms", timeout=5.0)
        if response.status_code == 200:
            forms = response.json()
            print(f"  Forms: {len(forms)}")
            for form in forms:
                print(f"    - {form.get('form_id')}: {form.get('config_name')}")
            print()
    except httpx.HTTPError as e:
        print(f"  Could not list forms: {e}\n")

    return 0 if healthy == total else 1


if __name__ == "__main__":
    sys.exit(main())
