#!/usr/bin/env python3
"""
Development startup script.

Starts the mock storefront API in development mode.
"""

import os
import sys
import subprocess
from pathlib import Path

# Project root
PROJECT_ROOT = Path(__file__).parent.parent


def check_dependencies():
    """Check if required dependencies are installed."""
    try:
        import fastapi
        import uvicorn
        import httpx
        import pydantic_settings
        print("✓ All core dependencies installed")
        return True
    except ImportError as e:
        print(f"✗ Missing dependency: {e.name}")
        print("\nRun: pip install -e .")
        return False


def check_env():
    """Check if .env file exists."""
    env_file = PROJECT_ROOT / ".env"
    env_example = PROJECT_ROOT / ".env.example"

    if env_file.exists():
        print("✓ Configuration file found")
    elif env_example.exists():
        import shutil
        shutil.copy(env_example, env_file)
        print("✓ Created .env from example")
    else:
        print("! No .env file, using defaults")
    return True


def load_settings():
    """Read settings from the project's .env, whatever the working directory."""
    if str(PROJECT_ROOT) not in sys.path:
        sys.path.insert(0, str(PROJECT_ROOT))
    from storefront.core.config import Settings

    settings = Settings(_env_file=PROJECT_ROOT / ".env")
    print(f"✓ Mock API will listen on {settings.mock_api_host}:{settings.mock_api_port}")
    return settings


def start_mock_api(host: str, port: int):
    """Start the mock API in development mode."""
    print(f"\n🛴 Starting Mock Storefront API on http://{host}:{port} ...")
    process = subprocess.Popen(
        [
            sys.executable, "-m", "uvicorn",
            "mock_api.main:app",
            "--reload",
            "--host", host,
            "--port", str(port),
        ],
        cwd=PROJECT_ROOT,
        env={**os.environ, "PYTHONPATH": str(PROJECT_ROOT)},
    )

    print("\n" + "=" * 60)
    print(f"📍 Storefront API: http://{host}:{port}/api")
    print(f"📍 API docs:       http://{host}:{port}/docs")
    print("\nPress Ctrl+C to stop")
    print("=" * 60)

    try:
        process.wait()
    except KeyboardInterrupt:
        print("\n\nShutting down...")
        process.terminate()
        process.wait()
        print("Stopped.")


def main():
    print("=" * 60)
    print("Scooter Storefront - Development Server")
    print("=" * 60)

    print("\nRunning pre-flight checks...")

    if not check_dependencies():
        sys.exit(1)

    check_env()

    print("\n✓ All checks passed!")

    settings = load_settings()
    start_mock_api(settings.mock_api_host, settings.mock_api_port)


if __name__ == "__main__":
    main()
