#!/usr/bin/env python3
"""
Prompt Template Builder Server Startup Script

This script checks the environment, then starts the FastAPI server and
prints the available endpoints.
"""

import os
import sys
from pathlib import Path

from main import API_KEY_ENV_VARS, resolve_api_key


def check_dependencies():
    """Check if required dependencies are installed"""
    required_packages = ['fastapi', 'uvicorn', 'pydantic', 'openai']
    missing_packages = []

    for package in required_packages:
        try:
            __import__(package)
        except ImportError:
            missing_packages.append(package)

    if missing_packages:
        print(f"Error: Missing required packages: {', '.join(missing_packages)}")
        print(f"Install them with: pip install {' '.join(missing_packages)}")
        return False

    return True


def check_config_file():
    """Report whether an optional configuration file is present"""
    config_file = Path("config.ini")
    if not config_file.exists():
        print(f"No {config_file} found, using built-in defaults")
        print("Copy config.sample.ini to config.ini to override completion settings")
        return False

    print(f"Configuration file found: {config_file}")
    return True


def check_credentials():
    """Check that a completion API key is present in the environment"""
    if resolve_api_key() is None:
        print(f"Warning: none of {', '.join(API_KEY_ENV_VARS)} is set")
        print("Task analysis will work, but prompt generation will return 401")
        return False

    print("Completion API key found")
    return True


def main():
    """Main startup routine"""
    print("Starting Prompt Template Builder Server")
    print("=" * 40)

    print(f"Working directory: {Path.cwd()}")

    print("\n📦 Checking Dependencies...")
    if not check_dependencies():
        sys.exit(1)
    print("All dependencies are available")

    print("\n⚙️  Checking Configuration...")
    check_config_file()

    print("\nChecking Credentials...")
    check_credentials()  # Warning only, not fatal

    # Server configuration
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    reload = os.getenv("RELOAD", "true").lower() == "true"
    log_level = os.getenv("LOG_LEVEL", "info")

    print(f"\n🌐 Server Configuration:")
    print(f"  • Host: {host}")
    print(f"  • Port: {port}")
    print(f"  • Reload: {reload}")
    print(f"  • Log Level: {log_level}")

    print(f"\n📡 API Endpoints will be available at:")
    print(f"  • Health:          http://{host}:{port}/health")
    print(f"  • Catalog:         http://{host}:{port}/api/catalog")
    print(f"  • Analyze task:    http://{host}:{port}/api/analyze-task")
    print(f"  • Task prompt:     http://{host}:{port}/api/generate-task-prompt")
    print(f"  • Generate prompt: http://{host}:{port}/api/generate-prompt")
    print(f"  • Docs:            http://{host}:{port}/docs")

    print(f"\nStarting server...")
    print("=" * 40)

    try:
        import uvicorn
        uvicorn.run(
            "fastapi_app:app",
            host=host,
            port=port,
            reload=reload,
            log_level=log_level
        )
    except KeyboardInterrupt:
        print("\n\n🛑 Server stopped by user")
    except Exception as e:
        print(f"\n\nError: Server failed to start: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
