#!/usr/bin/env python3
"""Script to verify development environment setup."""

import sys
from pathlib import Path


def check_python_version():
    """Check Python version >= 3.10."""
    version = sys.version_info
    if version.major >= 3 and version.minor >= 10:
        print(f"✓ Python {version.major}.{version.minor}.{version.micro}")
        return True
    else:
        print(f"✗ Python {version.major}.{version.minor}.{version.micro} (need 3.10+)")
        return False


def check_package(package_name):
    """Check if a package is installed."""
    try:
        __import__(package_name)
        print(f"✓ {package_name} installed")
        return True
    except ImportError:
        print(f"✗ {package_name} not installed")
        return False


def check_path(path):
    """Check if a file or directory exists."""
    if Path(path).exists():
        print(f"✓ {path} exists")
        return True
    else:
        print(f"✗ {path} missing")
        return False


def main():
    """Run all verification checks."""
    print("=" * 60)
    print("GraphQL Schema MCP Development Environment Verification")
    print("=" * 60)
    print()

    checks = []

    print("Checking Python version...")
    checks.append(check_python_version())
    print()

    print("Checking required packages...")
    for package in ["mcp", "graphql", "yaml"]:
        checks.append(check_package(package))
    print()

    print("Checking development packages...")
    for package in ["pytest", "pytest_asyncio", "mypy", "ruff"]:
        checks.append(check_package(package))
    print()

    print("Checking project structure...")
    for path in [
        "src/graphql_schema_mcp",
        "tests",
        "pyproject.toml",
        "config/server.yaml",
    ]:
        checks.append(check_path(path))
    print()

    print("=" * 60)
    passed = sum(checks)
    total = len(checks)
    print(f"Results: {passed}/{total} checks passed")
    print("=" * 60)

    if passed == total:
        print("✓ All checks passed! Environment is ready.")
        return 0
    else:
        print("✗ Some checks failed. Please review the output above.")
        return 1


if __name__ == "__main__":
    sys.exit(main())
