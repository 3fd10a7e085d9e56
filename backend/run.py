#!/usr/bin/env python3
"""
Scholarbase API - Startup Script
Run this file to start the server with the configured host and port
"""

import sys
from pathlib import Path


def check_environment():
    """Report whether a .env file will be picked up"""
    print("🔍 Checking environment setup...")

    if Path(".env").exists():
        print("✅ Using settings from .env")
    else:
        print("ℹ️  No .env file found, using defaults and environment variables")
    return True


def check_dependencies():
    """Check if all dependencies are installed"""
    print("\n🔍 Checking dependencies...")

    try:
        import fastapi
        import uvicorn
        import pydantic_settings
        import jose
        print("✅ All core dependencies installed!")
        return True
    except ImportError as e:
        print(f"❌ ERROR: Missing dependency: {e}")
        print("\n📦 Install dependencies with:")
        print("   pip install -e .")
        return False


def print_banner():
    """Print startup banner"""
    banner = """
╔═══════════════════════════════════════════════════╗
║                                                   ║
║                 Scholarbase API                   ║
║          Courses, Students & Enrollments          ║
║                                                   ║
║                   Version 1.0.0                   ║
║                                                   ║
╚═══════════════════════════════════════════════════╝
    """
    print(banner)


def print_startup_info(host, port, docs_url):
    """Print startup information"""
    base = f"http://localhost:{port}"
    print(f"\n🚀 Starting server on {host}:{port}...")
    print("\n📚 Once started, you can access:")
    print(f"   • API Docs (Swagger): {base}{docs_url}")
    print(f"   • Health Check:       {base}/health")
    print(f"   • Authentication:     {base}/auth")
    print(f"   • Courses:            {base}/courses")
    print(f"   • Users:              {base}/users")
    print(f"   • Enrollments:        {base}/enrollments")
    print("\n💡 Press CTRL+C to stop the server")
    print("\n" + "="*55 + "\n")


def main():
    """Main startup function"""
    print_banner()

    if not check_environment():
        sys.exit(1)

    if not check_dependencies():
        sys.exit(1)

    try:
        import uvicorn
        from scholarbase.config import settings

        print_startup_info(settings.host, settings.port, settings.DOCS_URL)

        uvicorn.run(
            "scholarbase.main:app",
            host=settings.host,
            port=settings.port,
            reload=settings.debug and not settings.is_production,
            log_level=settings.LOG_LEVEL.lower()
        )
    except KeyboardInterrupt:
        print("\n\n👋 Server stopped by user")
    except Exception as e:
        print(f"\n❌ ERROR: Failed to start server: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
