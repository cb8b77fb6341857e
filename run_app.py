#!/usr/bin/env python3
"""
SquishyShop Backend Runner
==========================

Usage:
    python run_app.py                    # Development mode with auto-reload (default)
    python run_app.py --mode prod        # Production mode, multiple workers
    python run_app.py --port 8001        # Custom port
    python run_app.py --host 127.0.0.1   # Custom host
    python run_app.py --seed             # Seed the database and exit
"""

import argparse
import asyncio
import os
import sys

def print_banner():
    """Print application banner"""
    banner = """
╔═══════════════════════════════════════════════════════╗
║                 SquishyShop Backend                   ║
╚═══════════════════════════════════════════════════════╝
    """
    print(banner)

def check_environment():
    """Report on local configuration"""
    if os.path.exists(".env"):
        print("✅ .env file found")
    else:
        print("⚠️  .env file not found, using defaults")

def seed():
    """Create tables and insert initial data"""
    from storefront.core.database import init_db, close_db
    from storefront.core.events import create_startup_data
    from storefront.core.logging import setup_logging

    async def _run():
        setup_logging()
        await init_db()
        await create_startup_data()
        await close_db()

    asyncio.run(_run())
    print("✅ Database seeded")

def run_main_app(host: str, port: int, reload: bool, workers: int):
    """Run the FastAPI application"""
    import uvicorn

    print(f"\n🚀 Starting SquishyShop API on {host}:{port}")
    print(f"📖 API Docs: http://{host}:{port}/api/docs")
    print("\n" + "=" * 50)

    uvicorn.run(
        "storefront.main:app",
        host=host,
        port=port,
        reload=reload,
        workers=1 if reload else workers,
        log_level="info"
    )

def main():
    from storefront.core.config import settings

    parser = argparse.ArgumentParser(
        description="SquishyShop Backend Runner",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--mode",
        choices=["dev", "prod"],
        default="dev",
        help="Server mode (default: dev)"
    )
    parser.add_argument("--host", default=settings.HOST, help="Host to bind to")
    parser.add_argument("--port", type=int, default=settings.PORT, help="Port to bind to")
    parser.add_argument("--no-reload", action="store_true", help="Disable auto-reload")
    parser.add_argument("--seed", action="store_true", help="Seed the database and exit")

    args = parser.parse_args()

    print_banner()
    check_environment()

    if args.seed:
        seed()
        return 0

    reload = not args.no_reload and args.mode != "prod"
    run_main_app(args.host, args.port, reload, settings.WORKERS)
    return 0

if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n👋 Goodbye!")
        sys.exit(0)
