#!/usr/bin/env python3
"""
Explore the live Ideoz UI to (re)discover locators.

Opens a real browser, walks the login dialog and/or the chat upload
controls, prints what it found and saves screenshots.

Usage:
    # Probe everything headless
    uv run python scripts/explore_app.py

    # Watch the login probe in a visible browser
    uv run python scripts/explore_app.py --target login --headed

Exit codes:
    0 - Exploration finished
    1 - The application could not be explored
"""

from __future__ import annotations

import argparse
import json
import sys

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from ideoz_e2e.config import get_settings
from ideoz_e2e.config.logging import configure_logging, get_logger
from ideoz_e2e.explore import explore_file_upload, explore_login

log = get_logger(__name__)


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Ideoz UI exploration",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Upload controls only, screenshots into ./probe
  uv run python scripts/explore_app.py --target upload --screenshots probe

  # Against a local build
  BASE_URL=http://localhost:3000/ uv run python scripts/explore_app.py
        """,
    )

    parser.add_argument(
        "--target",
        choices=["login", "upload", "all"],
        default="all",
        help="Which screen to explore (default: all)",
    )
    parser.add_argument(
        "--headed",
        action="store_true",
        help="Show the browser window",
    )
    parser.add_argument(
        "--screenshots",
        default="screenshots",
        help="Directory for screenshots (default: screenshots)",
    )
    parser.add_argument(
        "--linger",
        type=int,
        default=0,
        help="Seconds to keep the browser open after each probe (default: 0)",
    )

    return parser.parse_args()


def main() -> int:
    """Main entry point."""
    args = parse_args()
    configure_logging()
    settings = get_settings()

    probes = {"login": explore_login, "upload": explore_file_upload}
    targets = list(probes) if args.target == "all" else [args.target]
    results = {}

    with sync_playwright() as playwright:
        browser = playwright.chromium.launch(headless=not (args.headed or settings.headed))
        try:
            for target in targets:
                page = browser.new_page(viewport=settings.viewport)
                try:
                    results[target] = probes[target](page, settings.base_url, args.screenshots)
                    if args.linger:
                        page.wait_for_timeout(args.linger * 1000)
                finally:
                    page.close()
        except PlaywrightError as e:
            log.error("exploration_failed", target=target, error=str(e))
            return 1
        finally:
            browser.close()

    print(json.dumps(results, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
