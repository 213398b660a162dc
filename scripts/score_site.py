#!/usr/bin/env python3
"""
Score a Website

Print the outcome (tier, badge, CTAs, quick wins) for four Lighthouse scores,
or run a live PageSpeed scan first.

Usage:
    python scripts/score_site.py --scores 72 88 91 85 --domain myshop.com
    python scripts/score_site.py --url https://example.com
    python scripts/score_site.py --scores 95 98 100 97 --user-id visitor-42 --env staging
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

from src.flags import resolve_feature_flags
from src.outcomes import resolve_outcome_view
from src.scan import InMemoryScanStore, PageSpeedClient, ScanOrchestrator
from src.scoring import InvalidScoreError, ScoreSet
from src.utils.config import get_settings
from src.utils.domain import is_valid_url, normalize_domain

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stderr),
        ]
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


async def scan_url(url: str, api_key: str, timeout: float) -> dict:
    """Run a live scan and return the device score sets."""
    client = PageSpeedClient(api_key=api_key)
    try:
        orchestrator = ScanOrchestrator(
            store=InMemoryScanStore(),
            performance_scanner=client,
            timeout=timeout,
        )
        record = await orchestrator.run_scan(url)
    finally:
        await client.close()

    for name, error in record.errors.items():
        logger.warning(f"{name}: {error}")

    return record.device_scores()


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Print the gamified outcome for a website's Lighthouse scores"
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--scores",
        nargs=4,
        type=int,
        metavar=("PERF", "A11Y", "BP", "SEO"),
        help="Performance, accessibility, best-practices and SEO scores (0-100)",
    )
    source.add_argument(
        "--url",
        help="Scan this URL with PageSpeed Insights instead",
    )
    parser.add_argument("--domain", help="Domain used for personalization and analytics")
    parser.add_argument("--user-id", help="Visitor id for A/B bucketing")
    parser.add_argument(
        "--env",
        choices=["development", "staging", "production"],
        help="Feature flag environment (defaults to ENVIRONMENT)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")

    args = parser.parse_args()

    load_dotenv()
    setup_logging(args.verbose)
    settings = get_settings()
    flags = resolve_feature_flags(args.env or settings.ENVIRONMENT)

    if args.url:
        if not is_valid_url(args.url):
            parser.error(f"Invalid URL: {args.url}")
        device_scores = asyncio.run(scan_url(args.url, settings.PAGESPEED_API_KEY, settings.SCAN_TIMEOUT))
        if not device_scores:
            logger.error("Scan failed: no desktop scores")
            sys.exit(1)
        domain = normalize_domain(args.domain or args.url)
    else:
        perf, a11y, bp, seo = args.scores
        scores = ScoreSet(performance=perf, accessibility=a11y, best_practices=bp, seo=seo)
        try:
            scores.validate()
        except InvalidScoreError as e:
            parser.error(str(e))
        device_scores = {"desktop": scores}
        domain = normalize_domain(args.domain)

    output = {
        device: resolve_outcome_view(
            scores,
            domain=domain,
            flags=flags,
            user_id=args.user_id,
        ).to_dict()
        for device, scores in device_scores.items()
    }
    print(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()
