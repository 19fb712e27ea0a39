#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
HTTP Status Rabbits image downloader

With UNSPLASH_ACCESS_KEY set, downloads one rabbit photo per status code into
public/rabbits/<code>.jpg (existing files are kept). Without it, writes
placeholder image URLs to data/image_placeholders.json instead.
"""
import argparse
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

from core.fetch_config import FetchConfig, FetchMode
from core.image_materializer import ImageMaterializer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Download rabbit images for every HTTP status code")
    parser.add_argument("--images-dir", default=None, help="image directory (default: public/rabbits)")
    parser.add_argument("--placeholder-file", default=None,
                        help="placeholder mapping file (default: data/image_placeholders.json)")
    parser.add_argument("--delay", type=float, default=None, help="seconds between API requests (default: 1.0)")
    parser.add_argument("--verbose", action="store_true", help="debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    load_dotenv()
    config = FetchConfig.from_env()
    config.load()
    config.update(
        images_dir=args.images_dir,
        placeholder_file=args.placeholder_file,
        request_delay=args.delay,
    )

    print("🐰 HTTP Status Rabbits Image Downloader\n")

    if config.mode == FetchMode.PLACEHOLDER:
        print("ℹ️  No Unsplash API key provided.")
        print("   Creating placeholder images instead...\n")

    summary = ImageMaterializer(config).run()
    print()
    print(summary.format())

    if summary.mode == FetchMode.PLACEHOLDER:
        print("\n💡 To use real rabbit images:")
        print("   1. Get a free API key from https://unsplash.com/developers")
        print("   2. Set UNSPLASH_ACCESS_KEY environment variable")
        print("   3. Run this script again\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
