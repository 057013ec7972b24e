#!/usr/bin/env python3
"""
Format the DataForSEO MCP codebase with black.

Pass --check to report unformatted files without rewriting them (for CI).
"""
import argparse
import logging
import subprocess
import sys
from pathlib import Path

# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("dataforseo-mcp-format")

ROOT_DIR = Path(__file__).parent.parent.absolute()

FORMAT_DIRS = [
    ROOT_DIR / "src",
    ROOT_DIR / "tests",
    ROOT_DIR / "scripts",
]


def black_command(check=False):
    cmd = [sys.executable, "-m", "black"]
    if check:
        cmd += ["--check", "--diff"]
    return cmd + [str(d) for d in FORMAT_DIRS if d.exists()]


def main(argv=None):
    parser = argparse.ArgumentParser(description="Run black on src, tests and scripts")
    parser.add_argument(
        "--check", action="store_true", help="Only report files black would change"
    )
    args = parser.parse_args(argv)

    description = "Black check" if args.check else "Black formatting"
    logger.info(f"{description}...")
    result = subprocess.run(black_command(args.check), capture_output=True, text=True)
    if result.stdout:
        logger.info(result.stdout)

    if result.returncode != 0:
        logger.error(f"❌ {description} failed!")
        if result.stderr:
            logger.error(result.stderr)
        return 1

    logger.info(f"✅ {description} completed successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
