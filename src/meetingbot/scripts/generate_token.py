#!/usr/bin/env python3
# src/meetingbot/scripts/generate_token.py
"""
Generate a bearer token for local testing.

Usage:
    python -m meetingbot.scripts.generate_token <user_id> [--secret S] [--expires-in 1h]
    meetingbot-token <user_id>

The secret defaults to JWT_SECRET from the environment (or .env).
"""

import argparse
import sys

from dotenv import load_dotenv

from ..auth import generate_token
from ..config import get_config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a MeetingBot API token")
    parser.add_argument("user_id", help="User id to put in the token subject")
    parser.add_argument("--secret", help="Signing secret (default: JWT_SECRET)")
    parser.add_argument("--expires-in", help="Lifetime such as 30m, 1h or 7d (default: JWT_EXPIRATION)")
    return parser


def main(argv=None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    config = get_config()
    
    try:
        token = generate_token(
            args.user_id,
            secret=args.secret or config.jwt_secret,
            expires_in=args.expires_in or config.jwt_expiration,
        )
    except ValueError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1
    
    print(token)
    return 0


if __name__ == "__main__":
    sys.exit(main())
