from __future__ import annotations

"""Command-line front end: ask one question, print the answer.

    llmchat "What is 2+2?"
    llmchat "Explain TCP/IP in one sentence" --system "You are a networking expert"
    llmchat "List three colors" --schema colors.json
"""

import argparse
import json
import sys
from typing import List, Optional

from dotenv import load_dotenv

from . import get_llm_client
from .errors import LLMError
from .utils.logger import setup_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="llmchat", description="Send a prompt to a chat-completion API.")
    parser.add_argument("prompt", help="User message")
    parser.add_argument("--system", help="Optional system message")
    parser.add_argument("--model", help="Model name (defaults to the client default)")
    parser.add_argument("--temperature", type=float, help="Sampling temperature")
    parser.add_argument("--timeout", type=int, help="Request timeout in milliseconds")
    parser.add_argument("--provider", help="Provider name (default: $LLM_PROVIDER or openai)")
    parser.add_argument(
        "--schema",
        help='Path to a JSON file {"name": ..., "schema": {...}} requesting structured output',
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # Load env first so the client sees the API key
    load_dotenv(".env", override=False)
    logger = setup_logger(level=args.log_level.upper())

    overrides = {}
    if args.system:
        overrides["system"] = args.system
    if args.model:
        overrides["model"] = args.model
    if args.temperature is not None:
        overrides["temperature"] = args.temperature

    try:
        client_kwargs = {"timeout": args.timeout} if args.timeout is not None else {}
        client = get_llm_client(args.provider, **client_kwargs)
        if args.schema:
            with open(args.schema, encoding="utf-8") as fh:
                schema = json.load(fh)
            parsed = client.prompt_structured(args.prompt, schema, **overrides)
            print(json.dumps(parsed, indent=2, ensure_ascii=False))
        else:
            print(client.prompt(args.prompt, **overrides))
    except (OSError, ValueError, LLMError) as exc:
        logger.error("%s", exc)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
