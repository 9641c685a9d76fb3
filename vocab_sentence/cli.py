"""CLI entry point for vocab-sentence.

Usage:
    # Generate an example sentence for the default words
    export LLAMA_API_KEY=...
    vocab-sentence

    # Use your own vocabulary list
    vocab-sentence --words ubiquitous ephemeral
"""

import argparse
import logging
import sys

from .client import get_generated_response
from .config import API_KEY_ENV, get_config
from .exceptions import VocabSentenceError
from .prompt import DEFAULT_WORDS, build_prompt

# Configure logging before anything else
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def _print_header(title: str) -> None:
    print("")
    print("")
    print(f"++++++ {title} ++++++")


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="vocab-sentence",
        description="Generate an English example sentence with the Llama API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Environment Variables:
  {API_KEY_ENV}      API key for the Llama API (required)

Examples:
  %(prog)s
  %(prog)s --words ubiquitous ephemeral
        """,
    )

    parser.add_argument(
        "--words",
        "-w",
        nargs="+",
        default=list(DEFAULT_WORDS),
        help=f"Vocabulary words to use (default: {', '.join(DEFAULT_WORDS)})",
    )

    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        default="info",
        help="Logging level (default: info)",
    )

    args = parser.parse_args(argv)

    config = get_config(logging={"level": args.log_level})
    logging.getLogger().setLevel(getattr(logging, config.logging.level))

    try:
        prompt = build_prompt(args.words)
    except VocabSentenceError as e:
        logger.error(f"Invalid words: {e}")
        sys.exit(1)

    _print_header("Prompt")
    print(prompt)

    _print_header("Generated response")
    try:
        response = get_generated_response(prompt, config=config.api)
    except VocabSentenceError as e:
        logger.error(f"Failed to get generated response from Llama API: {e}")
        sys.exit(1)
    print(response)

    print("")
    print("")


if __name__ == "__main__":
    main()
