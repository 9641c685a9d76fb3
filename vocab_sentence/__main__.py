#!/usr/bin/env python3
"""
Entry point for running vocab_sentence as a module.

Usage:
    python -m vocab_sentence
    python -m vocab_sentence --words ubiquitous ephemeral
    python -m vocab_sentence --help
"""

from vocab_sentence.cli import main

if __name__ == "__main__":
    main()
