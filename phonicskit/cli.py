#!/usr/bin/env python3
"""
phonicskit CLI
==============
Command-line interface for syllable segmentation and word analysis.

Usage:
    phonicskit segment apple water library
    phonicskit analyze unhappy --json
    phonicskit batch words.txt --workers 4
    phonicskit exceptions
"""

import argparse
import json
import logging
import re
import sys

from phonicskit import __version__
from phonicskit.settings import get_setting, resolve_path

logger = logging.getLogger(__name__)

MAX_WORD_LENGTH = 45

# =============================================================================
# Utilities
# =============================================================================

class Output:
    """Handles CLI output with quiet mode support."""

    def __init__(self, quiet: bool = False):
        self.quiet = quiet

    def print(self, *args, **kwargs):
        if not self.quiet:
            print(*args, **kwargs)

    def error(self, msg: str):
        print(f"Error: {msg}", file=sys.stderr)

    def json(self, data):
        """Print JSON regardless of quiet mode (it is the command's result)."""
        print(json.dumps(data, indent=2, ensure_ascii=False))


def validate_word(word: str) -> tuple[bool, str]:
    """Validate a word input."""
    if not word or not word.strip():
        return False, "Word cannot be empty"

    word = word.strip()

    if len(word) > MAX_WORD_LENGTH:
        return False, f"Word must be at most {MAX_WORD_LENGTH} characters"

    if not re.match(r'^[a-zA-Z]+$', word):
        return False, f"'{word}' must contain only ASCII letters"

    return True, word


def _validate_all(words, out: Output):
    """Validate every word, reporting the first bad one. Returns None on failure."""
    valid_words = []
    for word in words:
        ok, result = validate_word(word)
        if not ok:
            out.error(result)
            return None
        valid_words.append(result)
    return valid_words


def configure_logging(verbose: bool = False):
    """Configure the root logger from app.yaml."""
    level = 'DEBUG' if verbose else str(get_setting('logging.level', 'WARNING')).upper()
    fmt = get_setting('logging.format', '%(levelname)s %(message)s')
    logging.basicConfig(level=getattr(logging, level, logging.WARNING), format=fmt)


# =============================================================================
# Commands
# =============================================================================

def cmd_segment(args, out: Output):
    """Split words into syllable segments."""
    from phonicskit import segment, engine_config

    words = _validate_all(args.words, out)
    if words is None:
        return 1

    separator = args.separator or engine_config().pronunciation_separator
    results = {word: segment(word) for word in words}

    if args.json:
        out.json(results)
        return 0

    for word, segments in results.items():
        out.print(f"{word}: {separator.join(segments)}")
    return 0


def cmd_analyze(args, out: Output):
    """Show the structural analysis of words."""
    from phonicskit import analyze
    from phonicskit.ui import AnalysisView

    words = _validate_all(args.words, out)
    if words is None:
        return 1

    analyses = [analyze(word) for word in words]

    if args.json:
        out.json([a.to_dict() for a in analyses])
        return 0

    AnalysisView(quiet=out.quiet).show(*analyses)
    return 0


def cmd_batch(args, out: Output):
    """Segment every word listed in a file."""
    from phonicskit.batch import read_word_list, segment_many

    path = resolve_path(args.file)
    if not path.exists():
        out.error(f"File not found: {path}")
        return 1

    words = read_word_list(path.read_text(encoding='utf-8').splitlines())
    if not words:
        out.print("No words found.")
        return 0

    valid, skipped = [], []
    for word in words:
        (valid if validate_word(word)[0] else skipped).append(word)
    for word in skipped:
        logger.warning(f"Skipping invalid word '{word}'")
    words = valid

    results = segment_many(words, max_workers=args.workers)

    if args.json:
        out.json(dict(zip(words, results)))
    else:
        for word, segments in zip(words, results):
            out.print(f"{word}\t{' '.join(segments)}")

    if skipped:
        out.print(f"\nSkipped {len(skipped)} invalid entries.", file=sys.stderr)
    return 0


def cmd_exceptions(args, out: Output):
    """List the hand-authored exception dictionary."""
    from phonicskit.tables import load_exceptions

    exceptions = load_exceptions()
    if args.json:
        out.json({word: list(segs) for word, segs in exceptions.items()})
        return 0

    width = max(len(word) for word in exceptions) + 2
    for word in sorted(exceptions):
        out.print(f"{word.ljust(width)}{'-'.join(exceptions[word])}")
    out.print(f"\n{len(exceptions)} entries")
    return 0


# =============================================================================
# Main
# =============================================================================

def main():
    parser = argparse.ArgumentParser(
        prog='phonicskit',
        description='phonicskit - English syllable segmentation for pronunciation hints',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s segment apple water library
  %(prog)s segment happy --json
  %(prog)s analyze unhappy kindness
  %(prog)s batch words.txt --workers 4 --json
  %(prog)s exceptions
"""
    )

    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging and tracebacks')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # --- segment ---
    p = subparsers.add_parser('segment', aliases=['seg', 's'], help='Split words into syllables')
    p.add_argument('words', nargs='+', help='Words to segment')
    p.add_argument('--separator', help='Separator between segments')
    p.add_argument('--json', action='store_true', help='Output JSON')

    # --- analyze ---
    p = subparsers.add_parser('analyze', aliases=['a'], help='Analyze word structure')
    p.add_argument('words', nargs='+', help='Words to analyze')
    p.add_argument('--json', action='store_true', help='Output JSON')

    # --- batch ---
    p = subparsers.add_parser('batch', aliases=['b'], help='Segment words from a file')
    p.add_argument('file', help='Text file with one word per line')
    p.add_argument('-w', '--workers', type=int, help='Worker threads (default: app.yaml)')
    p.add_argument('--json', action='store_true', help='Output JSON')

    # --- exceptions ---
    p = subparsers.add_parser('exceptions', help='List the exception dictionary')
    p.add_argument('--json', action='store_true', help='Output JSON')

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return 0

    configure_logging(args.verbose)

    # Resolve aliases
    cmd_map = {
        'seg': 'segment', 's': 'segment',
        'a': 'analyze',
        'b': 'batch',
    }
    command = cmd_map.get(args.command, args.command)

    out = Output(quiet=args.quiet)

    commands = {
        'segment': cmd_segment,
        'analyze': cmd_analyze,
        'batch': cmd_batch,
        'exceptions': cmd_exceptions,
    }

    handler = commands.get(command)
    if handler:
        try:
            return handler(args, out)
        except KeyboardInterrupt:
            out.print("\nCancelled.")
            return 130
        except Exception as e:
            out.error(str(e))
            if args.verbose:
                import traceback
                traceback.print_exc()
            return 1

    parser.print_help()
    return 0


if __name__ == '__main__':
    sys.exit(main())
