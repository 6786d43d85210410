"""Command-line interface.

Examples:
    buchicheck --sample pure-b "b^w" "ab^w"
    buchicheck -a automaton.txt --json "(ab)^w"
    buchicheck --sample ab-cycle --export tikz
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from buchicheck import __version__
from buchicheck.automaton.buchi import BuchiAutomaton
from buchicheck.automaton.checker import AcceptanceChecker
from buchicheck.config import Config
from buchicheck.diagnostics.diagnostics import Diagnostics, Status
from buchicheck.exceptions import AutomatonFormatError
from buchicheck.export.latex import build_formal_definition_latex, build_tikz_export
from buchicheck.parser.omega_word import parse_omega_word
from buchicheck.samples import SAMPLES, get_sample

logger = logging.getLogger(__name__)

EXIT_ACCEPTED = 0
EXIT_REJECTED = 1
EXIT_INVALID = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="buchicheck",
        description="Check omega-words against a deterministic Büchi automaton.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "-a", "--automaton", metavar="FILE", help="automaton definition file ('-' for stdin)"
    )
    source.add_argument("-s", "--sample", metavar="ID", help="use a bundled sample automaton")
    parser.add_argument("words", nargs="*", metavar="WORD", help="omega-word, e.g. 'ab(ba)^w'")
    parser.add_argument(
        "--list-samples", action="store_true", help="list bundled samples and exit"
    )
    parser.add_argument(
        "--export", choices=("tikz", "formal"), help="print a LaTeX export of the automaton"
    )
    parser.add_argument("--json", action="store_true", help="print results as JSON")
    parser.add_argument(
        "--max-closure-size",
        type=int,
        metavar="N",
        help="give up when a star closure exceeds N state transforms",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def load_automaton(args: argparse.Namespace) -> BuchiAutomaton:
    """Read the automaton selected on the command line.

    Raises:
        AutomatonFormatError: If the definition is missing or invalid.
    """
    if args.sample:
        sample = get_sample(args.sample)
        if sample is None:
            raise AutomatonFormatError([f"Unknown sample: {args.sample}"])
        return sample.automaton()

    if args.automaton == "-":
        return BuchiAutomaton.from_text(sys.stdin.read())
    if args.automaton:
        try:
            with open(args.automaton, encoding="utf-8") as f:
                return BuchiAutomaton.from_text(f.read())
        except OSError as e:
            raise AutomatonFormatError([f"Cannot read {args.automaton}: {e.strerror}"])

    raise AutomatonFormatError(["No automaton given; use --automaton or --sample"])


def check_words(
    automaton: BuchiAutomaton, words: List[str], config: Config
) -> List[Diagnostics]:
    """Check each word against one compiled automaton."""
    checker = AcceptanceChecker(automaton, config)
    results = []
    for word in (w.strip() for w in words):
        parsed = parse_omega_word(word)
        if not parsed.ok:
            results.append(Diagnostics.warning(word, parsed.error))
            continue
        results.append(Diagnostics.from_evaluation(word, checker.evaluate(parsed.word)))
    return results


def format_result(result: Diagnostics) -> str:
    lines = [str(result)]
    evaluation = result.evaluation
    if evaluation is not None:
        lines.append(f"  prefix: {evaluation.prefix_word or 'ε'}")
        lines.append(f"  loop:   {evaluation.loop_word or 'ε'}")
        lines.append(f"  entry:  {evaluation.entry_state or '-'}")
        cycle = " -> ".join(evaluation.cycle) if evaluation.found_cycle else "-"
        lines.append(f"  cycle:  {cycle}")
        lines.append(f"  reason: {evaluation.reason}")
    return "\n".join(lines)


def exit_code(results: List[Diagnostics]) -> int:
    if any(r.status == Status.WARNING for r in results):
        return EXIT_INVALID
    if any(r.status == Status.REJECTED for r in results):
        return EXIT_REJECTED
    return EXIT_ACCEPTED


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.list_samples:
        for sample in SAMPLES:
            print(f"{sample.id:<24} {sample.title}")
        return EXIT_ACCEPTED

    try:
        automaton = load_automaton(args)
        config = Config.default().with_limit(args.max_closure_size)
    except (AutomatonFormatError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_INVALID

    if args.export == "tikz":
        print(build_tikz_export(automaton))
        return EXIT_ACCEPTED
    if args.export == "formal":
        print(build_formal_definition_latex(automaton))
        return EXIT_ACCEPTED

    if not args.words:
        parser.print_usage(sys.stderr)
        print("error: no words to check", file=sys.stderr)
        return EXIT_INVALID

    logger.debug("Checking %d word(s) on %d states", len(args.words), automaton.size())
    results = check_words(automaton, args.words, config)

    if args.json:
        print(json.dumps([r.to_dict() for r in results], ensure_ascii=False, indent=2))
    else:
        for result in results:
            print(format_result(result))

    return exit_code(results)


if __name__ == "__main__":
    sys.exit(main())
