"""PassMint command-line interface.

Usage examples:
    python -m passmint generate -n 20 -c 5
    python -m passmint generate -k "blue!whale" --symbols --log
    python -m passmint score 'Tr0ub4dor&3' -k troub
"""

import argparse
import logging
import sys

from passmint import (
    MAX_SCORE,
    InvalidConfiguration,
    generate_password,
    resolve_classes,
    score_strength,
)
from passmint.audit import build_record, log_generation, new_user_id
from passmint.config import Config


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="passmint",
        description="Generate keyword-aware passwords and score their strength.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    sub = parser.add_subparsers(dest="command")

    # ── generate ───────────────────────────────────────────────────────
    gen_p = sub.add_parser("generate", help="Generate passwords")
    gen_p.add_argument(
        "-n", "--length", type=int,
        help="Password length (default: PASSMINT_DEFAULT_LENGTH or 16)",
    )
    gen_p.add_argument("--no-lowercase", action="store_true")
    gen_p.add_argument("--no-uppercase", action="store_true")
    gen_p.add_argument("--no-digits", action="store_true")
    gen_p.add_argument(
        "--symbols", action="store_true",
        help="Include symbols (off by default)",
    )
    gen_p.add_argument(
        "-k", "--keyword", default="",
        help="Keyword to mix into the password (letters and digits only are kept)",
    )
    gen_p.add_argument(
        "-c", "--count", type=int, default=1,
        help="Number of passwords to generate (default: 1)",
    )
    gen_p.add_argument(
        "--log", action="store_true",
        help="Send generation metadata (never the password) to the configured sink",
    )
    gen_p.add_argument(
        "--user-id",
        help="User id for metadata records (default: random per run)",
    )

    # ── score ──────────────────────────────────────────────────────────
    score_p = sub.add_parser("score", help="Score password strength")
    score_p.add_argument("passwords", nargs="+", help="Passwords to score")
    score_p.add_argument(
        "-k", "--keyword", default="",
        help="Keyword to look for in each password",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "generate":
        return _cmd_generate(args)
    if args.command == "score":
        return _cmd_score(args)

    parser.print_help()
    return 0


def _selected_classes(args: argparse.Namespace) -> list[str]:
    classes = []
    if not args.no_lowercase:
        classes.append("lowercase")
    if not args.no_uppercase:
        classes.append("uppercase")
    if not args.no_digits:
        classes.append("digit")
    if args.symbols:
        classes.append("symbol")
    return classes


def _warnings(analysis: dict) -> list[str]:
    warnings = []
    if analysis["length"] < 8:
        warnings.append("Too short -- use at least 8 characters")
    if analysis["has_repeat_run"]:
        warnings.append("Repeated characters detected (e.g. 'aaa')")
    if analysis["has_sequential_run"]:
        warnings.append("Sequential pattern detected (e.g. 'abc', '123')")
    return warnings


def _cmd_generate(args: argparse.Namespace) -> int:
    try:
        config = Config()
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    if args.length is None:
        args.length = config.default_length

    classes = _selected_classes(args)
    try:
        resolve_classes(classes)
    except InvalidConfiguration as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    if args.length < 1:
        print("Error: password length must be at least 1", file=sys.stderr)
        return 1

    if args.log and not config.logging_enabled:
        print(
            "Warning: --log given but neither PASSMINT_LOG_URL nor "
            "PASSMINT_LOG_FILE is set; metadata will not be recorded",
            file=sys.stderr,
        )

    user_id = args.user_id or new_user_id()

    for _ in range(args.count):
        pwd = generate_password(args.length, classes, args.keyword)
        report = score_strength(pwd, classes, args.keyword)
        print(f"  {pwd}  ({report['label']}, {report['score']}/{MAX_SCORE})")

        if args.log:
            record = build_record(user_id, args.length, classes, report)
            log_generation(record, config=config)

    return 0


def _cmd_score(args: argparse.Namespace) -> int:
    for pwd in args.passwords:
        report = score_strength(pwd, keyword=args.keyword)
        filled = report["score"] // 10
        bar = "#" * filled + "-" * (MAX_SCORE // 10 - filled)
        print(f"  '{pwd}'")
        print(f"            Strength: [{bar}] {report['label']} ({report['score']}/{MAX_SCORE})")
        if args.keyword and report["analysis"]["has_keyword"]:
            print(f"            + keyword '{args.keyword}' found")
        for w in _warnings(report["analysis"]):
            print(f"            ! {w}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
