"""
Terminal front end for the article simplifier.

Interactive mode (default) reads an article ending with a line "END", shows
its readability, asks for a target level, simplifies it, and loops until the
user declines another run.

File mode simplifies one file and prints the text or a JSON report.

Run with:
    PYTHONPATH=src python -m article_simplifier
    PYTHONPATH=src python -m article_simplifier --file article.txt --level a2 --json
"""
from __future__ import annotations

import argparse
import math
import sys
from pathlib import Path
from typing import Callable, List, Optional

from tqdm import tqdm

from .levels import LEVEL_MENU, LevelError, ProficiencyLevel, parse_level
from .reading_level import ReadabilityMetrics, analyze, reference_reading_level
from .schemas import build_report
from .simplifier import SimplifiedArticle, Simplifier

END_MARKER = "END"

InputFn = Callable[[str], str]


def banner() -> str:
    return "\n--- article simplifier ---\na1 = beginner / a2 = elementary\n"


def read_article(input_fn: InputFn = input) -> str:
    """Read lines until END (or end of input). Each kept line ends with a newline."""
    print(f"paste article, then type {END_MARKER} on a new line:\n")
    lines: List[str] = []
    while True:
        try:
            line = input_fn("")
        except EOFError:
            break
        if line == END_MARKER:
            break
        lines.append(line + "\n")
    return "".join(lines)


def pick_level(input_fn: InputFn = input) -> ProficiencyLevel:
    """Prompt for a level until a valid menu choice is entered."""
    while True:
        print("output level:")
        for key, level in LEVEL_MENU.items():
            name = "beginner" if level is ProficiencyLevel.A1 else "elementary"
            print(f"  {key} = {level.label} ({name})")
        try:
            return parse_level(input_fn("> "))
        except LevelError as e:
            print(f"[simplifier] {e}")


def ask_again(input_fn: InputFn = input) -> bool:
    try:
        answer = input_fn("another? [y/n]: ")
    except EOFError:
        return False
    return answer.strip().lower().startswith("y")


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def format_metrics(metrics: ReadabilityMetrics, text: Optional[str] = None) -> str:
    """
    Render metrics as aligned lines.

    When text is given, the textstat Flesch-Kincaid grade is appended as a
    cross-check.
    """
    lines = [
        f"  flesch score:       {round_half_away(metrics.flesch_score)}",
        f"  avg words/sentence: {round_half_away(metrics.avg_words_per_sentence)}",
        f"  estimated level:    {metrics.cefr_label}",
    ]
    if text is not None:
        ref = reference_reading_level(text)
        status = "ok" if ref.meets_target else "above target"
        lines.append(f"  textstat FK grade:  {ref.flesch_kincaid_grade} ({status})")
    return "\n".join(lines) + "\n"


def format_result(article: SimplifiedArticle) -> str:
    return (
        f"\n[original]\n{article.original}"
        f"\n[simplified - {article.level.label}]\n{article.simplified}\n"
    )


def simplify_with_progress(
    text: str,
    level: ProficiencyLevel,
    show_progress: bool = True,
) -> SimplifiedArticle:
    simplifier = Simplifier(level)
    with tqdm(desc="processing", unit="sentence", disable=not show_progress) as bar:
        def on_progress(done: int, total: int) -> None:
            bar.total = total
            bar.update(done - bar.n)

        simplifier.set_progress(on_progress)
        return simplifier.run(text)


def run_interactive(
    input_fn: Optional[InputFn] = None,
    show_reference: bool = False,
    show_progress: bool = True,
) -> int:
    input_fn = input_fn or input
    print(banner())
    while True:
        text = read_article(input_fn)
        if not text:
            break

        print("\noriginal metrics:")
        print(format_metrics(analyze(text), text if show_reference else None))

        level = pick_level(input_fn)
        result = simplify_with_progress(text, level, show_progress=show_progress)

        print("\nsimplified metrics:")
        print(format_metrics(
            analyze(result.simplified),
            result.simplified if show_reference else None,
        ))
        print(format_result(result))

        if not ask_again(input_fn):
            break
    return 0


def run_file(
    path: Path,
    level: ProficiencyLevel,
    as_json: bool = False,
    out_path: Optional[Path] = None,
    show_reference: bool = False,
    show_progress: bool = True,
) -> int:
    if not path.exists():
        print(f"[simplifier] File not found: {path}", file=sys.stderr)
        return 1

    text = path.read_text(encoding="utf-8")
    result = simplify_with_progress(text, level, show_progress=show_progress)

    if as_json:
        output = build_report(result).model_dump_json(indent=2)
    else:
        output = (
            "original metrics:\n"
            + format_metrics(analyze(text), text if show_reference else None)
            + "\nsimplified metrics:\n"
            + format_metrics(
                analyze(result.simplified),
                result.simplified if show_reference else None,
            )
            + format_result(result)
        )

    if out_path is not None:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(output, encoding="utf-8")
        print(f"[simplifier] Wrote: {out_path}")
    else:
        print(output)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="article_simplifier",
        description="Rewrite an article toward CEFR A1/A2 reading level.",
    )
    parser.add_argument("--file", type=Path, help="Simplify this file once instead of prompting")
    parser.add_argument(
        "--level",
        choices=["a1", "a2"],
        default="a1",
        help="Target level for --file (default: a1)",
    )
    parser.add_argument("--json", action="store_true", help="Print a JSON report (--file only)")
    parser.add_argument("--out", type=Path, help="Write output here instead of stdout (--file only)")
    parser.add_argument(
        "--reference",
        action="store_true",
        help="Also show the textstat Flesch-Kincaid grade",
    )
    parser.add_argument("--no-progress", action="store_true", help="Hide the progress bar")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.file is not None:
        return run_file(
            args.file,
            parse_level(args.level),
            as_json=args.json,
            out_path=args.out,
            show_reference=args.reference,
            show_progress=not args.no_progress,
        )

    try:
        return run_interactive(
            show_reference=args.reference,
            show_progress=not args.no_progress,
        )
    except (EOFError, KeyboardInterrupt):
        print("\n[simplifier] Aborted.")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
