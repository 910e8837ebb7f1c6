from __future__ import annotations

from pathlib import Path

from article_simplifier.levels import ProficiencyLevel
from article_simplifier.schemas import build_report
from article_simplifier.simplifier import Simplifier


def _repo_root() -> Path:
    # scripts/run_demo.py -> repo root is one parent up
    return Path(__file__).resolve().parents[1]


def load_sample_article() -> str:
    """
    Load the sample article text.

    Expected location:
      examples/sample_article.txt

    If the file does not exist, we fall back to an inline sample.
    """
    sample_path = _repo_root() / "examples" / "sample_article.txt"
    if sample_path.exists():
        return sample_path.read_text(encoding="utf-8")

    return (
        "The teacher will utilize new methods and the students will commence "
        "their projects and they will terminate early. Additionally, the school "
        "(which opened in 1990) will purchase new books."
    )


def main() -> int:
    print("[simplifier] Loading sample article...")
    article = load_sample_article()

    out_dir = _repo_root() / "out"
    out_dir.mkdir(parents=True, exist_ok=True)

    for level in ProficiencyLevel:
        print(f"[simplifier] Simplifying for {level.label}...")
        simplifier = Simplifier(level)
        simplifier.set_progress(lambda done, total: print(f"  {done}/{total}"))
        report = build_report(simplifier.run(article))

        out_path = out_dir / f"simplified_{level.label.lower()}.json"
        out_path.write_text(report.model_dump_json(indent=2), encoding="utf-8")

        print(f"[simplifier] Wrote: {out_path}")
        print(
            f"  flesch {report.before.flesch_score} -> {report.after.flesch_score}, "
            f"level {report.before.cefr_label} -> {report.after.cefr_label}"
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
