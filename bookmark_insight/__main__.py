import argparse
import json
import sys

from bookmark_insight.application.errors import BookmarkIngestError
from bookmark_insight.ingest import run_ingest


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="bookmark_insight",
        description="Extract, classify and summarise a browser bookmark export (HTML).",
    )
    parser.add_argument("input", help="Path to the exported bookmarks .html file")
    parser.add_argument(
        "--output-dir",
        default="artifacts/bookmarks",
        help="Directory for bookmarks.jsonl, analysis_report.json and per-category files",
    )
    parser.add_argument("--no-progress", action="store_true", help="Disable the progress bar")
    args = parser.parse_args(argv)

    try:
        outcome = run_ingest(
            input_path=args.input,
            output_dir=args.output_dir,
            show_progress=not args.no_progress,
        )
    except (BookmarkIngestError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    result = outcome.result
    print(outcome.message)
    print(
        json.dumps(
            {
                "stats": result.stats.to_dict(),
                "categories": [c.to_dict() for c in result.categories],
                "topDomains": [d.to_dict() for d in result.top_domains],
            },
            ensure_ascii=False,
            indent=2,
        )
    )
    return 0


# python -m bookmark_insight bookmarks.html
if __name__ == "__main__":
    sys.exit(main())
