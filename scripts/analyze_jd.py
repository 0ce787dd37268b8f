from __future__ import annotations

import argparse
import sys
from pathlib import Path

from app.core.history_store import AnalysisHistoryStore
from app.services.analysis_service import analyze
from app.services.report import render_report


def main() -> None:
    parser = argparse.ArgumentParser(description="Analyze a job description and print a readiness report.")
    parser.add_argument("jd_file", nargs="?", help="Path to a text file with the job description (default: stdin).")
    parser.add_argument("--company", default="", help="Company name.")
    parser.add_argument("--role", default="", help="Role title.")
    parser.add_argument("--save", action="store_true", help="Store the analysis in the local history.")
    parser.add_argument("--db", default=None, help="History database path (default: HISTORY_DB_PATH).")
    parser.add_argument("--out", default=None, help="Write the report to this file instead of stdout.")
    args = parser.parse_args()

    if args.jd_file:
        jd_text = Path(args.jd_file).read_text(encoding="utf-8")
    else:
        jd_text = sys.stdin.read()

    if not jd_text.strip():
        parser.error("job description is empty")

    record = analyze(args.company.strip(), args.role.strip(), jd_text)
    if args.save:
        AnalysisHistoryStore(args.db).save_or_update(record)

    report = render_report(record)
    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(report, encoding="utf-8")
    else:
        sys.stdout.write(report)


if __name__ == "__main__":
    main()
