from __future__ import annotations

import argparse
import sys

from .export import format_plan_text
from .planner import build_plan
from .validation import InvalidPlanInput, validate_plan_inputs


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="wordplan", description="Vocabulary study-plan generator")
    sub = parser.add_subparsers(dest="command", required=True)

    plan_cmd = sub.add_parser("plan", help="Print a study plan as a copyable text block")
    plan_cmd.add_argument("total_words", help="Total vocabulary size")
    plan_cmd.add_argument("plan_days", help="Number of study days")
    plan_cmd.add_argument("--no-review", action="store_true", help="Skip review sessions")

    serve_cmd = sub.add_parser("serve", help="Run the HTTP API with uvicorn")
    serve_cmd.add_argument("--host", default="127.0.0.1")
    serve_cmd.add_argument("--port", type=int, default=8000)

    args = parser.parse_args(argv)

    if args.command == "plan":
        try:
            request = validate_plan_inputs(args.total_words, args.plan_days, not args.no_review)
        except InvalidPlanInput as exc:
            print(exc.message, file=sys.stderr)
            return 2
        sys.stdout.write(format_plan_text(build_plan(request)))
        return 0

    import uvicorn

    # アプリ側で structlog を設定するため uvicorn 既定のログ設定は使わない
    uvicorn.run("wordplan.main:app", host=args.host, port=args.port, log_config=None)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
