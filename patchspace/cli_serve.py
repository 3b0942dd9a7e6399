import argparse
import os

import uvicorn


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="patchspace-serve",
        description="Serve the workspace HTTP API (sessions, tools, diff).",
    )
    parser.add_argument("--host", default=os.getenv("HOST", "127.0.0.1"))
    parser.add_argument("--port", type=int, default=int(os.getenv("PORT", "8000")))
    parser.add_argument(
        "--reload",
        action="store_true",
        default=os.getenv("RELOAD", "0") in {"1", "true", "True"},
        help="Reload on code changes (development only)",
    )
    args = parser.parse_args(argv)

    # Sessions live in process memory, so one worker owns them all
    uvicorn.run("patchspace.main:app", host=args.host, port=args.port, reload=args.reload, workers=1)  # type: ignore[arg-type]
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
