import argparse
import json
import os
import sys
from typing import Any

from patchspace.adapters.files.local_snapshot_adapter import LocalSnapshotAdapter
from patchspace.container import container
from patchspace.exceptions import WorkspaceError
from patchspace.utils.paths import normalize_path


def _render_pretty(result: dict[str, Any], tool: str) -> None:
    from rich import box
    from rich.console import Console
    from rich.panel import Panel
    from rich.syntax import Syntax
    from rich.text import Text

    console = Console(soft_wrap=True)
    diff = result.pop("diff", None)
    console.print(
        Panel(
            Syntax(json.dumps(result, ensure_ascii=False, indent=2), "json"),
            title=tool,
            box=box.ROUNDED,
            border_style="green" if result.get("success") else "red",
            expand=True,
        )
    )
    if not diff:
        return
    body = Text()
    for line in diff:
        old = str(line.get("oldLineNumber", "")).rjust(4)
        new = str(line.get("newLineNumber", "")).rjust(4)
        if line["type"] == "add":
            body.append(f"{old} {new} +{line['content']}\n", style="green")
        elif line["type"] == "remove":
            body.append(f"{old} {new} -{line['content']}\n", style="red")
        else:
            body.append(f"{old} {new}  {line['content']}\n", style="dim")
    title = f"{result.get('filePath', '')} +{result.get('additions', 0)} -{result.get('removals', 0)}"
    console.print(Panel(body, title=title, box=box.ROUNDED, expand=True))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="patchspace-tools",
        description="Run one workspace tool call against a snapshot and print the result.",
    )
    parser.add_argument(
        "--snapshot",
        required=True,
        help="Directory or JSON file providing the initial files",
    )
    parser.add_argument("--tool", required=True, help="Tool name (e.g. edit_file)")
    parser.add_argument(
        "--args", default="{}", help="JSON object with the tool arguments"
    )
    parser.add_argument("--session", default="cli", help="Session identifier")
    parser.add_argument(
        "--diff",
        action="store_true",
        help="Ask edit tools for a line diff (includeDiff)",
    )
    parser.add_argument(
        "--write-back",
        action="store_true",
        help=(
            "Sync the session back into a directory snapshot: write every file it "
            "holds and remove snapshot files it deleted"
        ),
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Pretty print output (JSON panel and colored diff)",
    )

    args = parser.parse_args(argv)

    try:
        arguments = json.loads(args.args)
    except ValueError as e:
        print(f"--args is not valid JSON: {e}", file=sys.stderr)
        return 2
    if not isinstance(arguments, dict):
        print("--args must be a JSON object", file=sys.stderr)
        return 2
    if args.diff:
        arguments["includeDiff"] = True
    if args.write_back and not os.path.isdir(args.snapshot):
        print("--write-back requires a directory snapshot", file=sys.stderr)
        return 2

    snapshots = LocalSnapshotAdapter()
    try:
        files, tree = snapshots.load(args.snapshot)
    except WorkspaceError as e:
        print(str(e), file=sys.stderr)
        return 2
    container.get_load_snapshot_use_case().execute(args.session, files, tree)

    handler = container.get_workspace_tools_handler(args.session)
    try:
        result = handler.run(args.tool, arguments)
    except ValueError as e:
        print(str(e), file=sys.stderr)
        return 2

    if args.write_back and result.get("success"):
        session = container.get_session_registry().get_or_create(args.session)
        final = [
            {"path": r.path, "content": r.content}
            for r in session.files.values()
            if not r.is_directory
        ]
        stale = [
            f["path"] for f in files if normalize_path(f["path"]) not in session.files
        ]
        snapshots.write_back(args.snapshot, final, stale)

    if args.pretty:
        _render_pretty(dict(result), args.tool)
    else:
        print(json.dumps(result, ensure_ascii=False, indent=2))
    return 0 if result.get("success") else 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
