from __future__ import annotations

import argparse
import sys

from .. import __version__
from ..core.context import RunContext
from ..core.errors import ShimScanError
from ..core.exit_codes import ERR_INTERNAL
from .output import build_base_payload, emit, render_error, resolve_output_format


def _run_options() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(add_help=False)
    p.add_argument("--config", help="YAML run configuration file")
    p.add_argument("--out-dir", help="directory for shims.txt, shims-map.csv and shims-report.json")
    p.add_argument("--shims-dir", help="shim registry directory (default: $SCOOP/shims)")
    p.add_argument("--posix-shell", help="path to the POSIX shell binary used for .sh scripts")
    p.add_argument("--dry-run", action="store_true", help="plan only: no registry changes, no state entries")
    return p


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="shimscan")
    p.add_argument("--version", action="version", version=f"shimscan {__version__}")
    p.add_argument("--json", action="store_true", help="emit JSON output")
    p.add_argument("--format", choices=["text", "json"], default=None, help="output format")
    p.add_argument("--run-id", help="run identifier for logs and reports")
    p.add_argument("--log-json", action="store_true", help="write log events as JSON lines")
    vg = p.add_mutually_exclusive_group()
    vg.add_argument("--verbose", action="store_true", help="enable debug log events")
    vg.add_argument("--quiet", action="store_true", help="only log warnings and errors")
    sub = p.add_subparsers(dest="cmd", required=True)

    run_opts = _run_options()
    scan_p = sub.add_parser("scan", parents=[run_opts], help="scan app families and register their scripts as shims")
    scan_p.add_argument("--root", help="root directory holding <family>/<app>/current trees")
    scan_p.add_argument("--families", help="comma-separated family allow-list (default: all)")
    scan_p.add_argument("--include-version", action="store_true", help="append -v<version> to shim names")

    sub.add_parser("clean", parents=[run_opts], help="remove shims recorded in shims.txt")
    sub.add_parser("doctor", parents=[run_opts], help="show interpreter and shim registry diagnostics")
    sub.add_parser("version", help="print version")
    return p


def _context(ns: argparse.Namespace, fmt: str) -> RunContext:
    return RunContext.from_args(
        root=getattr(ns, "root", None),
        out_dir=getattr(ns, "out_dir", None),
        shims_dir=getattr(ns, "shims_dir", None),
        families=getattr(ns, "families", None),
        include_version=getattr(ns, "include_version", False),
        dry_run=getattr(ns, "dry_run", False),
        posix_shell=getattr(ns, "posix_shell", None),
        config=getattr(ns, "config", None),
        run_id=ns.run_id,
        output_format="json" if fmt == "json" else "text",
        verbose=ns.verbose,
        quiet=ns.quiet,
        log_json=ns.log_json,
    )


def main(argv: list[str] | None = None) -> int:
    ns = build_parser().parse_args(argv)
    fmt = resolve_output_format(cli_json=ns.json, cli_format=ns.format)
    as_json = fmt == "json"
    try:
        ctx = _context(ns, fmt)
        if ns.cmd == "version":
            emit({**build_base_payload(ctx), "shimscan_version": __version__}, as_json)
            return 0
        if ns.cmd == "scan":
            from ..scan.command import run_scan_command

            return run_scan_command(ctx, as_json)
        if ns.cmd == "clean":
            from ..commands.clean import run_clean_command

            return run_clean_command(ctx, as_json)
        if ns.cmd == "doctor":
            from ..commands.doctor import run_doctor

            return run_doctor(ctx, as_json)
        return 2
    except ShimScanError as exc:
        print(render_error(as_json=as_json, message=str(exc), code=exc.code, kind=exc.kind), file=sys.stderr)
        return exc.code
    except Exception as exc:  # pragma: no cover
        print(render_error(as_json=as_json, message=f"internal error: {exc}", code=ERR_INTERNAL), file=sys.stderr)
        return ERR_INTERNAL


if __name__ == "__main__":
    raise SystemExit(main())
