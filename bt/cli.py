from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from .config import DEFAULT_CFG_FILE, BtConfig, load_config
from .errors import BTUserError
from .jsonic import dumps as jdumps
from .loader import load_specs
from .report_schema import BlockCheck, CheckReport, NamesReport, PlanReport
from .template import BlockRegistry, TemplateRegistrar
from .template.errors import TemplateError
from .version import tool_version


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="bt",
        description="Block Templater (block specification compiler)",
        add_help=True,
    )
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {tool_version()}")
    p.add_argument("--verbose", action="store_true", help="debug logging to stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    # Common arguments for all subcommands
    def add_common(sp: argparse.ArgumentParser) -> None:
        sp.add_argument(
            "paths",
            nargs="+",
            type=Path,
            help="specification files (.json/.yaml) or directories to scan",
        )
        sp.add_argument(
            "--config",
            type=Path,
            default=None,
            help=f"configuration file (default: ./{DEFAULT_CFG_FILE} if present)",
        )

    sp_check = sub.add_parser("check", help="Compile all specifications, JSON report of errors")
    add_common(sp_check)

    sp_plan = sub.add_parser("plan", help="Build plans as JSON")
    add_common(sp_plan)
    sp_plan.add_argument(
        "--name",
        action="append",
        metavar="BLOCK",
        help="only print the plan of this block (can be given several times)",
    )

    sp_list = sub.add_parser("list", help="Block names found in the specifications (JSON)")
    add_common(sp_list)

    return p


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose or os.environ.get("BT_DEBUG") else logging.WARNING
    root = logging.getLogger("bt")
    root.setLevel(level)
    if not root.handlers:
        h = logging.StreamHandler(sys.stderr)
        h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        root.addHandler(h)


def _config(ns: argparse.Namespace) -> BtConfig:
    path = ns.config
    if path is None:
        path = Path.cwd() / DEFAULT_CFG_FILE
    elif not path.is_file():
        raise ValueError(f"Config file not found: {path}")
    return load_config(path)


def run_check(paths: List[Path], cfg: BtConfig) -> CheckReport:
    """
    Registers every specification into a scratch registry and reports
    each outcome; failures do not stop the run.
    """
    registrar = TemplateRegistrar(BlockRegistry(), cfg)
    blocks: List[BlockCheck] = []
    for source, raw in load_specs(paths, cfg.spec_extensions):
        name = raw.get("name") if isinstance(raw.get("name"), str) else None
        try:
            init = registrar.add_template(raw)
        except TemplateError as e:
            blocks.append(BlockCheck(
                name=name, source=str(source), ok=False,
                error=str(e), error_type=type(e).__name__,
            ))
            continue
        blocks.append(BlockCheck(
            name=name, source=str(source), ok=True,
            dangling_fields=len(init.plan.dangling_fields),
        ))
    return CheckReport(ok=all(b.ok for b in blocks), blocks=blocks)


def run_plan(paths: List[Path], cfg: BtConfig, only: Optional[List[str]] = None) -> PlanReport:
    registry = BlockRegistry()
    registrar = TemplateRegistrar(registry, cfg)
    registrar.add_templates(raw for _, raw in load_specs(paths, cfg.spec_extensions))
    registry.freeze()

    names = only or registry.names()
    plans = []
    for name in names:
        init = registry.get(name)
        if init is None:
            raise ValueError(f"Block '{name}' not found")
        plans.append(init.plan.to_dict())
    return PlanReport(plans=plans)


def main(argv: list[str] | None = None) -> int:
    ns = _build_parser().parse_args(argv)
    _setup_logging(ns.verbose)

    try:
        cfg = _config(ns)

        if ns.cmd == "check":
            report = run_check(ns.paths, cfg)
            sys.stdout.write(jdumps(report.model_dump(mode="json", by_alias=True)))
            return 0 if report.ok else 1

        if ns.cmd == "plan":
            plan_report = run_plan(ns.paths, cfg, ns.name)
            sys.stdout.write(jdumps(plan_report.model_dump(mode="json")))
            return 0

        if ns.cmd == "list":
            names = [
                raw["name"] for _, raw in load_specs(ns.paths, cfg.spec_extensions)
                if isinstance(raw.get("name"), str)
            ]
            sys.stdout.write(jdumps(NamesReport(names=names).model_dump(mode="json")))
            return 0

    except BTUserError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2
    except ValueError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
