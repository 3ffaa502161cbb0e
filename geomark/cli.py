"""Command-line front end: ``python -m geomark BRAND``."""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from geomark.core import get_logger, load_config, set_log_level
from geomark.engine.orchestrator import generate_geometric_logos, generate_single_geometric_logo
from geomark.engine.qa import check_results
from geomark.engine.sdk import GeometricLogoResult, GeometricMethod
from geomark.utils.slug import safe_slug

log = get_logger("cli")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="geomark", description="Procedural geometric logo marks")
    ap.add_argument("brand", help="Brand name")
    ap.add_argument("--industry", default=None, help="Industry text (e.g. fintech, legal, coffee)")
    ap.add_argument("--aesthetic", default=None,
                    help="minimalist | tech | nature | bold, or a style alias; seeded pick when omitted")
    ap.add_argument("--seed", default=None, help="Base seed (defaults to the brand name)")
    ap.add_argument("--method", choices=[m.value for m in GeometricMethod], default=None,
                    help="Generate a single mark with this construction method")
    ap.add_argument("--out-dir", default=None, help="Write SVG files here instead of printing JSON")
    ap.add_argument("--config", default=None, help="Path to a geomark YAML config")
    ap.add_argument("--qa", action="store_true", help="Run QA gates; exit 1 on failures")
    ap.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return ap


def write_outputs(results: List[GeometricLogoResult], brand: str, out_dir: str,
                  write_manifest: bool = True) -> List[Path]:
    """Write one SVG per result as ``<slug>-<n>-<method>.svg``; returns the paths."""
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)
    slug = safe_slug(brand, limit=40)

    written = []
    manifest = []
    for i, result in enumerate(results, start=1):
        path = out / f"{slug}-{i}-{result.method.value}.svg"
        path.write_text(result.svg, encoding="utf-8")
        written.append(path)
        manifest.append({
            "file": path.name,
            "method": result.method.value,
            "aesthetic": result.aesthetic.value,
            "seed": result.seed,
        })

    if write_manifest:
        manifest_path = out / "manifest.json"
        manifest_path.write_text(json.dumps({"brand": brand, "logos": manifest}, indent=2), encoding="utf-8")
        written.append(manifest_path)
    log.info(f"Wrote {len(results)} marks to {out}")
    return written


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        cfg = load_config(args.config)
    except (OSError, ValueError) as e:
        print(f"Error: could not load config: {e}", file=sys.stderr)
        return 2

    set_log_level("DEBUG" if args.verbose else cfg.logging.level)
    if cfg.logging.log_file:
        get_logger(log_file=cfg.logging.log_file)

    industry = args.industry or cfg.engine.default_industry
    aesthetic = args.aesthetic or cfg.engine.default_aesthetic

    if args.method:
        results = [generate_single_geometric_logo(args.brand, args.method, aesthetic=aesthetic,
                                                  industry=industry, seed=args.seed)]
    else:
        results = generate_geometric_logos(args.brand, aesthetic=aesthetic, industry=industry, seed=args.seed)

    out_dir = args.out_dir or cfg.export.out_dir
    if out_dir:
        write_outputs(results, args.brand, out_dir, cfg.export.write_manifest)
    else:
        print(json.dumps([r.to_dict() for r in results], indent=2))

    if args.qa or cfg.export.qa:
        qa = check_results(results)
        for warning in qa.warnings:
            log.warning(warning)
        if not qa.ok:
            for fail in qa.fails:
                log.error(fail)
            return 1
        log.info("QA passed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
