"""
Command-line runner for the Gaussian model.

Subcommands:
- pdf:      density at a point
- cdf:      P(X <= x)
- prob:     probability of an interval (use --lo=-inf for negative values)
- quantile: inverse CDF

Prints a single key=value result line. Invalid parameters exit with status 2.
"""
from __future__ import annotations

import argparse
import logging
import math
import sys
from typing import Optional, Sequence

from .config import QuadratureConfig
from .density import density
from .distribution import Continuous, distribution
from .params import InvalidParameter
from .sets import Interval
from .utils.logging import get_logger, log_metrics


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="gauss-measure", description="Gaussian density and probabilities on ℝ")
    ap.add_argument("--verbose", action="store_true", help="Log parameters and results at INFO")
    sub = ap.add_subparsers(dest="command", required=True)

    def _common(p: argparse.ArgumentParser) -> None:
        p.add_argument("--mean", type=float, default=0.0, help="Mean μ (default 0)")
        p.add_argument("--variance", type=float, default=1.0, help="Variance v >= 0 (default 1)")

    p_pdf = sub.add_parser("pdf", help="Density at x")
    _common(p_pdf)
    p_pdf.add_argument("--x", type=float, required=True)

    p_cdf = sub.add_parser("cdf", help="P(X <= x)")
    _common(p_cdf)
    p_cdf.add_argument("--x", type=float, required=True)

    p_prob = sub.add_parser("prob", help="Probability of an interval")
    _common(p_prob)
    p_prob.add_argument("--lo", type=float, default=-math.inf, help="Lower bound (default -inf)")
    p_prob.add_argument("--hi", type=float, default=math.inf, help="Upper bound (default inf)")
    p_prob.add_argument("--open-lo", action="store_true", help="Exclude the lower bound")
    p_prob.add_argument("--open-hi", action="store_true", help="Exclude the upper bound")
    p_prob.add_argument("--quadrature", action="store_true", help="Integrate the density numerically")

    p_q = sub.add_parser("quantile", help="Inverse CDF at p")
    _common(p_q)
    p_q.add_argument("--p", type=float, required=True)
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    logger = get_logger(level=logging.INFO if args.verbose else logging.WARNING)

    try:
        cfg = QuadratureConfig.from_env()
        dist = distribution(args.mean, args.variance, config=cfg)
        if args.command == "pdf":
            key, value = "pdf", float(density(args.mean, args.variance, args.x))
        elif args.command == "cdf":
            key, value = "cdf", dist.cdf(args.x)
        elif args.command == "prob":
            s = Interval(args.lo, args.hi, not args.open_lo, not args.open_hi)
            if args.quadrature and isinstance(dist, Continuous):
                value = dist.integral_of_density(s)
            else:
                value = dist.probability_of(s)
            key = "prob"
        else:
            key, value = "quantile", dist.quantile(args.p)
    except InvalidParameter as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    log_metrics({"mean": args.mean, "variance": args.variance}, logger=logger)
    print(f"{key}={value:.10g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
