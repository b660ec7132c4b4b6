#!/usr/bin/env python3
"""
Main script for running the linear vs. logistic regression comparison.
"""

# Pipeline overview:
# 1) Optionally simulate the birth-year/happiness sample from a fixed seed and
#    write it as a TSV file.
# 2) Load and validate the TSV sample.
# 3) Fit an OLS line and a centered logit model.
# 4) Convert the logit fit to per-point log-odds, odds and probabilities and
#    build 95% bands on the probability and log-odds scales.
# 5) Export predictions, coefficients, the narrative summary and figures.

import argparse
import logging
import os
import sys
import time

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from oddly.analysis import run_tutorial
from oddly.data_processing import load_sample
from oddly.output import write_sample
from oddly.reporting import print_summary
from oddly.schema import SimulationConfig
from oddly.simulation import simulate_tutorial_sample

DEFAULT_DATA_PATH = os.path.join("data", "birthyear_happiness.tsv")


def configure_logging(log_path="oddly_analysis.log"):
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(log_path, mode="w"),
        ],
    )


def build_arg_parser():
    """CLI parser for data location, simulation parameters and outputs."""
    parser = argparse.ArgumentParser(
        description="Compare linear and logistic regression on a binary outcome."
    )
    parser.add_argument("--data", default=DEFAULT_DATA_PATH, help="Tab-separated sample file.")
    parser.add_argument(
        "--simulate",
        action="store_true",
        help="Simulate the sample and write it to --data before analysis.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for --simulate (default: $ODDLY_SEED, else 0).",
    )
    parser.add_argument("--n", type=int, default=250, help="Sample size for --simulate.")
    parser.add_argument("--lo", type=int, default=1900, help="Lowest simulated birth year.")
    parser.add_argument("--hi", type=int, default=1999, help="Highest simulated birth year.")
    parser.add_argument("--output-dir", default="output")
    parser.add_argument("--no-plots", action="store_true", help="Skip figure rendering.")
    return parser


def main(argv=None):
    """Main execution function with step timing logs."""
    args = build_arg_parser().parse_args(argv)
    configure_logging()

    start_time = time.time()
    logging.info("Initializing regression comparison pipeline")

    try:
        if args.simulate:
            overrides = {"n": args.n, "lo": args.lo, "hi": args.hi}
            if args.seed is not None:
                overrides["seed"] = args.seed
            config = SimulationConfig.from_env(**overrides)
            logging.info(
                "Simulating %d points over [%d, %d] with seed %d",
                config.n,
                config.lo,
                config.hi,
                config.seed,
            )
            write_sample(simulate_tutorial_sample(config), args.data)

        step_start = time.time()
        sample = load_sample(args.data)
        logging.info(
            "Loaded %d points from %s in %.2f seconds",
            len(sample),
            args.data,
            time.time() - step_start,
        )

        step_start = time.time()
        results = run_tutorial(
            sample, output_dir=args.output_dir, make_plots=not args.no_plots
        )
        logging.info("Analysis completed in %.2f seconds", time.time() - step_start)
    except (FileNotFoundError, ValueError) as exc:
        logging.error("%s", exc)
        return 1

    print_summary(results["summary_lines"])

    logging.info("Total execution time: %.2f seconds", time.time() - start_time)
    logging.info("Generated output files:")
    for name, path in results["artifacts"].items():
        logging.info("  - %s: %s", name, path)
    for name, path in results["figures"].items():
        logging.info("  - %s figure: %s", name, path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
