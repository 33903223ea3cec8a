# Command-line front end: generate a star field and report what was produced.
# The positions themselves are handed to the caller's renderer, not written out here.
import argparse
import logging

from stargen import Galaxy_Wrapper, GeneratorConfig
from stargen.utils import setup_logging

logger = logging.getLogger("stargen.main")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Gaussian galactic-disk star generator")
    parser.add_argument("--config", help="Path to a JSON generator config")
    parser.add_argument("--strategy", choices=["unconstrained", "small", "large"], help="Generation strategy")
    parser.add_argument("--count", help="Number of stars", type=int)
    parser.add_argument("--min_distance", help="Minimum distance between stars", type=float)
    parser.add_argument("--min_center_distance", help="Minimum distance between stars and the origin", type=float)
    parser.add_argument("--size", help="Standard deviation of the distribution", type=float)
    parser.add_argument("--thickness", help="Axial compression along the z-axis", type=float)
    parser.add_argument("--seed", help="Random seed", type=int)
    parser.add_argument("--max_attempts", help="Give up after this many rejected candidates for one star", type=int)
    parser.add_argument("--backend", choices=["numpy", "warp"], help="Nearest-distance backend")
    parser.add_argument("--device", help="Warp device, e.g. cpu or cuda:0", type=str)
    parser.add_argument("--log_level", help="Logging level", default="INFO",
                        type=str.upper, choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    parser.add_argument("--log_file", help="Also write the log to this file")
    return parser.parse_args(argv)


def build_config(args):
    """Start from the config file (or defaults) and apply any flags given on the command line."""
    if args.config:
        config = GeneratorConfig.from_json(args.config)
    else:
        config = GeneratorConfig()
    for key in ("strategy", "count", "min_distance", "min_center_distance", "size",
                "thickness", "seed", "max_attempts", "backend", "device"):
        value = getattr(args, key)
        if value is not None:
            setattr(config, key, value)
    return config


def main(argv=None):
    args = parse_args(argv)
    setup_logging(level=getattr(logging, args.log_level), log_file=args.log_file)

    config = build_config(args)
    logger.debug("Using %r", config)

    gen = Galaxy_Wrapper(config=config)
    gen.generate()

    summary = gen.summary()
    logger.info("Generated %d stars in %.3fs", summary["count"], summary["elapsed"])
    if summary["count"] > 0:
        logger.info("Radius range: [%.3f, %.3f]", summary["min_radius"], summary["max_radius"])
        logger.info("Spread: xy std %.3f, z std %.3f", summary["xy_std"], summary["z_std"])
    return summary


if __name__ == "__main__":
    main()
