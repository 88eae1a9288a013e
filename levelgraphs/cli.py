"""
Level-graphs: generates random level graphs as benchmark code.

Usage:
    levelgraphs -l 10 -n 20 -L Lisp -s 42
    levelgraphs -L Haskell -p preamble.hs -o bench.hs --percentage-ifs 0.2
    levelgraphs -L Graph --config settings.json --summary results/

The generated text goes to stdout unless -o is given; logs go to stderr.
"""
import sys
import logging
import argparse
from dataclasses import replace

from levelgraphs import VERSION
from levelgraphs.config import load_config, validate_request
from levelgraphs.core.rng import make_rng
from levelgraphs.emit.suite import assemble_suite
from levelgraphs.emit.targets import Target
from levelgraphs.pipeline import generate_graphs
from levelgraphs.utils.metrics import suite_summary
from levelgraphs.utils.save import save_suite_summary

logger = logging.getLogger("levelgraphs")

# Flags overriding the GeneratorConfig field of the same name
_OVERRIDES = ("output", "levels", "total_graphs", "language", "seed",
              "percentage_sources", "percentage_sinks", "percentage_ifs", "preamble")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="levelgraphs",
        description=f"Level-graphs: generates random level graphs, v-{VERSION}")
    parser.add_argument('-o', '--output', type=str, default=None,
                        help='Output to file. If nothing given it is output to stdout')
    parser.add_argument('-l', '--levels', type=int, default=None,
                        help='Number of different levels to generate. Default is 10')
    parser.add_argument('-n', '--total-graphs', type=int, default=None,
                        help='Total number of graphs to generate. Default is 20')
    parser.add_argument('-L', '--language', type=str, default=None,
                        help='Language to output in: Lisp, Haskell, or "Graph" for graphs. Default is Lisp')
    parser.add_argument('-s', '--seed', type=int, default=None,
                        help='Random seed for reproducibility (positive integer). Default is random')
    parser.add_argument('--percentage-sources', type=float, default=None,
                        help='Fraction of nodes that are data sources. Default is 0.4')
    parser.add_argument('--percentage-sinks', type=float, default=None,
                        help='Fraction of nodes that are sinks. Sources + sinks must be <= 1, '
                             'the rest are compute nodes. Default is 0')
    parser.add_argument('--percentage-ifs', type=float, default=None,
                        help='Probability that an eligible compute node becomes a conditional. '
                             'Applied last. Default is 0')
    parser.add_argument('-p', '--preamble', type=str, default=None,
                        help='Prepend the contents of this file to the generated code')
    parser.add_argument('--config', type=str, default=None,
                        help='JSON file with default settings (flags override it)')
    parser.add_argument('--summary', type=str, default=None, metavar='DIR',
                        help='Write a per-unit CSV summary under DIR')
    parser.add_argument('--verbose', action='store_true',
                        help='Log generation details to stderr')
    return parser


def config_from_args(args):
    """Config file values, overridden by every flag given on the command line."""
    config = load_config(args.config)
    given = {name: getattr(args, name) for name in _OVERRIDES if getattr(args, name) is not None}
    return replace(config, **given)


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(stream=sys.stderr,
                        level=logging.INFO if args.verbose else logging.WARNING,
                        format='%(asctime)s %(levelname)s %(message)s')

    config = config_from_args(args)
    errors = validate_request(config)
    if errors:
        for msg in errors:
            logger.error(f"[CLI] Error: {msg}")
        return 1

    try:
        rng = make_rng(config.seed)
        graphs = generate_graphs(config, rng)
        text = assemble_suite(Target.from_name(config.language), graphs)

        if config.preamble:
            with open(config.preamble, "r", encoding="utf-8") as f:
                text = f.read() + text

        if config.output:
            with open(config.output, "w", encoding="utf-8") as f:
                f.write(text)
            logger.info(f"[CLI] Wrote {len(graphs)} units to {config.output}")
        else:
            print(text)

        if args.summary:
            save_suite_summary(suite_summary(graphs), folder=args.summary,
                               suite_name=config.language.lower())
    except OSError as e:
        logger.error(f"[CLI] Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
