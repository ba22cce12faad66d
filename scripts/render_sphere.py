"""Render sentences onto the semantic sphere and save the figure as an image."""

from __future__ import annotations

import argparse
import logging
import os
import sys

import matplotlib

matplotlib.use("Agg")

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from semantic_sphere.config import Config
from semantic_sphere.plot import plot_sentences
from semantic_sphere.positioning import make_strategy
from semantic_sphere.render import render_axis_grid, render_sphere, save_figure
from semantic_sphere.sentences import UnmappedWordsError, validate_sentence

DEFAULT_SENTENCES = [
    "The stone became sand became dust became matter",
    "A tree grew in the city",
    "I think the universe is eternal",
]


def build_argparser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--sentence", "-s",
        action="append",
        dest="sentences",
        help="Sentence to plot (repeatable). Defaults to a few sample journeys.",
    )
    parser.add_argument("--out", default="sphere.png", help="Output image path")
    parser.add_argument("--strategy", choices=["spherical", "axes"], default=None)
    parser.add_argument("--axes", nargs=3, metavar="DIM", help="Dimensions for --strategy axes")
    parser.add_argument("--grid", action="store_true", help="Render every dimension triple side by side")
    parser.add_argument("--hide-layers", action="store_true", help="Do not draw the abstraction shells")
    parser.add_argument("--match-policy", choices=["whole", "substring"], default=None)
    parser.add_argument("--skip-invalid", action="store_true", help="Drop sentences with unmapped words instead of failing")
    parser.add_argument("--debug", action="store_true", help="Log per-word diagnostics")
    return parser


def main() -> int:
    args = build_argparser().parse_args()
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO)
    if args.debug:
        Config.core.DEBUG = True
    if args.match_policy:
        Config.classifier.MATCH_POLICY = args.match_policy

    sentences = []
    for text in args.sentences or DEFAULT_SENTENCES:
        try:
            sentences.append(validate_sentence(text))
        except UnmappedWordsError as e:
            if not args.skip_invalid:
                print(f"Rejected '{text}': unmapped words {', '.join(e.words)}", file=sys.stderr)
                return 1
            print(f"Skipping '{text}': unmapped words {', '.join(e.words)}")

    if not sentences:
        print("Nothing to plot", file=sys.stderr)
        return 1

    if args.grid:
        fig = render_axis_grid(sentences)
    else:
        result = plot_sentences(sentences, make_strategy(args.strategy, args.axes))
        print(f"Plotted {len(result)} words and {len(result.paths)} paths ({result.strategy})")
        fig = render_sphere(result, show_layers=not args.hide_layers)

    path = save_figure(fig, args.out)
    print(f"Visualization saved to {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
