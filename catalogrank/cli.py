#!/usr/bin/env python3
"""Catalog ranking CLI for searching and browsing a product catalog."""

import sys
import json
import argparse


def _items(args):
    from . import catalog
    return catalog.load_catalog(args.catalog)


def cmd_search(args):
    """Rank the catalog for a query."""
    from . import catalog
    from .config import scoring_config_from_env
    from .query import suggest_correction
    from .ranking import summarize
    from .scoring import explain

    query = " ".join(args.query)
    items = _items(args)
    results = catalog.search(
        query,
        items=items,
        min_price=args.min_price,
        max_price=args.max_price,
        category=args.category,
        config=scoring_config_from_env(),
    )
    summary = summarize(results)
    shown = results[:args.n]

    suggestion = suggest_correction(query, catalog.build_vocabulary(items))
    if suggestion and suggestion.lower() == " ".join(query.lower().split()):
        suggestion = None

    if args.json:
        print(json.dumps({
            "query": query,
            "results": [r.to_dict() for r in shown],
            "summary": summary.to_dict(),
            "suggestion": suggestion,
        }, indent=2))
        return

    if suggestion:
        print(f"Did you mean '{suggestion}'?\n")
    if not shown:
        print(f"No matches for '{query}'.")
        return

    print(f"-- Results for '{query}':\n")
    for r in shown:
        item = r.item
        price = f"${item.price:,.2f}" if item.price is not None else "n/a"
        print(f"  {item.name}")
        print(f"    Category: {item.category or '-'}  |  Price: {price}  |  Score: {r.match.score:.1f}")
        if args.explain:
            for label, value in explain(r.match):
                print(f"      {label:<18} {value:+.2f}")

    print(f"\n  {summary.total_results} result(s), average score {summary.average_score:.1f}")
    if summary.top_factors:
        print(f"  Top factors: {', '.join(summary.top_factor_labels())}")
    if summary.recommended_filters:
        print(f"  Filter by: {', '.join(summary.recommended_filters)}")
    print()


def cmd_catalog(args):
    """Show top catalog items."""
    from . import catalog

    results = catalog.get_top_items(n=args.n, items=_items(args))
    print(f"-- Top {len(results)} Catalog Items:\n")
    for i, r in enumerate(results, 1):
        item = r.item
        star = " *" if item.featured else ""
        rating = item.rating if item.rating is not None else "?"
        print(f"  {i:>3}. {item.name}{star} ({rating}/5, {item.review_count or 0} reviews)")
    print()


def cmd_suggest(args):
    """Suggest a spelling correction for a query."""
    from . import catalog
    from .query import suggest_correction

    query = " ".join(args.query)
    suggestion = suggest_correction(query, catalog.build_vocabulary(_items(args)))
    if suggestion:
        print(suggestion)
    else:
        print(f"No suggestion for '{query}'.")


def cmd_keywords(args):
    """Print the keywords extracted from a query."""
    from .query import keywords

    words = keywords(" ".join(args.query))
    if not words:
        print("No keywords.")
        return
    for word in words:
        print(f"  {word}")


def _positive_int(value):
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return n


def build_parser():
    from .config import RESULT_LIMIT

    parser = argparse.ArgumentParser(prog="catalogrank", description="Catalog relevance ranking CLI")
    parser.add_argument("--catalog", metavar="PATH", help="Catalog JSON file (default: $CATALOG_PATH)")
    subparsers = parser.add_subparsers(dest="command")

    # search
    search_parser = subparsers.add_parser("search", help="Rank the catalog for a query")
    search_parser.add_argument("query", nargs="+")
    search_parser.add_argument("-n", type=_positive_int, default=RESULT_LIMIT)
    search_parser.add_argument("--min-price", type=float)
    search_parser.add_argument("--max-price", type=float)
    search_parser.add_argument("--category", help="Only rank items in this category")
    search_parser.add_argument("--json", action="store_true", help="Print results as JSON")
    search_parser.add_argument("--explain", action="store_true", help="Show per-factor scores")

    # catalog
    cat_parser = subparsers.add_parser("catalog", help="Show top catalog items")
    cat_parser.add_argument("-n", type=_positive_int, default=20)

    # suggest
    suggest_parser = subparsers.add_parser("suggest", help="Suggest a corrected query")
    suggest_parser.add_argument("query", nargs="+")

    # keywords
    kw_parser = subparsers.add_parser("keywords", help="Extract query keywords")
    kw_parser.add_argument("query", nargs="+")

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "search": cmd_search,
        "catalog": cmd_catalog,
        "suggest": cmd_suggest,
        "keywords": cmd_keywords,
    }
    try:
        handlers[args.command](args)
    except (RuntimeError, ValueError) as e:
        print(f"  x {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
