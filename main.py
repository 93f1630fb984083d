# main.py
import argparse
import logging
import sys
from namecraft.app import NameCraftApp
from namecraft.config import Config, setup_logging
from namecraft.utils.formatters import format_category_tree, format_names

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="NameCraft name generator")
    parser.add_argument("--data-dir", help="Directory of the local store")
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser("generate", help="Generate names")
    generate_parser.add_argument("--category", default=None,
                                 help="Category id (general lists when omitted)")
    generate_parser.add_argument("--prefix", default="", help="Text put before every name")
    generate_parser.add_argument("--count", type=int, default=Config.GENERATION_COUNT)

    subparsers.add_parser("categories", help="Show the category tree")
    return parser

def main(argv=None) -> int:
    # Setup logging
    setup_logging()
    logger = logging.getLogger(__name__)

    args = build_parser().parse_args(argv)
    if getattr(args, "count", 0) < 0:
        print("--count must not be negative", file=sys.stderr)
        return 2

    try:
        app = NameCraftApp(args.data_dir)
        state = app.load()

        if args.command == "generate":
            names = app.name_lists.generate_names(args.category, args.prefix, args.count)
            print(format_names(names))
        elif args.command == "categories":
            print(format_category_tree(state["categories"]) or "No categories yet")
    except Exception as e:
        logger.error(f"Error running {args.command}: {e}", exc_info=True)
        raise

    return 0

if __name__ == "__main__":
    sys.exit(main())
