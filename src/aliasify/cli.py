# src/aliasify/cli.py
import sys
import argparse
import os
from pathlib import Path

# Module imports
from aliasify.config import VERSION
from aliasify.core.exclude import load_exclude_spec
from aliasify.core.walker import ImportRewriter
from aliasify.errors import AliasifyError
from aliasify.models import FileResult

def create_arg_parser():
    parser = argparse.ArgumentParser(
        prog="aliasify",
        description="Rewrite relative TypeScript imports that climb back up to 'src' into '@/' alias imports."
    )
    parser.add_argument(
        "path",
        type=str,
        nargs="?",
        default=os.getcwd(),
        help="The root path to search for .ts(x) files from (default: current directory)"
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {VERSION}")
    return parser

def main():
    try:
        # 1. Setup
        parser = create_arg_parser()
        args = parser.parse_args()

        root_dir = Path(args.path).resolve()
        if not root_dir.exists():
            print(f"Error: Invalid path '{root_dir}'", file=sys.stderr)
            sys.exit(1)

        print(f"--- aliasify ---")
        print(f"Scanning: {root_dir}")

        # 2. Walk & rewrite
        rewriter = ImportRewriter(root_dir, load_exclude_spec())
        results: list[FileResult] = rewriter.run()

        # 3. Summary
        changed_files = [f for f in results if f.changed]
        total_imports = sum(f.rewritten for f in changed_files)
        total_malformed = sum(f.malformed for f in results)

        if not changed_files:
            print("No imports needed rewriting.")
        else:
            print("-" * 60)
            print(f"Rewritten imports: {total_imports} in {len(changed_files)} file(s)")

        if total_malformed:
            print(f"Skipped malformed imports: {total_malformed} (see warnings above)")

    except AliasifyError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    except KeyboardInterrupt:
        print("\nCancelled.")
        sys.exit(1)

    except Exception as e:
        print(f"An unexpected error occurred: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()
