"""
Command-line interface for the file-backed document store.
"""

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from tqdm import tqdm

from .errors import ConflictError, NotFoundError
from .factory import create_database
from .manager import Database


def _print_json(value: Any) -> None:
    """Print a value as indented JSON."""
    print(json.dumps(value, indent=2, ensure_ascii=False))


def _load_payload(raw: str) -> Any:
    """Parse a JSON payload given on the command line."""
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON payload: {e}") from e


def import_documents(
    database: Database,
    collection_name: str,
    documents: Dict[str, Any],
    show_progress: bool = True,
) -> tuple[int, int, int]:
    """Create documents from a mapping of doc id to payload.

    Returns:
        Tuple of (created, conflicts, failed).
    """
    logger = logging.getLogger(__name__)
    store = database.collection(collection_name)

    created_count = 0
    conflict_count = 0
    failed_count = 0

    with tqdm(
        total=len(documents),
        unit="doc",
        desc=f"Importing {collection_name}",
        disable=not show_progress,
    ) as progress_bar:
        for doc_id, data in documents.items():
            try:
                store.create(doc_id, data)
                created_count += 1
            except ConflictError:
                conflict_count += 1
                logger.debug("Skipped existing document: %s", doc_id)
            except (OSError, TypeError) as e:
                failed_count += 1
                logger.warning("Failed to import %s: %s", doc_id, e)
            progress_bar.update(1)

    logger.info(
        "Import completed: %d created, %d conflicts, %d failed",
        created_count,
        conflict_count,
        failed_count,
    )
    return created_count, conflict_count, failed_count


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="Manage JSON documents stored as files"
    )
    parser.add_argument(
        "--database",
        help="Database directory name (default: $FILEDB_DATABASE_NAME "
        "or .data)",
    )
    parser.add_argument(
        "--base-dir",
        help="Directory holding the database (default: current directory)",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("init", help="Create the database directory")

    for name in ("create", "update"):
        command = commands.add_parser(name, help=f"{name.title()} a document")
        command.add_argument("collection")
        command.add_argument("doc_id")
        command.add_argument("data", help="JSON payload")

    for name in ("get", "delete"):
        command = commands.add_parser(name, help=f"{name.title()} a document")
        command.add_argument("collection")
        command.add_argument("doc_id")

    list_command = commands.add_parser(
        "list", help="List collections, or documents in a collection"
    )
    list_command.add_argument("collection", nargs="?")

    drop_command = commands.add_parser(
        "drop", help="Drop a collection, or the whole database"
    )
    drop_command.add_argument("collection", nargs="?")

    import_command = commands.add_parser(
        "import", help="Create documents from a JSON file of id -> payload"
    )
    import_command.add_argument("collection")
    import_command.add_argument("file")
    import_command.add_argument(
        "--no-progress", action="store_true", help="Disable progress bar"
    )
    return parser


def _run(args: argparse.Namespace, database: Database) -> int:
    """Execute a parsed command and return the exit code."""
    if args.command == "init":
        print(f"Database directory: {database.root}")
        return 0

    if args.command == "create":
        store = database.collection(args.collection)
        _print_json(store.create(args.doc_id, _load_payload(args.data)))
        return 0

    if args.command == "update":
        store = database.collection(args.collection)
        _print_json(store.update(args.doc_id, _load_payload(args.data)))
        return 0

    if args.command == "get":
        document = database.collection(args.collection).get(args.doc_id)
        if document is None:
            print(f"Document ({args.doc_id}) not found", file=sys.stderr)
            return 1
        _print_json(document)
        return 0

    if args.command == "delete":
        if not database.collection(args.collection).delete(args.doc_id):
            print(f"Document ({args.doc_id}) not deleted", file=sys.stderr)
            return 1
        print(f"Deleted {args.doc_id}")
        return 0

    if args.command == "list":
        if not args.collection:
            for name in database.list_collections():
                print(name)
            return 0
        _print_json(database.collection(args.collection).get_all())
        return 0

    if args.command == "drop":
        if args.collection:
            database.drop_collection(args.collection)
        else:
            database.drop()
        return 0

    with open(args.file, "r", encoding="utf-8") as f:
        documents = json.load(f)
    if not isinstance(documents, dict):
        print("Error: import file must hold a JSON object", file=sys.stderr)
        return 1

    created, conflicts, failed = import_documents(
        database,
        args.collection,
        documents,
        show_progress=not args.no_progress,
    )
    print("\nImport complete:")
    print(f"  Created: {created}")
    print(f"  Already existed (skipped): {conflicts}")
    print(f"  Failed: {failed}")
    return 1 if failed > 0 else 0


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point for the document store."""
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    try:
        database = create_database(args.database, args.base_dir)
        exit_code = _run(args, database)
    except (ConflictError, NotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        sys.exit(130)
    except Exception as e:  # pylint: disable=broad-except
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if exit_code:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
