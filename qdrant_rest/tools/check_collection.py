#!/usr/bin/env python
"""
Collection check for a Qdrant server
------------------------------------
Prints status, vector configuration, exact point count and a sample of point
ids for one collection. Connection settings come from QDRANT_* environment
variables (or .env) unless given on the command line.
"""

import argparse
import logging
import sys
from typing import Any, Dict, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich import box

from ..client import QdrantClient
from ..core.config import ConnectionConfig
from ..transport import HttpError, NetworkError, TransportError


def run_check(client: QdrantClient, collection: str, limit: int = 5, console: Optional[Console] = None) -> Dict[str, Any]:
    """
    Gather and print a summary of one collection

    Args:
        client: QdrantClient connected to the server
        collection: Collection name to inspect
        limit: Number of point ids to sample from the first scroll page
        console: Rich console to print to (a default one when omitted)

    Returns:
        Dict with status, points_count, vector_size, distance, count and sample_ids
    """
    console = console or Console()

    info = client.get_collection(collection).get("result", {})
    vectors = info.get("config", {}).get("params", {}).get("vectors", {})
    count = client.count_points(collection).get("result", {}).get("count", 0)
    page = client.scroll(collection, limit=limit, with_payload=False).get("result", {})
    sample_ids = [point.get("id") for point in page.get("points", [])]

    summary = {
        "status": info.get("status"),
        "points_count": info.get("points_count"),
        "vector_size": vectors.get("size"),
        "distance": vectors.get("distance"),
        "count": count,
        "sample_ids": sample_ids,
        "next_page_offset": page.get("next_page_offset"),
    }

    table = Table(title=f"Collection: {collection}", box=box.ROUNDED)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Status", str(summary["status"]))
    table.add_row("Points (reported)", str(summary["points_count"]))
    table.add_row("Points (counted)", str(summary["count"]))
    table.add_row("Vector size", str(summary["vector_size"]))
    table.add_row("Distance", str(summary["distance"]))
    table.add_row("Sample ids", ", ".join(str(i) for i in sample_ids) or "-")
    console.print(table)

    return summary


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Inspect a Qdrant collection")
    parser.add_argument("collection", help="Collection name")
    parser.add_argument("--host", help="Qdrant host (default: QDRANT_HOST or localhost)")
    parser.add_argument("--port", type=int, help="Qdrant port (default: QDRANT_PORT or 6333)")
    parser.add_argument("--api-key", help="API key sent in the api-key header")
    parser.add_argument("--scheme", choices=["http", "https"], help="Protocol scheme")
    parser.add_argument("--timeout", type=int, help="Request timeout in seconds")
    parser.add_argument("--config", help="Optional JSON or YAML config file")
    parser.add_argument("--limit", type=int, default=5, help="Number of sample point ids to show")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    console = Console()
    try:
        config = ConnectionConfig.from_env(args.config)
    except ValueError as e:
        console.print(f"[bold red]Configuration error: {escape(str(e))}[/bold red]")
        return 1
    overrides = {
        "host": args.host,
        "port": args.port,
        "api_key": args.api_key,
        "scheme": args.scheme,
        "timeout": args.timeout,
    }
    config = config.model_copy(update={k: v for k, v in overrides.items() if v is not None})

    logging.basicConfig(level=config.log_level)
    console.print(f"Connecting to Qdrant at {config.base_url}")

    client = QdrantClient.from_config(config)
    try:
        run_check(client, args.collection, args.limit, console)
    except HttpError as e:
        console.print(f"[bold red]HTTP error: {escape(e.message)}[/bold red]")
        console.print(f"Status code: {e.status_code}")
        return 1
    except NetworkError as e:
        console.print(f"[bold red]Network error: {escape(e.message)}[/bold red]")
        console.print(f"[yellow]Check that Qdrant is reachable at {config.base_url}[/yellow]")
        return 1
    except TransportError as e:
        console.print(f"[bold red]Transport error: {escape(e.message)}[/bold red]")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
