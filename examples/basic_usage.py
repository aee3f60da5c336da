#!/usr/bin/env python
"""
qdrant_rest - basic usage
-------------------------
Walks through every client operation against a running Qdrant server:
collections management, upserts, vector search with and without filters,
payload updates, scrolling, counting, recommendations and batch search.

Connection settings are read from QDRANT_* environment variables (or .env).
"""

import logging
import sys
import time

from rich.console import Console
from rich.markup import escape

from qdrant_rest import (
    ConnectionConfig,
    HttpError,
    NetworkError,
    QdrantClient,
    TransportError,
)

COLLECTION_NAME = "test_collection"

POINTS = [
    {"id": 1, "vector": [0.05, 0.61, 0.76, 0.74], "payload": {"city": "Berlin", "country": "Germany", "price": 100}},
    {"id": 2, "vector": [0.19, 0.81, 0.75, 0.11], "payload": {"city": "London", "country": "UK", "price": 200}},
    {"id": 3, "vector": [0.36, 0.55, 0.47, 0.94], "payload": {"city": "Moscow", "country": "Russia", "price": 150}},
    {"id": 4, "vector": [0.18, 0.01, 0.85, 0.80], "payload": {"city": "Paris", "country": "France", "price": 250}},
]

console = Console()


def print_section(title):
    """Print a section header"""
    console.print("\n" + "=" * 70)
    console.print(f"  [bold]{title}[/bold]")
    console.print("=" * 70 + "\n")


def success(message):
    console.print(f"[green]✔ {message}[/green]")


def info(message):
    console.print(f"[blue]ℹ {message}[/blue]")


def run_examples(client):
    print_section("Step 1: Create Collection")
    info("Creating collection with 4-dimensional vectors and Cosine distance")
    result = client.create_collection(COLLECTION_NAME, 4, "Cosine")
    success(f"Collection created: {result['status']}")

    print_section("Step 2: Insert Points (Upsert)")
    result = client.upsert_points(COLLECTION_NAME, POINTS)
    success(f"Points inserted: {result['status']}")
    info(f"Inserted {len(POINTS)} points with vectors and metadata")

    print_section("Step 3: Basic Vector Search")
    info("Searching for vectors similar to [0.2, 0.1, 0.9, 0.7]")
    hits = client.search(COLLECTION_NAME, [0.2, 0.1, 0.9, 0.7], 3)
    console.print("Top 3 similar cities:")
    for i, point in enumerate(hits["result"], start=1):
        payload = point["payload"]
        console.print(f"  {i}. {payload['city']} (Price: {payload['price']}) - Similarity: {point['score']:.4f}")

    print_section("Step 4: Search with Filter (price > 150)")
    price_filter = {"must": [{"key": "price", "range": {"gt": 150}}]}
    hits = client.search(COLLECTION_NAME, [0.2, 0.1, 0.9, 0.7], 10, price_filter)
    for point in hits["result"]:
        payload = point["payload"]
        console.print(f"  • {payload['city']} (Price: {payload['price']}, Score: {point['score']:.4f})")

    print_section("Step 5: Get Point by ID")
    point = client.get_point(COLLECTION_NAME, 1)
    success(f"Retrieved point #1: {point['result']['payload']['city']}")
    console.print(f"Vector: {point['result']['vector']}")

    print_section("Step 6: Update Payload")
    info('Adding "updated" field to points 1 and 2')
    client.set_payload(COLLECTION_NAME, {"updated": True, "timestamp": int(time.time())}, [1, 2])
    success("Payload updated for 2 points")

    print_section("Step 7: Scroll Through Points")
    info("Using cursor-based pagination (limit=2)")
    page = client.scroll(COLLECTION_NAME, 2)
    for point in page["result"]["points"]:
        console.print(f"  • {point['payload']['city']} (ID: {point['id']})")
    next_offset = page["result"].get("next_page_offset")
    info(f"Next offset: {next_offset if next_offset is not None else 'null (end of results)'}")

    print_section("Step 8: Count Points")
    count = client.count_points(COLLECTION_NAME)
    success(f"Total points in collection: {count['result']['count']}")
    count = client.count_points(COLLECTION_NAME, {"must": [{"key": "price", "range": {"gte": 200}}]})
    info(f"Points with price >= 200: {count['result']['count']}")

    print_section("Step 9: Content-based Recommendations")
    info("Find points similar to Berlin, but not like Paris")
    recommendations = client.recommend(COLLECTION_NAME, [1], [4], 3)
    for i, point in enumerate(recommendations["result"], start=1):
        console.print(f"  {i}. {point['payload']['city']} (Score: {point['score']:.4f})")

    print_section("Step 10: Batch Search (Multiple Queries)")
    batch = client.search_batch(COLLECTION_NAME, [
        {"vector": [0.1, 0.2, 0.3, 0.4], "limit": 2, "with_payload": True},
        {"vector": [0.9, 0.8, 0.7, 0.6], "limit": 2, "with_payload": True},
    ])
    for i, results in enumerate(batch["result"], start=1):
        console.print(f"Query {i} results:")
        for point in results:
            city = point.get("payload", {}).get("city", "Unknown")
            console.print(f"  • {city} (Score: {point['score']:.4f})")

    print_section("Step 11: Get Collection Info")
    collection = client.get_collection(COLLECTION_NAME)["result"]
    vectors = collection["config"]["params"]["vectors"]
    console.print(f"Status: {collection['status']}")
    console.print(f"Points count: {collection['points_count']}")
    console.print(f"Vector size: {vectors['size']}")
    console.print(f"Distance: {vectors['distance']}")

    print_section("Step 12: Delete Operations")
    info("Deleting points 3 and 4")
    client.delete_points(COLLECTION_NAME, [3, 4])
    success("2 points deleted")
    count = client.count_points(COLLECTION_NAME)
    info(f"Remaining points: {count['result']['count']}")

    print_section("Step 13: Cleanup")
    client.delete_collection(COLLECTION_NAME)
    success("Collection deleted successfully")


def main():
    config = ConnectionConfig.from_env()
    logging.basicConfig(level=config.log_level)
    client = QdrantClient.from_config(config)

    console.print(f"\nqdrant_rest - basic usage examples against {config.base_url}")
    try:
        run_examples(client)
    except HttpError as e:
        console.print(f"[bold red]HTTP error: {escape(e.message)}[/bold red]")
        console.print(f"Status code: {e.status_code}")
        if e.response:
            console.print("API response:")
            console.print_json(data=e.response)
        return 1
    except NetworkError as e:
        console.print(f"[bold red]Network error: {escape(e.message)}[/bold red]")
        console.print(f"[yellow]Check that Qdrant is running at {config.base_url}[/yellow]")
        return 1
    except TransportError as e:
        console.print(f"[bold red]Transport error: {escape(e.message)}[/bold red]")
        console.print(f"Status code: {e.status_code}")
        return 1

    success("All examples completed successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
