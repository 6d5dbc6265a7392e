"""Timing demo - run both strategies with real simulated latency for a few users."""

import asyncio
from pathlib import Path

from fanfetch import ContentFetcher, FetchConfig, save_json

# Demo users
USER_IDS = [
    "demoUser",
    "u1",
    "u2",
]

OUTPUT_DIR = Path(__file__).parent.parent / "reports"


async def run_user(fetcher: ContentFetcher, user_id: str, save: bool = True) -> dict:
    """Run both strategies for one user and print what came back."""
    print(f"\n{'='*60}")
    print(f"Fetching content for {user_id}...")
    print(f"{'='*60}")

    comparison = await fetcher.compare(user_id)

    for report in (comparison.sequential, comparison.parallel):
        print(f"\n--- {report.strategy.value} ({report.elapsed_ms}ms) ---")
        print(f"  {report.message}")
        for error in report.errors:
            print(f"  ⚠️  {error.stage}: {error.message}")
        for post in report.posts:
            status = f"{len(post.comments)} comments" if post.comments_ok else f"❌ {post.comments_error}"
            print(f"  Post #{post.post_id}: {post.title} [{status}]")

        if save:
            path = save_json(report, OUTPUT_DIR)
            print(f"  ✓ Saved JSON: {path}")

    return {
        "user_id": user_id,
        "sequential_ms": comparison.sequential.elapsed_ms,
        "parallel_ms": comparison.parallel.elapsed_ms,
        "errors": len(comparison.sequential.errors) + len(comparison.parallel.errors),
    }


async def main():
    """Run the demo for every user."""
    print("=" * 60)
    print("Sequential vs. parallel")
    print("=" * 60)
    print(f"Users: {', '.join(USER_IDS)}")

    results = []
    async with ContentFetcher(FetchConfig(log_level="WARNING")) as fetcher:
        for user_id in USER_IDS:
            results.append(await run_user(fetcher, user_id))

    print("\n" + "=" * 60)
    print("SUMMARY")
    print("=" * 60)

    print("\n| User      | Sequential | Parallel | Errors |")
    print("|-----------|------------|----------|--------|")
    for r in results:
        print(
            f"| {r['user_id']:<9} | {r['sequential_ms']:>8}ms | {r['parallel_ms']:>6}ms | {r['errors']:<6} |"
        )


if __name__ == "__main__":
    asyncio.run(main())
