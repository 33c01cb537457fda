#!/usr/bin/env python3
"""
Basic star-history usage example.

Runs offline against the in-memory FakeGitHub, then against the real API
when a repository is given on the command line.
Run with: python examples/basic_usage.py [owner/name]
"""

import sys
from datetime import timedelta

from starhistory import (
    InvalidRepositoryError,
    StarHistoryClient,
    StarHistoryError,
    plan_pages,
    to_records,
)
from starhistory.testing import FakeGitHub, create_stargazer_timestamps

print("=== star-history Basic Usage Example ===\n")

# 1. Sample plans
print("1. Sample plans...")
for total_pages in (5, 15, 150):
    print(f"   {total_pages:>3} pages -> {plan_pages(total_pages)}")
print("\n   OK: Plans stay within the budget\n")

# 2. Exact history of a small repository
print("2. Exact history (few stargazers)...")
fake = FakeGitHub()
fake.add_repo("octo/small", starred_at=create_stargazer_timestamps(100))
fake.add_repo(
    "octo/large",
    starred_at=create_stargazer_timestamps(4500, interval=timedelta(hours=6)),
    stargazers_count=4512,
)

with StarHistoryClient(transport=fake.transport) as client:
    points = client.get_star_history("octo/small")
    for record in to_records(points):
        print(f"   {record['date']}  {record['count']}")
    print(f"   Requests: {len(fake.requests)}")
    assert points[-1].count == 100

    print("\n   OK: Every stargazer accounted for\n")

    # 3. Sampled history of a large repository
    print("3. Sampled history (many stargazers)...")
    fake.reset()
    points = client.get_star_history("octo/large")
    for record in to_records(points):
        print(f"   {record['date']}  {record['count']}")
    print(f"   Requests: {len(fake.requests)}")
    assert points[-1].count == 4512

    print("\n   OK: Last point is the live star count\n")

    # 4. Errors
    print("4. Errors...")
    try:
        client.get_star_history("not-a-repo")
    except InvalidRepositoryError as e:
        print(f"   Caught InvalidRepositoryError: {e}")
    try:
        client.get_star_history("octo/missing")
    except StarHistoryError as e:
        print(f"   Caught {type(e).__name__}: code={e.code}, message={e.message}")

print("\n   OK: Exception classes working\n")

# 5. Real API
if len(sys.argv) > 1:
    print(f"5. Live history of {sys.argv[1]} (set GITHUB_TOKEN to raise rate limits)...")
    with StarHistoryClient.from_env() as client:
        for point in client.get_star_history(sys.argv[1]):
            print(f"   {point.date.isoformat()}  {point.count}")

print("=== Done ===")
