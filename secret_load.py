"""
secret_load.py - simple async load script against /secret

Usage:
  python secret_load.py --base http://127.0.0.1:3000 --user admin --password password --count 5000 --concurrency 100

Every request carries the same Authorization header, so every response should
be identical; the script reports how many distinct (status, body) pairs it saw.
"""
import argparse
import asyncio
import time
from collections import Counter
from datetime import datetime, timezone

import httpx


def _now_iso():
    return datetime.now(timezone.utc).isoformat()


async def _hit_one(client: httpx.AsyncClient, url: str):
    try:
        r = await client.get(url, timeout=10)
        return r.status_code, r.text
    except httpx.HTTPError as exc:
        return None, type(exc).__name__


async def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--base", default="http://127.0.0.1:3000")
    parser.add_argument("--user", default="admin")
    parser.add_argument("--password", default="password")
    parser.add_argument("--count", type=int, default=5000)
    parser.add_argument("--concurrency", type=int, default=100)
    args = parser.parse_args()

    url = f"{args.base}/secret"
    outcomes = Counter()

    start_iso = _now_iso()
    t0 = time.perf_counter()

    limit = httpx.Limits(max_connections=args.concurrency, max_keepalive_connections=args.concurrency)
    auth = httpx.BasicAuth(args.user, args.password)
    async with httpx.AsyncClient(limits=limit, auth=auth) as client:
        sem = asyncio.Semaphore(args.concurrency)

        async def _task():
            async with sem:
                outcomes[await _hit_one(client, url)] += 1

        await asyncio.gather(*(_task() for _ in range(args.count)))

    dt = time.perf_counter() - t0
    end_iso = _now_iso()
    ok = sum(n for (status, _), n in outcomes.items() if status == 200)
    print(f"START: {start_iso}")
    print(f"END:   {end_iso}")
    print(f"TOTAL: {dt:.3f} s")
    print(f"OPS:   requests={args.count}, ok={ok}, fail={args.count - ok}")
    if dt > 0:
        print(f"RPS:   {args.count/dt:.1f} req/s")
    print(f"DISTINCT RESPONSES: {len(outcomes)}")
    for (status, body), n in outcomes.most_common():
        print(f"  {status} {body!r}: {n}")


if __name__ == "__main__":
    asyncio.run(main())
