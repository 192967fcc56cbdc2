"""SieveStore command line demo."""

from __future__ import annotations

import argparse
import time

from sievestore.core.cache import SieveCache
from sievestore.core.filters import longer_than
from sievestore.core.utils import ttl_from_env

DEFAULT_PAIRS = ["key1=sh", "key2=longerString"]


def _parse_pairs(raw_pairs: list[str]) -> list[tuple[str, str]]:
    pairs = []
    for raw in raw_pairs:
        key, sep, value = raw.partition("=")
        if not sep or not key:
            raise ValueError(f"Expected KEY=VALUE, got {raw!r}")
        pairs.append((key, value))
    return pairs


def _print_lookup(cache: SieveCache, keys: list[str]) -> list[str]:
    found_keys = []
    for key in keys:
        value, found = cache.get(key)
        if found:
            found_keys.append(key)
            print(f"✅ Found {key}: {value}")
        else:
            print(f"❌ {key} not found")
    return found_keys


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="SieveStore expiring filtered store demo")
    parser.add_argument("pairs", nargs="*", metavar="KEY=VALUE", help="Entries to offer to the store")
    parser.add_argument("--ttl", type=float, default=None, help="Entry time-to-live in seconds (default: $SIEVESTORE_TTL or 10)")
    parser.add_argument("--longer-than", type=int, default=3, help="Admit only values longer than this (default 3)")
    parser.add_argument("--wait", type=float, default=None, help="Seconds to wait before the expiry check (default: ttl + 1)")
    args = parser.parse_args(argv)

    try:
        pairs = _parse_pairs(args.pairs or DEFAULT_PAIRS)
    except ValueError as exc:
        print(f"❌ {exc}")
        return 2

    ttl = args.ttl if args.ttl is not None else ttl_from_env()
    wait = args.wait if args.wait is not None else ttl + 1
    if not wait >= 0:
        print(f"❌ --wait must be >= 0, got {wait:g}")
        return 2

    try:
        cache = SieveCache(ttl, longer_than(args.longer_than))
    except ValueError as exc:
        print(f"❌ {exc}")
        return 2

    with cache:
        for key, value in pairs:
            cache.set(key, value)

        admitted = _print_lookup(cache, [key for key, _ in pairs])
        if not admitted:
            return 0

        print(f"\n⏳ Waiting {wait:g}s (ttl {ttl:g}s)...")
        time.sleep(wait)
        for key in admitted:
            if not cache.get(key)[1]:
                print(f"⌛ {key} expired")
            else:
                print(f"✅ {key} still live")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
