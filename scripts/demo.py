#!/usr/bin/env python3
"""
Demo script for the Guild Wars 2 API client.

This script fetches a few public endpoints with the blocking client, and the
account overview when GW2API_ACCESS_TOKEN (or APIKEY) is set.
"""

import time

from gw2api import Gw2ApiError, blocking, settings
from gw2api.v2.account import Account, AccountLuck, AccountWallet
from gw2api.v2.build import Build
from gw2api.v2.commerce import Exchange
from gw2api.v2.currencies import Currency
from gw2api.v2.worlds import World


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def demo_build(client: blocking.Client) -> None:
    print_section("Game Build")

    start = time.time()
    build = Build.get(client)
    duration = (time.time() - start) * 1000
    print(f"\n  Build id: {build.id} ({duration:.2f}ms)")


def demo_worlds(client: blocking.Client) -> None:
    """Show the most populated worlds."""
    print_section("Worlds")

    worlds = World.get_all(client)
    print(f"\n  {len(worlds)} worlds")
    for world in sorted(worlds, key=lambda w: w.population, reverse=True)[:5]:
        print(f"  {world.name:<30} {world.population.value}")


def demo_currencies(client: blocking.Client) -> dict[int, str]:
    print_section("Currencies")

    currencies = sorted(Currency.get_all(client), key=lambda c: c.order)
    for currency in currencies[:10]:
        print(f"  {currency.id:>4}  {currency.name}")
    return {c.id: c.name for c in currencies}


def demo_exchange(client: blocking.Client) -> None:
    print_section("Gem Exchange")

    quote = Exchange.gems(client, 100)
    print(f"\n  100 gems buy {quote.quantity} copper ({quote.coins_per_gem} per gem)")


def demo_account(client: blocking.Client, currency_names: dict[int, str]) -> None:
    """Show the account overview; needs an access token."""
    print_section("Account")

    account = Account.get(client)
    print(f"\n  Name:    {account.name}")
    print(f"  Created: {account.created:%Y-%m-%d}")
    print(f"  Access:  {', '.join(account.access.to_names())}")
    print(f"  Luck:    {int(AccountLuck.get(client))}")

    print("\n  Wallet:")
    for entry in AccountWallet.get(client):
        print(f"    {currency_names.get(entry.id, entry.id)!s:<30} {entry.value}")


def main() -> None:
    """Run all demos."""
    print("\nGuild Wars 2 API Demo")
    print("=" * 70)
    print(f"API: {settings.base_url} (language: {settings.language})")

    try:
        with blocking.Client.create() as client:
            demo_build(client)
            demo_worlds(client)
            names = demo_currencies(client)
            demo_exchange(client)
            if client.access_token:
                demo_account(client, names)
            else:
                print("\nSet GW2API_ACCESS_TOKEN to include the account overview.")

        print("\n" + "=" * 70)
        print("Demo completed successfully!")
        print("=" * 70)

    except Gw2ApiError as e:
        print(f"\nError: {e}")
        print("\nCheck your network connection, or set GW2API_BASE_URL.")


if __name__ == "__main__":
    main()
