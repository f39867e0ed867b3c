#!/usr/bin/env python
"""Generate a random team for a generation."""
import argparse
import asyncio
import logging
import random
import sys
from pathlib import Path

import requests
from dotenv import load_dotenv
from tqdm import tqdm

from randteam.config import Config
from randteam.data.client import PokeApiClient
from randteam.errors import RandteamError
from randteam.teams.builder import TeamAssembler, TeamOptions
from randteam.teams.export import write_export


async def main() -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("--gen", type=int, required=True, help="Generation (1-9)")
    parser.add_argument("--fully-evolved", action="store_true", help="Only fully evolved Pokemon")
    parser.add_argument("--randomize-evs", action="store_true", help="Random EVs and nature")
    parser.add_argument("--randomize-items", action="store_true", help="Random held items")
    parser.add_argument(
        "--export",
        nargs="?",
        const="",
        default=None,
        help="Write Showdown import file (default: pokemon_team.txt)",
    )
    parser.add_argument("--seed", type=int, help="Random seed")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    load_dotenv()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    config = Config()
    options = TeamOptions(
        only_fully_evolved=args.fully_evolved,
        randomize_evs=args.randomize_evs,
        randomize_items=args.randomize_items,
    )

    print("Generating team, please wait...")
    with PokeApiClient(config.api) as client:
        assembler = TeamAssembler(
            client=client,
            config=config.generator,
            rng=random.Random(args.seed),
        )

        pbar = tqdm(desc="Candidates", unit="mon")

        def on_progress(done: int, total: int) -> None:
            pbar.total = total
            pbar.update(done - pbar.n)

        try:
            team = await assembler.generate(args.gen, options, on_progress=on_progress)
        except (RandteamError, requests.RequestException) as e:
            print(f"Error: {e}")
            return 1
        finally:
            pbar.close()

    print()
    print(team.to_display())

    if args.export is not None:
        path = Path(args.export) if args.export else config.export.path
        write_export(team, path)
        print(f"\nSaved: {path}")

    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
