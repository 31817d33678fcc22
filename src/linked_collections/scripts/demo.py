"""Build a few linked lists, print them and walk them by index."""

import argparse
import logging
import os
import random
from typing import Optional, TypeVar

from linked_collections import LinkedList

logger = logging.getLogger(__name__)

T = TypeVar("T")

COMPANIES = ["Apple", "Microsoft", "Sony", "Lenovo", "Asus"]
NUMBERS = [100, 5, 53, 98, 29]


def build(
    values: list[T], rng: Optional[random.Random] = None
) -> LinkedList[T]:
    values = list(values)
    if rng is not None:
        rng.shuffle(values)
    linked_list: LinkedList[T] = LinkedList()
    for value in values:
        linked_list.append(value)
    return linked_list


def walk(linked_list: LinkedList[T]) -> list[T]:
    """Collect values with node_at(0), node_at(1), ... until it runs out."""
    values = []
    index = 0
    while (node := linked_list.node_at(index)) is not None:
        values.append(node.value)
        index += 1
    return values


def main(parsed_args: argparse.Namespace) -> None:
    rng = random.Random(parsed_args.seed) if parsed_args.shuffle else None

    companies = build(COMPANIES, rng)
    print(companies)
    numbers = build(NUMBERS, rng)
    print(numbers)

    print()
    for company in walk(companies):
        print(company)

    print()
    for number in walk(numbers):
        print(number)

    print()
    tuples = build(
        [(name, num) for name in walk(companies) for num in walk(numbers)]
    )

    print()
    for name, num in walk(tuples):
        print(f"Name: {name}  Num: {num}")

    if parsed_args.remove_index is not None:
        node = companies.node_at(parsed_args.remove_index)
        if node is None:
            logger.warning(
                "Index %d is out of range for %s",
                parsed_args.remove_index,
                companies,
            )
            return
        print()
        print(f"Removed: {companies.remove(node)}")
        print(companies)


def get_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Demo of the doubly linked list."
    )
    parser.add_argument(
        "--shuffle",
        action="store_true",
        help="Shuffle the companies and numbers before appending them",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed used by --shuffle"
    )
    parser.add_argument(
        "--remove-index",
        type=int,
        default=None,
        help="Remove the company at this index and print the result",
    )
    return parser


def run() -> None:
    logging.basicConfig(level=os.environ.get("LOGLEVEL", "WARNING"))
    main(get_parser().parse_args())


if __name__ == "__main__":
    run()
