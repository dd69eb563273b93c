#!/usr/bin/env python3

import argparse

from utils.utils import *

parser = argparse.ArgumentParser()
parser.add_argument('box_ids', type=argparse.FileType('r'), help="Text file with one box ID per line")
parser.add_argument('--verbose', '-v', action='store_true', help="Enable debug logging")
args = parser.parse_args()

logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

logging.info(f'Box IDs: {args.box_ids.name!r}')

box_ids = list(read_lines(args.box_ids))
args.box_ids.close()
logging.debug(f"Read {len(box_ids)} box IDs")

# part 1: characters repeated exactly two or three times
result = checksum(box_ids)
print(f"Doubles: {result.doubles}, Triples: {result.triples}, Checksum: {result.checksum}")

# part 2: first pair of IDs differing in one position
match = find_off_by_one(box_ids)
if match:
    partner = substitution_partner(match.box_id, box_ids[:match.line_number - 1])
    logging.info(f"{match.box_id!r} (line {match.line_number}) pairs with {partner!r}")
    print(f"Found off by one: {match.common}")
else:
    print("Did not find off by one")
