from collections import namedtuple, Counter
import logging
from typing import Generator, Iterable, Optional, Tuple

import regex

from utils.trie import Trie

Checksum = namedtuple('Checksum', ['doubles', 'triples', 'checksum'])
OffByOne = namedtuple('OffByOne', ['common', 'box_id', 'line_number'])


def read_lines(lines: Iterable[str]) -> Generator[str, None, None]:
    """
    Strip line endings from an open text file (or any iterable of lines). Blank lines are skipped.
    :param lines: open file handle or iterable of strings
    :return: generator with the box IDs
    """
    for lineno, line in enumerate(lines, start=1):
        box_id = line.rstrip('\r\n')
        if not box_id:
            logging.debug(f"Line {lineno} is blank, skipping")
            continue
        yield box_id


def letter_repeats(box_id: str) -> Tuple[bool, bool]:
    """
    Test if any character of the box ID appears exactly twice and if any appears exactly three times.
    """
    counts = Counter(box_id).values()
    return 2 in counts, 3 in counts


def checksum(box_ids: Iterable[str]) -> Checksum:
    """
    Count the IDs with a character repeated exactly twice (doubles) and exactly three times (triples).
    An ID can count towards both.
    :param box_ids: iterable of box IDs
    :return: (Checksum) doubles, triples and their product
    """
    doubles = 0
    triples = 0
    for box_id in box_ids:
        has_double, has_triple = letter_repeats(box_id)
        if has_double:
            doubles += 1
        if has_triple:
            triples += 1

    return Checksum(doubles=doubles, triples=triples, checksum=doubles * triples)


def find_off_by_one(box_ids: Iterable[str], trie: Optional[Trie] = None) -> Optional[OffByOne]:
    """
    Scan the box IDs in order and stop at the first one that differs from an earlier ID in exactly one position.
    Every ID is looked up before it is inserted, so an ID is never matched against itself.
    :param box_ids: iterable of box IDs
    :param trie: (Trie) trie to build on, a new one is created if not given
    :return: (OffByOne) common characters, the matching ID and its 1-based position, or None
    """
    if trie is None:
        trie = Trie()

    for line_number, box_id in enumerate(box_ids, start=1):
        common = trie.match_off_by_one(box_id)
        if common is not None:
            logging.debug(f"{box_id!r} (#{line_number}) is off by one from a stored ID")
            return OffByOne(common=common, box_id=box_id, line_number=line_number)
        trie.insert(box_id)

    logging.debug(f"Scanned {len(trie)} distinct IDs without finding an off by one pair")
    return None


def substitution_partner(query: str, candidates: Iterable[str]) -> Optional[str]:
    """
    Find the first candidate that differs from query by exactly one substituted character.
    Uses fuzzy matching restricted to substitutions, so candidates of a different length never match.
    """
    pattern = regex.compile(f"(?:{regex.escape(query)}){{s<=1}}")
    for candidate in candidates:
        if candidate == query:
            continue
        if pattern.fullmatch(candidate):
            return candidate
    return None
