import pytest

from utils.trie import Trie

CHECKSUM_IDS = ["abcdef", "bababc", "abbcde", "abcccd", "aabcdd", "abcdee", "ababab"]
OFF_BY_ONE_IDS = ["abcde", "fghij", "klmno", "pqrst", "fguij", "axcye", "wvxyz"]


@pytest.fixture
def trie():
    return Trie()


@pytest.fixture
def abcdef_trie(trie):
    trie.insert("abcdef")
    return trie


@pytest.fixture
def box_id_file(tmp_path):
    def _write(lines):
        path = tmp_path / "box_ids.txt"
        path.write_text("".join(f"{line}\n" for line in lines))
        return path
    return _write
