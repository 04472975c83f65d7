#!/usr/bin/env python3
import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.spellcheck.store import insert_words, parse_row


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Load a word list into the dictionary words table."
    )
    parser.add_argument("path", help="UTF-8 file, one word per line, optional trust score after a tab")
    parser.add_argument("--owner", default="System", help="Owner recorded for the inserted words")
    args = parser.parse_args()

    entries = []
    for line in Path(args.path).read_text(encoding="utf-8").splitlines():
        word, _, trust = line.partition("\t")
        entry = parse_row((word, None, int(trust) if trust.strip().isdigit() else None))
        if entry is not None:
            entries.append(entry)

    count = insert_words(entries, owner=args.owner)
    print(f"Inserted {count} words")


if __name__ == "__main__":
    main()
