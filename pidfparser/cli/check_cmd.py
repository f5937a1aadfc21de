import sys
import json
import logging
from collections import namedtuple

from lxml import etree

from pidfparser.models import Presence, MalformedDocument
from pidfparser.util import pprinttable


def check_reg(subp):
    argp = subp.add_parser("check", help="Parse PIDF documents and summarize them")

    argp.add_argument("files", nargs="+", help="PIDF documents to check")
    argp.add_argument(
        "-j",
        "--json",
        dest="json",
        default=False,
        action="store_true",
        help="Output the summary in JSON",
    )


def summarize(doc):
    """
    Build a JSON friendly summary of a Presence
    """
    tuples = []
    for tup in doc.get_tuple_list():
        basic = None
        if tup.status is not None and tup.status.basic is not None:
            basic = tup.status.basic.value

        tuples.append(
            {
                "id": tup.tuple_id,
                "basic": basic,
                "contact": tup.contact.uri if tup.contact is not None else None,
                "timestamp": tup.timestamp.format() if tup.timestamp else None,
                "notes": [note.text for note in tup.notes],
            }
        )

    return {
        "entity": doc.entity,
        "tuples": tuples,
        "notes": [{"text": note.text, "lang": note.lang} for note in doc.get_note_list()],
    }


def print_summary(path, stat):
    print(f"{path}: {stat['entity']}")
    print("Tuples: %d, Notes: %d" % (len(stat["tuples"]), len(stat["notes"])))

    if stat["tuples"]:
        Row = namedtuple("Row", ["ID", "Basic", "Contact", "Timestamp"])
        pprinttable(
            [
                Row(
                    ID=tup["id"],
                    Basic=tup["basic"],
                    Contact=tup["contact"],
                    Timestamp=tup["timestamp"],
                )
                for tup in stat["tuples"]
            ]
        )

    for note in stat["notes"]:
        print(f"Note: {note['text']}")
    print()


def check(args):
    lgr = logging.getLogger("check")

    ret = 0
    results = {}
    for path in args.files:
        try:
            with open(path, "rb") as doc_fp:
                doc = Presence.from_file(doc_fp)
        except MalformedDocument as exc:
            print(f"ERROR: {path}: {exc}", file=sys.stderr)
            ret = 1
            continue
        except etree.XMLSyntaxError as exc:
            print(f"ERROR: {path}: XML syntax error: {exc}", file=sys.stderr)
            ret = 1
            continue
        except OSError as exc:
            print(f"ERROR: {path}: {exc}", file=sys.stderr)
            ret = 1
            continue

        lgr.debug("Parsed %s: %s", path, doc)
        results[path] = summarize(doc)

        if not args.json:
            print_summary(path, results[path])

    if args.json:
        print(json.dumps(results))

    return ret
