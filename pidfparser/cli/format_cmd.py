import sys

from lxml import etree

from pidfparser.models import Presence, MalformedDocument


def format_reg(subp):
    argp = subp.add_parser(
        "format", help="Parse a PIDF document and write it back out"
    )

    argp.add_argument("file", help="PIDF document to format")
    argp.add_argument(
        "--pretty",
        dest="pretty",
        default=None,
        action="store_true",
        help="Indent the output",
    )


def format_doc(args):
    try:
        with open(args.file, "rb") as doc_fp:
            doc = Presence.from_file(doc_fp)

        data = doc.to_string(pretty_print=args.pretty)
    except (MalformedDocument, ValueError) as exc:
        print(f"ERROR: {args.file}: {exc}", file=sys.stderr)
        return 1
    except etree.XMLSyntaxError as exc:
        print(f"ERROR: {args.file}: XML syntax error: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"ERROR: {args.file}: {exc}", file=sys.stderr)
        return 1

    sys.stdout.buffer.write(data)
    if not data.endswith(b"\n"):
        sys.stdout.buffer.write(b"\n")

    return 0
