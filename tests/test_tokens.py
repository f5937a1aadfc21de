import io
import unittest as ut

from pidfparser import TokenSource, EventType, StreamFault

XML_S = b'<a xmlns="urn:x" xmlns:y="urn:y" k="v" y:k="w">hi<b/>there<c>in</c></a>'


def collect(tokens):
    ret = []
    while True:
        event = tokens.advance()
        if event is EventType.TEXT:
            ret.append((event, tokens.text))
        elif event in [EventType.START_TAG, EventType.END_TAG]:
            ret.append((event, tokens.name))
        else:
            ret.append((event, None))
            return ret


EXPECTED = [
    (EventType.START_TAG, "a"),
    (EventType.TEXT, "hi"),
    (EventType.START_TAG, "b"),
    (EventType.END_TAG, "b"),
    (EventType.TEXT, "there"),
    (EventType.START_TAG, "c"),
    (EventType.TEXT, "in"),
    (EventType.END_TAG, "c"),
    (EventType.END_TAG, "a"),
    (EventType.END_DOCUMENT, None),
]


class TokenSourceTestcase(ut.TestCase):
    def test_event_sequence(self):
        tokens = TokenSource(XML_S)
        self.assertIs(tokens.event_type, EventType.START_DOCUMENT)
        self.assertListEqual(collect(tokens), EXPECTED)

    def test_small_chunks(self):
        tokens = TokenSource(io.BytesIO(XML_S), chunk_size=3)
        self.assertListEqual(collect(tokens), EXPECTED)

    def test_str_source(self):
        tokens = TokenSource(XML_S.decode())
        self.assertListEqual(collect(tokens), EXPECTED)

    def test_names_and_attributes(self):
        tokens = TokenSource(XML_S)
        self.assertIs(tokens.next_tag(), EventType.START_TAG)
        self.assertEqual(tokens.namespace, "urn:x")
        self.assertEqual(tokens.name, "a")
        self.assertEqual(tokens.line, 1)
        self.assertEqual(tokens.get_attribute(None, "k"), "v")
        self.assertEqual(tokens.get_attribute("urn:y", "k"), "w")
        self.assertIsNone(tokens.get_attribute(None, "missing"))
        self.assertTrue(tokens.is_start_tag("urn:x", "a"))
        self.assertFalse(tokens.is_start_tag(None, "a"))

    def test_default_namespace(self):
        tokens = TokenSource(b"<a><b/></a>", default_namespace="urn:x")
        tokens.next_tag()
        self.assertEqual(tokens.namespace, "urn:x")

        tokens = TokenSource(b"<a><b/></a>")
        tokens.next_tag()
        self.assertIsNone(tokens.namespace)

    def test_skip_subtree(self):
        tokens = TokenSource(b"<a><b><c><b/></c></b><d/></a>")
        tokens.next_tag()
        tokens.next_tag()
        self.assertEqual(tokens.name, "b")

        self.assertIs(tokens.skip_subtree(), EventType.END_TAG)
        self.assertEqual(tokens.name, "b")
        self.assertIs(tokens.next_tag(), EventType.START_TAG)
        self.assertEqual(tokens.name, "d")

    def test_skip_subtree_not_on_start(self):
        tokens = TokenSource(b"<a/>")
        self.assertRaises(ValueError, tokens.skip_subtree)

    def test_end_document_is_sticky(self):
        tokens = TokenSource(b"<a/>")
        collect(tokens)
        self.assertIs(tokens.advance(), EventType.END_DOCUMENT)
        self.assertIsNone(tokens.name)

    def test_comments_dropped(self):
        tokens = TokenSource(b"<a>x<!-- c --><?pi y?><b/></a>")
        events = collect(tokens)
        self.assertEqual(
            [name for (event, name) in events if event is EventType.START_TAG],
            ["a", "b"],
        )

    def test_truncated(self):
        tokens = TokenSource(b"<a><b>text</b><c>te")
        events = collect(tokens)
        self.assertIn((EventType.END_TAG, "b"), events)
        self.assertNotIn((EventType.END_TAG, "c"), events)
        self.assertEqual(events[-1], (EventType.END_DOCUMENT, None))

    def test_syntax_error(self):
        tokens = TokenSource(b"<a><b></c></a>")
        self.assertRaises(StreamFault, collect, tokens)

    def test_syntax_error_inside_element(self):
        # Bad syntax inside an open element is a fault, not a truncation
        tokens = TokenSource(b"<a><b>x</b><b>y</b> & </a>")
        self.assertRaises(StreamFault, collect, tokens)

    def test_empty_document(self):
        tokens = TokenSource(b"")
        self.assertRaises(StreamFault, tokens.advance)
