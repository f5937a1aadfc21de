import io
import os
import json
import tempfile
import unittest as ut
from unittest import mock
from contextlib import redirect_stdout, redirect_stderr

from lxml import etree

from pidfparser.cli.__main__ import main
from pidfparser.config import load_config
from . import XML_FULL, XML_NOTE


class CLITestcase(ut.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.full = self.write("full.xml", XML_FULL)
        self.note = self.write("note.xml", XML_NOTE)
        self.bad = self.write("bad.xml", b'<tuple xmlns="urn:ietf:params:xml:ns:pidf"/>')

    def tearDown(self):
        self.tmpdir.cleanup()
        load_config(os.devnull)

    def write(self, name, data):
        path = os.path.join(self.tmpdir.name, name)
        with open(path, "wb") as doc_fp:
            doc_fp.write(data)
        return path

    def run_cli(self, *argv):
        out = io.StringIO()
        err = io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            with self.assertRaises(SystemExit) as ctx:
                main(["-c", os.devnull, *argv])

        return (ctx.exception.code, out.getvalue(), err.getvalue())

    def test_check(self):
        (ret, out, _) = self.run_cli("check", self.full, self.note)

        self.assertEqual(ret, 0)
        self.assertIn("pres:someone@example.com", out)
        self.assertIn("sg89ae", out)
        self.assertIn("Note: Busy", out)

    def test_check_json(self):
        (ret, out, _) = self.run_cli("check", "-j", self.full)

        self.assertEqual(ret, 0)
        stat = json.loads(out)[self.full]
        self.assertEqual(stat["entity"], "pres:someone@example.com")
        self.assertEqual([t["id"] for t in stat["tuples"]], ["sg89ae", "eg92n8"])
        self.assertEqual(stat["tuples"][0]["basic"], "open")
        self.assertEqual(stat["tuples"][0]["timestamp"], "2001-10-27T16:49:29.000Z")
        self.assertEqual(stat["notes"], [{"text": "I'll be in Tokyo next week", "lang": None}])

    def test_check_failure(self):
        missing = os.path.join(self.tmpdir.name, "missing.xml")
        (ret, _, err) = self.run_cli("check", self.note, self.bad, missing)

        self.assertEqual(ret, 1)
        self.assertIn("Incorrect element", err)
        self.assertIn("missing.xml", err)

    def test_format(self):
        buf = io.BytesIO()
        stdout = io.TextIOWrapper(buf, encoding="utf-8")
        with mock.patch("sys.stdout", stdout):
            with self.assertRaises(SystemExit) as ctx:
                main(["-c", os.devnull, "format", "--pretty", self.full])

        self.assertEqual(ctx.exception.code, 0)
        root = etree.fromstring(buf.getvalue())
        self.assertEqual(root.get("entity"), "pres:someone@example.com")
        self.assertEqual(len(root), 3)

    def test_no_command(self):
        (ret, out, _) = self.run_cli()
        self.assertEqual(ret, 1)
        self.assertIn("usage", out)
