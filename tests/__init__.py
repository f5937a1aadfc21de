PIDF_NS = "urn:ietf:params:xml:ns:pidf"

XML_NOTE = b"""<presence xmlns="urn:ietf:params:xml:ns:pidf" entity="sip:alice@example.com"><note>Busy</note></presence>"""

XML_FULL = b"""<?xml version='1.0' encoding='UTF-8'?>
<presence xmlns="urn:ietf:params:xml:ns:pidf"
          xmlns:dm="urn:ietf:params:xml:ns:pidf:data-model"
          xmlns:rpid="urn:ietf:params:xml:ns:pidf:rpid"
          entity="pres:someone@example.com">
  <tuple id="sg89ae">
    <status>
      <basic>open</basic>
      <rpid:activities><rpid:busy/></rpid:activities>
    </status>
    <contact priority="0.8">tel:+09012345678</contact>
    <note xml:lang="en">Don't Disturb Please!</note>
    <note xml:lang="fr">Ne derangez pas, s'il vous plait</note>
    <timestamp>2001-10-27T16:49:29Z</timestamp>
  </tuple>
  <dm:person id="p1">
    <rpid:activities><rpid:on-the-phone/></rpid:activities>
    <dm:note>Talking</dm:note>
  </dm:person>
  <tuple id="eg92n8">
    <status>
      <basic>closed</basic>
    </status>
    <contact>mailto:someone@example.com</contact>
  </tuple>
  <note>I'll be in Tokyo next week</note>
  <!-- trailing comment -->
</presence>
"""


def elements_equal(e1, e2):
    """
    Returns True if two elements are identical, ignoring whitespace between
    elements
    """
    if e1.tag != e2.tag:
        raise ValueError(f"Tags differ: {e1.tag} != {e2.tag}")
    if (e1.text or "").strip() != (e2.text or "").strip():
        raise ValueError(f"Text differs: '{e1.text}' != '{e2.text}'")
    if (e1.tail or "").strip() != (e2.tail or "").strip():
        raise ValueError(f"Tail differs: '{e1.tail}' != '{e2.tail}'")
    if e1.attrib != e2.attrib:
        raise ValueError(f"Attrib differs {e1.tag}.attrib != {e2.tag}.attrib")
    if len(e1) != len(e2):
        raise ValueError(
            f"Length differs: len({e1.tag})({len(e1)}) != len({e2.tag})({len(e2)})"
        )
    return all(elements_equal(c1, c2) for c1, c2 in zip(e1, e2))
