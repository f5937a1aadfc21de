PIDF_NAMESPACE = "urn:ietf:params:xml:ns:pidf"
XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"

CONTENT_TYPE = "application/pidf+xml"
