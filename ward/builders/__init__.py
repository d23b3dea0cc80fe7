from .xml_builder import WardXMLBuilder, XML_HEADER
