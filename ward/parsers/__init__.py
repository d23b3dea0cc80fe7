from .xml_parser import WardXMLParser
