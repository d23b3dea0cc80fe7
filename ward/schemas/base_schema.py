from typing import Optional, Type, get_args, get_origin

from pydantic import BaseModel, ConfigDict
from pydantic.fields import FieldInfo


XSI_NAMESPACE = "http://www.w3.org/2001/XMLSchema-instance"
XSD_NAMESPACE = "http://www.w3.org/2001/XMLSchema"
SOAP12_NAMESPACE = "http://www.w3.org/2003/05/soap-envelope"


class WardModel(BaseModel):
    """
    Base for every Ward payload model.

    The alias of each field is the XML element name used by Ward; fields
    are written and read in declaration order. List fields declare the tag
    of their repeated child via json_schema_extra={"xml_item": "..."}.
    """

    model_config = ConfigDict(populate_by_name=True)


def nested_model(field: FieldInfo) -> Optional[Type[WardModel]]:
    """Return the WardModel type of a nested field, None for scalar fields"""
    annotation = field.annotation
    if isinstance(annotation, type) and issubclass(annotation, WardModel):
        return annotation
    return None


def list_item_type(field: FieldInfo) -> Optional[type]:
    """Return the item type of a List[...] field, None otherwise"""
    if get_origin(field.annotation) is list:
        args = get_args(field.annotation)
        return args[0] if args else str
    return None


def list_item_tag(field: FieldInfo) -> str:
    extra = field.json_schema_extra if isinstance(field.json_schema_extra, dict) else {}
    return extra.get("xml_item", "Item")


def is_text_field(field: FieldInfo) -> bool:
    """True for plain string fields, where an empty element means ''"""
    return field.annotation is str