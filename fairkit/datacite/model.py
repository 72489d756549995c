"""DataCite metadata record with its JSON and XML forms."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from fairkit.datacite.vocabulary import (
    ContributorType,
    NameType,
    RelatedIdentifierType,
    ResourceTypeGeneral,
    TitleType,
)

DATACITE_NAMESPACE = "http://datacite.org/schema/kernel-4"
_XML_LANG = "xml:lang"


def _text(value: Any) -> str:
    return value.value if isinstance(value, Enum) else str(value)


def _set_optional(element: ET.Element, name: str, value: Any) -> None:
    text = _text(value)
    if text:
        element.set(name, text)


def _sub(parent: ET.Element, tag: str, text: str) -> ET.Element:
    child = ET.SubElement(parent, tag)
    child.text = text
    return child


@dataclass
class Title:
    value: str = ""
    lang: str = ""
    type: TitleType | str = TitleType.DEFAULT_TITLE

    def _to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"title": self.value}
        if self.lang:
            result["lang"] = self.lang
        if _text(self.type):
            result["type"] = _text(self.type)
        return result

    def _to_xml(self, parent: ET.Element) -> None:
        element = ET.SubElement(parent, "title")
        _set_optional(element, _XML_LANG, self.lang)
        _set_optional(element, "titleType", self.type)
        element.text = self.value


@dataclass
class Name:
    value: str = ""
    lang: str = ""
    type: NameType | str = NameType.DEFAULT

    def _to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"value": self.value}
        if self.lang:
            result["lang"] = self.lang
        if _text(self.type):
            result["type"] = _text(self.type)
        return result

    def _to_xml(self, parent: ET.Element, tag: str) -> None:
        element = ET.SubElement(parent, tag)
        _set_optional(element, _XML_LANG, self.lang)
        _set_optional(element, "nameType", self.type)
        element.text = self.value


@dataclass
class NameIdentifier:
    value: str = ""
    lang: str = ""
    scheme_uri: str = ""
    name_identifier_scheme: str = ""

    def _to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"nameIdentifier": self.value}
        if self.lang:
            result["lang"] = self.lang
        if self.scheme_uri:
            result["schemeUri"] = self.scheme_uri
        if self.name_identifier_scheme:
            result["name_identifierScheme"] = self.name_identifier_scheme
        return result

    def _to_xml(self, parent: ET.Element) -> None:
        element = ET.SubElement(parent, "nameIdentifier")
        _set_optional(element, _XML_LANG, self.lang)
        _set_optional(element, "schemeURI", self.scheme_uri)
        _set_optional(element, "nameIdentifierScheme", self.name_identifier_scheme)
        element.text = self.value


@dataclass
class Creator:
    creator_name: Name = field(default_factory=Name)
    given_name: str = ""
    family_name: str = ""
    affiliation: list[str] = field(default_factory=list)
    name_identifier: list[NameIdentifier] = field(default_factory=list)

    def _to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"creatorName": self.creator_name._to_dict()}
        if self.given_name:
            result["givenName"] = self.given_name
        if self.family_name:
            result["familyName"] = self.family_name
        if self.affiliation:
            result["affiliation"] = list(self.affiliation)
        if self.name_identifier:
            result["nameIdentifier"] = [item._to_dict() for item in self.name_identifier]
        return result

    def _to_xml(self, parent: ET.Element) -> None:
        element = ET.SubElement(parent, "creator")
        self.creator_name._to_xml(element, "creatorName")
        if self.given_name:
            _sub(element, "givenName", self.given_name)
        if self.family_name:
            _sub(element, "familyName", self.family_name)
        for affiliation in self.affiliation:
            _sub(element, "affiliation", affiliation)
        for ident in self.name_identifier:
            ident._to_xml(element)


@dataclass
class Contributor:
    contributor_type: ContributorType | str = ""
    contributor_name: Name = field(default_factory=Name)
    given_name: str = ""
    family_name: str = ""
    affiliation: str = ""
    name_identifier: NameIdentifier = field(default_factory=NameIdentifier)

    def _to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "contributorType": _text(self.contributor_type),
            "contributorName": self.contributor_name._to_dict(),
        }
        if self.given_name:
            result["givenName"] = self.given_name
        if self.family_name:
            result["familyName"] = self.family_name
        if self.affiliation:
            result["affiliation"] = self.affiliation
        result["nameIdentifier"] = self.name_identifier._to_dict()
        return result

    def _to_xml(self, parent: ET.Element) -> None:
        element = ET.SubElement(parent, "Contributor")
        _sub(element, "contributorType", _text(self.contributor_type))
        self.contributor_name._to_xml(element, "contributorName")
        if self.given_name:
            _sub(element, "givenName", self.given_name)
        if self.family_name:
            _sub(element, "familyName", self.family_name)
        if self.affiliation:
            _sub(element, "affiliation", self.affiliation)
        self.name_identifier._to_xml(element)


@dataclass
class Identifier:
    value: str = ""
    identifier_type: RelatedIdentifierType | str = ""

    def _to_dict(self) -> dict[str, Any]:
        return {"identifier": self.value, "identifierType": _text(self.identifier_type)}

    def _to_xml(self, parent: ET.Element) -> None:
        element = ET.SubElement(parent, "identifier")
        element.set("identifierType", _text(self.identifier_type))
        element.text = self.value


@dataclass
class AlternateIdentifier:
    value: str = ""
    alternate_identifier_type: RelatedIdentifierType | str = ""

    def _to_dict(self) -> dict[str, Any]:
        return {
            "alternateIdentifier": self.value,
            "alternateIdentifierType": _text(self.alternate_identifier_type),
        }

    def _to_xml(self, parent: ET.Element) -> None:
        element = ET.SubElement(parent, "alternateIdentifier")
        element.set("alternateIdentifierType", _text(self.alternate_identifier_type))
        element.text = self.value


@dataclass
class ResourceType:
    value: str = ""
    identifier_type: ResourceTypeGeneral | str = ""

    def _to_dict(self) -> dict[str, Any]:
        return {"resourceType": self.value, "identifierType": _text(self.identifier_type)}

    def _to_xml(self, parent: ET.Element) -> None:
        element = ET.SubElement(parent, "resourceType")
        element.set("resourceTypeGeneral", _text(self.identifier_type))
        element.text = self.value


@dataclass
class DataCite:
    """DataCite kernel-4 resource record."""

    identifier: Identifier = field(default_factory=Identifier)
    alternate_identifiers: list[AlternateIdentifier] = field(default_factory=list)
    creators: list[Creator] = field(default_factory=list)
    titles: list[Title] = field(default_factory=list)
    publisher: str = ""
    publication_year: int = 0
    resource_type: ResourceType = field(default_factory=ResourceType)
    contributors: list[Contributor] = field(default_factory=list)
    xsi_type: str = ""
    xsi_schema_location: str = ""

    def init_namespace(self) -> None:
        """Set the XML schema instance namespace and schema location."""
        self.xsi_type = "http://www.w3.org/2001/XMLSchema-instance"
        self.xsi_schema_location = (
            "http://datacite.org/schema/kernel-4 "
            "http://schema.datacite.org/meta/kernel-4.1/metadata.xsd"
        )

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready dictionary of the record."""
        return {
            "Identifier": self.identifier._to_dict(),
            "AlternateIdentifiers": {
                "AlternateIdentifier": [item._to_dict() for item in self.alternate_identifiers]
            },
            "Creators": [item._to_dict() for item in self.creators],
            "Titles": [item._to_dict() for item in self.titles],
            "Publisher": self.publisher,
            "PublicationYear": self.publication_year,
            "ResourceType": self.resource_type._to_dict(),
            "Contributors": [item._to_dict() for item in self.contributors],
        }

    def to_xml(self) -> str:
        """Serialize the record as an XML document without declaration."""
        root = ET.Element("resource")
        root.set("xmlns", DATACITE_NAMESPACE)
        root.set("xmlns:xsi", self.xsi_type)
        root.set("xsi:schemaLocation", self.xsi_schema_location)

        self.identifier._to_xml(root)

        alternates = ET.SubElement(root, "alternateIdentifiers")
        for alternate in self.alternate_identifiers:
            alternate._to_xml(alternates)

        creators = ET.SubElement(root, "creators")
        for creator in self.creators:
            creator._to_xml(creators)

        titles = ET.SubElement(root, "titles")
        for title in self.titles:
            title._to_xml(titles)

        _sub(root, "publisher", self.publisher)
        _sub(root, "publicationYear", str(self.publication_year))
        self.resource_type._to_xml(root)

        contributors = ET.SubElement(root, "contributors")
        for contributor in self.contributors:
            contributor._to_xml(contributors)

        return ET.tostring(root, encoding="unicode", short_empty_elements=False)