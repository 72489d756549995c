"""Core metadata record and its JSON form."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

from fairkit.myfair.vocabulary import (
    CoreTitleType,
    NameType,
    PersonType,
    RelatedIdentifierType,
    ResourceType,
)


def _coerce(enum_type: type[Enum], value: Any) -> Any:
    """Return the enum member for ``value``, or the plain string if it is not one."""
    value = value or ""
    try:
        return enum_type(value)
    except ValueError:
        return value


def _text(value: Any) -> str:
    return value.value if isinstance(value, Enum) else str(value)


def _str(data: Mapping[str, Any], key: str) -> str:
    return data.get(key) or ""


def _int(data: Mapping[str, Any], key: str) -> int:
    return int(data.get(key) or 0)


@dataclass
class Name:
    value: str = ""
    lang: str = ""
    type: NameType | str = NameType.DEFAULT


@dataclass
class NameIdentifier:
    value: str = ""
    lang: str = ""
    scheme_uri: str = ""
    name_identifier_scheme: str = ""


@dataclass
class Person:
    person_type: PersonType | str = ""
    person_name: Name = field(default_factory=Name)
    given_name: str = ""
    family_name: str = ""
    affiliation: str = ""
    name_identifier: NameIdentifier = field(default_factory=NameIdentifier)


@dataclass
class Identifier:
    value: str = ""
    identifier_type: RelatedIdentifierType | str = ""


@dataclass
class Title:
    lang: str = ""
    data: str = ""
    type: CoreTitleType | str = CoreTitleType.MAIN


@dataclass
class Media:
    name: str = ""
    mimetype: str = ""
    type: str = ""
    uri: str = ""
    width: int = 0
    height: int = 0
    orientation: int = 0
    duration: int = 0
    fulltext: str = ""


def _name_to_dict(name: Name) -> dict[str, Any]:
    result: dict[str, Any] = {"value": name.value}
    if name.lang:
        result["lang"] = name.lang
    if _text(name.type):
        result["type"] = _text(name.type)
    return result


def _name_from_dict(data: Mapping[str, Any]) -> Name:
    return Name(
        value=_str(data, "value"),
        lang=_str(data, "lang"),
        type=_coerce(NameType, data.get("type")),
    )


def _name_identifier_to_dict(ident: NameIdentifier) -> dict[str, Any]:
    pairs = (
        ("value", ident.value),
        ("lang", ident.lang),
        ("schemeURI", ident.scheme_uri),
        ("nameIdentifierScheme", ident.name_identifier_scheme),
    )
    return {key: value for key, value in pairs if value}


def _name_identifier_from_dict(data: Mapping[str, Any]) -> NameIdentifier:
    return NameIdentifier(
        value=_str(data, "value"),
        lang=_str(data, "lang"),
        scheme_uri=_str(data, "schemeURI"),
        name_identifier_scheme=_str(data, "nameIdentifierScheme"),
    )


def _person_to_dict(person: Person) -> dict[str, Any]:
    result: dict[str, Any] = {
        "personType": _text(person.person_type),
        "personName": _name_to_dict(person.person_name),
    }
    if person.given_name:
        result["givenName"] = person.given_name
    if person.family_name:
        result["familyName"] = person.family_name
    if person.affiliation:
        result["affiliation"] = person.affiliation
    result["nameIdentifier"] = _name_identifier_to_dict(person.name_identifier)
    return result


def _person_from_dict(data: Mapping[str, Any]) -> Person:
    return Person(
        person_type=_coerce(PersonType, data.get("personType")),
        person_name=_name_from_dict(data.get("personName") or {}),
        given_name=_str(data, "givenName"),
        family_name=_str(data, "familyName"),
        affiliation=_str(data, "affiliation"),
        name_identifier=_name_identifier_from_dict(data.get("nameIdentifier") or {}),
    )


def _identifier_to_dict(ident: Identifier) -> dict[str, Any]:
    return {"value": ident.value, "identifierType": _text(ident.identifier_type)}


def _identifier_from_dict(data: Mapping[str, Any]) -> Identifier:
    return Identifier(
        value=_str(data, "value"),
        identifier_type=_coerce(RelatedIdentifierType, data.get("identifierType")),
    )


def _title_to_dict(title: Title) -> dict[str, Any]:
    return {"lang": title.lang, "value": title.data, "type": _text(title.type)}


def _title_from_dict(data: Mapping[str, Any]) -> Title:
    return Title(
        lang=_str(data, "lang"),
        data=_str(data, "value"),
        type=_coerce(CoreTitleType, data.get("type")),
    )


def _media_to_dict(media: Media) -> dict[str, Any]:
    result: dict[str, Any] = {
        "name": media.name,
        "mimetype": media.mimetype,
        "type": media.type,
        "uri": media.uri,
    }
    for key in ("width", "height", "orientation", "duration", "fulltext"):
        value = getattr(media, key)
        if value:
            result[key] = value
    return result


def _media_from_dict(data: Mapping[str, Any]) -> Media:
    return Media(
        name=_str(data, "name"),
        mimetype=_str(data, "mimetype"),
        type=_str(data, "type"),
        uri=_str(data, "uri"),
        width=_int(data, "width"),
        height=_int(data, "height"),
        orientation=_int(data, "orientation"),
        duration=_int(data, "duration"),
        fulltext=_str(data, "fulltext"),
    )


@dataclass
class Core:
    """Core metadata record from which the export formats are built."""

    identifier: list[Identifier] = field(default_factory=list)
    person: list[Person] = field(default_factory=list)
    title: list[Title] = field(default_factory=list)
    publisher: str = ""
    publication_year: str = ""
    resource_type: ResourceType | str = ""
    rights: str = ""
    license: str = ""
    media: list[Media | None] = field(default_factory=list)
    poster: Media | None = None

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready dictionary; empty optional fields are left out."""
        result: dict[str, Any] = {
            "identifier": [_identifier_to_dict(item) for item in self.identifier],
            "person": [_person_to_dict(item) for item in self.person],
            "title": [_title_to_dict(item) for item in self.title],
            "publisher": self.publisher,
            "publicationYear": self.publication_year,
            "resourceType": _text(self.resource_type),
        }
        if self.rights:
            result["rights"] = self.rights
        if self.license:
            result["license"] = self.license
        result["media"] = [None if item is None else _media_to_dict(item) for item in self.media]
        result["poster"] = None if self.poster is None else _media_to_dict(self.poster)
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Core:
        """Build a record from its JSON dictionary; missing fields take defaults."""
        poster = data.get("poster")
        return cls(
            identifier=[_identifier_from_dict(item) for item in data.get("identifier") or []],
            person=[_person_from_dict(item) for item in data.get("person") or []],
            title=[_title_from_dict(item) for item in data.get("title") or []],
            publisher=_str(data, "publisher"),
            publication_year=_str(data, "publicationYear"),
            resource_type=_coerce(ResourceType, data.get("resourceType")),
            rights=_str(data, "rights"),
            license=_str(data, "license"),
            media=[
                None if item is None else _media_from_dict(item)
                for item in data.get("media") or []
            ],
            poster=None if poster is None else _media_from_dict(poster),
        )