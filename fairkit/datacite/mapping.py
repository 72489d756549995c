"""Conversion of core metadata records into DataCite records."""

from __future__ import annotations

from enum import Enum
from typing import Any

from dateutil import parser as date_parser

from fairkit.datacite.model import (
    AlternateIdentifier,
    Contributor,
    Creator,
    DataCite,
    Identifier,
    Name,
    NameIdentifier,
    ResourceType,
    Title,
)
from fairkit.datacite.vocabulary import (
    NameType,
    RelatedIdentifierType,
    ResourceTypeGeneral,
    TitleType,
)
from fairkit.myfair import vocabulary as core_vocabulary
from fairkit.myfair.core import Core, Person

_RESOURCE_TYPE_GENERAL: dict[core_vocabulary.ResourceType, ResourceTypeGeneral] = {
    core_vocabulary.ResourceType.BOOK: ResourceTypeGeneral.BOOK,
    core_vocabulary.ResourceType.BOOK_SECTION: ResourceTypeGeneral.BOOK_CHAPTER,
    core_vocabulary.ResourceType.THESIS: ResourceTypeGeneral.DISSERTATION,
    core_vocabulary.ResourceType.JOURNAL_ARTICLE: ResourceTypeGeneral.JOURNAL_ARTICLE,
    core_vocabulary.ResourceType.MAGAZINE_ARTICLE: ResourceTypeGeneral.JOURNAL_ARTICLE,
    core_vocabulary.ResourceType.ONLINE_RESOURCE: ResourceTypeGeneral.OTHER,
    core_vocabulary.ResourceType.REPORT: ResourceTypeGeneral.REPORT,
    core_vocabulary.ResourceType.WEBPAGE: ResourceTypeGeneral.OTHER,
    core_vocabulary.ResourceType.CONFERENCE_PAPER: ResourceTypeGeneral.CONFERENCE_PAPER,
    core_vocabulary.ResourceType.PATENT: ResourceTypeGeneral.OTHER,
    core_vocabulary.ResourceType.NOTE: ResourceTypeGeneral.OTHER,
    core_vocabulary.ResourceType.ARTISTIC_PERFORMANCE: ResourceTypeGeneral.OTHER,
    core_vocabulary.ResourceType.DATASET: ResourceTypeGeneral.DATASET,
    core_vocabulary.ResourceType.PRESENTATION: ResourceTypeGeneral.OTHER,
    core_vocabulary.ResourceType.PHYSICAL_OBJECT: ResourceTypeGeneral.PHYSICAL_OBJECT,
    core_vocabulary.ResourceType.COMPUTER_PROGRAM: ResourceTypeGeneral.SOFTWARE,
    core_vocabulary.ResourceType.OTHER: ResourceTypeGeneral.OTHER,
    core_vocabulary.ResourceType.ARTWORK: ResourceTypeGeneral.OTHER,
    core_vocabulary.ResourceType.ATTACHMENT: ResourceTypeGeneral.OTHER,
    core_vocabulary.ResourceType.AUDIO_RECORDING: ResourceTypeGeneral.SOUND,
    core_vocabulary.ResourceType.DOCUMENT: ResourceTypeGeneral.OTHER,
    core_vocabulary.ResourceType.EMAIL: ResourceTypeGeneral.OTHER,
    core_vocabulary.ResourceType.ENCYCLOPEDIA_ARTICLE: ResourceTypeGeneral.OTHER,
    core_vocabulary.ResourceType.FILM: ResourceTypeGeneral.OTHER,
    core_vocabulary.ResourceType.INSTANT_MESSAGE: ResourceTypeGeneral.OTHER,
    core_vocabulary.ResourceType.INTERVIEW: ResourceTypeGeneral.OTHER,
    core_vocabulary.ResourceType.LETTER: ResourceTypeGeneral.OTHER,
    core_vocabulary.ResourceType.MANUSCRIPT: ResourceTypeGeneral.OTHER,
    core_vocabulary.ResourceType.MAP: ResourceTypeGeneral.OTHER,
    core_vocabulary.ResourceType.NEWSPAPER_ARTICLE: ResourceTypeGeneral.OTHER,
    core_vocabulary.ResourceType.PODCAST: ResourceTypeGeneral.OTHER,
    core_vocabulary.ResourceType.RADIO_BROADCAST: ResourceTypeGeneral.OTHER,
    core_vocabulary.ResourceType.TV_BROADCAST: ResourceTypeGeneral.OTHER,
    core_vocabulary.ResourceType.VIDEO_RECORDING: ResourceTypeGeneral.OTHER,
}

_TITLE_TYPES: dict[core_vocabulary.CoreTitleType, TitleType] = {
    core_vocabulary.CoreTitleType.MAIN: TitleType.DEFAULT_TITLE,
    core_vocabulary.CoreTitleType.ALTERNATIVE_TITLE: TitleType.ALTERNATIVE_TITLE,
    core_vocabulary.CoreTitleType.SUB_TITLE: TitleType.SUB_TITLE,
    core_vocabulary.CoreTitleType.TRANSLATED_TITLE: TitleType.TRANSLATED_TITLE,
    core_vocabulary.CoreTitleType.OTHER: TitleType.OTHER,
}

_NAME_TYPES: dict[core_vocabulary.NameType, NameType] = {
    core_vocabulary.NameType.DEFAULT: NameType.DEFAULT,
    core_vocabulary.NameType.PERSONAL: NameType.PERSONAL,
    core_vocabulary.NameType.ORGANIZATIONAL: NameType.ORGANIZATIONAL,
}

_RELATED_IDENTIFIER_TYPES: dict[core_vocabulary.RelatedIdentifierType, RelatedIdentifierType] = {
    core_vocabulary.RelatedIdentifierType.ARK: RelatedIdentifierType.ARK,
    core_vocabulary.RelatedIdentifierType.ARXIV: RelatedIdentifierType.ARXIV,
    core_vocabulary.RelatedIdentifierType.BIBCODE: RelatedIdentifierType.BIBCODE,
    core_vocabulary.RelatedIdentifierType.DOI: RelatedIdentifierType.DOI,
    core_vocabulary.RelatedIdentifierType.EAN13: RelatedIdentifierType.EAN13,
    core_vocabulary.RelatedIdentifierType.EISSN: RelatedIdentifierType.EISSN,
    core_vocabulary.RelatedIdentifierType.HANDLE: RelatedIdentifierType.HANDLE,
    core_vocabulary.RelatedIdentifierType.IGSN: RelatedIdentifierType.IGSN,
    core_vocabulary.RelatedIdentifierType.ISBN: RelatedIdentifierType.ISBN,
    core_vocabulary.RelatedIdentifierType.ISSN: RelatedIdentifierType.ISSN,
    core_vocabulary.RelatedIdentifierType.ISTC: RelatedIdentifierType.ISTC,
    core_vocabulary.RelatedIdentifierType.LISSN: RelatedIdentifierType.LISSN,
    core_vocabulary.RelatedIdentifierType.LSID: RelatedIdentifierType.LSID,
    core_vocabulary.RelatedIdentifierType.PMID: RelatedIdentifierType.PMID,
    core_vocabulary.RelatedIdentifierType.PURL: RelatedIdentifierType.PURL,
    core_vocabulary.RelatedIdentifierType.UPC: RelatedIdentifierType.UPC,
    core_vocabulary.RelatedIdentifierType.URL: RelatedIdentifierType.URL,
    core_vocabulary.RelatedIdentifierType.URN: RelatedIdentifierType.URN,
    core_vocabulary.RelatedIdentifierType.W3ID: RelatedIdentifierType.W3ID,
}

_CONTRIBUTOR_PERSON_TYPES = {
    core_vocabulary.PersonType.CONTACT_PERSON,
    core_vocabulary.PersonType.DATA_COLLECTOR,
}


def _text(value: Any) -> str:
    return value.value if isinstance(value, Enum) else str(value)


def resource_type_from_core(resource_type: core_vocabulary.ResourceType | str) -> ResourceType:
    """DataCite resource type for a core resource type; unknown types become OTHER."""
    general = _RESOURCE_TYPE_GENERAL.get(resource_type, ResourceTypeGeneral.OTHER)
    return ResourceType(value=_text(resource_type), identifier_type=general)


def title_type_from_core(title_type: core_vocabulary.CoreTitleType | str) -> TitleType:
    """DataCite title type for a core title type; unknown types become OTHER."""
    return _TITLE_TYPES.get(title_type, TitleType.OTHER)


def name_type_from_core(name_type: core_vocabulary.NameType | str) -> NameType:
    """DataCite name type for a core name type; unknown types become DEFAULT."""
    return _NAME_TYPES.get(name_type, NameType.DEFAULT)


def related_identifier_from_core(
    identifier_type: core_vocabulary.RelatedIdentifierType | str,
) -> RelatedIdentifierType | str:
    """DataCite identifier type for a core identifier type; an empty string if it has none."""
    return _RELATED_IDENTIFIER_TYPES.get(identifier_type, "")


def _publication_year(value: str) -> int:
    try:
        return date_parser.parse(value).year
    except (ValueError, OverflowError):
        return 0


def _name(person: Person) -> Name:
    return Name(
        value=person.person_name.value,
        type=name_type_from_core(person.person_name.type),
    )


def _name_identifier(person: Person) -> NameIdentifier:
    source = person.name_identifier
    return NameIdentifier(
        value=source.value,
        lang=source.lang,
        scheme_uri=source.scheme_uri,
        name_identifier_scheme=source.name_identifier_scheme,
    )


def datacite_from_core(core: Core) -> DataCite:
    """Build a DataCite record from a core metadata record."""
    record = DataCite(resource_type=resource_type_from_core(core.resource_type))

    record.titles = [
        Title(value=title.data, type=title_type_from_core(title.type)) for title in core.title
    ]

    for person in core.person:
        if person.person_type in _CONTRIBUTOR_PERSON_TYPES:
            record.contributors.append(
                Contributor(
                    contributor_name=_name(person),
                    given_name=person.given_name,
                    family_name=person.family_name,
                    affiliation=person.affiliation,
                    name_identifier=_name_identifier(person),
                )
            )
        else:
            record.creators.append(
                Creator(
                    creator_name=_name(person),
                    given_name=person.given_name,
                    family_name=person.family_name,
                    affiliation=[person.affiliation],
                    name_identifier=[_name_identifier(person)],
                )
            )

    record.publisher = core.publisher
    record.publication_year = _publication_year(core.publication_year)

    for ident in core.identifier:
        if ident.identifier_type == core_vocabulary.RelatedIdentifierType.DOI:
            record.identifier = Identifier(
                value=ident.value,
                identifier_type=related_identifier_from_core(ident.identifier_type),
            )
            continue
        kind = related_identifier_from_core(ident.identifier_type)
        if kind != "":
            record.alternate_identifiers.append(
                AlternateIdentifier(value=ident.value, alternate_identifier_type=kind)
            )

    return record