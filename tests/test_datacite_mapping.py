import pytest

from fairkit.datacite.mapping import (
    datacite_from_core,
    name_type_from_core,
    related_identifier_from_core,
    resource_type_from_core,
    title_type_from_core,
)
from fairkit.datacite.vocabulary import (
    NameType,
    RelatedIdentifierType,
    ResourceTypeGeneral,
    TitleType,
)
from fairkit.myfair import vocabulary as cv
from fairkit.myfair.core import Core, Identifier, Name, NameIdentifier, Person, Title


def test_resource_type_book():
    result = resource_type_from_core(cv.ResourceType.BOOK)
    assert result.value == "book"
    assert result.identifier_type == ResourceTypeGeneral.BOOK


def test_resource_type_thesis_is_dissertation():
    result = resource_type_from_core(cv.ResourceType.THESIS)
    assert result.identifier_type == ResourceTypeGeneral.DISSERTATION
    assert result.value == "thesis"


def test_resource_type_unknown_becomes_other():
    result = resource_type_from_core("somethingElse")
    assert result.value == "somethingElse"
    assert result.identifier_type == ResourceTypeGeneral.OTHER


@pytest.mark.parametrize("member", list(cv.ResourceType))
def test_every_resource_type_keeps_its_value(member):
    result = resource_type_from_core(member)
    assert result.value == member.value
    assert isinstance(result.identifier_type, ResourceTypeGeneral)


def test_title_types():
    assert title_type_from_core(cv.CoreTitleType.MAIN) == TitleType.DEFAULT_TITLE
    assert title_type_from_core(cv.CoreTitleType.SUB_TITLE) == TitleType.SUB_TITLE
    assert title_type_from_core("Unknown") == TitleType.OTHER


def test_name_types():
    assert name_type_from_core(cv.NameType.PERSONAL) == NameType.PERSONAL
    assert name_type_from_core(cv.NameType.ORGANIZATIONAL) == NameType.ORGANIZATIONAL
    assert name_type_from_core("Unknown") == NameType.DEFAULT


@pytest.mark.parametrize(
    "member", [m for m in cv.RelatedIdentifierType if m != cv.RelatedIdentifierType.ZOTERO]
)
def test_related_identifier_keeps_value(member):
    assert related_identifier_from_core(member).value == member.value


def test_related_identifier_zotero_has_none():
    assert related_identifier_from_core(cv.RelatedIdentifierType.ZOTERO) == ""


def _core():
    return Core(
        identifier=[
            Identifier(value="10.1234/abc", identifier_type=cv.RelatedIdentifierType.DOI),
            Identifier(value="20.500/xyz", identifier_type=cv.RelatedIdentifierType.HANDLE),
            Identifier(value="ITEM1", identifier_type=cv.RelatedIdentifierType.ZOTERO),
        ],
        person=[
            Person(
                person_type=cv.PersonType.AUTHOR,
                person_name=Name(value="Doe, Jane", type=cv.NameType.PERSONAL),
                given_name="Jane",
                family_name="Doe",
                affiliation="Example University",
                name_identifier=NameIdentifier(value="0000-0000", name_identifier_scheme="ORCID"),
            ),
            Person(
                person_type=cv.PersonType.CONTACT_PERSON,
                person_name=Name(value="Roe, Rick"),
                affiliation="Example Lab",
            ),
            Person(person_type=cv.PersonType.EDITOR, person_name=Name(value="Editor, Ed")),
        ],
        title=[
            Title(data="Main title", type=cv.CoreTitleType.MAIN),
            Title(data="Second", type=cv.CoreTitleType.ALTERNATIVE_TITLE),
        ],
        publisher="Example Press",
        publication_year="2021",
        resource_type=cv.ResourceType.DATASET,
    )


def test_datacite_from_core_identifiers():
    record = datacite_from_core(_core())
    assert record.identifier.value == "10.1234/abc"
    assert record.identifier.identifier_type == RelatedIdentifierType.DOI
    assert [a.value for a in record.alternate_identifiers] == ["20.500/xyz"]
    assert record.alternate_identifiers[0].alternate_identifier_type == RelatedIdentifierType.HANDLE


def test_datacite_from_core_persons():
    record = datacite_from_core(_core())
    assert [c.creator_name.value for c in record.creators] == ["Doe, Jane", "Editor, Ed"]
    assert [c.contributor_name.value for c in record.contributors] == ["Roe, Rick"]
    first = record.creators[0]
    assert first.creator_name.type == NameType.PERSONAL
    assert first.affiliation == ["Example University"]
    assert first.name_identifier[0].value == "0000-0000"
    assert first.name_identifier[0].name_identifier_scheme == "ORCID"
    assert record.creators[1].affiliation == [""]
    assert record.contributors[0].affiliation == "Example Lab"


def test_datacite_from_core_titles_and_fields():
    record = datacite_from_core(_core())
    assert [(t.value, t.type) for t in record.titles] == [
        ("Main title", TitleType.DEFAULT_TITLE),
        ("Second", TitleType.ALTERNATIVE_TITLE),
    ]
    assert record.publisher == "Example Press"
    assert record.publication_year == 2021
    assert record.resource_type.identifier_type == ResourceTypeGeneral.DATASET


def test_unparseable_publication_year_stays_zero():
    core = _core()
    core.publication_year = "not a date"
    assert datacite_from_core(core).publication_year == 0


def test_empty_core():
    record = datacite_from_core(Core())
    assert record.creators == []
    assert record.contributors == []
    assert record.alternate_identifiers == []
    assert record.identifier.value == ""
    assert record.resource_type.identifier_type == ResourceTypeGeneral.OTHER