import pytest

from fairkit.myfair.vocabulary import (
    CoreTitleType,
    NameType,
    PersonType,
    RelatedIdentifierType,
    ResourceType,
    related_identifier_type_from_string,
)


@pytest.mark.parametrize(
    "key, expected",
    [
        ("doi", RelatedIdentifierType.DOI),
        ("arxiv", RelatedIdentifierType.ARXIV),
        ("handle", RelatedIdentifierType.HANDLE),
        ("w3id", RelatedIdentifierType.W3ID),
        ("zotero", RelatedIdentifierType.ZOTERO),
    ],
)
def test_related_identifier_lookup(key, expected):
    assert related_identifier_type_from_string(key) is expected


def test_related_identifier_lookup_ignores_case():
    assert related_identifier_type_from_string("arXiv") is RelatedIdentifierType.ARXIV
    assert related_identifier_type_from_string("DOI").value == "DOI"


def test_related_identifier_lookup_covers_every_member():
    for member in RelatedIdentifierType:
        assert related_identifier_type_from_string(member.value.lower()) is member


def test_related_identifier_lookup_unknown_raises():
    with pytest.raises(ValueError):
        related_identifier_type_from_string("orcid")


@pytest.mark.parametrize("enum_type", [CoreTitleType, NameType, PersonType, RelatedIdentifierType, ResourceType])
def test_values_round_trip(enum_type):
    for member in enum_type:
        assert enum_type(member.value) is member


def test_default_title_and_name_types_are_empty():
    assert CoreTitleType("") is CoreTitleType.MAIN
    assert NameType("") is NameType.DEFAULT


def test_resource_type_by_value():
    assert ResourceType("tvBroadcast") is ResourceType.TV_BROADCAST
    assert ResourceType("computerProgram") is ResourceType.COMPUTER_PROGRAM


def test_unknown_person_type_raises():
    with pytest.raises(ValueError):
        PersonType("author")