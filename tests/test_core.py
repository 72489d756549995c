import json

from fairkit.myfair.core import (
    Core,
    Identifier,
    Media,
    Name,
    NameIdentifier,
    Person,
    Title,
)
from fairkit.myfair.vocabulary import (
    CoreTitleType,
    NameType,
    PersonType,
    RelatedIdentifierType,
    ResourceType,
)


def _sample_core() -> Core:
    return Core(
        identifier=[Identifier(value="10.1000/xyz", identifier_type=RelatedIdentifierType.DOI)],
        person=[
            Person(
                person_type=PersonType.AUTHOR,
                person_name=Name(value="Doe, Jane", lang="en", type=NameType.PERSONAL),
                given_name="Jane",
                family_name="Doe",
                affiliation="Example University",
                name_identifier=NameIdentifier(
                    value="0000-0000-0000-0000",
                    scheme_uri="https://orcid.example.com",
                    name_identifier_scheme="ORCID",
                ),
            )
        ],
        title=[
            Title(lang="en", data="Main title", type=CoreTitleType.MAIN),
            Title(lang="de", data="Untertitel", type=CoreTitleType.SUB_TITLE),
        ],
        publisher="Example Press",
        publication_year="2021",
        resource_type=ResourceType.DATASET,
        rights="open",
        license="CC0",
        media=[Media(name="cover", mimetype="image/png", type="image", uri="file:///a.png", width=640)],
        poster=Media(name="poster", mimetype="image/jpeg", type="image", uri="file:///p.jpg"),
    )


def test_round_trip_through_dict():
    core = _sample_core()
    assert Core.from_dict(core.to_dict()) == core


def test_round_trip_through_json_text():
    core = _sample_core()
    assert Core.from_dict(json.loads(json.dumps(core.to_dict()))) == core


def test_top_level_keys():
    data = _sample_core().to_dict()
    assert set(data) == {
        "identifier",
        "person",
        "title",
        "publisher",
        "publicationYear",
        "resourceType",
        "rights",
        "license",
        "media",
        "poster",
    }


def test_empty_optional_fields_are_left_out():
    data = Core().to_dict()
    assert "rights" not in data
    assert "license" not in data
    assert data["poster"] is None
    assert data["identifier"] == []


def test_media_zero_sizes_are_left_out():
    data = _sample_core().to_dict()
    media = data["media"][0]
    assert media["width"] == 640
    assert "height" not in media
    assert "fulltext" not in media


def test_person_always_carries_name_identifier():
    data = Core(person=[Person(person_type=PersonType.EDITOR, person_name=Name(value="X"))]).to_dict()
    person = data["person"][0]
    assert person["nameIdentifier"] == {}
    assert person["personName"] == {"value": "X"}
    assert person["personType"] == PersonType.EDITOR.value


def test_title_keeps_all_keys():
    data = Core(title=[Title(data="Only")]).to_dict()
    assert data["title"] == [{"lang": "", "value": "Only", "type": ""}]


def test_from_dict_converts_vocabulary_values():
    core = Core.from_dict(
        {
            "person": [{"personType": "Author", "personName": {"value": "A"}}],
            "identifier": [{"value": "abc", "identifierType": "Handle"}],
            "resourceType": "book",
        }
    )
    assert core.person[0].person_type is PersonType.AUTHOR
    assert core.identifier[0].identifier_type is RelatedIdentifierType.HANDLE
    assert core.resource_type is ResourceType.BOOK


def test_from_dict_keeps_unknown_values_as_text():
    core = Core.from_dict({"resourceType": "unusual"})
    assert core.resource_type == "unusual"
    assert core.to_dict()["resourceType"] == "unusual"


def test_from_dict_missing_fields_take_defaults():
    core = Core.from_dict({})
    assert core == Core()