# fairkit

Tools for FAIR research metadata and for parts of the Handle System wire
protocol.

It needs Python 3.10 or later and depends only on `python-dateutil`.

## Core metadata records

`fairkit.myfair.core.Core` is a neutral metadata record (identifiers,
persons, titles, publisher, publication year, resource type, rights,
licence, media). It is read from and written to a JSON-ready dictionary:

```python
from fairkit.myfair.core import Core

core = Core.from_dict({
    "identifier": [
        {"value": "10.1234/example", "identifierType": "DOI"},
        {"value": "https://example.com/item/1", "identifierType": "URL"},
    ],
    "person": [
        {"personType": "Author", "personName": {"value": "Doe, Jane"}},
        {"personType": "ContactPerson", "personName": {"value": "Roe, Richard"}},
    ],
    "title": [{"lang": "en", "value": "An example dataset", "type": ""}],
    "publisher": "Example Press",
    "publicationYear": "2021",
    "resourceType": "dataset",
})

data = core.to_dict()   # empty optional fields are left out
```

Values found in the vocabularies of `fairkit.myfair.vocabulary`
(`CoreTitleType`, `NameType`, `PersonType`, `RelatedIdentifierType`,
`ResourceType`) become enum members; other values are kept as plain
strings. `related_identifier_type_from_string` looks up an identifier type
regardless of case and raises `ValueError` for an unknown name.

## DataCite

`fairkit.datacite.mapping.datacite_from_core` turns a core record into a
`fairkit.datacite.model.DataCite` record:

```python
from fairkit.datacite.mapping import datacite_from_core

record = datacite_from_core(core)
record.init_namespace()      # sets the xsi namespace and schema location
print(record.to_xml())       # <resource xmlns="http://datacite.org/schema/kernel-4" ...>
print(record.to_dict())
```

How the mapping decides:

* Contact persons and data collectors become contributors; every other
  person becomes a creator.
* A DOI identifier becomes the primary identifier. Other identifier types
  that DataCite knows become alternate identifiers; the rest are dropped.
* The publication year is parsed with `dateutil`; if it cannot be parsed
  the year is 0.
* Resource types, title types and name types are translated with fixed
  tables (`resource_type_from_core`, `title_type_from_core`,
  `name_type_from_core`, `related_identifier_from_core`); unknown resource
  and title types map to "Other", unknown name types to the default.

The DataCite vocabularies live in `fairkit.datacite.vocabulary`.

## Search index vocabulary

```python
from fairkit.zsearch import item_type_from_string, person_role_from_string

item_type_from_string("blogPost")        # ItemType.BLOG_POST
person_role_from_string("contributor")   # PersonRole.CONTRIBUTOR
```

Unknown names raise `ValueError`.

## Handle protocol fields

`fairkit.handle.fields` encodes and decodes the length-prefixed building
blocks of Handle System messages: UTF-8 strings, index lists, type lists,
body digests (`BodyDigest`) and resolution request bodies
(`BodyQueryRequest`). `fairkit.handle.envelope` covers the fixed 20-byte
message envelope (`MessageEnvelope`, `MessageFlag`) and the credential
section (`Credential`).

```python
from fairkit.handle.fields import BodyQueryRequest
from fairkit.handle.envelope import MessageEnvelope

request = BodyQueryRequest(handle="20.500.12345/abc", index=b"\x01", types=["URL"])
raw = request.to_bytes()
assert BodyQueryRequest.from_bytes(raw) == request

envelope = MessageEnvelope(major_version=2, minor_version=1, request_id=7)
assert len(envelope.to_bytes()) == 20
```

Malformed input raises `fairkit.handle.fields.HandleProtocolError`, a
subclass of `ValueError`.

## What fairkit does not do

* It does not encode or decode message headers or whole Handle messages,
  and it has no Handle server: only the fields, envelope and credential
  above are provided.
* It exports core records to DataCite only; there is no Dublin Core export
  and no ORCID vocabulary.
* It does not translate search index item types into core resource types.
* It has no command-line program and no storage.

## Tests

The test suite uses pytest; install the `test` extra to get it.