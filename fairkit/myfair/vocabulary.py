"""Controlled vocabularies of the core metadata model."""

from __future__ import annotations

from enum import Enum


class CoreTitleType(str, Enum):
    MAIN = ""
    ALTERNATIVE_TITLE = "AlternativeTitle"
    SUB_TITLE = "Subtitle"
    TRANSLATED_TITLE = "TranslatedTitle"
    OTHER = "Other"


class NameType(str, Enum):
    DEFAULT = ""
    ORGANIZATIONAL = "Organizational"
    PERSONAL = "Personal"


class PersonType(str, Enum):
    AUTHOR = "Author"
    ARTIST = "Artist"
    CONTACT_PERSON = "ContactPerson"
    DATA_COLLECTOR = "DataCollector"
    DATA_CURATOR = "DataCurator"
    DATA_MANAGER = "DataManager"
    DISTRIBUTOR = "Distributor"
    EDITOR = "Editor"
    HOSTING_INSTITUTION = "HostingInstitution"
    OTHER = "Other"
    PRODUCER = "Producer"
    PROJECT_LEADER = "ProjectLeader"
    PROJECT_MANAGER = "ProjectManager"
    PROJECT_MEMBER = "ProjectMember"
    REGISTRATION_AGENCY = "RegistrationAgency"
    REGISTRATION_AUTHORITY = "RegistrationAuthority"
    RELATED_PERSON = "RelatedPerson"
    RESEARCH_GROUP = "ResearchGroup"
    RIGHTS_HOLDER = "RightsHolder"
    RESEARCHER = "Researcher"
    SPONSOR = "Sponsor"
    SUPERVISOR = "Supervisor"
    WORK_PACKAGE_LEADER = "WorkPackageLeader"


class RelatedIdentifierType(str, Enum):
    ARK = "ARK"
    ARXIV = "arXiv"
    BIBCODE = "bibcode"
    DOI = "DOI"
    EAN13 = "EAN13"
    EISSN = "EISSN"
    HANDLE = "Handle"
    IGSN = "IGSN"
    ISBN = "ISBN"
    ISSN = "ISSN"
    ISTC = "ISTC"
    LISSN = "LISSN"
    LSID = "LSID"
    PMID = "PMID"
    PURL = "PURL"
    UPC = "UPC"
    URL = "URL"
    URN = "URN"
    W3ID = "w3id"
    ZOTERO = "zotero"


class ResourceType(str, Enum):
    BOOK = "book"
    BOOK_SECTION = "bookSection"
    THESIS = "thesis"
    JOURNAL_ARTICLE = "journalArticle"
    MAGAZINE_ARTICLE = "magazineArticle"
    ONLINE_RESOURCE = "onlineResource"
    REPORT = "report"
    WEBPAGE = "webpage"
    CONFERENCE_PAPER = "conferencePaper"
    PATENT = "patent"
    NOTE = "note"
    ARTISTIC_PERFORMANCE = "artisticPerformance"
    DATASET = "dataset"
    PRESENTATION = "presentation"
    PHYSICAL_OBJECT = "physicalObject"
    COMPUTER_PROGRAM = "computerProgram"
    OTHER = "other"
    ARTWORK = "artwork"
    ATTACHMENT = "attachment"
    AUDIO_RECORDING = "audioRecording"
    DOCUMENT = "document"
    EMAIL = "email"
    ENCYCLOPEDIA_ARTICLE = "encyclopediaArticle"
    FILM = "film"
    INSTANT_MESSAGE = "instantMessage"
    INTERVIEW = "interview"
    LETTER = "letter"
    MANUSCRIPT = "manuscript"
    MAP = "map"
    NEWSPAPER_ARTICLE = "newspaperArticle"
    PODCAST = "podcast"
    RADIO_BROADCAST = "radioBroadcast"
    TV_BROADCAST = "tvBroadcast"
    VIDEO_RECORDING = "videoRecording"


_RELATED_IDENTIFIER_TYPES = {member.value.lower(): member for member in RelatedIdentifierType}


def related_identifier_type_from_string(value: str) -> RelatedIdentifierType:
    """Look up an identifier type by its lower-case name, ignoring the case of ``value``."""
    try:
        return _RELATED_IDENTIFIER_TYPES[value.lower()]
    except KeyError:
        raise ValueError(f"unknown identifier type {value}") from None