"""Item types and person roles of the search index vocabulary."""

from __future__ import annotations

from enum import Enum


class PersonRole(str, Enum):
    ARTIST = "artist"
    CONTRIBUTOR = "contributor"


class ItemType(str, Enum):
    BOOK = "book"
    BOOK_SECTION = "bookSection"
    THESIS = "thesis"
    JOURNAL_ARTICLE = "journalArticle"
    MAGAZINE_ARTICLE = "magazineArticle"
    REPORT = "report"
    WEBPAGE = "webpage"
    CONFERENCE_PAPER = "conferencePaper"
    PATENT = "patent"
    NOTE = "note"
    PRESENTATION = "presentation"
    COMPUTER_PROGRAM = "computerProgram"
    ARTWORK = "artwork"
    PERFORMANCE = "performance"
    ATTACHMENT = "attachment"
    AUDIO_RECORDING = "audioRecording"
    BILL = "bill"
    BLOG_POST = "blogPost"
    CASE = "case"
    DICTIONARY_ENTRY = "dictionaryEntry"
    DOCUMENT = "document"
    EMAIL = "email"
    ENCYCLOPEDIA_ARTICLE = "encyclopediaArticle"
    FILM = "film"
    FORUM_POST = "forumPost"
    HEARING = "hearing"
    INSTANT_MESSAGE = "instantMessage"
    INTERVIEW = "interview"
    LETTER = "letter"
    MANUSCRIPT = "manuscript"
    MAP = "map"
    NEWSPAPER_ARTICLE = "newspaperArticle"
    PODCAST = "podcast"
    RADIO_BROADCAST = "radioBroadcast"
    STATUTE = "statute"
    TV_BROADCAST = "tvBroadcast"
    VIDEO_RECORDING = "videoRecording"
    OTHER = "other"


_ITEM_TYPES = {member.value: member for member in ItemType}
_PERSON_ROLES = {member.value: member for member in PersonRole}


def item_type_from_string(value: str) -> ItemType:
    """Look up an item type by its exact name; raise ValueError if unknown."""
    try:
        return _ITEM_TYPES[value]
    except KeyError:
        raise ValueError(f"unknown item type {value}") from None


def person_role_from_string(value: str) -> PersonRole:
    """Look up a person role by its exact name; raise ValueError if unknown."""
    try:
        return _PERSON_ROLES[value]
    except KeyError:
        raise ValueError(f"unknown creator type {value}") from None