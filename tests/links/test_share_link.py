"""Tests for share link encoding and parsing."""

import pytest

from pushpin_core.exceptions import (
    ChecksumMismatchError,
    EmptyInputError,
    InvalidContentTypeError,
    InvalidInternalIdentifierError,
    MalformedLinkError,
    MissingIdentifierError,
    MissingTypeError,
    ShareLinkError,
    UnsupportedSchemeError,
)
from pushpin_core.links import (
    EncodedParts,
    HypermergeUrl,
    ShareLinkParts,
    crc16,
    create_document_link,
    encode_token,
    is_hypermerge_url,
    is_pushpin_url,
    is_valid_checksum,
    new_hypermerge_url,
    parse_document_link,
    split_link,
    with_checksum,
)
from pushpin_core.links import share_link


def _flip(char: str) -> str:
    return "x" if char != "x" else "y"


class TestCreateDocumentLink:
    def test_board_link_layout(self):
        link = create_document_link("board", HypermergeUrl("hypermerge:/abc123"))
        assert link.startswith("pushpin://board/abc123/")
        token = link.rsplit("/", 1)[1]
        assert 1 <= len(token) <= 4

    def test_link_ends_with_checksum_of_body(self):
        link = create_document_link("board", HypermergeUrl("hypermerge:/abc123"))
        assert link == with_checksum("pushpin://board/abc123")
        assert link.endswith("/" + encode_token(crc16("pushpin://board/abc123")))

    def test_deterministic(self):
        url = HypermergeUrl("hypermerge:/abc123")
        assert create_document_link("board", url) == create_document_link("board", url)

    def test_rejects_share_link_passed_as_id(self):
        link = create_document_link("board", HypermergeUrl("hypermerge:/abc123"))
        with pytest.raises(InvalidInternalIdentifierError, match="pushpin"):
            create_document_link("board", HypermergeUrl(link))

    def test_rejects_reserved_word_inside_id(self):
        with pytest.raises(InvalidInternalIdentifierError):
            create_document_link("board", HypermergeUrl("hypermerge:/pushpin"))

    @pytest.mark.parametrize(
        "internal_id",
        ["abc123", "hypermerge:/", "hypermerge:/ab-c", "hypermerge://abc", "xhypermerge:/abc", "hypermerge:/abc\n", ""],
    )
    def test_rejects_non_hypermerge_ids(self, internal_id: str):
        with pytest.raises(InvalidInternalIdentifierError):
            create_document_link("board", HypermergeUrl(internal_id))

    def test_rejects_empty_type(self):
        with pytest.raises(MissingTypeError):
            create_document_link("", HypermergeUrl("hypermerge:/abc123"))

    @pytest.mark.parametrize("type_tag", ["bo/ard", "board game", "mind-map", "böard"])
    def test_rejects_type_that_cannot_round_trip(self, type_tag: str):
        with pytest.raises(InvalidContentTypeError):
            create_document_link(type_tag, HypermergeUrl("hypermerge:/abc123"))

    def test_identifier_checked_before_type(self):
        with pytest.raises(InvalidInternalIdentifierError):
            create_document_link("", HypermergeUrl("abc123"))


class TestParseDocumentLink:
    def test_board_scenario(self):
        link = create_document_link("board", HypermergeUrl("hypermerge:/abc123"))
        parts = parse_document_link(link)
        assert parts == ShareLinkParts(
            scheme="pushpin",
            type="board",
            identifier="abc123",
            internal_id=HypermergeUrl("hypermerge:/abc123"),
        )

    @pytest.mark.parametrize("type_tag", ["board", "mindmap", "a", "Text_2", "t" * 40])
    @pytest.mark.parametrize("bare_id", ["abc123", "Z", "_", "0", "7Yz9QkWm3bCdEfGh"])
    def test_round_trip(self, type_tag: str, bare_id: str):
        internal_id = HypermergeUrl(f"hypermerge:/{bare_id}")
        parts = parse_document_link(create_document_link(type_tag, internal_id))
        assert parts.type == type_tag
        assert parts.identifier == bare_id
        assert parts.internal_id == internal_id
        assert parts.scheme == "pushpin"

    def test_round_trip_minted_id(self):
        internal_id = new_hypermerge_url()
        parts = parse_document_link(create_document_link("board", internal_id))
        assert parts.internal_id == internal_id

    def test_empty_input(self):
        with pytest.raises(EmptyInputError):
            parse_document_link("")

    @pytest.mark.parametrize(
        "link",
        [
            "not-a-link",
            "pushpin://board/abc123",
            "pushpin://board/abc123/",
            "pushpin://board/abc123/12345",
            "pushpin://bo-ard/abc123/11",
            "pushpin://board/abc-123/11",
            "pushpin:/board/abc123/11",
            "pushpin://board/extra/abc123/11",
            "pushpin:///abc123/11",
            "pushpin://board//11",
            " pushpin://board/abc123/11",
        ],
    )
    def test_malformed(self, link: str):
        with pytest.raises(MalformedLinkError):
            parse_document_link(link)

    def test_trailing_newline_is_malformed(self):
        link = create_document_link("board", HypermergeUrl("hypermerge:/abc123"))
        with pytest.raises(MalformedLinkError):
            parse_document_link(link + "\n")

    def test_checksum_token_outside_base58_alphabet_is_malformed(self):
        with pytest.raises(MalformedLinkError, match="base-58"):
            parse_document_link("pushpin://board/abc123/0OIl")

    def test_flipping_any_body_character_fails_checksum(self):
        link = create_document_link("board", HypermergeUrl("hypermerge:/abc123"))
        body, token = link.rsplit("/", 1)
        for i, char in enumerate(body):
            if char in ":/":
                continue
            tampered = f"{body[:i]}{_flip(char)}{body[i + 1 :]}/{token}"
            with pytest.raises(ChecksumMismatchError):
                parse_document_link(tampered)

    def test_checksum_mismatch_carries_both_values(self):
        body = "pushpin://board/abc123"
        other_token = encode_token(crc16("pushpin://board/abc124"))
        with pytest.raises(ChecksumMismatchError) as exc_info:
            parse_document_link(f"{body}/{other_token}")
        assert exc_info.value.expected == crc16(body)
        assert exc_info.value.actual == crc16("pushpin://board/abc124")

    def test_short_token_fails_checksum(self):
        with pytest.raises(ChecksumMismatchError) as exc_info:
            parse_document_link("pushpin://board/abc123/2")
        assert exc_info.value.actual == "01"

    def test_other_scheme_with_valid_checksum(self):
        link = with_checksum("http://board/abc123")
        with pytest.raises(UnsupportedSchemeError) as exc_info:
            parse_document_link(link)
        assert exc_info.value.scheme == "http"

    def test_scheme_is_case_sensitive(self):
        with pytest.raises(UnsupportedSchemeError):
            parse_document_link(with_checksum("Pushpin://board/abc123"))

    def test_checksum_checked_before_scheme(self):
        with pytest.raises(ChecksumMismatchError):
            parse_document_link("http://board/abc123/11")

    def test_empty_type_capture_rejected(self, monkeypatch: pytest.MonkeyPatch):
        body = "pushpin:///abc123"
        monkeypatch.setattr(
            share_link,
            "split_link",
            lambda link: EncodedParts(body=body, scheme="pushpin", type="", identifier="abc123", token=encode_token(crc16(body))),
        )
        with pytest.raises(MissingTypeError):
            parse_document_link("anything")

    def test_empty_identifier_capture_rejected(self, monkeypatch: pytest.MonkeyPatch):
        body = "pushpin://board/"
        monkeypatch.setattr(
            share_link,
            "split_link",
            lambda link: EncodedParts(body=body, scheme="pushpin", type="board", identifier="", token=encode_token(crc16(body))),
        )
        with pytest.raises(MissingIdentifierError):
            parse_document_link("anything")

    def test_all_failures_are_share_link_errors(self):
        for link in ["", "not-a-link", "pushpin://board/abc123/2", with_checksum("http://board/abc123")]:
            with pytest.raises(ShareLinkError):
                parse_document_link(link)


class TestZeroChecksum:
    def test_body_with_zero_checksum(self):
        assert crc16("pushpin://board/pz0") == "0000"

    def test_zero_checksum_round_trips(self):
        link = create_document_link("board", HypermergeUrl("hypermerge:/pz0"))
        assert link == "pushpin://board/pz0/11"
        parts = parse_document_link(link)
        assert parts.identifier == "pz0"
        assert parts.type == "board"
        assert parts.internal_id == "hypermerge:/pz0"
        assert is_valid_checksum("pushpin://board/pz0", "11")


class TestSplitLink:
    def test_captures_every_part(self):
        assert split_link("pushpin://board/abc123/FFS") == EncodedParts(
            body="pushpin://board/abc123",
            scheme="pushpin",
            type="board",
            identifier="abc123",
            token="FFS",
        )

    def test_no_partial_match(self):
        assert split_link("pushpin://board/abc123") is None
        assert split_link("prefix pushpin://board/abc123/FFS") is None


class TestIsValidChecksum:
    def test_valid(self):
        body = "pushpin://board/abc123"
        assert is_valid_checksum(body, encode_token(crc16(body)))

    def test_invalid(self):
        assert not is_valid_checksum("pushpin://board/abc123", encode_token(crc16("pushpin://board/abc124")))

    def test_empty_values(self):
        assert not is_valid_checksum("", "11")
        assert not is_valid_checksum("pushpin://board/abc123", "")

    def test_undecodable_token(self):
        assert not is_valid_checksum("pushpin://board/abc123", "0")


class TestPredicates:
    def test_is_hypermerge_url(self):
        assert is_hypermerge_url("hypermerge:/abc123")
        assert not is_hypermerge_url("hypermerge:/")
        assert not is_hypermerge_url("pushpin://board/abc123/11")
        assert not is_hypermerge_url("hypermerge:/abc\n")

    def test_is_pushpin_url(self):
        assert is_pushpin_url(create_document_link("board", HypermergeUrl("hypermerge:/abc123")))
        assert is_pushpin_url("pushpin://board/abc123/zzzz")  # layout only, checksum not verified
        assert not is_pushpin_url("hypermerge:/abc123")
        assert not is_pushpin_url("pushpin://board/abc123/12345")

    def test_new_hypermerge_url(self):
        first = new_hypermerge_url()
        second = new_hypermerge_url()
        assert is_hypermerge_url(first)
        assert first != second
