"""
Unit Tests for charset detection and decoding.
"""
import logging

import pytest

from ofx_ingest.common.models import EncodingTag
from ofx_ingest.parsing.sources.encoding import detect_encoding, decode_document


# ============================================================================
# detect_encoding
# ============================================================================

class TestDetectEncoding:

    @pytest.mark.parametrize("code", ["65001", "28591"])
    def test_known_codes_resolve_to_utf8(self, code):
        tag = detect_encoding(f"OFXHEADER:100\nCHARSET:{code}\n")
        assert tag == EncodingTag(code=int(code), name="utf-8")

    def test_unknown_code_falls_back_to_cp1252(self):
        tag = detect_encoding("OFXHEADER:100\nCHARSET:1252\n")
        assert tag.code == 1252
        assert tag.name == "cp1252"

    def test_absent_declaration_falls_back_to_cp1252(self):
        tag = detect_encoding("OFXHEADER:100\nENCODING:USASCII\n")
        assert tag.code is None
        assert tag.name == "cp1252"

    def test_non_numeric_charset_is_not_a_declaration(self):
        assert detect_encoding("CHARSET:NONE").name == "cp1252"

    def test_case_insensitive(self):
        assert detect_encoding("charset:65001").name == "utf-8"

    def test_bytes_input(self):
        assert detect_encoding(b"CHARSET:28591\n<OFX>").name == "utf-8"

    def test_leading_zeros_are_part_of_the_code(self):
        tag = detect_encoding("CHARSET:065001")
        assert tag.name == "cp1252"
        assert tag.code == 65001
        assert detect_encoding(b"CHARSET:0028591").name == "cp1252"

    def test_overlong_code_never_fails(self):
        tag = detect_encoding("CHARSET:" + "1" * 5000)
        assert tag == EncodingTag(code=None, name="cp1252")

    def test_overlong_code_in_bytes(self):
        assert detect_encoding(b"CHARSET:" + b"9" * 5000).code is None

    def test_custom_table(self):
        tag = detect_encoding("CHARSET:1252", charset_map={"1252": "latin-1"}, default_encoding="ascii")
        assert tag.name == "latin-1"
        assert detect_encoding("CHARSET:9", charset_map={}, default_encoding="ascii").name == "ascii"


# ============================================================================
# decode_document
# ============================================================================

class TestDecodeDocument:

    def test_utf8_bytes(self):
        assert decode_document("São João".encode("utf-8"), "utf-8") == "São João"

    def test_cp1252_bytes(self):
        assert decode_document("Crédito €".encode("cp1252"), "cp1252") == "Crédito €"

    def test_mislabelled_utf8_falls_back_to_legacy(self):
        raw = "Padaria São João".encode("cp1252")
        assert decode_document(raw, "utf-8") == "Padaria São João"

    def test_undefined_cp1252_bytes_are_dropped(self):
        assert decode_document(b"A\x81B", "cp1252") == "AB"

    def test_no_fallback_message_when_already_legacy(self, caplog):
        with caplog.at_level(logging.INFO, logger="ofx_ingest"):
            assert decode_document(b"A\x81B", "cp1252", "cp1252") == "AB"
        assert not any("falling back" in r.getMessage() for r in caplog.records)

    def test_fallback_is_logged(self, caplog):
        with caplog.at_level(logging.INFO, logger="ofx_ingest"):
            decode_document("São".encode("cp1252"), "utf-8", "cp1252")
        assert any("falling back to cp1252" in r.getMessage() for r in caplog.records)

    def test_text_is_taken_as_decoded(self):
        assert decode_document("Crédito", "cp1252") == "Crédito"

    def test_bom_removed(self):
        assert decode_document(b"\xef\xbb\xbfOFXHEADER:100", "utf-8") == "OFXHEADER:100"
        assert decode_document("\ufeffOFXHEADER:100", "utf-8") == "OFXHEADER:100"
