"""
Shared OFX samples for the test suite.
"""
import pytest


SGML_HEADER = """OFXHEADER:100
DATA:OFXSGML
VERSION:102
SECURITY:NONE
ENCODING:USASCII
CHARSET:{charset}
COMPRESSION:NONE
OLDFILEUID:NONE
NEWFILEUID:NONE
"""

SGML_BODY = """<OFX>
<SIGNONMSGSRSV1>
<SONRS>
<STATUS>
<CODE>0
<SEVERITY>INFO
</STATUS>
<DTSERVER>20250131120000[-3:BRT]
<LANGUAGE>POR
</SONRS>
</SIGNONMSGSRSV1>
<BANKMSGSRSV1>
<STMTTRNRS>
<TRNUID>1001
<STATUS>
<CODE>0
<SEVERITY>INFO
</STATUS>
<STMTRS>
<CURDEF>BRL
<BANKACCTFROM>
<BANKID>0341
<ACCTID>12345-6
<ACCTTYPE>CHECKING
</BANKACCTFROM>
<BANKTRANLIST>
<DTSTART>20250101
<DTEND>20250131
<STMTTRN>
<TRNTYPE>DEBIT
<DTPOSTED>20250105
<TRNAMT>-42.50
<FITID>0001
<MEMO>Padaria São João
</STMTTRN>
<STMTTRN>
<TRNTYPE>
<DTPOSTED>20250110
<TRNAMT>100.00
<FITID>0002
<NAME>Bob & Sons
<MEMO>
</STMTTRN>
</BANKTRANLIST>
<LEDGERBAL>
<BALAMT>57.50
<DTASOF>20250131
</LEDGERBAL>
</STMTRS>
</STMTTRNRS>
</BANKMSGSRSV1>
</OFX>
"""

# Exporters leave a blank after an empty TRNTYPE
SGML_BODY = SGML_BODY.replace("<TRNTYPE>\n", "<TRNTYPE> \n")

XML_OFX = """<?xml version="1.0" encoding="UTF-8" standalone="no"?>
<?OFX OFXHEADER="200" VERSION="211" SECURITY="NONE" OLDFILEUID="NONE" NEWFILEUID="NONE"?>
<OFX>
  <BANKMSGSRSV1>
    <STMTTRNRS>
      <STMTRS>
        <CURDEF>USD</CURDEF>
        <BANKTRANLIST>
          <STMTTRN>
            <TRNTYPE>CREDIT</TRNTYPE>
            <TRNAMT>10.00</TRNAMT>
            <NAME>Payroll</NAME>
          </STMTTRN>
        </BANKTRANLIST>
      </STMTRS>
    </STMTTRNRS>
  </BANKMSGSRSV1>
</OFX>
"""


def build_sgml(charset="1252", body=SGML_BODY):
    return SGML_HEADER.format(charset=charset) + body


@pytest.fixture
def sgml_text():
    """Multi-line SGML export declaring UTF-8."""
    return build_sgml(charset="65001")


@pytest.fixture
def sgml_utf8_bytes():
    return build_sgml(charset="65001").encode("utf-8")


@pytest.fixture
def sgml_cp1252_bytes():
    """Same export written by a Windows exporter."""
    return build_sgml(charset="1252").encode("cp1252")


@pytest.fixture
def xml_text():
    return XML_OFX


@pytest.fixture
def minimal_text():
    return "OFXHEADER:100\nCHARSET:65001\n<OFX><BANKMSGSRSV1><MEMO></OFX>"
