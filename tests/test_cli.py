from pathlib import Path

from gift_aid_claims.cli import main

ENVELOPE = """<GovTalkMessage xmlns="http://www.govtalk.gov.uk/CM/envelope">
  <EnvelopeVersion>2.0</EnvelopeVersion>
  <Header>
    <MessageDetails>
      <Class>HMRC-CHAR-CLM</Class>
      <Qualifier>response</Qualifier>
      <Function>submit</Function>
      <CorrelationID>ABC123</CorrelationID>
      <ResponseEndPoint>https://gateway.example/submission</ResponseEndPoint>
    </MessageDetails>
  </Header>
  <Body/>
</GovTalkMessage>
"""


def write_donations(tmp_path: Path, type_value: str = "GAD") -> Path:
    path = tmp_path / "donations.csv"
    path.write_text(
        "Fore,Sur,House,Postcode,Date,Total,Type\n"
        f"Jane,Doe,1,AB1 2CD,2023-04-01,100,{type_value}\n",
        encoding="utf-8",
    )
    return path


def test_assemble_summary(tmp_path, capsys):
    exit_code = main(["assemble", str(write_donations(tmp_path))])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Donation lines: 1" in out
    assert "Earliest donation: 2023-04-01" in out


def test_assemble_xml(tmp_path, capsys):
    exit_code = main(["assemble", str(write_donations(tmp_path)), "--xml"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "EarliestGAdate" in out


def test_assemble_unknown_type_exits_with_error(tmp_path, capsys):
    exit_code = main(["assemble", str(write_donations(tmp_path, type_value="Bogus"))])

    assert exit_code == 1
    assert "unknown_donation_kind" in capsys.readouterr().err


def test_read_response_placeholder(tmp_path, capsys):
    envelope = tmp_path / "reply.xml"
    envelope.write_text(ENVELOPE, encoding="utf-8")

    exit_code = main(["read-response", str(envelope), "--failed-dir", str(tmp_path / "failed")])

    lines = capsys.readouterr().out.splitlines()
    assert exit_code == 0
    assert lines[0] == "CorrelationId::ABC123"
    assert lines[4] == "IRmarkReceipt::NONE"


def test_read_response_csv(tmp_path, capsys):
    envelope = tmp_path / "reply.xml"
    envelope.write_text(ENVELOPE, encoding="utf-8")

    exit_code = main(["read-response", str(envelope), "--csv", "--failed-dir", str(tmp_path / "failed")])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert out.startswith("correlation_id,qualifier")
    assert "ABC123" in out
