"""Serialise an assembled claim into the R68 ``Repayment`` element."""
from __future__ import annotations

import xml.etree.ElementTree as ET
from decimal import Decimal

from gift_aid_claims.config import SETTINGS
from gift_aid_claims.domain.models import Claim, ClaimLine, OtherIncomeLine


def _tag(name: str) -> str:
    return f"{{{SETTINGS.r68_namespace}}}{name}"


def _sub(parent: ET.Element, name: str, text: str) -> ET.Element:
    element = ET.SubElement(parent, _tag(name))
    element.text = text
    return element


def _money(value: Decimal) -> str:
    return f"{value.quantize(SETTINGS.money_quantum):f}"


def _gad(parent: ET.Element, line: ClaimLine) -> None:
    gad = ET.SubElement(parent, _tag("GAD"))
    if line.donor is not None:
        donor = ET.SubElement(gad, _tag("Donor"))
        if line.donor.title:
            _sub(donor, "Ttl", line.donor.title)
        _sub(donor, "Fore", line.donor.forename)
        _sub(donor, "Sur", line.donor.surname)
        _sub(donor, "House", line.donor.house)
        if line.donor.overseas:
            _sub(donor, "Overseas", "yes")
        else:
            _sub(donor, "Postcode", line.donor.postcode or "")
    else:
        _sub(gad, "AggDonation", line.aggregated_donations or "")
    if line.sponsored:
        _sub(gad, "Sponsored", "yes")
    _sub(gad, "Date", line.donation_date.isoformat())
    _sub(gad, "Total", _money(line.total))


def _other_income(parent: ET.Element, line: OtherIncomeLine) -> None:
    other = ET.SubElement(parent, _tag("OtherInc"))
    _sub(other, "Payer", line.payer)
    _sub(other, "OIDate", line.income_date.isoformat())
    _sub(other, "Gross", _money(line.gross))
    _sub(other, "Tax", _money(line.tax))


def claim_to_element(claim: Claim) -> ET.Element:
    repayment = ET.Element(_tag("Repayment"))
    for line in claim.lines:
        _gad(repayment, line)
    if claim.earliest_donation_date is not None:
        _sub(repayment, "EarliestGAdate", claim.earliest_donation_date.isoformat())
    for line in claim.other_income:
        _other_income(repayment, line)
    return repayment


def render_claim(claim: Claim) -> bytes:
    ET.register_namespace("", SETTINGS.r68_namespace)
    return ET.tostring(claim_to_element(claim), encoding="utf-8", xml_declaration=True)
