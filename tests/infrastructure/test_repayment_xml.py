import xml.etree.ElementTree as ET
from datetime import date
from decimal import Decimal

from gift_aid_claims.config import R68_NAMESPACE
from gift_aid_claims.domain.models import Claim, ClaimLine, Donor, OtherIncomeLine
from gift_aid_claims.infrastructure.xml.repayment import claim_to_element, render_claim

NS = {"r68": R68_NAMESPACE}


def make_claim() -> Claim:
    return Claim(
        lines=(
            ClaimLine(
                donation_date=date(2023, 4, 1),
                total=Decimal("100"),
                donor=Donor(forename="Jane", surname="Doe", house="1", postcode="AB1 2CD", title="Mrs"),
            ),
            ClaimLine(
                donation_date=date(2023, 3, 1),
                total=Decimal("12.5"),
                aggregated_donations="Collection plate",
                sponsored=True,
            ),
        ),
        earliest_donation_date=date(2023, 3, 1),
        other_income=(
            OtherIncomeLine(payer="Bank plc", income_date=date(2023, 3, 31), gross=Decimal("200"), tax=Decimal("40")),
        ),
    )


def test_repayment_element_layout():
    element = claim_to_element(make_claim())

    children = [child.tag.split("}")[1] for child in element]
    assert children == ["GAD", "GAD", "EarliestGAdate", "OtherInc"]

    donor_gad, agg_gad = element.findall("r68:GAD", NS)
    assert donor_gad.findtext("r68:Donor/r68:Ttl", namespaces=NS) == "Mrs"
    assert donor_gad.findtext("r68:Donor/r68:Postcode", namespaces=NS) == "AB1 2CD"
    assert donor_gad.findtext("r68:Total", namespaces=NS) == "100.00"
    assert agg_gad.find("r68:Donor", NS) is None
    assert agg_gad.findtext("r68:AggDonation", namespaces=NS) == "Collection plate"
    assert agg_gad.findtext("r68:Sponsored", namespaces=NS) == "yes"
    assert element.findtext("r68:EarliestGAdate", namespaces=NS) == "2023-03-01"
    assert element.findtext("r68:OtherInc/r68:Tax", namespaces=NS) == "40.00"


def test_overseas_donor_has_no_postcode():
    claim = Claim(
        lines=(
            ClaimLine(
                donation_date=date(2023, 4, 1),
                total=Decimal("5"),
                donor=Donor(forename="Ana", surname="Silva", house="2", postcode=None, overseas=True),
            ),
        ),
        earliest_donation_date=date(2023, 4, 1),
    )

    gad = claim_to_element(claim).find("r68:GAD", NS)

    assert gad.findtext("r68:Donor/r68:Overseas", namespaces=NS) == "yes"
    assert gad.find("r68:Donor/r68:Postcode", NS) is None


def test_empty_claim_has_no_earliest_date():
    element = claim_to_element(Claim())

    assert list(element) == []


def test_render_claim_is_parseable_xml():
    rendered = render_claim(make_claim())

    assert rendered.startswith(b"<?xml")
    assert ET.fromstring(rendered).tag == f"{{{R68_NAMESPACE}}}Repayment"
