"""GovTalk envelope deserialization built on ElementTree."""
from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Union

from gift_aid_claims.config import SETTINGS
from gift_aid_claims.domain.envelope import EnvelopeMetadata, SuccessBody
from gift_aid_claims.infrastructure.parsing.utils import parse_timestamp

EnvelopeSource = Union[bytes, str, Path, ET.Element, ET.ElementTree]

QUALIFIERS = {"request", "acknowledgement", "response", "poll", "error"}
FUNCTIONS = {"submit", "list", "delete", "add"}


def _env(tag: str) -> str:
    return f"{{{SETTINGS.envelope_namespace}}}{tag}"


def _success(tag: str) -> str:
    return f"{{{SETTINGS.success_response_namespace}}}{tag}"


def to_element(source: EnvelopeSource) -> ET.Element:
    """Parse an envelope source into its root element. Strings are XML text."""
    if isinstance(source, ET.ElementTree):
        return source.getroot()
    if isinstance(source, ET.Element):
        return source
    if isinstance(source, Path):
        return ET.parse(source).getroot()
    if isinstance(source, (bytes, str)):
        return ET.fromstring(source)
    raise TypeError(f"Unsupported envelope source: {type(source)!r}")


def to_bytes(source: EnvelopeSource) -> bytes:
    """Raw bytes of an envelope for archiving, whatever form it arrived in."""
    if isinstance(source, bytes):
        return source
    if isinstance(source, str):
        return source.encode("utf-8")
    if isinstance(source, Path):
        return source.read_bytes()
    if isinstance(source, ET.ElementTree):
        source = source.getroot()
    return ET.tostring(source, encoding="utf-8")


def header_value(root: ET.Element, tag: str) -> str | None:
    """Text of the first namespaced descendant named ``tag``, if any."""
    element = root.find(f".//{_env(tag)}")
    if element is None or element.text is None:
        return None
    return element.text.strip()


def _required_text(parent: ET.Element, tag: str) -> str:
    element = parent.find(_env(tag))
    if element is None or not (element.text or "").strip():
        raise ValueError(f"MessageDetails/{tag} is missing")
    return element.text.strip()


def deserialize_metadata(root: ET.Element) -> EnvelopeMetadata:
    if root.tag != _env("GovTalkMessage"):
        raise ValueError(f"Not a GovTalkMessage envelope: {root.tag}")
    details = root.find(f"{_env('Header')}/{_env('MessageDetails')}")
    if details is None:
        raise ValueError("Header/MessageDetails is missing")

    qualifier = _required_text(details, "Qualifier")
    if qualifier not in QUALIFIERS:
        raise ValueError(f"Unknown Qualifier {qualifier!r}")
    function = _required_text(details, "Function")
    if function not in FUNCTIONS:
        raise ValueError(f"Unknown Function {function!r}")

    end_point = details.find(_env("ResponseEndPoint"))
    end_point_text = None
    poll_interval = None
    if end_point is not None:
        end_point_text = (end_point.text or "").strip() or None
        if end_point.get("PollInterval"):
            poll_interval = int(end_point.get("PollInterval"))

    timestamp = details.find(_env("GatewayTimestamp"))
    return EnvelopeMetadata(
        correlation_id=_required_text(details, "CorrelationID"),
        qualifier=qualifier,
        function=function,
        response_end_point=end_point_text,
        poll_interval=poll_interval,
        gateway_timestamp=parse_timestamp(timestamp.text) if timestamp is not None else None,
    )


def body_payload(root: ET.Element) -> ET.Element | None:
    """First element inside ``Body``; ``None`` when the body is absent or empty."""
    body = root.find(_env("Body"))
    if body is None:
        return None
    children = list(body)
    return children[0] if children else None


def deserialize_success_response(element: ET.Element) -> SuccessBody:
    if element.tag != _success("SuccessResponse"):
        raise ValueError(f"Body does not hold a SuccessResponse: {element.tag}")

    receipt = element.find(f"{_success('IRmarkReceipt')}/{_success('Message')}")
    accepted = element.find(_success("AcceptedTime"))
    messages = tuple(
        (message.text or "").strip() for message in element.findall(_success("Message"))
    )
    return SuccessBody(
        irmark_receipt=(receipt.text or "").strip() if receipt is not None else None,
        accepted_time=parse_timestamp(accepted.text) if accepted is not None else None,
        messages=messages,
    )
