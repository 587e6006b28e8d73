"""Gift Aid repayment claim assembly and gateway response reading."""
from gift_aid_claims.application.assembly import ClaimAssembler, OtherIncomeAssembler
from gift_aid_claims.application.dto import ClaimInputContext
from gift_aid_claims.application.response_reader import ResponseReader
from gift_aid_claims.application.use_cases import AssembleClaimUseCase, ReadResponseUseCase
from gift_aid_claims.domain.models import Claim, ClaimLine, DonationKind, OtherIncomeLine

__all__ = [
    "AssembleClaimUseCase",
    "ReadResponseUseCase",
    "ClaimInputContext",
    "ClaimAssembler",
    "OtherIncomeAssembler",
    "ResponseReader",
    "Claim",
    "ClaimLine",
    "DonationKind",
    "OtherIncomeLine",
]
