"""Approval decisions returned by the gate for one proposed tool call."""

from typing import Literal

from pydantic import BaseModel


class Approved(BaseModel, frozen=True):
    outcome: Literal["approved"] = "approved"
    automatic: bool = False  # True when the tool is on the allow-list


class Denied(BaseModel, frozen=True):
    outcome: Literal["denied"] = "denied"
    clarification: str | None = None


type ApprovalDecision = Approved | Denied
