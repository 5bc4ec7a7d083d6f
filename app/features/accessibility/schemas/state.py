"""
Request lifecycle state of an analysis orchestrator.

Exactly one of Idle, Loading, Succeeded or Failed at any time, so a result can
never be visible while a request is still in flight.
"""
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from app.features.accessibility.schemas.analysis import AnalysisResult


class Idle(BaseModel):
    status: Literal["idle"] = "idle"


class Loading(BaseModel):
    status: Literal["loading"] = "loading"
    url: str


class Succeeded(BaseModel):
    status: Literal["succeeded"] = "succeeded"
    result: AnalysisResult


class Failed(BaseModel):
    status: Literal["failed"] = "failed"
    reason: str


RequestState = Annotated[
    Union[Idle, Loading, Succeeded, Failed],
    Field(discriminator="status"),
]
