from __future__ import annotations

from typing import Literal, Union

from pydantic import BaseModel, Field, field_validator


class DiscRecord(BaseModel):
    disc_id: int
    disc_name: str
    disc_ql: int
    crystal_id: int
    crystal_ql: int
    crystal_name: str
    comment: str = ""

    @field_validator("comment", mode="before")
    @classmethod
    def _empty_comment(cls, value: object) -> object:
        return "" if value is None else value


class NanoDetails(BaseModel):
    profession: str | None = None
    nanoline_name: str | None = None
    location: str | None = None


class ItemRef(BaseModel):
    low_id: int
    high_id: int
    ql: int
    name: str


class ById(BaseModel):
    kind: Literal["by_id"] = "by_id"
    disc_id: int
    link_name: str
    raw: str


class ByName(BaseModel):
    kind: Literal["by_name"] = "by_name"
    term: str


ResolvedInput = Union[ById, ByName]


class DiscReply(BaseModel):
    argument: str
    outcome: Literal["single", "choices", "not_an_instruction_disc", "no_longer_convertible"]
    pages: list[str] = Field(default_factory=list)
    disc: DiscRecord | None = None
    details: NanoDetails | None = None
    matches: list[DiscRecord] = Field(default_factory=list)

    @property
    def message(self) -> str | list[str]:
        if len(self.pages) == 1:
            return self.pages[0]
        return list(self.pages)
