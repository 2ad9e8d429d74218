"""Raw single-column SELECT builder used by the repository's raw SQL helpers.

Produces statements of the form

    SELECT t."<column>" FROM <schema>."<table>" AS t
        [WHERE <condition>] [<KEYWORD> <value>]... [OFFSET n] [LIMIT m]

Identifiers are double-quoted so mixed-case table and column names survive.
condition and the additional clause values are SQL fragments owned by the
caller and are inserted verbatim; values that come from users must be bound
through params (":name" placeholders) instead of being formatted in.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator
from sqlalchemy import TextClause, text

_KEYWORD_RE = re.compile(r"^[A-Za-z]+( [A-Za-z]+)*$")
_SCHEMA_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def quote_identifier(name: str) -> str:
    """Double-quote an identifier, doubling any embedded quote."""
    return '"' + name.replace('"', '""') + '"'


class RawSqlQuery(BaseModel):
    """Immutable description of one raw SELECT.

    additional_queries keeps insertion order; keys are rendered upper-cased
    and must be plain keyword phrases ("order by", "group by", "having").
    OFFSET is emitted whenever skip or take is set (skip defaults to 0);
    LIMIT only when take is set.
    """

    model_config = ConfigDict(frozen=True)

    table_name: str = Field(min_length=1)
    column_name: str = Field(default="Id", min_length=1)
    condition: str | None = None
    additional_queries: dict[str, str] = Field(default_factory=dict)
    skip: int | None = Field(default=None, ge=0)
    take: int | None = Field(default=None, ge=0)
    schema_name: str = "public"

    @field_validator("additional_queries")
    @classmethod
    def _keywords_are_plain(cls, v: dict[str, str]) -> dict[str, str]:
        for key in v:
            if not _KEYWORD_RE.match(key):
                raise ValueError(f"invalid SQL clause keyword: {key!r}")
        return v

    @field_validator("schema_name")
    @classmethod
    def _schema_is_identifier(cls, v: str) -> str:
        if not _SCHEMA_RE.match(v):
            raise ValueError(f"invalid schema name: {v!r}")
        return v

    @property
    def sql(self) -> str:
        parts = [
            f"SELECT t.{quote_identifier(self.column_name)} "
            f"FROM {self.schema_name}.{quote_identifier(self.table_name)} AS t"
        ]

        if self.condition is not None and self.condition.strip():
            parts.append(f"WHERE {self.condition}")

        for keyword, value in self.additional_queries.items():
            parts.append(f"{keyword.upper()} {value}")

        if self.skip is not None or self.take is not None:
            parts.append(f"OFFSET {self.skip or 0}")
            if self.take is not None:
                parts.append(f"LIMIT {self.take}")

        return " ".join(parts)

    def statement(self) -> TextClause:
        return text(self.sql)
