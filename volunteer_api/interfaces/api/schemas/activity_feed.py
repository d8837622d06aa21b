"""Pydantic schemas for the group activity feed endpoint."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class ActivityAuthorRead(BaseModel):
    id: int
    username: str
    display_name: str


class ActivityAnimalRead(BaseModel):
    id: int
    name: str
    image_url: str | None = None


class ActivityTagRead(BaseModel):
    id: int
    name: str
    color: str


class ActivityItemRead(BaseModel):
    type: Literal["comment", "announcement"] = Field(
        ..., description="Origen del elemento: comentario de animal o anuncio del grupo"
    )
    id: int = Field(..., description="Identificador único dentro de su tipo")
    created_at: datetime = Field(..., description="Momento de creación del elemento")
    user: ActivityAuthorRead | None = Field(None, description="Autor del elemento")
    content: str
    title: str | None = Field(None, description="Título (solo anuncios)")
    image_url: str | None = None
    tags: list[ActivityTagRead] = Field(
        default_factory=list, description="Etiquetas del comentario (vacío en anuncios)"
    )
    animal: ActivityAnimalRead | None = Field(
        None, description="Animal comentado (nulo en anuncios)"
    )
    metadata: dict[str, Any] = Field(
        default_factory=dict,
        description="Reporte de sesión del comentario (vacío en anuncios)",
    )


class ActivityFeedSummaryRead(BaseModel):
    behavior_concerns_count: int = 0
    medical_concerns_count: int = 0
    poor_sessions_count: int = 0


class ActivityFeedRead(BaseModel):
    items: list[ActivityItemRead]
    total: int = Field(..., ge=0, description="Total de elementos que cumplen el filtro")
    limit: int = Field(..., ge=1)
    offset: int = Field(..., ge=0)
    has_more: bool = Field(..., alias="hasMore")
    summary: ActivityFeedSummaryRead = Field(default_factory=ActivityFeedSummaryRead)

    model_config = ConfigDict(populate_by_name=True)


__all__ = [
    "ActivityAnimalRead",
    "ActivityAuthorRead",
    "ActivityFeedRead",
    "ActivityFeedSummaryRead",
    "ActivityItemRead",
    "ActivityTagRead",
]
