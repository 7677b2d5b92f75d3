"""Output data model: the contract every blueprint renders from."""

from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field

Number = Union[int, float]
# Literal dimensions are numbers; the viewBox-only fallback uses "100%"
Dimension = Union[int, float, str]


class ViewBox(BaseModel):
    minx: Number = 0
    miny: Number = 0
    width: Number
    height: Number


class SvgMetadata(BaseModel):
    """Geometry inferred from the root <svg> tag."""

    width: Dimension | None = None
    height: Dimension | None = None
    view_box: ViewBox | None = Field(default=None, alias="viewBox")

    model_config = ConfigDict(populate_by_name=True)


class OutputRecord(BaseModel):
    """One normalized, render-ready SVG asset."""

    name: str
    path: str
    svg_hash: str = Field(alias="svgHash")
    svg: str
    css: str | None = None
    width: Dimension | None = None
    height: Dimension | None = None
    view_box: ViewBox | None = Field(default=None, alias="viewBox")
    context_interface: str | None = Field(default=None, alias="contextInterface")
    context_defaults: dict[str, Any] | None = Field(default=None, alias="contextDefaults")

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @property
    def is_dynamic(self) -> bool:
        return self.context_defaults is not None

    def to_dict(self, *, exclude: set[str] | None = None) -> dict[str, Any]:
        """camelCase dict with absent optional fields dropped."""
        return self.model_dump(by_alias=True, exclude_none=True, exclude=exclude)
