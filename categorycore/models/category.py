"""Pydantic model for the category resource."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Category(BaseModel):
    """A category as stored by the provider.

    The id is assigned by the provider on creation and never changes.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: Optional[str] = None
    icon_url: Optional[str] = Field(default=None, description="Icon reference")
