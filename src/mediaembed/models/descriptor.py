"""
PlayableDescriptor model: the normalized result of resolving one reference.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from mediaembed.config.defaults import DEFAULT_JOIN_TOKENS


class PlayableDescriptor(BaseModel):
    """Normalized id and type of one reference string.

    ``type`` is the category of the last rule applied; when several rules
    contributed, ``categories`` lists all of them in match order.
    """

    model_config = ConfigDict(frozen=True)

    normalized_id: str = Field(..., description="Provider-specific playable id")
    type: str = Field(..., description="Category of the last matching rule, or 'id'")
    categories: tuple[str, ...] = ()
    join_tokens: tuple[str, str, str] = DEFAULT_JOIN_TOKENS

    @property
    def is_raw_id(self) -> bool:
        return self.type == "id" and not self.categories

    def __str__(self) -> str:
        return f"{self.type}:{self.normalized_id}"
