"""Options model for the sectionizer."""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, ValidationInfo, field_validator

from sectionize.config import DEFAULT_ID_PROPERTY_NAME, DEFAULT_RANK_PROPERTY_NAME
from sectionize.exceptions import ConfigurationError


class SectionizeOptions(BaseModel):
    """Sectionizer configuration.

    Accepts both the camelCase option names used by HTML tooling
    (``enableRootSection``) and the snake_case field names. Passing ``None``
    for an option selects its default.

    Attributes:
        properties: Static metadata merged into every synthesized section.
        enable_root_section: Emit the rank-0 root section as the single
            output node instead of its children.
        rank_property_name: Metadata key holding a section's rank. Reserved:
            it must not appear in ``properties``.
        id_property_name: Metadata key holding a section's promoted id.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)

    properties: dict[str, Any] = Field(default_factory=dict)
    enable_root_section: bool = Field(default=False, alias="enableRootSection")
    rank_property_name: str = Field(
        default=DEFAULT_RANK_PROPERTY_NAME, alias="rankPropertyName", min_length=1
    )
    id_property_name: str = Field(
        default=DEFAULT_ID_PROPERTY_NAME, alias="idPropertyName", min_length=1
    )

    @field_validator(
        "properties",
        "enable_root_section",
        "rank_property_name",
        "id_property_name",
        mode="before",
    )
    @classmethod
    def none_means_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value

    def check_reserved_keys(self) -> None:
        """Raise ConfigurationError if ``properties`` overrides the rank key."""
        if self.rank_property_name in self.properties:
            raise ConfigurationError(
                f"rank_property_name ({self.rank_property_name!r}) is reserved "
                "and must not be set in properties"
            )

    def build_metadata(self, rank: int, section_id: str | None) -> dict[str, Any]:
        """Build section metadata: rank, promoted id, then static properties."""
        metadata: dict[str, Any] = {self.rank_property_name: rank}
        if isinstance(section_id, str):
            metadata[self.id_property_name] = section_id
        metadata.update(self.properties)
        return metadata


def resolve_options(
    options: SectionizeOptions | Mapping[str, Any] | None,
) -> SectionizeOptions:
    """Normalize user-supplied options into a validated SectionizeOptions."""
    if options is None:
        return SectionizeOptions()
    if isinstance(options, SectionizeOptions):
        return options
    try:
        return SectionizeOptions.model_validate(dict(options))
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid sectionize options: {exc}") from exc
