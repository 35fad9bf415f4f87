"""Typed view over the key/value ``settings`` table."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator


class SiteSettings(BaseModel):
    """Company copy and contact details used by the site templates.

    Known keys are named fields with defaults, so a missing row never leaves a
    hole in the page. Keys without a field are kept as extra string entries.
    """

    model_config = ConfigDict(extra="allow")

    company_name: str = "Srimitha Energy Solutions"
    company_email: str = "info@srimitha-energy.com"
    company_phone: str = ""
    company_address: str = ""
    social_linkedin: str = ""
    social_twitter: str = ""
    social_facebook: str = ""
    about_company: str = ""
    company_mission: str = ""
    company_vision: str = ""

    @model_validator(mode="after")
    def _extra_values_are_strings(self) -> SiteSettings:
        for key, value in (self.model_extra or {}).items():
            if not isinstance(value, str):
                raise ValueError(f"setting {key!r} must be a string")
        return self

    def as_map(self) -> dict[str, str]:
        return dict(self.model_dump())
