"""Data models for freelancer applications and their outcomes."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from enum import Enum


class LabeledEnum(Enum):
    """Enum whose members carry a wire value and a display label."""

    def __new__(cls, value: str, label: str):
        member = object.__new__(cls)
        member._value_ = value
        member.label = label
        return member

    @classmethod
    def values(cls) -> list[str]:
        return [m.value for m in cls]


class Category(LabeledEnum):
    LOGO_BRAND = ("logo-brand", "Logo & Brand Identity Design")
    SOCIAL_GRAPHICS = ("social-graphics", "Social Media Graphics")
    COPYWRITING = ("copywriting", "Copywriting (Sales Copy)")
    CONTENT_WRITING = ("content-writing", "Content Writing (Blogs & SEO)")
    SOCIAL_MANAGEMENT = ("social-management", "Social Media Management")
    VIRTUAL_ASSISTANT = ("virtual-assistant", "Virtual Assistance")
    DIGITAL_MARKETING = ("digital-marketing", "Digital Marketing (FB/IG Ads)")
    FRONTEND_DEV = ("frontend-dev", "Frontend Development")
    BACKEND_DEV = ("backend-dev", "Backend Development")
    VIDEO_EDITING = ("video-editing", "Video Editing")
    UI_UX = ("ui-ux", "Product Design (UI/UX)")


class Experience(LabeledEnum):
    JUNIOR = ("0-2", "0–2 years")
    MID = ("3-5", "3–5 years")
    SENIOR = ("6-10", "6–10 years")
    EXPERT = ("10+", "10+ years")


class HourlyRate(LabeledEnum):
    RATE_15_30 = ("15-30", "$15–30")
    RATE_30_50 = ("30-50", "$30–50")
    RATE_50_80 = ("50-80", "$50–80")
    RATE_80_120 = ("80-120", "$80–120")
    RATE_120_PLUS = ("120+", "$120+")


class Availability(LabeledEnum):
    HOURS_10_20 = ("10-20", "10–20 hours")
    HOURS_20_30 = ("20-30", "20–30 hours")
    HOURS_30_40 = ("30-40", "30–40 hours")
    HOURS_40_PLUS = ("40+", "40+ hours")


# Closed-set fields and the enum that defines their allowed values.
CHOICE_FIELDS: dict[str, type[LabeledEnum]] = {
    "category": Category,
    "experience": Experience,
    "hourly_rate": HourlyRate,
    "availability": Availability,
}

# Form-side (camelCase) names for fields whose Python name differs.
FORM_ALIASES = {
    "fullName": "full_name",
    "hourlyRate": "hourly_rate",
    "whyOnSwift": "why_on_swift",
}


class SubmitResult(Enum):
    NONE = "none"
    SUCCESS = "success"
    REJECTED = "rejected"


class FailureKind(Enum):
    TRANSPORT = "transport"
    HTTP_STATUS = "http_status"
    QUALIFICATION = "qualification"


@dataclass
class Application:
    full_name: str = ""
    email: str = ""
    phone: str = ""
    category: str = ""
    experience: str = ""
    portfolio: str = ""
    project1: str = ""
    project2: str = ""
    project3: str = ""
    hourly_rate: str = ""
    availability: str = ""
    why_on_swift: str = ""

    @classmethod
    def field_names(cls) -> list[str]:
        return [f.name for f in fields(cls)]

    @classmethod
    def from_dict(cls, raw: dict) -> Application:
        """Build an Application from snake_case or camelCase keys.

        Unknown keys are ignored. Non-string values are coerced with str();
        None becomes an empty string.
        """
        app = cls()
        for key, value in raw.items():
            name = FORM_ALIASES.get(key, key)
            if name in cls.field_names():
                app.set_field(name, value)
        return app

    def set_field(self, name: str, value) -> None:
        name = FORM_ALIASES.get(name, name)
        if name not in self.field_names():
            raise KeyError(f"Unknown application field: {name}")
        setattr(self, name, "" if value is None else str(value))

    def freeze(self) -> SubmittedApplication:
        return SubmittedApplication(**asdict(self))


@dataclass(frozen=True)
class SubmittedApplication:
    """Immutable snapshot of an Application taken at submission time.

    Attribute names double as the backend's JSON keys.
    """

    full_name: str
    email: str
    phone: str
    category: str
    experience: str
    portfolio: str
    project1: str
    project2: str
    project3: str
    hourly_rate: str
    availability: str
    why_on_swift: str

    def to_payload(self) -> dict[str, str]:
        return asdict(self)


@dataclass(frozen=True)
class QualificationSignal:
    has_portfolio: bool
    has_experience: bool
    has_thoughtful_answer: bool
    word_count: int = 0
