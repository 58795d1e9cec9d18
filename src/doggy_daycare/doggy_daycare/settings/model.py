from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from ..common.validators import require_str_field

DEFAULT_BUSINESS_NAME = "Your Doggy Daycare"

DEFAULT_EMAIL_CONSENT_FORM = (
    "Dear {ownerName},\n\n"
    "This is a friendly reminder that your dog {dogName} needs their monthly consent form "
    "completed for continued daycare services.\n\n"
    "Please complete and return the consent form at your earliest convenience. If you have any "
    "questions or concerns, please don't hesitate to contact us.\n\n"
    "Thank you for choosing our daycare services for {dogName}.\n\n"
    "Best regards,\nThe Doggy Daycare Team\n\nDate: {currentDate}"
)
DEFAULT_EMAIL_VACCINE_REMINDER = (
    "Dear {ownerName},\n\n"
    "This is a friendly reminder that your dog {dogName}'s {vaccineType} vaccination is due to "
    "expire on {expirationDate}.\n\n"
    "To ensure {dogName} can continue to enjoy our daycare services, please schedule an "
    "appointment with your veterinarian to update their vaccination records.\n\n"
    "Please provide us with the updated vaccination certificate once completed.\n\n"
    "Thank you for keeping {dogName} healthy and safe.\n\n"
    "Best regards,\nThe Doggy Daycare Team"
)
DEFAULT_SUBJECT_CONSENT_FORM = "Monthly Consent Form Required - {dogName}"
DEFAULT_SUBJECT_VACCINE_REMINDER = "Vaccine Record Update Required - {dogName}"
DEFAULT_WHATSAPP_CONSENT_FORM = (
    "Hi {ownerName}! This is a friendly reminder that {dogName} needs their monthly consent form "
    "completed for continued daycare services. Please complete it at your earliest convenience. Thanks!"
)
DEFAULT_WHATSAPP_VACCINE_REMINDER = (
    "Hi {ownerName}! Just a reminder that {dogName}'s {vaccineType} vaccination expires on "
    "{expirationDate}. Please update their vaccination records to continue daycare services. Thanks!"
)


@dataclass
class MessageTemplates:
    """Consent-form and vaccine-reminder text for one channel."""

    consent_form: str
    vaccine_reminder: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MessageTemplates":
        return cls(
            consent_form=require_str_field(data, "consent_form"),
            vaccine_reminder=require_str_field(data, "vaccine_reminder"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"consent_form": self.consent_form, "vaccine_reminder": self.vaccine_reminder}


def default_email_templates() -> MessageTemplates:
    return MessageTemplates(DEFAULT_EMAIL_CONSENT_FORM, DEFAULT_EMAIL_VACCINE_REMINDER)


def default_email_subjects() -> MessageTemplates:
    return MessageTemplates(DEFAULT_SUBJECT_CONSENT_FORM, DEFAULT_SUBJECT_VACCINE_REMINDER)


def default_whatsapp_templates() -> MessageTemplates:
    return MessageTemplates(DEFAULT_WHATSAPP_CONSENT_FORM, DEFAULT_WHATSAPP_VACCINE_REMINDER)


@dataclass
class CloudBackupConfig:
    enabled: bool = False
    cloud_directory: str = ""
    max_backups: int = 100
    sync_interval_minutes: int = 30

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CloudBackupConfig":
        return cls(
            enabled=bool(data["enabled"]),
            cloud_directory=require_str_field(data, "cloud_directory"),
            max_backups=int(data["max_backups"]),
            sync_interval_minutes=int(data["sync_interval_minutes"]),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "enabled": self.enabled,
            "cloud_directory": self.cloud_directory,
            "max_backups": self.max_backups,
            "sync_interval_minutes": self.sync_interval_minutes,
        }


@dataclass
class Settings:
    business_name: str = DEFAULT_BUSINESS_NAME
    business_phone: str = ""
    auto_backup: bool = True
    cloud_backup: Optional[CloudBackupConfig] = None
    email_templates: MessageTemplates = field(default_factory=default_email_templates)
    email_subjects: MessageTemplates = field(default_factory=default_email_subjects)
    whatsapp_templates: MessageTemplates = field(default_factory=default_whatsapp_templates)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Settings":
        cloud_backup = data.get("cloud_backup")
        return cls(
            business_name=require_str_field(data, "business_name"),
            business_phone=require_str_field(data, "business_phone"),
            auto_backup=bool(data["auto_backup"]),
            cloud_backup=CloudBackupConfig.from_dict(cloud_backup) if cloud_backup is not None else None,
            email_templates=MessageTemplates.from_dict(data["email_templates"]),
            email_subjects=MessageTemplates.from_dict(data["email_subjects"]),
            whatsapp_templates=MessageTemplates.from_dict(data["whatsapp_templates"]),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "business_name": self.business_name,
            "business_phone": self.business_phone,
            "auto_backup": self.auto_backup,
            "cloud_backup": self.cloud_backup.to_dict() if self.cloud_backup is not None else None,
            "email_templates": self.email_templates.to_dict(),
            "email_subjects": self.email_subjects.to_dict(),
            "whatsapp_templates": self.whatsapp_templates.to_dict(),
        }
