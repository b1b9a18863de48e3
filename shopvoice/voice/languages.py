"""Languages advertised to callers.

Only en, es, fr and de have keyword tables; the rest are accepted and fall
back to symbol-only segmentation and English replies.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from shopvoice.voice.models import primary_subtag


@dataclass(frozen=True)
class Language:
    code: str
    display_name: str
    icon: str

    @property
    def primary(self) -> str:
        return primary_subtag(self.code)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


SUPPORTED_LANGUAGES: tuple[Language, ...] = (
    Language("en-US", "English (US)", "🇺🇸"),
    Language("es-ES", "Español", "🇪🇸"),
    Language("fr-FR", "Français", "🇫🇷"),
    Language("de-DE", "Deutsch", "🇩🇪"),
    Language("it-IT", "Italiano", "🇮🇹"),
    Language("pt-BR", "Português", "🇧🇷"),
    Language("ja-JP", "日本語", "🇯🇵"),
    Language("ko-KR", "한국어", "🇰🇷"),
    Language("zh-CN", "中文", "🇨🇳"),
)


def list_languages() -> list[dict[str, Any]]:
    return [language.to_dict() for language in SUPPORTED_LANGUAGES]


def is_supported(language: str | None) -> bool:
    code = primary_subtag(language)
    return any(entry.primary == code for entry in SUPPORTED_LANGUAGES)


__all__ = ["Language", "SUPPORTED_LANGUAGES", "is_supported", "list_languages"]
