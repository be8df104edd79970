# quantum_labels/config.py
from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="QUANTUM_LABELS_",
        env_file=".env",
        extra="ignore",
    )

    # Alert lifetimes (milliseconds) per severity
    error_alert_ms: int = 3000
    success_alert_ms: int = 5000
    info_alert_ms: int = 5000

    # Label sheet layout
    page_format: Literal["A4", "Letter", "LabelPrinter"] = "A4"
    label_width_mm: float = 180
    label_height_mm: float = 45
    label_font: str = "Helvetica"
    label_font_size: int = 10
    qr_size_mm: float = 35

    # Every label carries the same QR code: an image file if given,
    # otherwise a code drawn from this fixed payload.
    qr_payload: str = "GESTAO-QUANTUM"
    qr_image_path: Optional[Path] = None

    logo_path: Optional[Path] = None
    description_preview_chars: int = 30

    log_level: str = "INFO"

    def alert_lifetimes_ms(self):
        return {
            "danger": self.error_alert_ms,
            "success": self.success_alert_ms,
            "info": self.info_alert_ms,
        }


@lru_cache
def get_settings() -> Settings:
    return Settings()
