from pydantic import BaseModel, ConfigDict, Field

from share_app.components.share.models import DEFAULT_CAPTION
from share_app.domain.entities import WINDOWS_SEPARATOR


class WindowSettings(BaseModel):
    title: str = "Share App"
    width: float = 300
    height: float = 150
    center: bool = True
    frameless: bool = True
    skip_taskbar: bool = True
    background_color: str = "#C8FFFFFF"
    border_radius: float = 5

class SessionSettings(BaseModel):
    auto_close_seconds: float = 30.0
    settle_delay_ms: int = 300

class ShareSettings(BaseModel):
    caption: str = DEFAULT_CAPTION
    path_separator: str = WINDOWS_SEPARATOR

class LoggingSettings(BaseModel):
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

class AppSettings(BaseModel):
    window: WindowSettings = Field(default_factory=WindowSettings)
    session: SessionSettings = Field(default_factory=SessionSettings)
    share: ShareSettings = Field(default_factory=ShareSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = ConfigDict(extra="forbid")
