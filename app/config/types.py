from dataclasses import dataclass
from enum import StrEnum, auto

from mixed_list.generator import DEFAULT_HEADING_INTERVAL
from mixed_list.renderer.image import DEFAULT_WIDTH


class RenderMode(StrEnum):
    WIDGETS = auto()
    IMAGE = auto()
    TEXT = auto()


@dataclass(frozen=True)
class AppConfig:
    item_count: int = 50
    heading_interval: int = DEFAULT_HEADING_INTERVAL
    page_size: int = 12
    render_mode: RenderMode = RenderMode.WIDGETS
    image_width: int = DEFAULT_WIDTH
