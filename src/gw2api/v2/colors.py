from pydantic import Field

from .base import BulkEndpoint, Gw2Model


class ArmorColor(Gw2Model):
    """Information about a color applied to an armor material."""

    brightness: int
    contrast: float
    hue: int
    saturation: float
    lightness: float
    rgb: list[int]


class Color(BulkEndpoint):
    """A dye color."""

    path = "/v2/colors"
    localized = True

    id: int
    name: str
    base_rgb: list[int]
    cloth: ArmorColor
    leather: ArmorColor
    metal: ArmorColor
    fur: ArmorColor | None = None
    item: int | None = Field(None, description="Dye item id, if the color is unlocked by an item")
    categories: list[str]
