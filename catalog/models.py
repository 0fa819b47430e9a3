"""
Value types shared by the catalog layout engine.

All coordinates are in points with a top-left origin and y growing downward.
Text positions are baselines.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union
from PIL import Image


@dataclass(frozen=True)
class Color:
    """RGB color, each channel an integer in [0, 255]"""
    r: int
    g: int
    b: int

    def __post_init__(self):
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise ValueError(f"Color channel out of range: {channel}")

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @property
    def hex(self) -> str:
        return "#{:02x}{:02x}{:02x}".format(self.r, self.g, self.b)


DARK_TEAL = Color(0, 77, 64)
LIGHT_GREY = Color(242, 242, 242)
DIVIDER_GREY = Color(200, 200, 200)
TEXT_COLOR = Color(20, 20, 20)


@dataclass(frozen=True)
class ProductInput:
    """One product as entered by the user, possibly with several images"""
    name: str
    images: Tuple[Image.Image, ...]
    price: str
    description: str = ""


@dataclass(frozen=True)
class ProductRow:
    """One (product, image) pair after flattening"""
    name: str
    price: str
    description: str
    image: Image.Image


@dataclass(frozen=True)
class PageSize:
    width: float
    height: float


@dataclass(frozen=True)
class GridSpec:
    rows: int
    cols: int
    margin: float

    def __post_init__(self):
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError(f"Grid must have at least one row and column, got {self.rows}x{self.cols}")

    @property
    def cells_per_page(self) -> int:
        return self.rows * self.cols


@dataclass(frozen=True)
class CellBox:
    """Drawing rectangle for one grid cell."""
    x: float
    y: float
    width: float
    height: float

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass(frozen=True)
class Placement:
    """Where a flattened row lands in the document"""
    page_index: int
    cell_index: int
    box: CellBox


# Draw instructions

@dataclass(frozen=True)
class FillBackground:
    color: Color


@dataclass(frozen=True)
class DrawLine:
    x1: float
    y1: float
    x2: float
    y2: float
    color: Color = DIVIDER_GREY
    width: float = 0.5


@dataclass(frozen=True)
class DrawText:
    text: str
    x: float
    y: float
    font_size: float
    bold: bool = False
    align: str = "center"
    color: Color = TEXT_COLOR


@dataclass(frozen=True)
class DrawImage:
    image: Image.Image
    x: float
    y: float
    width: float
    height: float


DrawInstruction = Union[FillBackground, DrawLine, DrawText, DrawImage]


@dataclass(frozen=True)
class Page:
    """An ordered list of draw instructions for one physical page"""
    kind: str
    instructions: Tuple[DrawInstruction, ...]

    @property
    def images(self) -> Tuple[DrawImage, ...]:
        return tuple(i for i in self.instructions if isinstance(i, DrawImage))

    @property
    def texts(self) -> Tuple[DrawText, ...]:
        return tuple(i for i in self.instructions if isinstance(i, DrawText))


@dataclass(frozen=True)
class CatalogRequest:
    """Everything needed to build one catalog"""
    logo: Optional[Image.Image]
    company_name: str
    products: Tuple[ProductInput, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Catalog:
    background: Color
    page_size: PageSize
    pages: Tuple[Page, ...]
    filename: str = "product-catalog.pdf"

    @property
    def page_count(self) -> int:
        return len(self.pages)
