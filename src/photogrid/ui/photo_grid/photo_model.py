"""
PhotoGrid - Photo Model

Items shown in the grid.
"""

import random
from dataclasses import dataclass

from photogrid.config import DEFAULT_SAMPLE_PHOTO_COUNT
from photogrid.utils.exceptions import ValidationError

SAMPLE_IMAGE_URL = "https://picsum.photos/seed/{seed}/256/256"


@dataclass(frozen=True)
class Photo:
    """A grid item.

    Attributes:
        id: Item key; ids follow grid order so key ranges match what the
            user sees between two cells
        url: Image location
    """

    id: int
    url: str


def random_sample_image_url() -> str:
    return SAMPLE_IMAGE_URL.format(seed=random.randint(0, 100000))


def build_sample_photos(count: int = DEFAULT_SAMPLE_PHOTO_COUNT) -> list[Photo]:
    """Create ``count`` placeholder photos with ids 0..count-1.

    Raises:
        ValidationError: If count is not a non-negative integer
    """
    if isinstance(count, bool) or not isinstance(count, int):
        raise ValidationError("count", value=repr(count), reason="must be an integer")
    if count < 0:
        raise ValidationError("count", value=str(count), reason="must not be negative")
    return [Photo(id=i, url=random_sample_image_url()) for i in range(count)]
