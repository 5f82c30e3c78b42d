# photo_resizer/services/variant_pipeline/resizer.py
"""
Resizer Component

Scales a decoded image to exact target dimensions.
"""

from PIL import Image

from ...exceptions import InvalidDimensionsError
from .image_codec import DecodedImage

RESAMPLING = Image.Resampling.BICUBIC


class Resizer:
    """
    Stretches images to exactly the requested width and height.

    Source aspect ratio is not preserved. Every variant uses the same
    bicubic resampling.
    """

    def resize(self, image: DecodedImage, width: int, height: int) -> DecodedImage:
        """
        Return a new image of exactly width x height.

        Raises:
            InvalidDimensionsError: if width or height is not a positive integer
        """
        if (
            isinstance(width, bool)
            or isinstance(height, bool)
            or not isinstance(width, int)
            or not isinstance(height, int)
            or width <= 0
            or height <= 0
        ):
            raise InvalidDimensionsError(
                f"Target dimensions must be positive, got {width}x{height}"
            )

        return DecodedImage(image.image.resize((width, height), RESAMPLING))
