"""
Image registry.

Lookup of known image assets by identifier or category, and resolution of the
image reference of a display item to a concrete source.
"""

import random
from collections.abc import Mapping
from functools import lru_cache
from typing import Any, Iterable, Optional

from edushelf.configs.logging_init import logger
from edushelf.models.components import ImageAsset, ImageReference

PLACEHOLDER_URL = "https://picsum.photos/seed/{seed}/{width}/{height}"

# Categories served from the shared content set
CONTENT_CATEGORIES = ("blog", "post")


def _placeholder(seed: str, width: int = 640, height: int = 360) -> str:
    return PLACEHOLDER_URL.format(seed=seed, width=width, height=height)


AVATAR_ASSETS = [
    ("avatar-1", "Profile avatar of a young woman with glasses", ["female", "professional", "student"]),
    ("avatar-2", "Profile avatar of a man with beard", ["male", "teacher", "professional"]),
    ("avatar-3", "Profile avatar of a woman with curly hair", ["female", "student"]),
    ("avatar-4", "Profile avatar of a man with glasses", ["male", "student"]),
    ("avatar-5", "Profile avatar of a woman with short hair", ["female", "teacher", "professional"]),
    ("avatar-default", "Default profile avatar", ["default", "neutral"]),
]

CONTENT_ASSETS = [
    ("blog-tech-1", "blog", "Modern tech workspace with multiple screens", ["technology", "workspace"]),
    ("blog-code-1", "blog", "Computer screen showing code", ["code", "programming"]),
    ("blog-meeting-1", "blog", "Team meeting in modern office", ["team", "meeting"]),
    ("post-design-1", "post", "Design mockup on tablet", ["design", "ux"]),
    ("post-mobile-1", "post", "Mobile app interface on smartphone", ["mobile", "app"]),
    ("post-event-1", "post", "Students at campus event", ["campus", "event"]),
]

BACKGROUND_ASSETS = [
    ("bg-pattern-1", "Abstract geometric pattern background", ["pattern", "abstract"]),
    ("bg-gradient-1", "Soft color gradient background", ["gradient", "soft"]),
    ("bg-campus-1", "University campus background", ["campus", "education"]),
]

BANNER_ASSETS = [
    ("banner-welcome", "Welcome to the platform banner", ["welcome", "intro"]),
    ("banner-event", "Upcoming events banner", ["event", "announcement"]),
    ("banner-course", "Featured courses banner", ["course", "education"]),
]


class ImageRegistry:
    """In-memory registry of image assets."""

    def __init__(self, assets: Iterable[ImageAsset] = ()):
        self._assets: list[ImageAsset] = list(assets)
        self._by_id: dict[str, ImageAsset] = {}
        for asset in self._assets:
            if asset.id in self._by_id:
                logger.warning(f"Duplicate image asset id '{asset.id}'; keeping the first entry")
                continue
            self._by_id[asset.id] = asset

    def __len__(self) -> int:
        return len(self._assets)

    def all_images(self) -> list[ImageAsset]:
        return list(self._assets)

    def get_image_by_id(self, image_id: str) -> Optional[ImageAsset]:
        return self._by_id.get(image_id)

    def get_images_by_category(self, category: str) -> list[ImageAsset]:
        return [asset for asset in self._assets if asset.category == category]

    def get_random_image(self, category: str) -> Optional[ImageAsset]:
        images = self.get_images_by_category(category)
        return random.choice(images) if images else None

    def resolve_image(
        self, image: Optional[ImageReference] = None, image_id: Optional[str] = None
    ) -> Optional[str]:
        """
        Resolve an item's image to a concrete source.

        The registry identifier wins over the direct reference. Mapping sources
        are unwrapped through their ``src`` key. Anything unusable resolves to
        None so that renderers fall back to their placeholder.
        """
        if image_id:
            asset = self.get_image_by_id(str(image_id))
            if asset is not None:
                return source_of(asset.src)
            logger.debug(f"Image id '{image_id}' is not registered")
        return source_of(image)


def source_of(reference: Any) -> Optional[str]:
    """Unwrap an image reference to a URL/path string, or None."""
    if isinstance(reference, str):
        return reference.strip() or None
    if isinstance(reference, Mapping):
        return source_of(reference.get("src"))
    return None


def build_default_assets() -> list[ImageAsset]:
    assets = [
        ImageAsset(id=id_, src=_placeholder(id_, 200, 200), alt=alt, category="avatar", tags=tags)
        for id_, alt, tags in AVATAR_ASSETS
    ]
    assets += [
        ImageAsset(id=id_, src=_placeholder(id_), alt=alt, category=category, tags=tags)
        for id_, category, alt, tags in CONTENT_ASSETS
    ]
    assets += [
        ImageAsset(id=id_, src=_placeholder(id_, 1280, 480), alt=alt, category="background", tags=tags)
        for id_, alt, tags in BACKGROUND_ASSETS
    ]
    assets += [
        ImageAsset(id=id_, src=_placeholder(id_, 1280, 400), alt=alt, category="banner", tags=tags)
        for id_, alt, tags in BANNER_ASSETS
    ]
    return assets


@lru_cache(maxsize=1)
def default_registry() -> ImageRegistry:
    """Registry of the bundled mock assets."""
    return ImageRegistry(build_default_assets())


def resolve_image(
    image: Optional[ImageReference] = None, image_id: Optional[str] = None
) -> Optional[str]:
    return default_registry().resolve_image(image=image, image_id=image_id)
