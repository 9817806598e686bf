"""
Media models package.

Exports:
    MediaFile: An uploaded file, referenced by media entities
    MediaBundle: Media type descriptor (source plugin and source field)
    Media: Typed media entity wrapping one MediaFile
"""

from media.models.media import Media
from media.models.media_bundle import MediaBundle
from media.models.media_file import MediaFile

__all__ = [
    "Media",
    "MediaBundle",
    "MediaFile",
]
