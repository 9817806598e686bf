"""
Media app for uploaded files and typed media entities.

This app provides:
- MediaFile model for uploaded files
- MediaBundle model describing media types and their source plugin
- Media model for media entities of a bundle
- Entity storages (media.storage) and upload validators (media.validators)
"""
