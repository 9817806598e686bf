"""
Media audio app.

Provides the ``media_entity_audio_upload`` entity browser widget, which
uploads audio files and wraps each one in a Media entity of an audio bundle.
"""
