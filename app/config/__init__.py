# =============================================================================
# Django Project Configuration Package
# =============================================================================
# Settings, root URLs and the WSGI application.
# =============================================================================
