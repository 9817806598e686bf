"""
Root pytest configuration for the Django project.

The Django project lives in app/; its conftest.py carries the shared
fixtures and test auto-marking. App-specific fixtures are defined in each
app's tests/conftest.py.
"""

import os

# Ensure Django settings are configured before any tests run
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")
