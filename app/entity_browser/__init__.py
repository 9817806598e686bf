"""
Entity browser app.

Lets editors pick or create entities through pluggable widgets:
- Typed widget forms and form state (entity_browser.forms)
- Widget plugin registry (entity_browser.registry)
- Generic upload widget (entity_browser.widgets.upload)
- Stored widget configurations and the REST API the browser UI calls
"""
