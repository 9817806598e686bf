"""
Entity browser widget plugins.

- base.py: WidgetBase with the shared widget helpers
- upload.py: FileUploadWidget (plugin id ``upload``)

Widget modules register themselves on import; AppConfig.ready() imports them.
"""
