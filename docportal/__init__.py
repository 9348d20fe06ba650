"""docportal: backend of a document-collection portal for accounting firms.

Firms invite clients to upload files against document requests grouped into
collections. See docportal.main.create_app for the HTTP application.
"""

__version__ = "1.0.0"
