"""Shared Box connector constants.

This module centralizes URLs and listing parameters used by the REST
endpoints and the upload protocol so the connector itself can stay small.
"""

# Metadata API and the separate host that serves chunked uploads
API_URL = "https://api.box.com/2.0"
UPLOAD_URL = "https://upload.box.com/api/2.0"

# Fields requested for every folder entry
LIST_FIELDS = "id,type,name,size,created_at,modified_at,etag,sha1"

# Box caps folder listings at 1000 entries per page
PAGE_LIMIT = 1000

FOLDER_TYPE = "folder"
