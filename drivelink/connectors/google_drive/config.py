"""Shared Google Drive connector constants."""

API_URL = "https://www.googleapis.com/drive/v3"
UPLOAD_URL = "https://www.googleapis.com/upload/drive/v3"

FOLDER_MIME_TYPE = "application/vnd.google-apps.folder"

ITEM_FIELDS = "id,kind,name,size,createdTime,modifiedTime,mimeType,md5Checksum"
# nextPageToken has to be requested explicitly alongside the file fields
LIST_FIELDS = f"nextPageToken,files({ITEM_FIELDS})"
PAGE_SIZE = 1000

# Resumable uploads require parts in multiples of 256 KiB, except the last
CHUNK_GRANULARITY = 256 * 1024
DEFAULT_PART_SIZE = 8 * 1024 * 1024
