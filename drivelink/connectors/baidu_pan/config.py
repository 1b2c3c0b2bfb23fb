"""Shared Baidu Pan connector constants."""

API_URL = "https://pan.baidu.com/rest/2.0"

# xpan/file caps a listing page at 1000 entries
PAGE_LIMIT = 1000
