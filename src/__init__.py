"""
Package marker for the storefront API client under `src`.
It groups the shared HTTP plumbing, the request/response schemas, and the four service facades.
Most functionality lives in the sibling packages; this file intentionally stays lightweight.
"""
